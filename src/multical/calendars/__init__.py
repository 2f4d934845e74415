"""Calendar keys and closed-form calendar arithmetic."""
