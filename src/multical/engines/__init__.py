"""Calendar providers and the conversion orchestrator."""
