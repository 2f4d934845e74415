"""Shared types, errors, configuration and the provider registry."""
