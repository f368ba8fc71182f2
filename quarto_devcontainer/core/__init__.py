"""Core inference and assembly logic for development containers."""
