"""Core configuration for the translation gateway."""
