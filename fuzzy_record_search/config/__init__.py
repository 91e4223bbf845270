"""Configuration management for fuzzy record search."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
