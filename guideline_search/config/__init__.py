"""Configuration management for guideline search."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
