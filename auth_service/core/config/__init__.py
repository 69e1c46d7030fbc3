"""Configuration package. Import `get_settings` for the process-wide settings."""

from .settings import Settings, create_settings, get_settings

__all__ = ["Settings", "create_settings", "get_settings"]
