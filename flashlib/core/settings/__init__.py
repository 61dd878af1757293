"""Shared settings."""

from .settings import FlashSettings, configure_settings, get_settings, reset_settings

__all__ = ["FlashSettings", "configure_settings", "get_settings", "reset_settings"]
