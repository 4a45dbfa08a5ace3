"""
Configuration module for the ComplyCube compliance client.

This module contains:
- settings.py: Environment configuration and application settings
"""

from config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
