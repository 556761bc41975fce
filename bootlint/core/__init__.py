"""
Core utilities for bootlint.

This module provides the settings shared across the lint engine.
"""

from .config import Settings, settings

__all__ = ["Settings", "settings"]
