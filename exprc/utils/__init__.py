"""
Utility modules for exprc.

This package contains utility functions and helpers used throughout the compiler.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
