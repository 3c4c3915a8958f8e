"""Core module - Settings and cross-cutting concerns"""

from .config import Settings, get_settings
from .logging import get_logger

__all__ = [
    "Settings",
    "get_settings",
    "get_logger",
]
