"""Core package"""
from mobilecases.core.config import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
