"""Utility modules for Entitas.

Provides:
- logger: get_logger for logging
"""

from entitas.utils.logger import get_logger

__all__ = [
    "get_logger",
]
