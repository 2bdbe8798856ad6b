"""Utility modules for cifras.

Provides:
- logger: get_logger for logging
"""

from cifras.utils.logger import get_logger

__all__ = [
    "get_logger",
]
