"""
Utility functions for the animation timeline engine
"""

from .logger import (
    get_logger,
    configure_logger,
)

__all__ = [
    'get_logger',
    'configure_logger',
]
