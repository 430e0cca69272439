"""Internal helpers shared by the DebugTreeLib modules.

This package should NOT be imported directly by users.
"""

from .logging import get_logger

__all__ = [
    'get_logger',
]
