"""mongo_autoload utility functions.

Each file in this package exports exactly one concern, following
the single file == function/class rule.
"""

from .logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
