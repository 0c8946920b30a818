"""
Logging package for ``family_tree``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import (
    configure_logging,
    get_logger,
    list_active_loggers,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "list_active_loggers",
]
