# spatialclust/utils/__init__.py
"""
Utility functions and classes for the package.
"""

from spatialclust.utils.logging import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
]
