"""
Utility modules for Schema Topic Router.

Provides:
- Structured logging configuration
"""

from schema_topic_router.utils.logging import configure_logging, configure_logging_from, get_logger

__all__ = [
    "configure_logging",
    "configure_logging_from",
    "get_logger",
]
