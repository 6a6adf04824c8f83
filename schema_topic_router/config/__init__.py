"""
Configuration module for Schema Topic Router.

This module provides:
- Pydantic configuration models
- Raw host option parsing
- YAML properties file loading
- Configuration validation
"""

from schema_topic_router.config.models import (
    LoggingConfig,
    ResolverConfig,
    ResolverOptions,
    RouterSettings,
)
from schema_topic_router.config.loader import (
    build_resolver_config,
    load_properties,
    load_resolver_config,
)
from schema_topic_router.config.validation import ConfigurationError, validate_resolver_config

__all__ = [
    "LoggingConfig",
    "ResolverConfig",
    "ResolverOptions",
    "RouterSettings",
    "build_resolver_config",
    "load_properties",
    "load_resolver_config",
    "ConfigurationError",
    "validate_resolver_config",
]
