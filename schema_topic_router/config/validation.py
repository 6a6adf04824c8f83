"""
Configuration validation for Schema Topic Router.

Provides checks beyond Pydantic model validation. Fatal problems are
already rejected when ResolverConfig is built; the checks here only
report configurations that are legal but probably not what was meant.
"""

import structlog

from schema_topic_router.config.models import ResolverConfig
from schema_topic_router.errors import ConfigurationError

logger = structlog.get_logger()

__all__ = ["ConfigurationError", "validate_resolver_config"]


def validate_resolver_config(config: ResolverConfig | None) -> list[str]:
    """
    Validate resolver configuration.

    Args:
        config: ResolverConfig to validate (None means no overrides)

    Returns:
        List of warning messages (non-fatal issues)
    """
    warnings: list[str] = []

    if config is None:
        return warnings

    if config.regex is not None and config.regex.groups > 1:
        warnings.append(
            f"regex {config.regex.pattern!r} has {config.regex.groups} capturing groups; "
            "only group 1 is used as the topic."
        )

    identity = [
        name for name, topic in (config.schema_name_to_topic or {}).items()
        if name == topic
    ]
    if identity:
        warnings.append(
            f"Map entries route schema names to themselves: {', '.join(sorted(identity))}. "
            "They bypass the regex; remove them if that isn't intended."
        )

    for warning in warnings:
        logger.warning("config_validation_warning", message=warning)

    return warnings
