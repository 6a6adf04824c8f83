"""
Loading of transform properties from YAML files.

A properties file holds the same keys a host passes to
ExtractTopicFromValueSchema.configure():

    schema.name.topic-map: "com.acme.Order:orders-v2,com.acme.Refund:refunds"
    regex: 'com\\.acme\\.(\\w+)'

The map may also be written as a nested mapping. String values may
reference environment variables as ${VAR} or ${VAR:-default}.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_topic_router.config.models import ResolverConfig, RouterSettings
from schema_topic_router.errors import ConfigurationError

_ENV_REF = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def _expand_env(value: Any) -> Any:
    """Expand ${VAR} references in a property value (strings and map values)."""
    if isinstance(value, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), value)
    if isinstance(value, Mapping):
        return {k: _expand_env(v) for k, v in value.items()}
    return value


def load_properties(path: str | Path) -> dict[str, Any]:
    """
    Read raw transform properties from a YAML file.

    Args:
        path: YAML file holding a flat mapping of property keys

    Returns:
        Property dictionary with environment references expanded

    Raises:
        ConfigurationError: If the file is missing, not valid YAML, or not a mapping
    """
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Properties file not found: {path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            f"{path}: expected a mapping of transform properties, got {type(raw).__name__}"
        )

    return {str(key): _expand_env(value) for key, value in raw.items()}


def load_resolver_config(path: str | Path) -> ResolverConfig:
    """
    Build a ResolverConfig from a YAML properties file.

    Raises:
        ConfigurationError: If the file can't be read or an option is
            malformed; the message names the file
    """
    properties = load_properties(path)
    try:
        return ResolverConfig.from_properties(properties)
    except ConfigurationError as e:
        raise ConfigurationError(f"{path}: {e}") from e


def build_resolver_config(settings: RouterSettings) -> ResolverConfig | None:
    """
    Build the resolver configuration from environment settings.

    Returns None when no override is configured, in which case every
    record is routed to its value schema name.
    """
    if settings.resolver.is_empty:
        return None
    return ResolverConfig.from_options(settings.resolver)
