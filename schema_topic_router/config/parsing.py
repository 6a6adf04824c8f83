"""
Parsing of raw host options into typed resolver settings.

Hosts hand the transform flat key/value properties (Kafka Connect style).
The helpers here turn those into the values ResolverConfig expects and
reject malformed input with ConfigurationError.
"""

import re
from collections.abc import Mapping
from typing import Any

import structlog

from schema_topic_router.errors import ConfigurationError

logger = structlog.get_logger()

SCHEMA_NAME_TO_TOPIC_KEY = "schema.name.topic-map"
REGEX_KEY = "regex"

# Raw property key -> ResolverOptions field name
PROPERTY_FIELDS: dict[str, str] = {
    SCHEMA_NAME_TO_TOPIC_KEY: "schema_name_to_topic",
    REGEX_KEY: "regex",
}


def parse_topic_map(value: Any) -> dict[str, str] | None:
    """
    Parse a schema-name-to-topic map.

    Accepts either a mapping or a string of the form
    "schemaA:topicA,schemaB:topicB". Each entry is split on its first
    colon, so topic names may themselves contain colons.

    Args:
        value: Raw map value (None, str, or mapping)

    Returns:
        Parsed mapping, or None when the option is absent or empty

    Raises:
        ConfigurationError: If an entry is malformed or a schema name repeats
    """
    if value is None:
        return None

    if isinstance(value, Mapping):
        entries = list(value.items())
    elif isinstance(value, str):
        if not value.strip():
            return None
        entries = []
        for raw_entry in value.split(","):
            entry = raw_entry.strip()
            if ":" not in entry:
                raise ConfigurationError(
                    f"Invalid {SCHEMA_NAME_TO_TOPIC_KEY} entry {entry!r}: "
                    "expected 'schema_name:topic'"
                )
            schema_name, topic = entry.split(":", 1)
            entries.append((schema_name.strip(), topic.strip()))
    else:
        raise ConfigurationError(
            f"{SCHEMA_NAME_TO_TOPIC_KEY} must be a mapping or a string, "
            f"got {type(value).__name__}"
        )

    result: dict[str, str] = {}
    for schema_name, topic in entries:
        if not isinstance(schema_name, str) or not isinstance(topic, str):
            raise ConfigurationError(
                f"Invalid {SCHEMA_NAME_TO_TOPIC_KEY} entry {schema_name!r}: "
                "schema names and topics must be strings"
            )
        if not schema_name or not topic:
            raise ConfigurationError(
                f"Invalid {SCHEMA_NAME_TO_TOPIC_KEY} entry {schema_name!r}:{topic!r}: "
                "schema name and topic must be non-empty"
            )
        if schema_name in result:
            raise ConfigurationError(
                f"Duplicate schema name in {SCHEMA_NAME_TO_TOPIC_KEY}: {schema_name!r}"
            )
        result[schema_name] = topic

    return result or None


def compile_topic_regex(value: Any) -> re.Pattern[str] | None:
    """
    Compile the topic extraction pattern.

    Args:
        value: Raw pattern (None, str, or an already compiled pattern)

    Returns:
        Compiled pattern, or None when the option is absent or empty

    Raises:
        ConfigurationError: If the pattern does not compile or has no
            capturing group
    """
    if value is None:
        return None

    if isinstance(value, re.Pattern):
        pattern = value
    elif isinstance(value, str):
        if not value:
            return None
        try:
            pattern = re.compile(value)
        except re.error as e:
            raise ConfigurationError(f"Invalid {REGEX_KEY} {value!r}: {e}") from e
    else:
        raise ConfigurationError(
            f"{REGEX_KEY} must be a string, got {type(value).__name__}"
        )

    if pattern.groups < 1:
        raise ConfigurationError(
            f"{REGEX_KEY} {pattern.pattern!r} must contain at least one capturing group"
        )

    return pattern


def parse_properties(properties: Mapping[str, Any]) -> dict[str, Any]:
    """
    Translate raw host properties into ResolverOptions field values.

    Unknown keys are ignored with a warning. Values are passed through
    unparsed; ResolverOptions/ResolverConfig validate them.

    Args:
        properties: Raw key/value pairs supplied by the host

    Returns:
        Dictionary keyed by ResolverOptions field names
    """
    options: dict[str, Any] = {}
    for key, value in properties.items():
        field_name = PROPERTY_FIELDS.get(key)
        if field_name is None:
            logger.warning("unknown_option_ignored", option=key)
            continue
        options[field_name] = value
    return options
