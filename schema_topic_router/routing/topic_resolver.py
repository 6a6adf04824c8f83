"""
Topic resolution for mapping value schema names to destination topics.
"""

from dataclasses import dataclass
from enum import Enum

from schema_topic_router.config.models import ResolverConfig
from schema_topic_router.errors import MissingSchemaNameError
from schema_topic_router.routing.matcher import Matched, match_topic
from schema_topic_router.routing.record import RoutableRecord


class ResolutionSource(str, Enum):
    """Which rule produced the destination topic."""
    MAPPING = "mapping"
    REGEX = "regex"
    SCHEMA_NAME = "schema_name"
    TOPIC = "topic"


@dataclass(frozen=True)
class Resolution:
    """A resolved destination topic and the rule that produced it."""

    topic: str
    source: ResolutionSource


def explain_topic(record: RoutableRecord, config: ResolverConfig | None = None) -> Resolution:
    """
    Resolve the destination topic for a record and report which rule applied.

    Rules, first match wins:
    1. No (or empty) value schema name: MissingSchemaNameError
    2. No config: the schema name
    3. Exact entry in schema_name_to_topic: the mapped topic
    4. regex whose group 1 captures: the captured text
    5. Otherwise: the schema name

    Args:
        record: Record to route
        config: Resolver configuration, or None for no overrides

    Returns:
        Resolution with the destination topic

    Raises:
        MissingSchemaNameError: If the record's value schema has no name
            or an empty one
    """
    schema_name = record.value_schema_name
    if not schema_name:
        raise MissingSchemaNameError(record)

    if config is None:
        # Current topic only if the schema name is gone (unreachable after the check above)
        if schema_name:
            return Resolution(schema_name, ResolutionSource.SCHEMA_NAME)
        return Resolution(record.topic, ResolutionSource.TOPIC)

    mapping = config.schema_name_to_topic
    if mapping and schema_name in mapping:
        return Resolution(mapping[schema_name], ResolutionSource.MAPPING)

    if config.regex is not None:
        result = match_topic(config.regex, schema_name)
        if isinstance(result, Matched):
            return Resolution(result.captured, ResolutionSource.REGEX)

    return Resolution(schema_name, ResolutionSource.SCHEMA_NAME)


def resolve_topic(record: RoutableRecord, config: ResolverConfig | None = None) -> str:
    """Resolve the destination topic for a record."""
    return explain_topic(record, config).topic


class TopicResolver:
    """
    Resolves records to destination topics using a fixed configuration.

    Stateless apart from the configuration it was built with; safe to
    share between threads.
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> ResolverConfig | None:
        return self._config

    def resolve(self, record: RoutableRecord) -> str:
        """
        Resolve a record to a topic name.

        Args:
            record: Record carrying a value schema name

        Returns:
            Destination topic name

        Raises:
            MissingSchemaNameError: If the record's value schema has no name
        """
        return resolve_topic(record, self._config)

    def explain(self, record: RoutableRecord) -> Resolution:
        """Resolve a record and report which rule produced the topic."""
        return explain_topic(record, self._config)
