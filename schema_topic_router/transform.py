"""
ExtractTopicFromValueSchema: the per-record transform handed to the host pipeline.
"""

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

from schema_topic_router.config.loader import load_resolver_config
from schema_topic_router.config.models import ResolverConfig
from schema_topic_router.config.parsing import REGEX_KEY, SCHEMA_NAME_TO_TOPIC_KEY
from schema_topic_router.config.validation import validate_resolver_config
from schema_topic_router.routing.rebuilder import RecordRebuilder
from schema_topic_router.routing.record import R
from schema_topic_router.routing.topic_resolver import ResolutionSource, TopicResolver

logger = structlog.get_logger()

# ResolutionSource.TOPIC is unreachable once a record has a schema name
COUNTED_SOURCES = (
    ResolutionSource.MAPPING,
    ResolutionSource.REGEX,
    ResolutionSource.SCHEMA_NAME,
)


@dataclass(frozen=True)
class ConfigOption:
    """Description of one option the transform accepts."""

    name: str
    type: str
    default: Any
    documentation: str


CONFIG_OPTIONS: tuple[ConfigOption, ...] = (
    ConfigOption(
        name=SCHEMA_NAME_TO_TOPIC_KEY,
        type="string",
        default=None,
        documentation=(
            "Map of value schema name to new topic name, "
            "in the format 'schemaA:topicA,schemaB:topicB'. Takes precedence over regex."
        ),
    ),
    ConfigOption(
        name=REGEX_KEY,
        type="string",
        default=None,
        documentation=(
            "Regular expression applied to the value schema name; "
            "capturing group 1 becomes the new topic name."
        ),
    ),
)


class ExtractTopicFromValueSchema:
    """
    Routes each record to a topic named after its value schema.

    Usage:
        transform = ExtractTopicFromValueSchema()
        transform.configure({"regex": r"com\\.acme\\.(\\w+)"})
        routed = transform.apply(record)

    An unconfigured transform routes every record to its schema name.
    """

    def __init__(self) -> None:
        self._config: ResolverConfig | None = None
        self._rebuilder = RecordRebuilder()
        self._closed = False
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {source.value: 0 for source in COUNTED_SOURCES}

    @staticmethod
    def config_definition() -> tuple[ConfigOption, ...]:
        """Options recognised by configure()."""
        return CONFIG_OPTIONS

    @property
    def config(self) -> ResolverConfig | None:
        return self._config

    def configure(self, properties: Mapping[str, Any]) -> None:
        """
        Build the resolver configuration from raw host properties.

        Must be called before records are applied; the configuration is
        not changed afterwards.

        Args:
            properties: Raw options, see config_definition()

        Raises:
            ConfigurationError: If an option is malformed
        """
        config = ResolverConfig.from_properties(properties)
        self._install(config)

    def configure_from_file(self, path: str | Path) -> None:
        """
        Configure from a YAML file holding the same properties as configure().

        Raises:
            ConfigurationError: If the file can't be read or an option is malformed
        """
        config = load_resolver_config(path)
        self._install(config, source=str(path))

    def _install(self, config: ResolverConfig, **context: Any) -> None:
        validate_resolver_config(config)

        self._config = config
        self._rebuilder = RecordRebuilder(TopicResolver(config))
        logger.info("transform_configured", **context, **config.describe())

    def apply(self, record: R) -> R:
        """
        Route a single record.

        Args:
            record: Record from the host pipeline

        Returns:
            Copy of record with its topic replaced

        Raises:
            MissingSchemaNameError: If the record's value schema has no name
            RuntimeError: If the transform has been closed
        """
        if self._closed:
            raise RuntimeError("Transform is closed")

        rebuilt, resolution = self._rebuilder.route(record)
        with self._lock:
            self._counts[resolution.source.value] += 1
        return rebuilt

    def apply_many(self, records: Iterable[R]) -> list[R]:
        """Route records in order, stopping at the first one that fails."""
        return [self.apply(record) for record in records]

    def close(self) -> None:
        """Close the transform. Further apply() calls fail."""
        self._closed = True
        logger.debug("transform_closed", **self.stats)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def stats(self) -> dict[str, int]:
        """Records routed so far, by the rule that produced the topic."""
        with self._lock:
            return dict(self._counts)
