"""
Record rebuilding: applies a resolved topic to a record.
"""

from schema_topic_router.routing.record import R
from schema_topic_router.routing.topic_resolver import Resolution, TopicResolver


class RecordRebuilder:
    """
    Produces a copy of a record that differs only in its topic.

    Key, value, schemas, partition, timestamp and headers are carried
    over as-is.
    """

    def __init__(self, resolver: TopicResolver | None = None) -> None:
        self._resolver = resolver or TopicResolver()

    @property
    def resolver(self) -> TopicResolver:
        return self._resolver

    def rebuild(self, record: R, topic: str) -> R:
        """
        Copy a record with its topic replaced.

        Args:
            record: Original record (not modified)
            topic: Resolved destination topic

        Returns:
            New record targeting topic

        Raises:
            ValueError: If topic is empty
        """
        if not topic:
            raise ValueError("Resolved topic must be a non-empty string")
        return record.with_topic(topic)

    def route(self, record: R) -> tuple[R, Resolution]:
        """
        Resolve a record's destination and rebuild it.

        Raises:
            MissingSchemaNameError: If the record's value schema has no name
        """
        resolution = self._resolver.explain(record)
        return self.rebuild(record, resolution.topic), resolution
