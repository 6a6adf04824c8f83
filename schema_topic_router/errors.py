"""
Exception types raised by topic routing.
"""


class TopicRoutingError(Exception):
    """Base class for all topic routing errors."""

    pass


class ConfigurationError(TopicRoutingError):
    """Raised when resolver configuration is invalid."""

    pass


class MissingSchemaNameError(TopicRoutingError):
    """
    Raised when a record's value schema carries no name.

    The record cannot be routed. The host decides whether to halt the
    pipeline or dead-letter the record; the resolver never retries.
    """

    def __init__(self, record: object) -> None:
        super().__init__(f"value schema name can't be null: {record!r}")
        self.record = record


class InvalidPatternStateError(TopicRoutingError):
    """Raised when a capture group is read from a pattern that did not match."""

    pass
