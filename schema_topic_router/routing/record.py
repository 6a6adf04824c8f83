"""
Record abstractions: the RoutableRecord protocol and MessageDescriptor dataclass.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class RoutableRecord(Protocol):
    """
    What topic routing needs from a host record.

    Host record types don't have to subclass anything; any object with
    these members can be routed.
    """

    @property
    def topic(self) -> str:
        """Topic the record currently targets."""
        ...

    @property
    def value_schema_name(self) -> str | None:
        """Name of the record's value schema, if it has one."""
        ...

    def with_topic(self, topic: str) -> "RoutableRecord":
        """Return a copy of the record targeting another topic."""
        ...


R = TypeVar("R", bound=RoutableRecord)


@dataclass(frozen=True)
class MessageDescriptor:
    """
    A message flowing through the host pipeline.

    Only topic and value_schema_name are read during routing. Every
    other field is opaque and carried through unchanged.
    """

    topic: str
    value_schema_name: str | None
    partition: int | None = None
    key_schema: Any = None
    key: Any = None
    value_schema: Any = None
    value: Any = None
    timestamp: datetime | int | None = None
    headers: tuple[tuple[str, bytes | None], ...] = ()

    def with_topic(self, topic: str) -> "MessageDescriptor":
        """Copy with a new topic; all other fields are the same objects."""
        return replace(self, topic=topic)
