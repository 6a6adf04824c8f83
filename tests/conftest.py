"""
Shared test fixtures for Schema Topic Router tests.
"""

from datetime import datetime

import pytest
import structlog

from schema_topic_router.config.models import ResolverConfig
from schema_topic_router.routing.record import MessageDescriptor


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


# =============================================================================
# Record Fixtures
# =============================================================================


@pytest.fixture
def order_record() -> MessageDescriptor:
    """A fully populated record with value schema com.acme.Order."""
    return MessageDescriptor(
        topic="ingest.raw",
        value_schema_name="com.acme.Order",
        partition=3,
        key_schema={"type": "string"},
        key=b"order-1001",
        value_schema={"type": "record", "name": "com.acme.Order"},
        value={"order_id": 1001, "amount": "25.50"},
        timestamp=datetime(2025, 1, 15, 10, 0),
        headers=(("trace-id", b"abc123"), ("source", b"checkout")),
    )


@pytest.fixture
def make_record():
    """Factory for records with a given schema name."""

    def _make(schema_name: str | None, topic: str = "ingest.raw", **kwargs) -> MessageDescriptor:
        return MessageDescriptor(topic=topic, value_schema_name=schema_name, **kwargs)

    return _make


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def acme_regex() -> str:
    return r"com\.acme\.(\w+)"


@pytest.fixture
def regex_config(acme_regex: str) -> ResolverConfig:
    """Regex-only configuration."""
    return ResolverConfig(regex=acme_regex)


@pytest.fixture
def full_config(acme_regex: str) -> ResolverConfig:
    """Map and regex configured together."""
    return ResolverConfig(
        schema_name_to_topic={"com.acme.Order": "orders-v2"},
        regex=acme_regex,
    )
