"""
Tests for the ExtractTopicFromValueSchema transform.
"""

import pytest
from structlog.testing import capture_logs

from schema_topic_router.errors import ConfigurationError, MissingSchemaNameError
from schema_topic_router.transform import CONFIG_OPTIONS, ExtractTopicFromValueSchema


@pytest.fixture
def transform():
    t = ExtractTopicFromValueSchema()
    t.configure(
        {
            "schema.name.topic-map": "com.acme.Order:orders-v2",
            "regex": r"com\.acme\.(\w+)",
        }
    )
    return t


class TestConfigDefinition:
    def test_options(self):
        names = [option.name for option in ExtractTopicFromValueSchema.config_definition()]
        assert names == ["schema.name.topic-map", "regex"]
        assert ExtractTopicFromValueSchema.config_definition() is CONFIG_OPTIONS

    def test_documented(self):
        for option in CONFIG_OPTIONS:
            assert option.documentation
            assert option.default is None


class TestConfigure:
    def test_unconfigured_routes_to_schema_name(self, order_record):
        t = ExtractTopicFromValueSchema()
        assert t.config is None
        assert t.apply(order_record).topic == "com.acme.Order"

    def test_configure_builds_config(self, transform):
        assert transform.config.schema_name_to_topic == {"com.acme.Order": "orders-v2"}
        assert transform.config.regex.pattern == r"com\.acme\.(\w+)"

    def test_configure_logs_summary(self):
        t = ExtractTopicFromValueSchema()
        with capture_logs() as logs:
            t.configure({"regex": r"com\.acme\.(\w+)"})
        event = next(log for log in logs if log["event"] == "transform_configured")
        assert event["regex"] == r"com\.acme\.(\w+)"
        assert event["mapped_schema_names"] == []

    def test_bad_regex_fails_at_configure(self):
        t = ExtractTopicFromValueSchema()
        with pytest.raises(ConfigurationError):
            t.configure({"regex": r"com\.acme\.\w+"})
        assert t.config is None

    def test_empty_properties(self, order_record):
        t = ExtractTopicFromValueSchema()
        t.configure({})
        assert t.apply(order_record).topic == "com.acme.Order"

    def test_configure_from_file(self, tmp_path, order_record):
        path = tmp_path / "router.yaml"
        path.write_text("regex: 'com\\.acme\\.(\\w+)'\n")
        t = ExtractTopicFromValueSchema()
        with capture_logs() as logs:
            t.configure_from_file(path)
        assert t.apply(order_record).topic == "Order"
        event = next(log for log in logs if log["event"] == "transform_configured")
        assert event["source"] == str(path)

    def test_configure_from_missing_file(self, tmp_path):
        t = ExtractTopicFromValueSchema()
        with pytest.raises(ConfigurationError):
            t.configure_from_file(tmp_path / "missing.yaml")
        assert t.config is None


class TestApply:
    def test_mapping(self, transform, order_record):
        routed = transform.apply(order_record)
        assert routed.topic == "orders-v2"
        assert routed.value is order_record.value
        assert routed.partition == order_record.partition

    def test_regex(self, transform, make_record):
        assert transform.apply(make_record("com.acme.Invoice")).topic == "Invoice"

    def test_fallback(self, transform, make_record):
        assert transform.apply(make_record("xyz")).topic == "xyz"

    def test_missing_schema_name(self, transform, make_record):
        with pytest.raises(MissingSchemaNameError):
            transform.apply(make_record(None))

    def test_missing_schema_name_is_not_logged(self, transform, make_record):
        with capture_logs() as logs:
            with pytest.raises(MissingSchemaNameError):
                transform.apply(make_record(None))
        assert logs == []

    def test_apply_many_preserves_order(self, transform, make_record):
        records = [make_record(name) for name in ["com.acme.Order", "com.acme.Invoice", "xyz"]]
        assert [r.topic for r in transform.apply_many(records)] == ["orders-v2", "Invoice", "xyz"]

    def test_apply_many_stops_at_first_failure(self, transform, make_record):
        records = [make_record("com.acme.Order"), make_record(None), make_record("xyz")]
        with pytest.raises(MissingSchemaNameError):
            transform.apply_many(records)
        assert transform.stats["mapping"] == 1
        assert transform.stats["schema_name"] == 0

    def test_stats(self, transform, make_record):
        transform.apply(make_record("com.acme.Order"))
        transform.apply(make_record("com.acme.Invoice"))
        transform.apply(make_record("com.acme.Shipment"))
        transform.apply(make_record("xyz"))
        assert transform.stats == {"mapping": 1, "regex": 2, "schema_name": 1}

    def test_stats_only_list_reachable_sources(self):
        assert set(ExtractTopicFromValueSchema().stats) == {"mapping", "regex", "schema_name"}


class TestClose:
    def test_apply_after_close_raises(self, transform, order_record):
        transform.close()
        assert transform.closed
        with pytest.raises(RuntimeError):
            transform.apply(order_record)

    def test_close_logs_stats(self, transform, order_record):
        transform.apply(order_record)
        with capture_logs() as logs:
            transform.close()
        assert logs[0]["event"] == "transform_closed"
        assert logs[0]["mapping"] == 1
