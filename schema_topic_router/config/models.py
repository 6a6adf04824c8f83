"""
Pydantic configuration models for Schema Topic Router.

These models define the structure and validation for router configuration.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from schema_topic_router.config.parsing import (
    compile_topic_regex,
    parse_properties,
    parse_topic_map,
)


class LoggingConfig(BaseModel):
    """Logging output settings."""

    level: str = Field(default="INFO", description="Log level")
    json_output: bool = Field(default=False, description="Render logs as JSON")
    include_timestamp: bool = Field(default=True, description="Add ISO timestamps")

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        """Ensure level is a standard logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class ResolverOptions(BaseModel):
    """
    Resolver options as read from environment variables.

    The map may be given as a mapping or as "schemaA:topicA,schemaB:topicB".
    Both options are checked on load so bad values fail before any
    record is processed.
    """

    schema_name_to_topic: dict[str, str] | str | None = Field(
        default=None,
        description="Exact schema name to topic overrides (highest priority)",
    )
    regex: str | None = Field(
        default=None,
        description="Pattern whose first capturing group is used as the topic",
    )

    @field_validator("schema_name_to_topic", mode="before")
    @classmethod
    def parse_map(cls, v: Any) -> dict[str, str] | None:
        """Accept both mapping and "key:value,..." string forms."""
        return parse_topic_map(v)

    @field_validator("regex")
    @classmethod
    def check_regex(cls, v: str | None) -> str | None:
        """Reject patterns that don't compile or have no capturing group."""
        if compile_topic_regex(v) is None:
            return None
        return v

    @property
    def is_empty(self) -> bool:
        """True if neither option is set."""
        return not self.schema_name_to_topic and self.regex is None


class ResolverConfig(BaseModel):
    """
    Validated, immutable configuration consumed by topic resolution.

    Built once per pipeline instance. The regex is compiled here and never
    again, and the override map is stored as a read-only view, so one
    instance can be shared by any number of worker threads.
    """

    schema_name_to_topic: Mapping[str, str] | None = Field(
        default=None,
        description="Exact schema name to topic overrides (read-only)",
    )
    regex: re.Pattern[str] | None = Field(
        default=None,
        description="Compiled extraction pattern with at least one capturing group",
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("schema_name_to_topic", mode="before")
    @classmethod
    def parse_map(cls, v: Any) -> dict[str, str] | None:
        """Parse and validate the override map."""
        return parse_topic_map(v)

    @field_validator("schema_name_to_topic")
    @classmethod
    def freeze_map(cls, v: Mapping[str, str] | None) -> Mapping[str, str] | None:
        """Store the map as a read-only view of a private copy."""
        if v is None:
            return None
        return MappingProxyType(dict(v))

    @field_validator("regex", mode="before")
    @classmethod
    def compile_regex(cls, v: Any) -> re.Pattern[str] | None:
        """Compile the pattern once and require a capturing group."""
        return compile_topic_regex(v)

    @classmethod
    def from_options(cls, options: ResolverOptions) -> "ResolverConfig":
        """Build from loaded ResolverOptions."""
        return cls(
            schema_name_to_topic=options.schema_name_to_topic,
            regex=options.regex,
        )

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any]) -> "ResolverConfig":
        """
        Build from raw host properties.

        Args:
            properties: Keys "schema.name.topic-map" and/or "regex"

        Returns:
            Validated ResolverConfig

        Raises:
            ConfigurationError: If any option is malformed
        """
        return cls(**parse_properties(properties))

    def describe(self) -> dict[str, Any]:
        """Summary suitable for structured log fields."""
        return {
            "mapped_schema_names": sorted(self.schema_name_to_topic or {}),
            "regex": self.regex.pattern if self.regex is not None else None,
        }


class RouterSettings(BaseSettings):
    """
    Root router configuration.

    Values are read from environment variables, e.g.
    SCHEMA_TOPIC_ROUTER_RESOLVER__REGEX or SCHEMA_TOPIC_ROUTER_LOGGING__LEVEL.
    """

    resolver: ResolverOptions = Field(default_factory=ResolverOptions)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "SCHEMA_TOPIC_ROUTER_",
        "env_nested_delimiter": "__",
    }
