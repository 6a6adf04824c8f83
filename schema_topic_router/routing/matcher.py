"""
Regex matching for topic extraction.

match_topic() returns a tagged result instead of a raw re.Match, so the
caller can only get a captured topic out of a match that succeeded and
whose first group took part in it.
"""

import re
from dataclasses import dataclass
from enum import Enum

from schema_topic_router.errors import InvalidPatternStateError


class NoMatchReason(str, Enum):
    """Why a pattern produced no topic."""
    NO_MATCH = "no_match"                  # Pattern does not occur in the name
    GROUP_NOT_PARTICIPATING = "group_not_participating"  # e.g. (a)?b against "b"
    EMPTY_CAPTURE = "empty_capture"        # Group 1 matched the empty string


@dataclass(frozen=True)
class Matched:
    """Pattern matched and group 1 captured a non-empty topic."""

    captured: str

    @property
    def matched(self) -> bool:
        return True


@dataclass(frozen=True)
class NotMatched:
    """Pattern produced no usable capture."""

    pattern: str
    schema_name: str
    reason: NoMatchReason = NoMatchReason.NO_MATCH

    @property
    def matched(self) -> bool:
        return False

    @property
    def captured(self) -> str:
        raise InvalidPatternStateError(
            f"No capture available: pattern {self.pattern!r} gave {self.reason.value} "
            f"for {self.schema_name!r}"
        )


MatchResult = Matched | NotMatched


def match_topic(pattern: re.Pattern[str], schema_name: str) -> MatchResult:
    """
    Search schema_name for pattern and extract capturing group 1.

    The pattern may occur anywhere in the name; anchor it to require a
    full match.

    Args:
        pattern: Compiled pattern with at least one capturing group
        schema_name: Value schema name to search

    Returns:
        Matched with the captured text, or NotMatched with the reason
    """
    match = pattern.search(schema_name)
    if match is None:
        return NotMatched(pattern.pattern, schema_name, NoMatchReason.NO_MATCH)

    captured = match.group(1)
    if captured is None:
        return NotMatched(pattern.pattern, schema_name, NoMatchReason.GROUP_NOT_PARTICIPATING)
    if not captured:
        return NotMatched(pattern.pattern, schema_name, NoMatchReason.EMPTY_CAPTURE)

    return Matched(captured)
