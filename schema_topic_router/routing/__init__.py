"""
Topic routing package for Schema Topic Router.

Resolves each record's destination topic from its value schema name
and rebuilds the record with only the topic changed.
"""

from schema_topic_router.routing.matcher import Matched, MatchResult, NotMatched, match_topic
from schema_topic_router.routing.rebuilder import RecordRebuilder
from schema_topic_router.routing.record import MessageDescriptor, RoutableRecord
from schema_topic_router.routing.topic_resolver import (
    Resolution,
    ResolutionSource,
    TopicResolver,
    explain_topic,
    resolve_topic,
)

__all__ = [
    "Matched",
    "MatchResult",
    "NotMatched",
    "match_topic",
    "RecordRebuilder",
    "MessageDescriptor",
    "RoutableRecord",
    "Resolution",
    "ResolutionSource",
    "TopicResolver",
    "explain_topic",
    "resolve_topic",
]
