"""
Schema Topic Router
===================

Routes stream messages to a destination topic derived from the name of
their value schema.

This package provides the per-message topic resolution used by a host
stream-processing pipeline, plus the record rewrite that applies it.
"""

__version__ = "0.1.0"
