"""Record sources for freightbooks."""

from freightbooks.sources.base import RecordSource
from freightbooks.sources.factories import create_json_source

__all__ = ["RecordSource", "create_json_source"]
