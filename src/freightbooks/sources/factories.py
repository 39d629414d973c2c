"""Factory functions for creating record sources."""

import os
from pathlib import Path
from typing import Optional

from freightbooks.sources.json_source import JsonRecordSource

DATA_PATH_ENV = "FREIGHTBOOKS_DATA_PATH"


def default_data_path() -> Path:
    """Return ~/.freightbooks/data.json."""
    return Path.home() / ".freightbooks" / "data.json"


def create_json_source(data_path: Optional[str] = None) -> JsonRecordSource:
    """Create a JSON snapshot record source.

    Args:
        data_path: Path to the snapshot file. If None, checks the
            FREIGHTBOOKS_DATA_PATH environment variable, then defaults to
            ~/.freightbooks/data.json

    Returns:
        JsonRecordSource reading the snapshot
    """
    if data_path is None:
        data_path = os.environ.get(DATA_PATH_ENV)

    if data_path is None:
        return JsonRecordSource(default_data_path())

    return JsonRecordSource(Path(data_path))
