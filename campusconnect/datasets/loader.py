"""Read dataset snapshots from JSON files.

Loading never fails the caller: a missing or corrupt file is logged and
treated as an empty dataset so the service can still start.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List

from .errors import DatasetError, MalformedSource, SourceUnavailable

logger = logging.getLogger(__name__)


def read_source(path: str | os.PathLike) -> Any:
    """Parse the JSON document at ``path``.

    Raises :class:`SourceUnavailable` when the file is missing or cannot be
    read and :class:`MalformedSource` when it does not parse.
    """

    path = Path(path)
    if not path.exists():
        raise SourceUnavailable(f"{path} does not exist")

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(f"could not read {path}: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedSource(f"invalid JSON in {path}: {e}") from e


def load_dataset(path: str | os.PathLike, required: bool = True, wrap_object: bool = False) -> List[Any]:
    """Load a dataset file as a list of records.

    ``required`` controls how loudly a missing file is reported; optional
    sources (the supplemental colleges, universities) are silently skipped.
    With ``wrap_object`` a single top-level object becomes a one-element
    list and a null document an empty one.
    """

    try:
        parsed = read_source(path)
        if isinstance(parsed, list):
            return parsed
        if wrap_object:
            return [parsed] if isinstance(parsed, dict) or parsed else []
        raise MalformedSource(f"expected a JSON array in {path}, got {type(parsed).__name__}")
    except SourceUnavailable as e:
        if required or Path(path).exists():
            logger.warning("Could not load dataset %s: %s", Path(path).name, e)
        else:
            logger.debug("Optional dataset %s not present", Path(path).name)
        return []
    except DatasetError as e:
        logger.warning("Could not load dataset %s: %s", Path(path).name, e)
        return []
