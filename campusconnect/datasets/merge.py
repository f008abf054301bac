"""Combine the primary colleges list with a supplemental source."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class MergePolicy(str, Enum):
    PRIMARY_WINS = "primary_wins"
    SUPPLEMENTAL_WINS = "supplemental_wins"


def college_key(record: Any) -> str:
    """Lower-cased ``name`` of a record, or ``""`` when it has none."""
    if not isinstance(record, dict):
        return ""
    name = record.get("name")
    if not name:
        return ""
    return str(name).lower()


def merge_colleges(
    primary: List[Any],
    supplemental: Any,
    policy: MergePolicy = MergePolicy.PRIMARY_WINS,
) -> List[Any]:
    """Merge ``supplemental`` into ``primary`` keyed by case-insensitive name.

    Primary records keep their order; supplemental records whose key is not
    already present are appended in their own order. Records without a name
    are skipped. Under ``PRIMARY_WINS`` (the default) an existing key is never
    overwritten; ``SUPPLEMENTAL_WINS`` replaces the primary record in place.

    A supplemental source that is not a list leaves ``primary`` unchanged.
    """

    if not isinstance(supplemental, list):
        if supplemental is not None:
            logger.warning("Supplemental colleges are not a list (%s); skipping merge", type(supplemental).__name__)
        return primary

    # A name repeated inside the primary list keeps the position of its first
    # record and the values of its last; unnamed records stay where they are.
    merged: List[Any] = []
    index: Dict[str, int] = {}
    for record in primary:
        key = college_key(record)
        if key:
            if key in index:
                merged[index[key]] = record
                continue
            index[key] = len(merged)
        merged.append(record)

    added = 0
    replaced = 0
    for record in supplemental:
        key = college_key(record)
        if not key:
            continue
        pos: Optional[int] = index.get(key)
        if pos is None:
            index[key] = len(merged)
            merged.append(record)
            added += 1
        elif policy == MergePolicy.SUPPLEMENTAL_WINS:
            merged[pos] = record
            replaced += 1

    logger.info("Merged supplemental colleges: %d added, %d replaced", added, replaced)
    return merged
