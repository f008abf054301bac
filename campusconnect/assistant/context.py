"""Bounded JSON snapshots of the datasets for the model prompt.

Each dataset is cut twice: first to a maximum number of records (keeping
the earliest ones), then its compact JSON text is cut to a maximum number of
characters. The second cut can land in the middle of a record; the result is
best-effort context, not a parseable document.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class ContextLimits:
    max_universities: int = 100
    max_colleges: int = 200
    max_scholarships: int = 200

    universities_chars: int = 5000
    colleges_chars: int = 20000
    scholarships_chars: int = 12000


@dataclass(frozen=True)
class DatasetContext:
    universities_text: str
    colleges_text: str
    scholarships_text: str


def bounded_json(records: Sequence[Any], max_items: int, max_chars: int) -> str:
    text = json.dumps(list(records[:max_items]), ensure_ascii=False, separators=(",", ":"))
    return text[:max_chars]


def build_context(
    universities: Sequence[Any],
    colleges: Sequence[Any],
    scholarships: Sequence[Any],
    limits: ContextLimits = ContextLimits(),
) -> DatasetContext:
    return DatasetContext(
        universities_text=bounded_json(universities, limits.max_universities, limits.universities_chars),
        colleges_text=bounded_json(colleges, limits.max_colleges, limits.colleges_chars),
        scholarships_text=bounded_json(scholarships, limits.max_scholarships, limits.scholarships_chars),
    )
