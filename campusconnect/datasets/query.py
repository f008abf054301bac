"""Deterministic filtering over the colleges dataset."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence


@dataclass(frozen=True)
class SearchResult:
    results: List[Any]

    @property
    def count(self) -> int:
        return len(self.results)


def _norm(s: Any) -> str:
    return str(s).lower()


def parse_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float, or None when it is not a number.

    Accepts ints, floats and numeric strings. Booleans, NaN, None and
    anything else are not numbers here.
    """

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def parse_ceiling(value: Any) -> Optional[float]:
    """Parse a ``maxFee`` filter value; a blank string means a ceiling of 0."""
    if isinstance(value, str) and not value.strip():
        return 0.0
    return parse_number(value)


def _location_matches(college: Any, wanted: str) -> bool:
    location = college.get("location") if isinstance(college, dict) else None
    return location is not None and _norm(location) == wanted


def _has_branch(college: Any, wanted: str) -> bool:
    branches = college.get("branches") if isinstance(college, dict) else None
    if not isinstance(branches, list):
        return False
    return any(_norm(b) == wanted for b in branches)


def _hostel_matches(college: Any, wanted: str) -> bool:
    hostel = college.get("hostel") if isinstance(college, dict) else None
    # str(True).lower() == "true", so boolean flags match "true"/"false".
    return hostel is not None and _norm(hostel) == wanted


def _fee_within(college: Any, cap: float) -> bool:
    fee = parse_number(college.get("fee")) if isinstance(college, dict) else None
    return fee is not None and fee <= cap


def search_colleges(
    colleges: Sequence[Any],
    location: Optional[str] = None,
    branch: Optional[str] = None,
    hostel: Optional[str] = None,
    max_fee: Optional[Any] = None,
) -> SearchResult:
    """Narrow ``colleges`` by each given filter, in order.

    Filters are ANDed and applied location, branch, hostel, then fee
    ceiling. Empty filters are skipped, and a ``max_fee`` that does not
    parse as a number is ignored rather than rejected. A whitespace-only
    ``max_fee`` is a ceiling of 0. The input order is preserved.
    """

    results = list(colleges)

    if location:
        wanted = _norm(location)
        results = [c for c in results if _location_matches(c, wanted)]

    if branch:
        wanted = _norm(branch)
        results = [c for c in results if _has_branch(c, wanted)]

    if hostel:
        wanted = _norm(hostel)
        results = [c for c in results if _hostel_matches(c, wanted)]

    if max_fee not in (None, ""):
        cap = parse_ceiling(max_fee)
        if cap is not None:
            results = [c for c in results if _fee_within(c, cap)]

    return SearchResult(results=results)
