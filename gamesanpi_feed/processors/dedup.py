from __future__ import annotations

from typing import Iterable, List, Optional, Set, TypeVar

from ..utils.logging import get_logger

R = TypeVar("R")

DEFAULT_LIMIT = 10

_logger = get_logger("gsf.processors.dedup")


def dedupe_by_url(records: Iterable[R]) -> List[R]:
    """Keep the first record seen for each ``url``, preserving order."""
    seen: Set[str] = set()
    unique: List[R] = []
    for record in records:
        if record.url in seen:
            _logger.debug("Dropping duplicate article: %s", record.url)
            continue
        seen.add(record.url)
        unique.append(record)
    return unique


def sort_by_key(records: Iterable[R]) -> List[R]:
    """Sort records newest first by their ``sort_key`` attribute.

    Keys are fixed-width digit strings, so string order is chronological
    order. An empty key (identifier without a date code) sorts after every
    dated record; the sort is stable among equal keys.
    """
    return sorted(records, key=lambda r: r.sort_key, reverse=True)


def dedupe_sort_and_cap(records: Iterable[R], *, limit: Optional[int] = DEFAULT_LIMIT) -> List[R]:
    ordered = sort_by_key(dedupe_by_url(records))
    if limit is not None:
        ordered = ordered[:limit]
    return ordered
