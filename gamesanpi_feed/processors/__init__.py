"""Processing steps: title sanitizing, date keys, deduplication and ordering."""

from .sanitize import decode_entities, sanitize_title
from .datekey import DateKey, derive_date_key
from .dedup import dedupe_by_url, sort_by_key, dedupe_sort_and_cap

__all__ = [
    "decode_entities",
    "sanitize_title",
    "DateKey",
    "derive_date_key",
    "dedupe_by_url",
    "sort_by_key",
    "dedupe_sort_and_cap",
]
