from __future__ import annotations

import re
from typing import NamedTuple

# Leading run of digits, optionally broken by hyphens ("24061501", "240615-01")
_leading_code_re = re.compile(r"^[0-9][0-9-]*")

_CODE_DIGITS = 8


class DateKey(NamedTuple):
    year: str = ""
    month: str = ""
    day: str = ""
    sequence: str = ""
    sort_key: str = ""
    published_date: str = ""

    @property
    def is_valid(self) -> bool:
        return bool(self.sort_key)


def derive_date_key(identifier: str | None) -> DateKey:
    """Derive the chronological key embedded in an article identifier.

    The identifier starts with ``YYMMDDNN`` (two-digit year, month, day and a
    sequence number), possibly with a hyphen before the sequence. The result
    carries ``sort_key`` ``"20YYMMDDNN"`` and ``published_date``
    ``"20YY年MM月DD日"``. Identifiers without eight leading digits produce an
    empty ``DateKey``. Values are not checked against the calendar.
    """
    if not identifier:
        return DateKey()
    match = _leading_code_re.match(identifier)
    if not match:
        return DateKey()
    digits = match.group(0).replace("-", "")
    if len(digits) < _CODE_DIGITS or not digits.isascii():
        return DateKey()

    year = f"20{digits[0:2]}"
    month, day, sequence = digits[2:4], digits[4:6], digits[6:8]
    return DateKey(
        year=year,
        month=month,
        day=day,
        sequence=sequence,
        sort_key=f"{year}{month}{day}{sequence}",
        published_date=f"{year}年{month}月{day}日",
    )
