from __future__ import annotations

from typing import Optional, Tuple

# Replaced in this order, so "&amp;lt;" ends up as "<"
_ENTITIES: Tuple[Tuple[str, str], ...] = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
    ("&#x27;", "'"),
    ("&#x2F;", "/"),
)

# Headings used for sidebar and navigation chrome rather than articles
_DENIED_LABELS = frozenset({"カテゴリー", "人気記事", "ゲーム賛否", "人気タグ"})
_DENIED_FRAGMENTS = ("span", "記事", "タグ", "カテゴリ")

MIN_TITLE_LENGTH = 5


def decode_entities(text: str) -> str:
    """Decode the fixed entity set found in landing page headings.

    Other entities (``&copy;``, numeric references outside the set) are left
    untouched.
    """
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return text


def sanitize_title(raw: str | None, *, min_length: int = MIN_TITLE_LENGTH) -> Optional[str]:
    """Return the cleaned title, or ``None`` when it is not an article title.

    A title is rejected when it is ``min_length`` characters or shorter, equals
    one of the chrome labels, or contains one of the chrome fragments.
    """
    if not raw:
        return None
    title = decode_entities(raw).strip()
    if len(title) <= min_length:
        return None
    if title in _DENIED_LABELS:
        return None
    if any(fragment in title for fragment in _DENIED_FRAGMENTS):
        return None
    return title
