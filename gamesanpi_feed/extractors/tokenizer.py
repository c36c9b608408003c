"""Minimal tag scanner for the landing page markup.

This is not an HTML parser: it only yields start/end tags in document order
with their raw attribute text, which is all the extractors need. Each call
walks the input once; no pattern is allowed to backtrack across tags.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

_tag_head_re = re.compile(r"(/?)([A-Za-z][A-Za-z0-9]*)")

# href values pointing at an article page; group 1 is the identifier
ARTICLE_HREF_RE = re.compile(r'href="/news/([A-Za-z0-9-]+)"')
SRC_RE = re.compile(r'src="([^"]*)"')
ARTICLE_IMAGE_SRC_RE = re.compile(r'src="([^"]*/images/articles/[^"]*)"')


@dataclass(frozen=True, slots=True)
class Tag:
    name: str
    attrs: str
    closing: bool
    start: int
    end: int

    def opens(self, name: str) -> bool:
        return not self.closing and self.name == name

    def closes(self, name: str) -> bool:
        # Only the bare form "</name>" counts as an end tag
        return self.closing and self.name == name and self.attrs == ""


def iter_tags(html: str) -> Iterator[Tag]:
    """Yield every ``<name ...>`` / ``</name>`` tag in document order.

    A ``<`` that does not start a tag name (text, comments, doctype) is
    skipped and scanning resumes right after it, so tags inside comments are
    still reported. A ``<`` followed by another ``<`` before any ``>`` is
    text as well, so ``x <y</a>`` still reports the ``</a>``. Tag names are
    case-sensitive.
    """
    pos = 0
    gt = -1
    while True:
        lt = html.find("<", pos)
        if lt < 0:
            return
        if gt <= lt:
            gt = html.find(">", lt + 1)
            if gt < 0:
                return
        following = html.find("<", lt + 1, gt)
        if following >= 0:
            pos = following
            continue
        head = _tag_head_re.match(html, lt + 1, gt)
        if head is None:
            pos = lt + 1
            continue
        yield Tag(
            name=head.group(2),
            attrs=html[head.end():gt],
            closing=bool(head.group(1)),
            start=lt,
            end=gt + 1,
        )
        pos = gt + 1


def tokenize(html: str) -> List[Tag]:
    return list(iter_tags(html))


def last_match(pattern: re.Pattern[str], text: str) -> Optional[str]:
    """Return group 1 of the last match of ``pattern`` in ``text``."""
    found = pattern.findall(text)
    return found[-1] if found else None


def heading_text(html: str, tags: Sequence[Tag], index: int, name: str = "h3") -> Optional[str]:
    """Return the raw text of a heading opened at ``tags[index]``.

    The heading must be immediately closed by ``</name>`` and contain plain
    text only (no nested markup, at least one character). Anything else
    yields ``None``.
    """
    if index + 1 >= len(tags):
        return None
    opening, following = tags[index], tags[index + 1]
    if not opening.opens(name) or not following.closes(name):
        return None
    text = html[opening.end:following.start]
    if not text or "<" in text:
        return None
    return text
