"""Block extraction: one article per ``<a href="/news/...">`` block.

A block is an article anchor followed, in document order, by the first image
with a ``src``, the first plain-text ``<h3>`` after it and the first ``</a>``
after that. Blocks never overlap: the search for the next anchor resumes after
the ``</a>`` that closed the previous block. If a started block cannot be
completed the scan stops, since no later anchor could complete one either.
"""

from __future__ import annotations

import enum
from typing import List, Optional, Set

from ..models import ArticleRecord, SiteConfig
from ..processors import sanitize_title
from ..utils.logging import get_logger
from .records import build_record
from .tokenizer import ARTICLE_HREF_RE, SRC_RE, heading_text, last_match, tokenize

logger = get_logger("gsf.extractors.primary")


class _State(enum.Enum):
    ANCHOR = "anchor"
    IMAGE = "image"
    HEADING = "heading"
    CLOSE = "close"


def extract_primary(html: str, config: SiteConfig) -> List[ArticleRecord]:
    tags = tokenize(html)
    records: List[ArticleRecord] = []
    seen_urls: Set[str] = set()

    state = _State.ANCHOR
    slug: Optional[str] = None
    image_src = ""
    raw_title = ""

    index = 0
    while index < len(tags):
        tag = tags[index]
        if state is _State.ANCHOR:
            if tag.opens("a"):
                slug = last_match(ARTICLE_HREF_RE, tag.attrs)
                if slug:
                    state = _State.IMAGE
        elif state is _State.IMAGE:
            if tag.opens("img"):
                src = last_match(SRC_RE, tag.attrs)
                if src is not None:
                    image_src = src
                    state = _State.HEADING
        elif state is _State.HEADING:
            text = heading_text(html, tags, index)
            if text is not None:
                raw_title = text
                state = _State.CLOSE
                index += 1  # the matching </h3>
        elif tag.closes("a"):
            _emit(config, slug or "", image_src, raw_title, records, seen_urls)
            state = _State.ANCHOR
        index += 1

    if state is not _State.ANCHOR:
        logger.debug("Trailing article block for %s left incomplete (%s)", slug, state.value)
    logger.info("Primary extraction produced %d article(s)", len(records))
    return records


def _emit(
    config: SiteConfig,
    slug: str,
    image_src: str,
    raw_title: str,
    records: List[ArticleRecord],
    seen_urls: Set[str],
) -> None:
    title = sanitize_title(raw_title)
    if title is None:
        logger.debug("Skipping block %s with non-article heading %r", slug, raw_title.strip())
        return
    url = config.article_url(slug)
    if url in seen_urls:
        logger.debug("Skipping duplicate article block: %s", url)
        return
    seen_urls.add(url)
    records.append(build_record(config, slug, image_src, title))
