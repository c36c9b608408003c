"""Last-resort extraction used when no complete article block is found.

Article links, article images and headings are collected by three independent
scans and paired purely by position: the i-th link, the i-th image and the
i-th heading form the i-th record. Nothing checks that a heading actually
belongs to the link it is paired with, so these records are lower confidence
than block matches. The pairing holds as long as the page lists each article
as link, image and heading in the same order.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from ..models import ArticleRecord, SiteConfig
from ..processors import sanitize_title
from ..utils.logging import get_logger
from .records import build_record
from .tokenizer import ARTICLE_HREF_RE, ARTICLE_IMAGE_SRC_RE, Tag, heading_text, last_match, tokenize

logger = get_logger("gsf.extractors.fallback")

# Stricter than the block extractor, unpaired headings are noisier
MIN_FALLBACK_TITLE_LENGTH = 10


def scan_article_slugs(html: str) -> List[str]:
    """Article identifiers from every ``href="/news/..."``, first occurrence only."""
    seen: Set[str] = set()
    slugs: List[str] = []
    for match in ARTICLE_HREF_RE.finditer(html):
        slug = match.group(1)
        if slug not in seen:
            seen.add(slug)
            slugs.append(slug)
    return slugs


def scan_article_images(html: str, tags: Optional[Sequence[Tag]] = None) -> List[str]:
    """Sources of ``<img>`` tags under ``/images/articles/``, duplicates kept."""
    images: List[str] = []
    for tag in tags if tags is not None else tokenize(html):
        if not tag.opens("img"):
            continue
        src = last_match(ARTICLE_IMAGE_SRC_RE, tag.attrs)
        if src is not None:
            images.append(src)
    return images


def scan_headings(html: str, tags: Optional[Sequence[Tag]] = None) -> List[str]:
    """Distinct ``<h3>`` texts that pass the title filter with the stricter length."""
    tags = tags if tags is not None else tokenize(html)
    seen: Set[str] = set()
    titles: List[str] = []
    for index in range(len(tags)):
        raw = heading_text(html, tags, index)
        if raw is None:
            continue
        title = sanitize_title(raw, min_length=MIN_FALLBACK_TITLE_LENGTH)
        if title is None or title in seen:
            continue
        seen.add(title)
        titles.append(title)
    return titles


def extract_fallback(html: str, config: SiteConfig) -> List[ArticleRecord]:
    tags = tokenize(html)
    slugs = scan_article_slugs(html)
    images = scan_article_images(html, tags)
    titles = scan_headings(html, tags)
    logger.info(
        "Fallback scan found links=%d images=%d titles=%d",
        len(slugs),
        len(images),
        len(titles),
    )

    records: List[ArticleRecord] = []
    seen_urls: Set[str] = set()
    for slug, image_src, title in zip(slugs, images, titles):
        url = config.article_url(slug)
        if url in seen_urls:
            logger.debug("Skipping duplicate fallback article: %s", url)
            continue
        seen_urls.add(url)
        records.append(build_record(config, slug, image_src, title))

    logger.info("Fallback extraction produced %d article(s)", len(records))
    return records
