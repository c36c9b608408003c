from __future__ import annotations

from urllib.parse import urljoin, urlparse

from ..models import ArticleRecord, SiteConfig
from ..processors import derive_date_key


def resolve_asset_url(config: SiteConfig, src: str) -> str:
    """Return ``src`` as an absolute URL on the asset host.

    Absolute http(s) sources are kept as-is and an empty source stays empty.
    """
    if not src:
        return ""
    if urlparse(src).scheme in ("http", "https"):
        return src
    return urljoin(config.asset_base_url.rstrip("/") + "/", src)


def build_record(config: SiteConfig, slug: str, image_src: str, title: str) -> ArticleRecord:
    """Assemble an ``ArticleRecord`` from an identifier, image source and sanitized title."""
    key = derive_date_key(slug)
    return ArticleRecord(
        title=title,
        url=config.article_url(slug),
        image_url=resolve_asset_url(config, image_src),
        slug=slug,
        published_date=key.published_date,
        sort_key=key.sort_key,
    )
