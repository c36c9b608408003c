from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(slots=True)
class SiteConfig:
    """Where to fetch from and how many records to keep.

    Canonical article URLs use the bare host while images and the landing page
    live on ``www``; both bases are kept separately for that reason.
    """

    landing_url: str = "https://www.gamesanpi.com/"
    article_base_url: str = "https://gamesanpi.com/news/"
    asset_base_url: str = "https://www.gamesanpi.com"
    headers: Dict[str, str] = field(default_factory=dict)
    # None keeps the transport default (requests waits indefinitely)
    timeout: Optional[float] = None
    article_limit: int = 10
    illustration_limit: int = 10
    max_articles_to_scan: int = 15
    max_illusts_per_article: int = 3
    probe_workers: int = 1

    def article_url(self, slug: str) -> str:
        return f"{self.article_base_url.rstrip('/')}/{slug}"

    def illustration_url(self, year: str, month: str, slug: str, index: int) -> str:
        base = self.asset_base_url.rstrip("/")
        return f"{base}/images/articles/{year}/{month}/{slug}/illust{index}.png"
