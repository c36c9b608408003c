from __future__ import annotations

from typing import List, Optional

import requests

from .errors import EmptyResultError
from .extractors import extract_fallback, extract_primary
from .fetchers import fetch_landing_page
from .models import ArticleRecord, IllustrationRecord, SiteConfig
from .processors import dedupe_sort_and_cap
from .prober import IllustrationProber
from .utils.logging import get_logger

logger = get_logger("gsf.orchestrator")


def extract_articles(html: str, config: SiteConfig) -> List[ArticleRecord]:
    """Run block extraction, falling back to positional pairing when it finds nothing."""
    records = extract_primary(html, config)
    if not records:
        logger.warning("No complete article blocks found; using positional fallback")
        records = extract_fallback(html, config)
    return records


class FeedService:
    """Entry point for the two feed operations.

    Holds configuration and an optional ``requests.Session`` only; every call
    keeps its own accumulators, so calls are independent and repeatable.
    """

    def __init__(
        self,
        config: Optional[SiteConfig] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or SiteConfig()
        self.session = session

    def _load_articles(self, *, limit: Optional[int]) -> List[ArticleRecord]:
        html = fetch_landing_page(self.config, session=self.session)
        records = extract_articles(html, self.config)
        if not records:
            raise EmptyResultError(self.config.landing_url)
        return dedupe_sort_and_cap(records, limit=limit)

    def fetch_articles(self) -> List[ArticleRecord]:
        """Return the newest articles on the landing page (1 to ``article_limit``).

        Raises ``FetchError`` if the page cannot be retrieved and
        ``EmptyResultError`` if no article could be extracted.
        """
        articles = self._load_articles(limit=self.config.article_limit)
        logger.info("Returning %d article(s)", len(articles))
        return articles

    def fetch_illustrations(self) -> List[IllustrationRecord]:
        """Return up to ``illustration_limit`` illustrations, newest first.

        The article list is extracted the same way as ``fetch_articles`` but
        is not truncated, so the prober can scan past the first page of
        articles. Failed probes only mean "no illustration"; an empty result
        is returned as an empty list.
        """
        articles = self._load_articles(limit=None)
        prober = IllustrationProber(self.config, session=self.session)
        illustrations = prober.discover(articles)
        logger.info("Returning %d illustration(s)", len(illustrations))
        return illustrations


def fetch_articles(config: Optional[SiteConfig] = None) -> List[ArticleRecord]:
    return FeedService(config).fetch_articles()


def fetch_illustrations(config: Optional[SiteConfig] = None) -> List[IllustrationRecord]:
    return FeedService(config).fetch_illustrations()
