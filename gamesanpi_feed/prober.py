"""Illustration discovery by probing predictable image URLs.

Illustrations have no index: an article may publish ``illust1.png`` up to
``illust3.png`` under its dated image folder. The prober walks the newest
articles, probes each candidate URL and keeps the ones that exist.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Callable, Iterable, List, Optional, Tuple

import requests

from .fetchers.http import request_headers
from .fetchers.probe import probe_exists
from .models import ArticleRecord, IllustrationRecord, SiteConfig
from .processors import derive_date_key, sort_by_key
from .utils.logging import get_logger

logger = get_logger("gsf.prober")

ProbeFn = Callable[[str], bool]
Candidate = Tuple[int, str]


class IllustrationProber:
    """Find up to ``illustration_limit`` illustrations for a sorted article list.

    At most ``max_articles_to_scan`` articles are visited and at most
    ``max_illusts_per_article`` URLs are probed per article. Scanning stops as
    soon as the limit is reached. With ``probe_workers`` above one, the
    candidates of a single article are probed concurrently; hits are still
    taken in illustration order so the result matches a sequential scan.
    """

    def __init__(
        self,
        config: SiteConfig,
        *,
        probe: Optional[ProbeFn] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        if session is not None and config.probe_workers > 1:
            # requests.Session is not thread-safe; pooled probes use plain requests
            logger.debug("Ignoring shared session for %d probe workers", config.probe_workers)
            session = None
        self._probe = probe or partial(
            probe_exists,
            session=session,
            headers=request_headers(config),
            timeout=config.timeout,
        )

    def candidate_urls(self, article: ArticleRecord) -> List[Candidate]:
        key = derive_date_key(article.slug)
        if not key.is_valid:
            return []
        return [
            (n, self.config.illustration_url(key.year, key.month, article.slug, n))
            for n in range(1, self.config.max_illusts_per_article + 1)
        ]

    def discover(self, articles: Iterable[ArticleRecord]) -> List[IllustrationRecord]:
        limit = self.config.illustration_limit
        scan = list(articles)[: self.config.max_articles_to_scan]
        found: List[IllustrationRecord] = []
        probes = 0

        workers = max(1, self.config.probe_workers)
        executor = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None
        try:
            for article in scan:
                if len(found) >= limit:
                    break
                candidates = self.candidate_urls(article)
                if not candidates:
                    logger.debug("No dated image folder for %s; skipping", article.slug)
                    continue
                if executor is None:
                    probes += self._scan_sequential(article, candidates, found, limit)
                else:
                    probes += self._scan_concurrent(executor, article, candidates, found, limit)
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

        logger.info(
            "Illustration scan complete: found=%d probes=%d articles=%d",
            len(found),
            probes,
            len(scan),
        )
        return sort_by_key(found)[:limit]

    def _scan_sequential(
        self,
        article: ArticleRecord,
        candidates: List[Candidate],
        found: List[IllustrationRecord],
        limit: int,
    ) -> int:
        probes = 0
        for n, url in candidates:
            if len(found) >= limit:
                break
            probes += 1
            if self._probe(url):
                logger.info("Illustration found: %s", url)
                found.append(IllustrationRecord.for_article(article, url, n))
        return probes

    def _scan_concurrent(
        self,
        executor: ThreadPoolExecutor,
        article: ArticleRecord,
        candidates: List[Candidate],
        found: List[IllustrationRecord],
        limit: int,
    ) -> int:
        urls = [url for _, url in candidates]
        results = list(executor.map(self._probe, urls))
        for (n, url), exists in zip(candidates, results):
            if len(found) >= limit:
                break
            if exists:
                logger.info("Illustration found: %s", url)
                found.append(IllustrationRecord.for_article(article, url, n))
        return len(urls)
