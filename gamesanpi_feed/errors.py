from __future__ import annotations


class FeedError(Exception):
    """Base class for errors surfaced by the feed operations."""


class FetchError(FeedError):
    """Raised when the landing page could not be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not retrieve content from {url}: {reason}")
        self.url = url
        self.reason = reason


class EmptyResultError(FeedError):
    """Raised when neither extraction strategy produced a single article."""

    def __init__(self, url: str) -> None:
        super().__init__(f"No articles found on {url}")
        self.url = url
