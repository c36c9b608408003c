"""Top-level package for the gamesanpi landing-page feed.

This package extracts the latest article records from the gamesanpi landing
page and discovers the illustration images published alongside them.
"""

from .errors import EmptyResultError, FeedError, FetchError
from .orchestrator import FeedService, fetch_articles, fetch_illustrations

__all__ = [
    "FeedService",
    "fetch_articles",
    "fetch_illustrations",
    "FeedError",
    "FetchError",
    "EmptyResultError",
]
