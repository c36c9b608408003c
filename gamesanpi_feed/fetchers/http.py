from __future__ import annotations

from typing import Dict, Optional
from urllib.parse import urlparse

import requests

from ..errors import FetchError
from ..models import SiteConfig
from ..utils.logging import get_logger

logger = get_logger("gsf.fetchers.http")


DEFAULT_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/127.0.0.0 Safari/537.36"
    )
}


def _validated_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise FetchError(url, "invalid URL")
    return url


def request_headers(config: SiteConfig) -> Dict[str, str]:
    return {**DEFAULT_HEADERS, **(config.headers or {})}


def fetch_landing_page(config: SiteConfig, *, session: Optional[requests.Session] = None) -> str:
    """Fetch the landing page HTML.

    Raises ``FetchError`` when the URL is not absolute http(s), the request
    fails or the response status is not 2xx. The underlying ``requests``
    exception, if any, is chained. A response without a declared charset is
    decoded as UTF-8 rather than the ISO-8859-1 default of ``requests``.
    """
    url = _validated_url(config.landing_url)
    http = session or requests
    logger.debug("Fetching landing page from %s", url)
    try:
        resp = http.get(url, headers=request_headers(config), timeout=config.timeout)
    except requests.RequestException as exc:
        logger.warning("Landing page request error for %s: %s", url, exc)
        raise FetchError(url, str(exc)) from exc

    if not 200 <= resp.status_code < 300:
        logger.warning("Landing page fetch failed (%s): %s", resp.status_code, url)
        raise FetchError(url, f"HTTP status {resp.status_code}")

    content_type = resp.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        resp.encoding = "utf-8"
    html = resp.text
    logger.info("Fetched landing page %s (%d characters)", url, len(html))
    return html
