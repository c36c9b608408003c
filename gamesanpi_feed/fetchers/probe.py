from __future__ import annotations

from typing import Dict, Optional

import requests

from ..utils.logging import get_logger

logger = get_logger("gsf.fetchers.probe")


def probe_exists(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> bool:
    """Return True when a HEAD request for ``url`` answers with a 2xx status.

    Any other status and any transport error count as "does not exist"; the
    error is logged and never raised.
    """
    http = session or requests
    try:
        resp = http.head(url, headers=headers, timeout=timeout, allow_redirects=True)
    except requests.RequestException as exc:
        logger.debug("Probe failed for %s: %s", url, exc)
        return False
    exists = 200 <= resp.status_code < 300
    if not exists:
        logger.debug("Probe miss (%s): %s", resp.status_code, url)
    return exists
