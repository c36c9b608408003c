"""Network layer: the landing page fetch and illustration existence probes."""

from .http import fetch_landing_page
from .probe import probe_exists

__all__ = ["fetch_landing_page", "probe_exists"]
