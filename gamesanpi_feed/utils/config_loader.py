from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

import yaml

from ..models import SiteConfig


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


URL_FIELDS = ("landing_url", "article_base_url", "asset_base_url")
INT_FIELDS = (
    "article_limit",
    "illustration_limit",
    "max_articles_to_scan",
    "max_illusts_per_article",
    "probe_workers",
)

# Illustrations are published as illust1.png .. illust3.png
MAX_ILLUSTS_PER_ARTICLE = 3


def _validate_site_dict(entry: dict) -> None:
    """Validate the ``site`` mapping from YAML.

    All fields are optional:
      - landing_url, article_base_url, asset_base_url: absolute http(s) URLs
      - headers: mapping[str, str]
      - timeout: positive number or null
      - article_limit, illustration_limit, max_articles_to_scan,
        max_illusts_per_article (at most 3), probe_workers: positive integers
    """
    for key in URL_FIELDS:
        if key not in entry:
            continue
        url_str = str(entry[key]).strip()
        parsed = urlparse(url_str)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"Invalid URL '{url_str}' for '{key}'. Must be absolute http(s) URL.")

    for key in INT_FIELDS:
        if key not in entry:
            continue
        value = entry[key]
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")

    if entry.get("max_illusts_per_article", 1) > MAX_ILLUSTS_PER_ARTICLE:
        raise ConfigError(f"'max_illusts_per_article' cannot exceed {MAX_ILLUSTS_PER_ARTICLE}")

    if "timeout" in entry and entry["timeout"] is not None:
        timeout = entry["timeout"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"'timeout' must be a positive number or null, got {timeout!r}")

    if "headers" in entry and entry["headers"] is not None:
        headers = entry["headers"]
        if not isinstance(headers, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in headers.items()):
            raise ConfigError("'headers' must be a mapping of string keys to string values if provided")


def _coerce_site(entry: dict) -> SiteConfig:
    kwargs: Dict[str, Any] = {}
    for key in URL_FIELDS:
        if key in entry:
            kwargs[key] = str(entry[key]).strip()
    for key in INT_FIELDS:
        if key in entry:
            kwargs[key] = int(entry[key])
    if "timeout" in entry:
        kwargs["timeout"] = float(entry["timeout"]) if entry["timeout"] is not None else None
    headers = entry.get("headers") or {}
    kwargs["headers"] = {str(k): str(v) for k, v in headers.items()}
    return SiteConfig(**kwargs)


def load_site_config(path: Path | str) -> SiteConfig:
    """Load a YAML configuration file into a ``SiteConfig``.

    YAML structure:
      - Top-level mapping
      - Key ``site``: mapping of ``SiteConfig`` field overrides

    A file without a ``site`` key yields the defaults. Unknown keys are ignored
    for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Top-level YAML configuration must be a mapping")

    site_raw = data.get("site") or {}
    if not isinstance(site_raw, dict):
        raise ConfigError(f"'site' must be a mapping, got: {type(site_raw)}")

    _validate_site_dict(site_raw)
    return _coerce_site(site_raw)
