"""Command line entrypoint for the gamesanpi feed.

Fetches either the latest articles or the latest illustrations and prints them
as a JSON array on stdout. Logs go to stderr.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .errors import FeedError
from .models import SiteConfig
from .orchestrator import FeedService
from .utils.config_loader import load_site_config
from .utils.logging import configure_logging, get_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch the latest gamesanpi articles or illustrations as JSON"
    )
    parser.add_argument(
        "command",
        choices=["articles", "illustrations"],
        help="Which list to fetch",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML file with a 'site' section overriding the defaults",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    parser.add_argument(
        "--probe-workers",
        type=int,
        default=None,
        help="Probe the illustrations of one article concurrently with this many workers",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level, output="stderr")
    logger = get_logger("gsf.cli")

    config = SiteConfig()
    if args.config:
        logger.info("Loading site configuration from %s", args.config)
        try:
            config = load_site_config(Path(args.config))
        except Exception as exc:  # noqa: BLE001 - top-level entrypoint guard
            logger.exception("Failed to load configuration: %s", exc)
            return 1
    if args.probe_workers is not None:
        config.probe_workers = max(1, args.probe_workers)

    service = FeedService(config)
    try:
        if args.command == "articles":
            records = service.fetch_articles()
        else:
            records = service.fetch_illustrations()
    except FeedError as exc:
        logger.error("%s", exc)
        return 1

    json.dump([r.to_dict() for r in records], sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
