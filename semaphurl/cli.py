#!/usr/bin/env python3
"""
semaphurl - open each URL in the browser its rules pick
"""

import argparse
import logging
import os
import sys

from .__version__ import __version__
from .config import ConfigStore, data_dir, load_config
from .history import UrlHistory
from .launcher import Launcher
from .log import setup_logging
from .placeholders import available_placeholders
from .router import preview_route, route

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="semaphurl",
        description="Open URLs in the browser chosen by your routing rules.",
    )
    parser.add_argument("url", nargs="?", help="URL to open")
    parser.add_argument("--dry-run", action="store_true",
                        help="print the routing decision without opening anything")
    parser.add_argument("--history", action="store_true", help="list recently routed URLs")
    parser.add_argument("--search", default="", help="filter --history output")
    parser.add_argument("--limit", type=int, default=20, help="max --history entries")
    parser.add_argument("--placeholders", action="store_true",
                        help="list placeholders usable in argument templates")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_decision(decision):
    if not decision.success:
        print(f"Error: {decision.error_message}")
        return
    print(f"URL:       {decision.original_url}")
    print(f"Rule:      {decision.describe()}")
    if decision.is_system_fallback:
        print("Browser:   (system handler)")
    else:
        print(f"Browser:   {decision.target_path}")
        print(f"Arguments: {decision.arguments}")


def print_history(history, search, limit):
    for entry in history.search(search)[:limit]:
        rule = entry.rule_name or "-"
        print(f"{entry.time:%Y-%m-%d %H:%M}  {entry.browser_name:<28} {rule:<20} {entry.url}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = load_config()
    setup_logging(settings.log_level)
    store = ConfigStore(settings.router)

    if args.placeholders:
        print("\n".join(available_placeholders()))
        return 0

    history = None
    if settings.enable_history or args.history:
        history = UrlHistory(data_dir() / "history.json", settings.history_retention_days)
        try:
            history.load()
        except Exception as e:
            logger.error(f"URL history unavailable, routing without it: {e}")

    if args.history:
        print_history(history, args.search, args.limit)
        return 0

    config = store.snapshot()

    if not args.url:
        # Allow launching without URL
        path = config.default_browser_path
        if path and os.path.isfile(path):
            logger.info("Launching default browser without URL...")
            Launcher().spawn(path, "")
            return 0
        build_parser().print_usage()
        return 1

    logger.info(f"Processing URL: {args.url}")
    if args.dry_run:
        decision = preview_route(args.url, config)
        print_decision(decision)
        return 0 if decision.success else 1

    decision = route(args.url, config)
    launcher = Launcher(history=history, focus_browser=config.focus_browser_after_routing)
    return 0 if launcher.execute(decision) else 1


if __name__ == "__main__":
    sys.exit(main())
