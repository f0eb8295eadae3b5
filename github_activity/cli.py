import argparse
import logging
import os
import sys
from typing import List, Optional

import requests

from github_activity.api import GitHubAPI
from github_activity.errors import FetchError
from github_activity.formatter import format_activity

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="github-activity", description="A CLI tool to fetch GitHub user activity")
    p.add_argument("username", help="GitHub username to fetch activity for")
    return p


def _configure_logging() -> None:
    level_name = (os.getenv("GITHUB_ACTIVITY_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    _configure_logging()

    base_url = os.getenv("GITHUB_API_URL")
    if base_url:
        logger.debug("Using API base URL %s", base_url)

    try:
        with GitHubAPI(base_url=base_url) as github:
            events = github.fetch_user_events(args.username)
    except (FetchError, requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not events:
        print(f"No recent activity found for user: {args.username}")
        return 0

    print(f"Recent activity for {args.username}:")
    print()
    for event in events:
        print(f"- {format_activity(event)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
