#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Look up GitHub issues similar to a description from the command line.

Example::

    python scripts/find_similar.py octocat hello-world "app crashes when uploading files" -n 3

The token is taken from ``GITHUB_TOKEN`` (or ``.env``) through the same
settings the servers use. Exit status is 1 when the search itself fails.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence, Tuple

from app.config import get_settings
from app.main import open_search_client
from app.models import SimilarIssuesResponse
from issue_search.formatting import format_result
from issue_search.github import IssueSearcher
from issue_search.ranker import MAX_RESULTS, MIN_RESULTS
from issue_search.service import ResultStatus, SimilarIssueService

LOGGER = logging.getLogger(__name__)


def _max_results(value: str) -> int:
    number = int(value)
    if not MIN_RESULTS <= number <= MAX_RESULTS:
        raise argparse.ArgumentTypeError(f"must be between {MIN_RESULTS} and {MAX_RESULTS}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find GitHub issues similar to a new issue description")
    parser.add_argument("owner", help="GitHub repository owner/organization")
    parser.add_argument("repo", help="GitHub repository name")
    parser.add_argument("description", help="Description of the issue to find similar ones for")
    parser.add_argument(
        "--max-results",
        "-n",
        type=_max_results,
        default=None,
        help=f"Maximum number of similar issues to return ({MIN_RESULTS}-{MAX_RESULTS})",
    )
    parser.add_argument("--json", action="store_true", help="Print the JSON response instead of text")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="More log output")
    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


async def run(args: argparse.Namespace, searcher: IssueSearcher, default_max_results: int) -> Tuple[str, bool]:
    """Return the rendered output and whether the search succeeded."""

    max_results = args.max_results if args.max_results is not None else default_max_results
    result = await SimilarIssueService(searcher).find_similar(
        args.owner, args.repo, args.description, max_results
    )
    text = format_result(result)
    if args.json:
        response = SimilarIssuesResponse.from_result(result, text)
        text = json.dumps(response.model_dump(mode="json"), ensure_ascii=False, indent=2)
    return text, result.status is not ResultStatus.FAILED


async def _main(args: argparse.Namespace) -> Tuple[str, bool]:
    settings = get_settings()
    async with open_search_client(settings) as client:
        return await run(args, client, settings.default_max_results)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    output, ok = asyncio.run(_main(args))
    print(output)
    if not ok:
        LOGGER.error("Issue search failed for %s/%s", args.owner, args.repo)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
