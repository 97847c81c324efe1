"""MCP stdio server exposing the ``find-similar-issues`` tool."""
import logging
import sys
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from issue_search.formatting import format_result
from issue_search.ranker import DEFAULT_MAX_RESULTS, MAX_RESULTS, MIN_RESULTS
from issue_search.service import SimilarIssueService

from .config import get_settings
from .main import open_search_client

logger = logging.getLogger(__name__)

SERVER_NAME = "support-assistant"

mcp = FastMCP(SERVER_NAME)


# Argument names are part of the tool's published schema.
@mcp.tool(
    name="find-similar-issues",
    description="Find GitHub issues similar to a new issue description",
)
async def find_similar_issues(
    owner: Annotated[str, Field(description="GitHub repository owner/organization")],
    repo: Annotated[str, Field(description="GitHub repository name")],
    issueDescription: Annotated[str, Field(description="Description of the issue to find similar ones for")],
    maxResults: Annotated[
        int,
        Field(ge=MIN_RESULTS, le=MAX_RESULTS, description="Maximum number of similar issues to return"),
    ] = DEFAULT_MAX_RESULTS,
) -> str:
    settings = get_settings()
    async with open_search_client(settings) as client:
        result = await SimilarIssueService(client).find_similar(
            owner, repo, issueDescription, maxResults
        )
    return format_result(result)


def configure_logging(level: str) -> None:
    # stdout carries the protocol stream; FastMCP already installed a root handler
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Support Assistant MCP Server running on stdio")
    try:
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
