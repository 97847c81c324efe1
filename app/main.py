import logging
from typing import AsyncIterator, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from issue_search.errors import FailureKind
from issue_search.formatting import format_result
from issue_search.github import GitHubSearchClient
from issue_search.ranker import MAX_RESULTS, MIN_RESULTS
from issue_search.service import ResultStatus, SimilarIssueService

from .config import Settings, get_settings
from .models import SimilarIssuesResponse

logger = logging.getLogger(__name__)

FAILURE_STATUS_CODES = {
    FailureKind.UNAVAILABLE: 503,
    FailureKind.REJECTED: 502,
    FailureKind.MALFORMED: 502,
}

app = FastAPI(title="support-assistant", default_response_class=ORJSONResponse)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)


def open_search_client(settings: Settings) -> GitHubSearchClient:
    return GitHubSearchClient(
        settings.github_token or None,
        base_url=settings.github_api_base,
        user_agent=settings.github_user_agent,
        timeout=settings.github_timeout,
    )


async def get_search_service(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[SimilarIssueService]:
    async with open_search_client(settings) as client:
        yield SimilarIssueService(client)


@app.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "status": "ok",
        "github_api_base": settings.github_api_base,
        "authenticated": settings.authenticated,
    }


@app.get("/similar", response_model=SimilarIssuesResponse)
async def similar(
    owner: str = Query(..., description="GitHub repository owner/organization"),
    repo: str = Query(..., description="GitHub repository name"),
    q: str = Query(..., description="Description of the issue to find similar ones for"),
    max_results: Optional[int] = Query(None, ge=MIN_RESULTS, le=MAX_RESULTS),
    settings: Settings = Depends(get_settings),
    service: SimilarIssueService = Depends(get_search_service),
):
    if max_results is None:
        max_results = settings.default_max_results
    result = await service.find_similar(owner, repo, q, max_results)
    response = SimilarIssuesResponse.from_result(result, format_result(result))
    if result.status is ResultStatus.FAILED and result.failure is not None:
        status_code = FAILURE_STATUS_CODES.get(result.failure.kind, 502)
        logger.error(f"/similar for {owner}/{repo} failed with {result.failure.kind.value}")
        return ORJSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
    return response
