"""Job search proxy endpoint."""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from backend.api.limiter import limiter
from backend.api.schemas import ErrorResponse, JobSearchRequest, JobSearchResponse
from backend.config import settings
from backend.errors import BadRequest, GenericServerError, JobsApiError, ServerMisconfigured
from backend.tools.serpapi_search import SerpApiJobSearch

logger = logging.getLogger(__name__)

router = APIRouter()


def get_job_search() -> SerpApiJobSearch:
    """FastAPI dependency providing the SerpApi client."""
    return SerpApiJobSearch(api_key=settings.serpapi_api_key, timeout=settings.search_timeout)


@router.post(
    "",
    response_model=JobSearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": JobSearchRequest.model_json_schema()}},
            "required": True,
        }
    },
)
@limiter.limit(settings.jobs_rate_limit)
async def search_jobs(
    request: Request,
    job_search: SerpApiJobSearch = Depends(get_job_search),
):
    """Search real job postings for a title and skills."""
    logger.info("Received request on /api/jobs")

    # Credential first: an unconfigured server answers 500 whatever the body is
    if not job_search.configured:
        logger.error("SERPAPI_API_KEY is not set on the server")
        raise ServerMisconfigured()

    data = await parse_search_request(request)
    if not data.title or not data.skills:
        raise BadRequest()

    logger.info(f"Received from client: title={data.title!r} skills={data.skills!r}")

    try:
        jobs = await job_search.search(data.title, data.skills)
    except JobsApiError:
        raise
    except Exception as e:
        logger.error(f"Job API route error: {job_search.redact(repr(e))}")
        raise GenericServerError(job_search.redact(str(e)) or None)

    return JobSearchResponse(jobs=jobs)


async def parse_search_request(request: Request) -> JobSearchRequest:
    """Decode the body; anything that is not a {title, skills} object is a 400."""
    try:
        return JobSearchRequest.model_validate(await request.json())
    except (json.JSONDecodeError, UnicodeDecodeError, PydanticValidationError) as e:
        logger.info(f"Rejected request body on /api/jobs: {e}")
        raise BadRequest()


@router.api_route(
    "", methods=["GET", "HEAD", "OPTIONS", "PUT", "PATCH", "DELETE"], include_in_schema=False
)
def method_not_allowed():
    """Only POST is supported."""
    return JSONResponse(status_code=405, content={"error": "Method not allowed"})
