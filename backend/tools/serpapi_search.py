"""
SerpApi Google Jobs search.

Builds a query from a job title and skills, calls SerpApi and normalizes
the first few results into Job objects.
"""

import logging

import httpx

from backend.api.schemas import Job
from backend.errors import ServerMisconfigured, UpstreamError

logger = logging.getLogger(__name__)

SERPAPI_URL = "https://serpapi.com/search"
GOOGLE_DOMAIN = "google.co.in"
SEARCH_LOCATION = "India"
MAX_JOBS = 5


def build_search_query(title: str, skills: list[str]) -> str:
    """Title followed by space-joined skills."""
    return f"{title} {' '.join(skills)}"


def best_job_link(hit: dict) -> str:
    """Apply link, else first related link, else share link."""
    if hit.get("apply_link"):
        return hit["apply_link"]
    related = hit.get("related_links") or []
    if related and isinstance(related[0], dict) and related[0].get("link"):
        return related[0]["link"]
    return hit.get("share_link") or ""


def normalize_job(hit: dict) -> Job:
    """Map a SerpApi jobs_results entry to a Job."""
    return Job(
        title=hit.get("title") or "",
        company_name=hit.get("company_name") or "",
        location=hit.get("location") or "",
        link=best_job_link(hit),
    )


class SerpApiJobSearch:
    """Google Jobs search through SerpApi.

    The API key is passed in explicitly and never returned to callers;
    it is redacted from every logged URL.
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def redact(self, text: str) -> str:
        if not self.api_key:
            return text
        return text.replace(self.api_key, "REDACTED")

    async def search(self, title: str, skills: list[str]) -> list[Job]:
        """
        Search Google Jobs for a title and skills.

        Args:
            title: Job title to search for
            skills: Skill keywords appended to the query

        Returns:
            At most MAX_JOBS jobs in provider order. Empty when the provider
            reports an error in its payload or has no results.

        Raises:
            ServerMisconfigured: no API key
            UpstreamError: provider answered with a non-success status
        """
        if not self.configured:
            logger.error("SERPAPI_API_KEY is not set on the server")
            raise ServerMisconfigured()

        query = build_search_query(title, skills)
        params = {
            "engine": "google_jobs",
            "q": query,
            "google_domain": GOOGLE_DOMAIN,
            "location": SEARCH_LOCATION,
            "api_key": self.api_key,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            request = client.build_request("GET", SERPAPI_URL, params=params)
            logger.info(f"Calling SerpApi with URL: {self.redact(str(request.url))}")
            response = await client.send(request)

        if not response.is_success:
            logger.error(
                f"SerpApi request failed: status={response.status_code} "
                f"body={self.redact(response.text)}"
            )
            raise UpstreamError(response.status_code, response.text)

        data = response.json()

        if data.get("error"):
            logger.error(f"SerpApi returned an error: {data['error']}")
            return []

        results = data.get("jobs_results") or []
        if not results:
            logger.info(f"No job results found from SerpApi for query: {query}")
            return []

        jobs = [normalize_job(hit) for hit in results[:MAX_JOBS]]
        logger.info(f"Successfully transformed {len(jobs)} jobs.")
        return jobs
