"""
Job Recommendations controller.

Turns resume feedback into real job postings: keywords from the chat model,
then a POST to the /api/jobs proxy. Holds the status and job list that the
renderer draws.
"""

import asyncio
import html
import logging
from enum import Enum
from typing import Any

import httpx

from backend.agents.keyword_extractor import Keywords, extract_keywords
from backend.api.schemas import Job
from backend.errors import HttpError, ProxyError
from backend.utils.parser import extract_json_object

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Searching for real job postings..."
NOT_FOUND_MESSAGE = "Could not find relevant job postings at this time."


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class JobRecommendations:
    """Keyword extraction and job lookup for one feedback document at a time.

    Every trigger bumps a generation counter. A run that settles after a newer
    one has started leaves status and jobs alone.
    """

    def __init__(self, ai, client: httpx.AsyncClient, jobs_path: str = "/api/jobs"):
        self.ai = ai
        self.client = client
        self.jobs_path = jobs_path

        self.status = Status.IDLE
        self.jobs: list[Job] = []
        self.error: Exception | None = None
        self.feedback: Any = None

        self._generation = 0
        self._triggered = False
        self._tasks: set[asyncio.Task] = set()

    def update(self, feedback: Any, ai=None) -> asyncio.Task | None:
        """Re-run the pipeline when feedback or the AI client changed.

        Must be called from a running event loop. Returns the scheduled task,
        or None when nothing changed.
        """
        ai = ai if ai is not None else self.ai
        if self._triggered and feedback is self.feedback and ai is self.ai:
            return None

        self._triggered = True
        self.feedback = feedback
        self.ai = ai

        task = asyncio.create_task(self.on_feedback_change(feedback))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def on_feedback_change(self, feedback: Any) -> None:
        """Run keyword extraction and the job search for one feedback value."""
        self._generation += 1
        generation = self._generation
        self.status = Status.LOADING

        try:
            keywords = await extract_keywords(self.ai, feedback)
            jobs = await self.fetch_jobs(keywords)
        except Exception as e:
            if generation != self._generation:
                logger.debug(f"Discarding failure from superseded run {generation}: {e}")
                return
            logger.error(f"Job recommendation error: {e!r}")
            self.error = e
            self.status = Status.ERROR
            return

        if generation != self._generation:
            logger.debug(f"Discarding {len(jobs)} jobs from superseded run {generation}")
            return

        self.jobs = jobs
        self.error = None
        self.status = Status.IDLE

    async def fetch_jobs(self, keywords: Keywords) -> list[Job]:
        """POST keywords to the jobs proxy and decode the job list."""
        response = await self.client.post(
            self.jobs_path,
            json={"title": keywords.title, "skills": keywords.skills},
        )

        # Read as text first: failures upstream may not be JSON
        body = response.text
        logger.info(
            f"Response from {self.jobs_path}: status={response.status_code} "
            f"reason={response.reason_phrase!r} body={body}"
        )

        if not response.is_success:
            raise HttpError(response.status_code, body)

        data = extract_json_object(body)
        if data.get("error"):
            raise ProxyError(data["error"])

        jobs = [Job.model_validate(job) for job in data.get("jobs") or []]
        logger.info(f"Jobs received from server: {len(jobs)}")
        return jobs

    def render(self) -> str:
        return render_job_recommendations(self.status, self.jobs)


def render_job_recommendations(status: Status, jobs: list[Job]) -> str:
    """Render the recommendations panel as an HTML fragment."""
    parts = [
        '<div class="job-recommendations">',
        "<h3>Real Job Postings For You</h3>",
    ]

    if status == Status.LOADING:
        parts.append(f'<p class="status">{LOADING_MESSAGE}</p>')
    elif status == Status.IDLE and jobs:
        parts.append('<div class="job-list">')
        for job in jobs:
            parts.append(
                f'<a class="job-card" href="{html.escape(job.link)}" '
                'target="_blank" rel="noopener noreferrer">'
                f"<h4>{html.escape(job.title)}</h4>"
                f'<p class="company">{html.escape(job.company_name)}</p>'
                f'<p class="location">{html.escape(job.location)}</p>'
                "</a>"
            )
        parts.append("</div>")
    else:
        parts.append(f'<p class="status">{NOT_FOUND_MESSAGE}</p>')

    parts.append("</div>")
    return "\n".join(parts)
