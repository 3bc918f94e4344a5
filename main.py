"""
Job Recommendations - CLI Entry Point.

Runs keyword extraction and the job search for a feedback JSON file against
a running /api/jobs proxy.

Usage:
    python main.py feedback.json [proxy-url]
"""

import asyncio
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import httpx

from backend.agents.job_recommender import JobRecommendations, Status
from backend.agents.keyword_extractor import create_keyword_model
from backend.config import configure_logging, settings


async def run(feedback: dict, proxy_url: str) -> int:
    """Run the pipeline once and print the jobs found."""
    try:
        ai = create_keyword_model()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    async with httpx.AsyncClient(base_url=proxy_url, timeout=settings.search_timeout) as client:
        recommender = JobRecommendations(ai, client)
        await recommender.on_feedback_change(feedback)

    if recommender.status == Status.ERROR:
        print(f"Could not find relevant job postings at this time. ({recommender.error})")
        return 1

    if not recommender.jobs:
        print("Could not find relevant job postings at this time.")
        return 0

    print(f"\nFound {len(recommender.jobs)} jobs")
    print("-" * 40)
    for i, job in enumerate(recommender.jobs, 1):
        print(f"\n  {i}. {job.title}")
        print(f"     Company:  {job.company_name}")
        print(f"     Location: {job.location}")
        print(f"     Link:     {job.link}")
    return 0


def main() -> int:
    """Run the job recommendations CLI."""
    print("Job Recommendations")
    print("=" * 40)

    if len(sys.argv) < 2:
        print(__doc__)
        return 1

    feedback_path = Path(sys.argv[1])
    if not feedback_path.exists():
        print(f"Not found: {feedback_path}")
        return 1

    try:
        feedback = json.loads(feedback_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        print(f"Error: {feedback_path} is not valid JSON ({e})")
        return 1

    proxy_url = sys.argv[2] if len(sys.argv) > 2 else settings.jobs_api_url
    configure_logging()
    print(f"Searching via {proxy_url}...")
    return asyncio.run(run(feedback, proxy_url))


if __name__ == "__main__":
    sys.exit(main())
