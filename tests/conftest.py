"""Shared fixtures for the API and the recommendations controller."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.api.app import app
from backend.api.limiter import limiter
from backend.api.routes.jobs import get_job_search
from backend.tools.serpapi_search import SerpApiJobSearch

limiter.enabled = False


@pytest.fixture
def use_search():
    """Install a SerpApiJobSearch as the route dependency for one test."""

    def install(search: SerpApiJobSearch) -> None:
        app.dependency_overrides[get_job_search] = lambda: search

    yield install
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def feedback() -> dict:
    return {
        "overallScore": 78,
        "ATS": {"score": 70, "tips": [{"type": "improve", "tip": "Add keywords"}]},
        "skills": {"score": 80, "tips": [{"type": "good", "tip": "Strong Python and FastAPI"}]},
    }
