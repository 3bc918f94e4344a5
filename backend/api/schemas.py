"""API request/response schemas."""

from pydantic import BaseModel, Field


class Job(BaseModel):
    """A job posting as returned to the browser."""

    title: str
    company_name: str
    location: str
    link: str


class JobSearchRequest(BaseModel):
    # Optional so that missing fields reach the route and map to a 400
    title: str | None = None
    skills: list[str] | None = Field(default=None, description="Skill keywords, in priority order")


class JobSearchResponse(BaseModel):
    jobs: list[Job]


class ErrorResponse(BaseModel):
    error: str
