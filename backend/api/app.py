"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.api.limiter import limiter
from backend.config import configure_logging, settings
from backend.errors import JobsApiError

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = settings.cors_origins.split(",")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and report missing credentials on startup."""
    configure_logging()
    if not settings.serpapi_api_key:
        logger.warning("SERPAPI_API_KEY not set, /api/jobs will answer 500")
    yield


app = FastAPI(
    title="Job Recommendations API",
    description="Real job postings matched to AI resume feedback",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(JobsApiError)
async def jobs_api_error_handler(request: Request, exc: JobsApiError):
    """Render route failures as {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"error": f"Rate limit exceeded: {exc.detail}"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from backend.api.routes import jobs  # noqa: E402

app.include_router(jobs.router, prefix="/api/jobs", tags=["Jobs"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
