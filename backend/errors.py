"""
Error types for job recommendations.

Two families:
- RecommendationError: failures of the client pipeline (keywords, proxy call).
  All of them collapse to the same "error" status in the UI.
- JobsApiError: failures of the /api/jobs proxy route. Each carries the HTTP
  status and a message that is safe to send to the client.
"""


class RecommendationError(Exception):
    """Base class for client pipeline failures."""


class ExtractionError(RecommendationError):
    """AI response had no textual content."""


class ParseError(RecommendationError):
    """Text that should hold JSON could not be decoded."""


class ValidationError(RecommendationError):
    """Extracted keywords are missing a title or skills."""


class HttpError(RecommendationError):
    """The jobs proxy answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Failed to fetch jobs. Server responded with: {body}")


class ProxyError(RecommendationError):
    """The jobs proxy answered with an error payload."""


class JobsApiError(Exception):
    """Base class for errors returned by the jobs route as {"error": message}."""

    status_code = 500
    default_message = "Failed to fetch jobs"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(JobsApiError):
    status_code = 400
    default_message = "Missing title or skills"


class ServerMisconfigured(JobsApiError):
    default_message = "API key is not configured"


class UpstreamError(JobsApiError):
    """Job search provider returned a non-success status.

    The upstream status and body are kept for server-side logs only.
    """

    default_message = "Job search request failed. Check your API key and credits."

    def __init__(self, upstream_status: int, upstream_body: str, message: str | None = None):
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body
        super().__init__(message)


class GenericServerError(JobsApiError):
    pass
