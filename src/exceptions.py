"""
Exceptions raised at the boundary to the external AI service.

Both AI clients catch these internally and convert them to fallback
values, recording which kind of failure happened.
"""


class AIServiceError(Exception):
    """Base class for failures talking to the reasoning service."""

    kind = "error"


class ServiceUnavailableError(AIServiceError):
    """Service could not be reached, rejected the request, or is not configured."""

    kind = "unavailable"


class InvalidResponseError(AIServiceError):
    """Service answered, but the content is empty or does not match the expected shape."""

    kind = "invalid_response"
