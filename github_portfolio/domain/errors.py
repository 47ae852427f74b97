"""Errors raised while fetching data from GitHub."""
from typing import Optional


class FetchError(Exception):
    """Base class for every failure talking to the GitHub API."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class NotFound(FetchError):
    """Raised when GitHub answers 404."""

    def __init__(self, message: str = "GitHub user not found. Please check the username."):
        super().__init__(message, status=404)


class RateLimited(FetchError):
    """Raised when GitHub answers 403 (unauthenticated quota exhausted)."""

    def __init__(self, message: str = "GitHub API rate limit exceeded. Please try again later."):
        super().__init__(message, status=403)


class ApiError(FetchError):
    """Raised for any other non-success status."""

    def __init__(self, status: int):
        super().__init__(f"GitHub API error: {status}", status=status)


class NetworkFailure(FetchError):
    """Raised when the request never produced a response (connection, timeout)."""

    def __init__(self, detail: str):
        super().__init__(f"Network error while contacting GitHub: {detail}")
        self.detail = detail


class InvalidResponse(FetchError):
    """Raised when a successful response carries an unusable body."""

    def __init__(self, detail: str):
        super().__init__(f"Unexpected response from GitHub: {detail}")
        self.detail = detail


def error_for_status(status: int, not_found_message: Optional[str] = None) -> Optional[FetchError]:
    """Map an HTTP status to the matching error, or None on success.

    Args:
        status: HTTP status code of the response
        not_found_message: Message to use for a 404 instead of the default

    Returns:
        FetchError instance for failures, None for 2xx statuses
    """
    if status == 404:
        return NotFound(not_found_message) if not_found_message else NotFound()
    if status == 403:
        return RateLimited()
    if not 200 <= status < 300:
        return ApiError(status)
    return None
