"""Failures reported by the GitHub events fetcher."""

from http import HTTPStatus


class FetchError(Exception):
    """Base class for every categorized fetch failure."""


class UserNotFoundError(FetchError):
    """The API answered 404 for the requested user."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"User '{username}' not found")


class RateLimitedError(FetchError):
    """The API answered 403, which for anonymous requests means rate limiting."""

    def __init__(self):
        super().__init__("API rate limit exceeded. Please try again later.")


class UnexpectedStatusError(FetchError):
    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason or _standard_phrase(status_code)
        status = f"{status_code} {self.reason}".strip()
        super().__init__(f"GitHub API request failed with status: {status}")


class MalformedResponseError(FetchError):
    """The response body could not be read as a list of events."""


def _standard_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""
