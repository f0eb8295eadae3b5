"""Fetch a GitHub user's public events and render them as an activity log."""

from github_activity.api import GitHubAPI
from github_activity.errors import (
    FetchError,
    MalformedResponseError,
    RateLimitedError,
    UnexpectedStatusError,
    UserNotFoundError,
)
from github_activity.formatter import capitalize_first_letter, format_activity
from github_activity.models import Actor, GitHubEvent, Repository

__version__ = "0.1.0"

__all__ = [
    "Actor",
    "FetchError",
    "GitHubAPI",
    "GitHubEvent",
    "MalformedResponseError",
    "RateLimitedError",
    "Repository",
    "UnexpectedStatusError",
    "UserNotFoundError",
    "capitalize_first_letter",
    "format_activity",
]
