import logging
from typing import List, Optional

import requests

from github_activity.errors import (
    MalformedResponseError,
    RateLimitedError,
    UnexpectedStatusError,
    UserNotFoundError,
)
from github_activity.models import GitHubEvent

logger = logging.getLogger(__name__)


class GitHubAPI:
    """Class to fetch a user's public event feed from the GitHub REST API."""

    BASE_URL = "https://api.github.com"
    USER_AGENT = "github-activity-cli"

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None):
        """
        Initialize the GitHub API client.

        Args:
            base_url: API root to query instead of api.github.com (optional)
            session: Preconfigured requests session (optional); its own headers are left untouched
        """
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.headers = {"User-Agent": self.USER_AGENT}

    def __enter__(self) -> "GitHubAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def events_url(self, username: str) -> str:
        return f"{self.base_url}/users/{username}/events"

    def fetch_user_events(self, username: str) -> List[GitHubEvent]:
        """
        Fetch the most recent public events for a user.

        Args:
            username: GitHub username to fetch events for

        Returns:
            List of GitHubEvent objects in the order the API returned them

        Raises:
            UserNotFoundError: If the API answers 404
            RateLimitedError: If the API answers 403
            UnexpectedStatusError: For any other non-200 status
            MalformedResponseError: If a 200 body is not a list of events
            requests.RequestException: If the request itself fails
        """
        url = self.events_url(username)
        logger.debug("GET %s", url)
        response = self.session.get(url, headers=self.headers)
        logger.debug("GET %s -> %s", url, response.status_code)

        if response.status_code == 200:
            return self._parse_events(response)
        if response.status_code == 404:
            logger.warning("User %s not found", username)
            raise UserNotFoundError(username)
        if response.status_code == 403:
            logger.warning("Rate limited while fetching events for %s", username)
            raise RateLimitedError()

        logger.error("Unexpected status %s fetching %s", response.status_code, url)
        raise UnexpectedStatusError(response.status_code, response.reason or "")

    def _parse_events(self, response: requests.Response) -> List[GitHubEvent]:
        try:
            data = response.json()
        except ValueError as e:
            logger.error("Response body is not valid JSON: %s", e)
            raise MalformedResponseError(f"Failed to decode response body: {e}") from e

        if not isinstance(data, list):
            raise MalformedResponseError(f"Expected a JSON array of events, got {type(data).__name__}")

        events = [GitHubEvent.from_dict(item) for item in data]
        logger.debug("Decoded %d events", len(events))
        return events
