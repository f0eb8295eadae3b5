from typing import Any, Dict, Optional

import pytest


def event_record(
    event_type: str = "PushEvent",
    repo: str = "octo/repo",
    payload: Optional[Any] = None,
    login: str = "octocat",
    created_at: str = "2024-03-01T12:30:00Z",
) -> Dict[str, Any]:
    """Build one element of the events API response."""
    return {
        "id": "1",
        "type": event_type,
        "actor": {"id": 1, "login": login},
        "repo": {"id": 2, "name": repo},
        "payload": {} if payload is None else payload,
        "public": True,
        "created_at": created_at,
    }


@pytest.fixture
def make_record():
    return event_record


@pytest.fixture
def make_event():
    from github_activity.models import GitHubEvent

    def _make(event_type: str = "PushEvent", payload: Optional[Any] = None, repo: str = "octo/repo"):
        return GitHubEvent.from_dict(event_record(event_type, repo=repo, payload=payload))

    return _make
