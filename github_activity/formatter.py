"""
Turn GitHub events into one-line, human-readable summaries.

Every lookup into an event payload is optional: a missing or wrong-typed
field is replaced by a fixed default, so formatting never fails.
"""

import logging
from typing import Any, Callable, Dict

from github_activity.models import GitHubEvent

logger = logging.getLogger(__name__)


def capitalize_first_letter(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def _object(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _get_str(data: Any, key: str, default: str) -> str:
    value = _object(data).get(key)
    return value if isinstance(value, str) else default


MAX_NUMBER = 2 ** 64 - 1


def _get_number(data: Any, key: str, default: int = 0) -> int:
    value = _object(data).get(key)
    # bool is an int subclass but never a JSON number
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_NUMBER:
        return value
    return default


def _format_push(event: GitHubEvent) -> str:
    commits = _object(event.payload).get("commits")
    count = len(commits) if isinstance(commits, list) else 0
    return f"Pushed {count} commit{'' if count == 1 else 's'} to {event.repo.name}"


def _format_create(event: GitHubEvent) -> str:
    ref_type = _get_str(event.payload, "ref_type", "repository")
    repo = event.repo.name
    if ref_type == "repository":
        return f"Created repository {repo}"
    if ref_type in ("branch", "tag"):
        ref = _get_str(event.payload, "ref", "unknown")
        return f"Created {ref_type} '{ref}' in {repo}"
    return f"Created {ref_type} in {repo}"


def _format_delete(event: GitHubEvent) -> str:
    ref_type = _get_str(event.payload, "ref_type", "branch")
    ref = _get_str(event.payload, "ref", "unknown")
    return f"Deleted {ref_type} '{ref}' in {event.repo.name}"


def _format_issues(event: GitHubEvent) -> str:
    action = _get_str(event.payload, "action", "updated")
    number = _get_number(_object(event.payload).get("issue"), "number")
    return f"{capitalize_first_letter(action)} issue #{number} in {event.repo.name}"


def _format_pull_request(event: GitHubEvent) -> str:
    action = _get_str(event.payload, "action", "updated")
    number = _get_number(event.payload, "number")
    return f"{capitalize_first_letter(action)} pull request #{number} in {event.repo.name}"


def _format_watch(event: GitHubEvent) -> str:
    return f"Starred {event.repo.name}"


def _format_fork(event: GitHubEvent) -> str:
    return f"Forked {event.repo.name}"


def _format_release(event: GitHubEvent) -> str:
    action = _get_str(event.payload, "action", "published")
    tag = _get_str(_object(event.payload).get("release"), "tag_name", "unknown")
    return f"{capitalize_first_letter(action)} release {tag} in {event.repo.name}"


def _format_public(event: GitHubEvent) -> str:
    return f"Made {event.repo.name} public"


def _format_member(event: GitHubEvent) -> str:
    action = _get_str(event.payload, "action", "added")
    return f"{capitalize_first_letter(action)} as collaborator to {event.repo.name}"


def _format_issue_comment(event: GitHubEvent) -> str:
    action = _get_str(event.payload, "action", "created")
    number = _get_number(_object(event.payload).get("issue"), "number")
    return f"{capitalize_first_letter(action)} comment on issue #{number} in {event.repo.name}"


def _format_pull_request_review(event: GitHubEvent) -> str:
    action = _get_str(event.payload, "action", "submitted")
    number = _get_number(_object(event.payload).get("pull_request"), "number")
    return f"{capitalize_first_letter(action)} review on pull request #{number} in {event.repo.name}"


FORMATTERS: Dict[str, Callable[[GitHubEvent], str]] = {
    "PushEvent": _format_push,
    "CreateEvent": _format_create,
    "DeleteEvent": _format_delete,
    "IssuesEvent": _format_issues,
    "PullRequestEvent": _format_pull_request,
    "WatchEvent": _format_watch,
    "ForkEvent": _format_fork,
    "ReleaseEvent": _format_release,
    "PublicEvent": _format_public,
    "MemberEvent": _format_member,
    "IssueCommentEvent": _format_issue_comment,
    "PullRequestReviewEvent": _format_pull_request_review,
}


def format_activity(event: GitHubEvent) -> str:
    """
    Describe a single event in one line.

    Args:
        event: The event to describe

    Returns:
        Display string such as "Pushed 2 commits to octo/repo"
    """
    formatter = FORMATTERS.get(event.type)
    if formatter is None:
        logger.debug("No dedicated format for %s, using generic description", event.type)
        return f"Performed {event.type} in {event.repo.name}"
    return formatter(event)
