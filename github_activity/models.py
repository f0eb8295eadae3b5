from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from github_activity.errors import MalformedResponseError

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class Actor:
    """The account that triggered an event."""
    login: str


@dataclass(frozen=True)
class Repository:
    """The repository an event happened in, named as ``owner/repo``."""
    name: str


@dataclass(frozen=True)
class GitHubEvent:
    """Represents one entry of a user's public event feed."""
    type: str
    actor: Actor
    repo: Repository
    created_at: datetime
    payload: Any = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GitHubEvent":
        """
        Build an event from one element of the API response array.

        Args:
            data: Decoded JSON object for a single event

        Returns:
            GitHubEvent instance

        Raises:
            MalformedResponseError: If a required field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected an event object, got {type(data).__name__}")

        return cls(
            type=_required_str(data, "type"),
            actor=Actor(login=_required_str(_required_object(data, "actor"), "login", "actor")),
            repo=Repository(name=_required_str(_required_object(data, "repo"), "name", "repo")),
            created_at=_parse_timestamp(_required_str(data, "created_at")),
            payload=data.get("payload", {}),
        )


def _required_object(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise MalformedResponseError(f"Event field '{key}' is missing or not an object")
    return value


def _required_str(data: Dict[str, Any], key: str, parent: str = "") -> str:
    value = data.get(key)
    if not isinstance(value, str):
        name = f"{parent}.{key}" if parent else key
        raise MalformedResponseError(f"Event field '{name}' is missing or not a string")
    return value


def _parse_timestamp(value: str) -> datetime:
    """Parse an RFC 3339 timestamp, with or without fractional seconds, into UTC."""
    try:
        parsed = datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        parsed = None
    if parsed is not None:
        return parsed

    # fromisoformat only learned "Z" in 3.11
    iso_value = value[:-1] + "+00:00" if value[-1:] in ("Z", "z") else value
    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError as e:
        raise MalformedResponseError(f"Invalid event timestamp {value!r}") from e
    if parsed.tzinfo is None:
        raise MalformedResponseError(f"Event timestamp {value!r} has no UTC offset")
    return parsed.astimezone(timezone.utc)
