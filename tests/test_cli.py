"""
End-to-end tests for the github-activity command with the network stubbed out.
"""
import logging
from unittest.mock import MagicMock

import pytest
import requests

from github_activity import cli


def stub_get(monkeypatch, status_code=200, json_data=None, reason="OK", error=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = json_data
    get = MagicMock(return_value=response, side_effect=error)
    monkeypatch.setattr(requests.Session, "get", get)
    return get


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    monkeypatch.delenv("GITHUB_ACTIVITY_LOG_LEVEL", raising=False)


def test_prints_one_line_per_event(monkeypatch, capsys, make_record):
    stub_get(monkeypatch, json_data=[
        make_record("PushEvent", repo="octo/repo", payload={"commits": [{}, {}]}),
        make_record("WatchEvent", repo="octo/other"),
    ])

    assert cli.main(["octocat"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Recent activity for octocat:",
        "",
        "- Pushed 2 commits to octo/repo",
        "- Starred octo/other",
    ]


def test_empty_feed_reports_no_activity(monkeypatch, capsys):
    stub_get(monkeypatch, json_data=[])

    assert cli.main(["quiet-user"]) == 0
    assert capsys.readouterr().out == "No recent activity found for user: quiet-user\n"


def test_unknown_user_exits_with_error(monkeypatch, capsys):
    stub_get(monkeypatch, status_code=404, reason="Not Found")

    assert cli.main(["nonexistent-user-xyz"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: User 'nonexistent-user-xyz' not found" in captured.err


def test_rate_limit_exits_with_error(monkeypatch, capsys):
    stub_get(monkeypatch, status_code=403, reason="Forbidden")

    assert cli.main(["octocat"]) == 1
    assert "Error: API rate limit exceeded. Please try again later." in capsys.readouterr().err


def test_transport_error_exits_with_error(monkeypatch, capsys):
    stub_get(monkeypatch, error=requests.ConnectionError("connection refused"))

    assert cli.main(["octocat"]) == 1
    assert "Error: connection refused" in capsys.readouterr().err


def test_api_url_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("GITHUB_API_URL", "http://localhost:8080/")
    get = stub_get(monkeypatch, json_data=[])

    cli.main(["octocat"])

    get.assert_called_once_with(
        "http://localhost:8080/users/octocat/events",
        headers={"User-Agent": "github-activity-cli"},
    )


def test_missing_username_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, logging.WARNING), ("debug", logging.DEBUG), ("bogus", logging.WARNING)],
)
def test_log_level_from_environment(monkeypatch, value, expected):
    if value is not None:
        monkeypatch.setenv("GITHUB_ACTIVITY_LOG_LEVEL", value)
    basic_config = MagicMock()
    monkeypatch.setattr(logging, "basicConfig", basic_config)

    cli._configure_logging()

    assert basic_config.call_args.kwargs["level"] == expected


def test_module_logger_follows_package_hierarchy():
    assert cli.logger.name == "github_activity.cli"
