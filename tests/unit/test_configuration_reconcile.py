"""Unit tests for the configuration.reconcile module."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch

from adr_sync.configuration.env import Settings
from adr_sync.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    InvalidPatternConfigurationError,
    RequiredConfigurationElementError,
)
from adr_sync.configuration.models import GitHubAuthenticationType
from adr_sync.configuration.reconcile import (
    compile_pattern,
    parse_close_statuses,
    reconcile_sync_configuration,
    validate_github_authentication_configuration,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    """Remove settings picked up from the runner environment and any local .env file."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.mark.asyncio
async def test_valid_token_authentication() -> None:
    """Test that token authentication is validated correctly."""
    auth_type = await validate_github_authentication_configuration(
        github_pat_token="test-token",
        github_app_id=None,
        github_app_private_key_path=None,
        github_app_installation_id=None,
    )
    assert auth_type == GitHubAuthenticationType.PAT


@pytest.mark.asyncio
async def test_valid_app_authentication() -> None:
    """Test that GitHub App authentication is validated correctly."""
    auth_type = await validate_github_authentication_configuration(
        github_pat_token=None,
        github_app_id=1,
        github_app_private_key_path=Path("/path/to/key.pem"),
        github_app_installation_id=2,
    )
    assert auth_type == GitHubAuthenticationType.APP


@pytest.mark.asyncio
async def test_both_auth_methods_error() -> None:
    """Test that an error is raised when both token and App authentication are provided."""
    with pytest.raises(GitHubAuthenticationConfigurationUndefinedError) as exc_info:
        await validate_github_authentication_configuration(
            github_pat_token="test-token",
            github_app_id=1,
            github_app_private_key_path=Path("/path/to/key.pem"),
            github_app_installation_id=2,
        )
    assert "Both token and GitHub App configurations are defined" in str(exc_info.value)


@pytest.mark.asyncio
async def test_no_auth_error() -> None:
    """Test that an error is raised when no authentication is provided."""
    with pytest.raises(GitHubAuthenticationConfigurationUndefinedError) as exc_info:
        await validate_github_authentication_configuration(None, None, None, None)
    assert "No GitHub authentication configuration provided" in str(exc_info.value)


@pytest.mark.asyncio
async def test_incomplete_app_configuration_names_missing_settings() -> None:
    """Test that a partial GitHub App configuration lists what is missing."""
    with pytest.raises(GitHubAuthenticationConfigurationUndefinedError) as exc_info:
        await validate_github_authentication_configuration(None, 1, None, 2)
    message = str(exc_info.value)
    assert "Incomplete GitHub App configuration" in message
    assert "GITHUB_APP_PRIVATE_KEY_PATH" in message
    assert "GITHUB_APP_ID)" not in message


def test_compile_pattern_requires_group() -> None:
    """Test that a status pattern without a capturing group is rejected."""
    with pytest.raises(InvalidPatternConfigurationError, match="capturing group"):
        compile_pattern("status regex", r"Status \w+", require_group=True)


def test_compile_pattern_rejects_invalid_regex() -> None:
    """Test that an invalid regular expression is rejected with its name."""
    with pytest.raises(InvalidPatternConfigurationError, match="title regex"):
        compile_pattern("title regex", r"([unclosed")


@pytest.mark.parametrize(
    "value,expected",
    [
        pytest.param("Accepted, Superseded, Deprecated, Rejected", ["Accepted", "Superseded", "Deprecated", "Rejected"], id="default"),
        pytest.param("Accepted,,Done ", ["Accepted", "Done"], id="empty-items"),
        pytest.param("", [], id="empty"),
    ],
)
def test_parse_close_statuses(value: str, expected: list[str]) -> None:
    """Test splitting of comma-separated close statuses."""
    assert parse_close_statuses(value) == expected


@pytest.mark.asyncio
async def test_reconcile_uses_defaults() -> None:
    """Test that defaults fill in everything not given on the command line."""
    config = await reconcile_sync_configuration(
        cli_github_pat_token="token",
        cli_repo="owner/repo",
        cli_event_name="push",
        cli_event_path=Path("event.json"),
    )
    assert config.github_authentication_type == GitHubAuthenticationType.PAT
    assert config.github_api_url == "https://api.github.com"
    assert config.branch == "main"
    assert config.discussion_category == "General"
    assert config.close_statuses == ["Accepted", "Superseded", "Deprecated", "Rejected"]
    assert config.title_pattern.search("0001-record-decisions.md")
    assert config.status_pattern.search("## Status\nAccepted\n").group(1) == "Accepted"  # type: ignore[union-attr]
    assert config.debug is False


@pytest.mark.asyncio
async def test_reconcile_reads_environment(monkeypatch: MonkeyPatch) -> None:
    """Test that GitHub Actions environment variables are used when no option is given."""
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("GITHUB_REPOSITORY", "env-owner/env-repo")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "discussion")
    monkeypatch.setenv("GITHUB_EVENT_PATH", "/github/workflow/event.json")
    monkeypatch.setenv("BRANCH", "trunk")
    monkeypatch.setenv("DISCUSSION_CATEGORY", "Decisions")
    monkeypatch.setenv("CLOSE_STATUSES", "Done")

    config = await reconcile_sync_configuration()

    assert config.github_pat_token == "env-token"
    assert config.repo == "env-owner/env-repo"
    assert config.event_name == "discussion"
    assert config.event_path == Path("/github/workflow/event.json")
    assert config.branch == "trunk"
    assert config.discussion_category == "Decisions"
    assert config.close_statuses == ["Done"]


@pytest.mark.asyncio
async def test_reconcile_prefers_command_line(monkeypatch: MonkeyPatch) -> None:
    """Test that command line values win over environment variables."""
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    monkeypatch.setenv("GITHUB_REPOSITORY", "env-owner/env-repo")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "push")
    monkeypatch.setenv("GITHUB_EVENT_PATH", "/github/workflow/event.json")
    monkeypatch.setenv("BRANCH", "trunk")

    config = await reconcile_sync_configuration(cli_repo="cli-owner/cli-repo", cli_branch="release", cli_debug=True)

    assert config.repo == "cli-owner/cli-repo"
    assert config.branch == "release"
    assert config.debug is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "missing,env_name",
    [
        pytest.param("cli_repo", "GITHUB_REPOSITORY", id="repository"),
        pytest.param("cli_event_name", "GITHUB_EVENT_NAME", id="event-name"),
        pytest.param("cli_event_path", "GITHUB_EVENT_PATH", id="event-path"),
    ],
)
async def test_reconcile_requires_repository_and_event(missing: str, env_name: str) -> None:
    """Test that the repository and the triggering event must be configured."""
    arguments: dict[str, object] = {
        "cli_github_pat_token": "token",
        "cli_repo": "owner/repo",
        "cli_event_name": "push",
        "cli_event_path": Path("event.json"),
    }
    arguments[missing] = None
    with pytest.raises(RequiredConfigurationElementError, match=env_name):
        await reconcile_sync_configuration(**arguments)  # type: ignore[arg-type]
