"""Reconciles configuration between CLI arguments and environment variables."""

import re
from pathlib import Path
from typing import TypeVar

import structlog

from adr_sync.configuration.env import Settings
from adr_sync.configuration.exceptions import (
    GitHubAuthenticationConfigurationUndefinedError,
    InvalidPatternConfigurationError,
    RequiredConfigurationElementError,
)
from adr_sync.configuration.models import GitHubAuthenticationType, SyncConfig
from adr_sync.utils.constants import (
    DEFAULT_BRANCH,
    DEFAULT_CLOSE_STATUSES,
    DEFAULT_DISCUSSION_CATEGORY,
    DEFAULT_STATUS_PATTERN,
    DEFAULT_TITLE_PATTERN,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")


def _first_defined(*values: T | None) -> T | None:
    """Return the first value that is not None or an empty string."""
    for value in values:
        if value is not None and value != "":
            return value
    return None


async def validate_github_authentication_configuration(
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
) -> GitHubAuthenticationType:
    """Validates the GitHub authentication configuration.

    Args:
        github_pat_token (str | None): The GitHub token.
        github_app_id (int | None): The GitHub App ID.
        github_app_private_key_path (Path | None): The path to the GitHub App private key.
        github_app_installation_id (int | None): The GitHub App installation ID.

    Raises:
        GitHubAuthenticationConfigurationUndefinedError: If neither or both configurations are defined,
            or if the GitHub App configuration is incomplete.

    Returns:
        GitHubAuthenticationType: The type of GitHub authentication used.
    """
    app_settings = {
        "GitHub App ID (command line option --github-app-id, environment variable GITHUB_APP_ID)": github_app_id,
        "GitHub App private key path (command line option --github-app-private-key-path, "
        "environment variable GITHUB_APP_PRIVATE_KEY_PATH)": github_app_private_key_path,
        "GitHub App installation ID (command line option --github-app-installation-id, "
        "environment variable GITHUB_APP_INSTALLATION_ID)": github_app_installation_id,
    }
    any_app_setting = any(app_settings.values())

    if github_pat_token and any_app_setting:
        raise GitHubAuthenticationConfigurationUndefinedError("Both token and GitHub App configurations are defined. Please use one or the other.")

    if github_pat_token:
        return GitHubAuthenticationType.PAT

    if all(app_settings.values()):
        return GitHubAuthenticationType.APP

    if any_app_setting:
        missing_settings = [name for name, value in app_settings.items() if not value]
        raise GitHubAuthenticationConfigurationUndefinedError(
            "Incomplete GitHub App configuration - missing settings include " + ", ".join(missing_settings)
        )

    raise GitHubAuthenticationConfigurationUndefinedError(
        "No GitHub authentication configuration provided. Please provide either a token or a GitHub App configuration."
    )


def compile_pattern(name: str, pattern: str, require_group: bool = False) -> re.Pattern[str]:
    """Compile a configured regular expression, optionally requiring a capturing group."""
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternConfigurationError(name, pattern, str(exc)) from exc
    if require_group and compiled.groups < 1:
        raise InvalidPatternConfigurationError(name, pattern, "the pattern must contain a capturing group")
    return compiled


def parse_close_statuses(close_statuses: str) -> list[str]:
    """Split a comma-separated list of statuses, dropping surrounding whitespace and empty items."""
    return [status.strip() for status in close_statuses.split(",") if status.strip()]


async def reconcile_sync_configuration(
    cli_debug: bool = False,
    cli_github_api_url: str | None = None,
    cli_github_pat_token: str | None = None,
    cli_github_app_id: int | None = None,
    cli_github_app_private_key_path: Path | None = None,
    cli_github_app_installation_id: int | None = None,
    cli_repo: str | None = None,
    cli_event_name: str | None = None,
    cli_event_path: Path | None = None,
    cli_branch: str | None = None,
    cli_discussion_category: str | None = None,
    cli_status_regex: str | None = None,
    cli_title_regex: str | None = None,
    cli_close_statuses: str | None = None,
) -> SyncConfig:
    """Reconcile the sync command configuration.

    Command line values take precedence over environment variables, which take
    precedence over the built-in defaults.
    """
    settings = Settings()

    repo = _first_defined(cli_repo, settings.GITHUB_REPOSITORY)
    if repo is None:
        raise RequiredConfigurationElementError(name="repository", cli_name="--repo", env_name="GITHUB_REPOSITORY")

    event_name = _first_defined(cli_event_name, settings.GITHUB_EVENT_NAME)
    if event_name is None:
        raise RequiredConfigurationElementError(name="event name", cli_name="--event-name", env_name="GITHUB_EVENT_NAME")

    event_path = _first_defined(cli_event_path, settings.GITHUB_EVENT_PATH)
    if event_path is None:
        raise RequiredConfigurationElementError(name="event path", cli_name="--event-path", env_name="GITHUB_EVENT_PATH")

    github_pat_token = _first_defined(cli_github_pat_token, settings.GITHUB_TOKEN)
    github_app_id = _first_defined(cli_github_app_id, settings.GITHUB_APP_ID)
    github_app_private_key_path = _first_defined(cli_github_app_private_key_path, settings.GITHUB_APP_PRIVATE_KEY_PATH)
    github_app_installation_id = _first_defined(cli_github_app_installation_id, settings.GITHUB_APP_INSTALLATION_ID)
    github_authentication_type = await validate_github_authentication_configuration(
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
    )

    status_regex = _first_defined(cli_status_regex, settings.STATUS_REGEX) or DEFAULT_STATUS_PATTERN
    title_regex = _first_defined(cli_title_regex, settings.TITLE_REGEX) or DEFAULT_TITLE_PATTERN
    close_statuses = _first_defined(cli_close_statuses, settings.CLOSE_STATUSES) or DEFAULT_CLOSE_STATUSES

    config = SyncConfig(
        debug=cli_debug or settings.DEBUG,
        github_api_url=_first_defined(cli_github_api_url, settings.GITHUB_API_URL) or "https://api.github.com",
        github_authentication_type=github_authentication_type,
        github_pat_token=github_pat_token,
        github_app_id=github_app_id,
        github_app_private_key_path=github_app_private_key_path,
        github_app_installation_id=github_app_installation_id,
        repo=repo,
        event_name=event_name,
        event_path=Path(event_path),
        branch=_first_defined(cli_branch, settings.BRANCH) or DEFAULT_BRANCH,
        discussion_category=_first_defined(cli_discussion_category, settings.DISCUSSION_CATEGORY) or DEFAULT_DISCUSSION_CATEGORY,
        status_pattern=compile_pattern("status regex", status_regex, require_group=True),
        title_pattern=compile_pattern("title regex", title_regex),
        close_statuses=parse_close_statuses(close_statuses),
    )
    logger.debug(
        "Reconciled sync configuration",
        repo=config.repo,
        event_name=config.event_name,
        branch=config.branch,
        discussion_category=config.discussion_category,
        close_statuses=config.close_statuses,
        github_authentication_type=config.github_authentication_type.value,
    )
    return config
