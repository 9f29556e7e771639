"""Synchronous driver for configuration reconciliation for the CLI entry point."""

import asyncio
from pathlib import Path

from adr_sync.configuration import reconcile
from adr_sync.configuration.models import SyncConfig


def get_sync_config(
    debug: bool = False,
    github_api_url: str | None = None,
    github_pat_token: str | None = None,
    github_app_id: int | None = None,
    github_app_private_key_path: Path | None = None,
    github_app_installation_id: int | None = None,
    repo: str | None = None,
    event_name: str | None = None,
    event_path: Path | None = None,
    branch: str | None = None,
    discussion_category: str | None = None,
    status_regex: str | None = None,
    title_regex: str | None = None,
    close_statuses: str | None = None,
) -> SyncConfig:
    """Synchronously get the reconciled sync configuration."""
    return asyncio.run(
        reconcile.reconcile_sync_configuration(
            cli_debug=debug,
            cli_github_api_url=github_api_url,
            cli_github_pat_token=github_pat_token,
            cli_github_app_id=github_app_id,
            cli_github_app_private_key_path=github_app_private_key_path,
            cli_github_app_installation_id=github_app_installation_id,
            cli_repo=repo,
            cli_event_name=event_name,
            cli_event_path=event_path,
            cli_branch=branch,
            cli_discussion_category=discussion_category,
            cli_status_regex=status_regex,
            cli_title_regex=title_regex,
            cli_close_statuses=close_statuses,
        )
    )
