"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from adr_sync.configuration.driver import get_sync_config
from adr_sync.synchronize.driver import run_sync_workflow
from adr_sync.synchronize.results import EventSynchronizationResult

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False)


@typer_app.callback()
def main() -> None:
    """Keep architecture decision records and GitHub Discussions in sync."""


def configure_logging(debug: bool) -> None:
    """Configure structlog to emit events at or above the selected level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO))


def echo_result(result: EventSynchronizationResult) -> None:
    """Print a short summary of what the event triggered."""
    if result.repository_results is not None:
        repository_results = result.repository_results
        typer.echo(f"Synchronized {len(repository_results.results)} ADR document(s) from {repository_results.adr_dir}")
        for document_result in repository_results.results:
            typer.echo(f"  {document_result.title}: {document_result.result.decision.value} (status: {document_result.status or 'none'})")
        if repository_results.created_labels:
            typer.echo(f"Created status label(s): {', '.join(repository_results.created_labels)}")
    elif result.discussion_result is not None and result.discussion_result.result is not None:
        discussion_result = result.discussion_result
        typer.echo(
            f"Synchronized discussion {discussion_result.title}: "
            f"{discussion_result.result.decision.value} (status: {discussion_result.status or 'none'})"
        )
    elif result.discussion_result is not None:
        typer.echo(f"Discussion {result.discussion_result.title} is not an ADR - nothing to do")
    else:
        typer.echo(f"Event {result.event_name} does not trigger a synchronization - nothing to do")


@typer_app.command(name="sync")
def sync_cli(
    repo: Annotated[str | None, Option(envvar="GITHUB_REPOSITORY", help="Repository name (owner/repo).")] = None,
    event_name: Annotated[str | None, Option(envvar="GITHUB_EVENT_NAME", help="Name of the triggering GitHub event.")] = None,
    event_path: Annotated[Path | None, Option(envvar="GITHUB_EVENT_PATH", help="Path to the JSON payload of the triggering event.")] = None,
    branch: Annotated[str | None, Option(envvar="BRANCH", help="Branch holding the ADR documents.")] = None,
    discussion_category: Annotated[
        str | None, Option(envvar="DISCUSSION_CATEGORY", help="Discussion category that ADR discussions are created in.")
    ] = None,
    status_regex: Annotated[
        str | None, Option(envvar="STATUS_REGEX", help="Regular expression whose first group captures the ADR status.")
    ] = None,
    title_regex: Annotated[str | None, Option(envvar="TITLE_REGEX", help="Regular expression that ADR titles match.")] = None,
    close_statuses: Annotated[
        str | None, Option(envvar="CLOSE_STATUSES", help="Comma-separated statuses whose discussions are closed.")
    ] = None,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_pat_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token.")] = None,
    github_app_id: Annotated[int | None, Option(envvar="GITHUB_APP_ID", help="GitHub App ID.")] = None,
    github_app_private_key_path: Annotated[Path | None, Option(envvar="GITHUB_APP_PRIVATE_KEY_PATH", help="Path to GitHub App private key.")] = None,
    github_app_installation_id: Annotated[int | None, Option(envvar="GITHUB_APP_INSTALLATION_ID", help="GitHub App Installation ID.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Synchronize ADR documents and discussions for the triggering GitHub event."""
    configure_logging(debug)
    try:
        config = get_sync_config(
            debug=debug,
            github_api_url=github_api_url,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            repo=repo,
            event_name=event_name,
            event_path=event_path,
            branch=branch,
            discussion_category=discussion_category,
            status_regex=status_regex,
            title_regex=title_regex,
            close_statuses=close_statuses,
        )
        if config.debug and not debug:
            configure_logging(config.debug)
        result = asyncio.run(run_sync_workflow(config))
    except Exception as e:
        logger.exception("Synchronization failed", error=str(e))
        typer.echo(f"Synchronization failed: {e}", err=True)
        sys.exit(1)

    echo_result(result)


if __name__ == "__main__":
    typer_app()
