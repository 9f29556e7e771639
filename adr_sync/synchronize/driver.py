"""Orchestrates the synchronization triggered by a GitHub event."""

import time

import structlog

from adr_sync.configuration.models import SyncConfig
from adr_sync.github.abc import ContentStoreBase, DiscussionStoreBase
from adr_sync.github.adapter import GitHubKitAdapter
from adr_sync.schemas.events import DiscussionEvent, PushEvent
from adr_sync.synchronize.exceptions import BranchMismatchError
from adr_sync.synchronize.models import SyncContext
from adr_sync.synchronize.repository import sync_repository_to_discussions
from adr_sync.synchronize.results import EventSynchronizationResult
from adr_sync.synchronize.router import route_discussion_event
from adr_sync.synchronize.utils import fetch_file_or_none
from adr_sync.utils.constants import ADR_DIR_FILE, DEFAULT_ADR_DIR
from adr_sync.utils.github import branch_from_ref, split_repository_in_configuration

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

PUSH_EVENT = "push"
DISCUSSION_EVENT = "discussion"
DISCUSSION_ACTIONS = ("created", "edited")


async def fetch_adr_dir(content_store: ContentStoreBase, ref: str) -> str:
    """Read the ADR directory from the `.adr-dir` file at a ref, falling back to the default."""
    adr_dir_file = await fetch_file_or_none(content_store, ADR_DIR_FILE, ref)
    adr_dir = adr_dir_file.content.strip() if adr_dir_file is not None else ""
    if not adr_dir:
        logger.debug("Using default ADR directory", adr_dir=DEFAULT_ADR_DIR, ref=ref)
        return DEFAULT_ADR_DIR
    return adr_dir


async def run_event_workflow(
    content_store: ContentStoreBase,
    discussion_store: DiscussionStoreBase,
    config: SyncConfig,
    event_payload: str,
) -> EventSynchronizationResult:
    """Dispatch a GitHub event payload to the matching synchronization workflow.

    Push events synchronize every ADR document to its discussion. Discussion
    events with a `created` or `edited` action synchronize that discussion to
    its ADR document. Other events are ignored.
    """
    owner, repo_name = split_repository_in_configuration(config.repo)
    close_statuses = tuple(config.close_statuses)

    if config.event_name == PUSH_EVENT:
        push_event = PushEvent.model_validate_json(event_payload)
        branch = branch_from_ref(push_event.ref)
        if branch != config.branch:
            raise BranchMismatchError(branch, config.branch)

        adr_dir = await fetch_adr_dir(content_store, push_event.ref)
        context = SyncContext(owner, repo_name, adr_dir, config.status_pattern, close_statuses)

        start_time = time.time()
        logger.info("Synchronizing ADR documents to discussions", adr_dir=adr_dir, ref=push_event.ref, start_time=start_time)
        repository_results = await sync_repository_to_discussions(
            content_store,
            discussion_store,
            context,
            category_name=config.discussion_category,
            ref=push_event.ref,
            before=push_event.before,
        )
        end_time = time.time()
        logger.info(
            "Synchronized ADR documents to discussions",
            start_time=start_time,
            end_time=end_time,
            duration=round(end_time - start_time, 2),
            document_count=len(repository_results.results),
            created_label_count=len(repository_results.created_labels),
        )
        return EventSynchronizationResult(config.event_name, repository_results=repository_results)

    if config.event_name == DISCUSSION_EVENT:
        discussion_event = DiscussionEvent.model_validate_json(event_payload)
        if discussion_event.action not in DISCUSSION_ACTIONS:
            logger.info("Ignoring discussion event", action=discussion_event.action)
            return EventSynchronizationResult(config.event_name, action=discussion_event.action)

        adr_dir = await fetch_adr_dir(content_store, config.branch)
        context = SyncContext(owner, repo_name, adr_dir, config.status_pattern, close_statuses)

        start_time = time.time()
        logger.info("Synchronizing discussion to ADR document", adr_dir=adr_dir, branch=config.branch, start_time=start_time)
        discussion_result = await route_discussion_event(
            content_store,
            discussion_store,
            context,
            branch=config.branch,
            category_name=config.discussion_category,
            title_pattern=config.title_pattern,
            event=discussion_event,
        )
        end_time = time.time()
        logger.info(
            "Synchronized discussion to ADR document",
            start_time=start_time,
            end_time=end_time,
            duration=round(end_time - start_time, 2),
            routed=discussion_result.routed,
        )
        return EventSynchronizationResult(config.event_name, action=discussion_event.action, discussion_result=discussion_result)

    logger.info("Ignoring event", event_name=config.event_name)
    return EventSynchronizationResult(config.event_name)


async def run_sync_workflow(config: SyncConfig) -> EventSynchronizationResult:
    """Run the sync workflow for the event recorded at the configured event path."""
    event_payload = config.event_path.read_text(encoding="utf-8")

    github_adapter = await GitHubKitAdapter.create(
        repo=config.repo,
        github_auth_type=config.github_authentication_type,
        github_pat_token=config.github_pat_token,
        github_app_id=config.github_app_id,
        github_app_private_key_path=config.github_app_private_key_path,
        github_app_installation_id=config.github_app_installation_id,
        github_api_url=config.github_api_url,
    )
    return await run_event_workflow(github_adapter, github_adapter, config, event_payload)
