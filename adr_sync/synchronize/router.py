"""Routes discussion events to the ADR document they describe."""

import re

import structlog

from adr_sync.github.abc import ContentStoreBase, DiscussionStoreBase
from adr_sync.schemas.events import DiscussionEvent
from adr_sync.schemas.models import Connection, Label
from adr_sync.synchronize.discussions import sync_discussion_to_document
from adr_sync.synchronize.labels import LabelEnsurer
from adr_sync.synchronize.models import SyncContext
from adr_sync.synchronize.pagination import collect_pages
from adr_sync.synchronize.results import DiscussionSynchronizationResult
from adr_sync.utils.helpers import extract_status

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def is_adr_discussion(event: DiscussionEvent, category_name: str, title_pattern: re.Pattern[str]) -> bool:
    """Whether a discussion is in the ADR category and titled like an ADR document."""
    return event.discussion.category.name == category_name and title_pattern.search(event.discussion.title) is not None


async def fetch_labels(discussion_store: DiscussionStoreBase) -> tuple[str, list[Label]]:
    """Fetch the repository ID with all of its labels."""
    repository = await discussion_store.fetch_repository_labels()

    async def fetch_next_labels(labels_end_cursor: str | None) -> Connection[Label]:
        return (await discussion_store.fetch_repository_labels(labels_end_cursor)).labels

    labels = await collect_pages(repository.labels, fetch_next_labels)
    return repository.id, labels


async def route_discussion_event(
    content_store: ContentStoreBase,
    discussion_store: DiscussionStoreBase,
    context: SyncContext,
    branch: str,
    category_name: str,
    title_pattern: re.Pattern[str],
    event: DiscussionEvent,
) -> DiscussionSynchronizationResult:
    """Synchronize a discussion to its ADR document when it identifies an ADR.

    Discussions outside the configured category, or whose title does not match
    the title pattern, are ignored without issuing any request.
    """
    title = event.discussion.title
    if not is_adr_discussion(event, category_name, title_pattern):
        logger.info(
            "Ignoring discussion that is not an ADR",
            title=title,
            category=event.discussion.category.name,
            configured_category=category_name,
        )
        return DiscussionSynchronizationResult(title, None, None)

    repository_id, labels = await fetch_labels(discussion_store)
    status = extract_status(event.discussion.body, context.status_pattern)
    status_label = await LabelEnsurer(discussion_store, repository_id, labels).ensure_status_label(status)

    logger.info("Synchronizing discussion", title=title, status=status, action=event.action)
    result = await sync_discussion_to_document(content_store, discussion_store, context, branch, event, status_label)
    return DiscussionSynchronizationResult(title, status, result)
