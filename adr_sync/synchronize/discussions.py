"""Contains synchronization logic from discussions to ADR documents."""

import structlog

from adr_sync.github.abc import ContentStoreBase, DiscussionStoreBase
from adr_sync.schemas.events import DiscussionEvent
from adr_sync.schemas.models import Label
from adr_sync.synchronize.documents import find_discussion_by_title
from adr_sync.synchronize.models import ReconciliationResult, SyncContext, SyncDecision
from adr_sync.synchronize.status import apply_status_transition, decide_status_transition
from adr_sync.synchronize.utils import fetch_file_or_none
from adr_sync.utils.constants import CREATE_COMMIT_MESSAGE, UPDATE_COMMIT_MESSAGE
from adr_sync.utils.helpers import extract_status, generate_author, generate_comment

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def sync_discussion_to_document(
    content_store: ContentStoreBase,
    discussion_store: DiscussionStoreBase,
    context: SyncContext,
    branch: str,
    event: DiscussionEvent,
    status_label: Label | None,
) -> ReconciliationResult:
    """Make the ADR document for one discussion reflect the discussion's body and status.

    The previous status is taken from the body recorded in the edit event. When
    the status changed, the discussion is looked up again so that label and
    open/closed changes already in place are not repeated.
    """
    discussion = event.discussion
    path = context.adr_path(discussion.title)

    existing_file = await fetch_file_or_none(content_store, path, branch)
    if existing_file is None:
        logger.info("Creating document for discussion", title=discussion.title, path=path, branch=branch)
        commit = await content_store.create_or_update_file(path, branch, discussion.body, CREATE_COMMIT_MESSAGE)
        comment = generate_comment(generate_author(event.sender, commit.author), commit.url)
        if comment is not None:
            await discussion_store.add_discussion_comment(discussion.node_id, comment)
        decision = SyncDecision.CREATE
    elif existing_file.content != discussion.body:
        logger.info("Updating document from discussion", title=discussion.title, path=path, branch=branch)
        await content_store.create_or_update_file(path, branch, discussion.body, UPDATE_COMMIT_MESSAGE, sha=existing_file.sha)
        decision = SyncDecision.UPDATE
    else:
        logger.debug("Document is up to date", title=discussion.title, path=path)
        decision = SyncDecision.NOOP

    previous_body = event.previous_body
    previous_status = extract_status(previous_body, context.status_pattern) if previous_body else None
    current_status = status_label.name if status_label is not None else None

    labels = [label.to_label() for label in discussion.labels]
    closed = discussion.closed
    if previous_status != current_status:
        # Payload labels and state predate changes already applied for this event
        live_discussion = await find_discussion_by_title(discussion_store, context.owner, context.repo, discussion.title)
        if live_discussion is not None and live_discussion.id == discussion.node_id:
            live_label_ids = {label.id for label in live_discussion.labels}
            labels = [label for label in labels if label.id in live_label_ids]
            labels += [label for label in live_discussion.labels if label not in labels]
            closed = live_discussion.closed

    transition = decide_status_transition(previous_status, status_label, context.close_statuses, labels, closed)
    await apply_status_transition(discussion_store, discussion.node_id, transition)
    return ReconciliationResult(decision=decision, transition=transition)
