"""Contains the status transition policy shared by both synchronization directions."""

from typing import Sequence

import structlog

from adr_sync.github.abc import DiscussionStoreBase
from adr_sync.schemas.models import Label
from adr_sync.synchronize.models import StatusTransition

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def decide_status_transition(
    previous_status: str | None,
    status_label: Label | None,
    close_statuses: Sequence[str],
    labels: Sequence[Label],
    closed: bool,
) -> StatusTransition:
    """Decide which label and open/closed changes follow from a status change.

    The transition is derived from the previous and current status only. The
    live labels and closed state are consulted solely to skip changes that are
    already in place, so manual edits survive as long as the status is unchanged.
    """
    current_status = status_label.name if status_label is not None else None
    if previous_status == current_status:
        return StatusTransition(previous_status=previous_status, current_status=current_status)

    label_to_remove = next((label for label in labels if label.name == previous_status), None)
    label_to_add = status_label
    if label_to_add is not None and any(label.id == label_to_add.id for label in labels):
        label_to_add = None

    should_have_been_closed = previous_status is not None and previous_status in close_statuses
    should_be_closed = current_status is not None and current_status in close_statuses

    return StatusTransition(
        previous_status=previous_status,
        current_status=current_status,
        label_to_remove=label_to_remove,
        label_to_add=label_to_add,
        should_close=not should_have_been_closed and should_be_closed and not closed,
        should_reopen=should_have_been_closed and not should_be_closed and closed,
    )


async def apply_status_transition(discussion_store: DiscussionStoreBase, discussion_id: str, transition: StatusTransition) -> None:
    """Apply a status transition to a discussion: remove, add, then close or reopen."""
    if transition.is_noop:
        logger.info(
            "Discussion status is up to date",
            discussion_id=discussion_id,
            previous_status=transition.previous_status,
            current_status=transition.current_status,
        )
        return

    if transition.label_to_remove is not None:
        logger.info("Removing previous status label", discussion_id=discussion_id, label_name=transition.label_to_remove.name)
        await discussion_store.remove_label(discussion_id, transition.label_to_remove.id)

    if transition.label_to_add is not None:
        logger.info("Adding status label", discussion_id=discussion_id, label_name=transition.label_to_add.name)
        await discussion_store.add_label(discussion_id, transition.label_to_add.id)

    if transition.should_close:
        logger.info("Closing discussion", discussion_id=discussion_id, current_status=transition.current_status)
        await discussion_store.close_discussion(discussion_id)
    elif transition.should_reopen:
        logger.info("Reopening discussion", discussion_id=discussion_id, current_status=transition.current_status)
        await discussion_store.reopen_discussion(discussion_id)
