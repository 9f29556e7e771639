"""Unit tests for the status transition policy."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from adr_sync.schemas.models import Label
from adr_sync.synchronize.models import StatusTransition
from adr_sync.synchronize.status import apply_status_transition, decide_status_transition

CLOSE_STATUSES = ("Accepted", "Superseded", "Deprecated", "Rejected")
PROPOSED = Label(id="LA_proposed", name="Proposed")
ACCEPTED = Label(id="LA_accepted", name="Accepted")
REJECTED = Label(id="LA_rejected", name="Rejected")
MANUAL = Label(id="LA_manual", name="needs-review")


def test_unchanged_status_is_noop_even_with_manual_overrides() -> None:
    """Test that an unchanged status leaves manual labels and closed state alone."""
    transition = decide_status_transition("Proposed", PROPOSED, CLOSE_STATUSES, [MANUAL], closed=True)
    assert transition.is_noop
    assert transition.previous_status == "Proposed"
    assert transition.current_status == "Proposed"


def test_no_status_on_either_side_is_noop() -> None:
    """Test that a document without a status before or after does nothing."""
    assert decide_status_transition(None, None, CLOSE_STATUSES, [], closed=False).is_noop


def test_new_close_status_closes_once() -> None:
    """Test that moving from no status into a close status adds the label and closes."""
    transition = decide_status_transition(None, ACCEPTED, CLOSE_STATUSES, [], closed=False)
    assert transition.label_to_remove is None
    assert transition.label_to_add == ACCEPTED
    assert transition.should_close is True
    assert transition.should_reopen is False


def test_close_status_already_closed_does_not_close_again() -> None:
    """Test that a discussion already closed is not closed again."""
    transition = decide_status_transition("Proposed", ACCEPTED, CLOSE_STATUSES, [PROPOSED], closed=True)
    assert transition.label_to_remove == PROPOSED
    assert transition.label_to_add == ACCEPTED
    assert transition.should_close is False


def test_leaving_close_status_reopens_closed_discussion() -> None:
    """Test that moving from a close status to no status removes the label and reopens."""
    transition = decide_status_transition("Accepted", None, CLOSE_STATUSES, [ACCEPTED], closed=True)
    assert transition.label_to_remove == ACCEPTED
    assert transition.label_to_add is None
    assert transition.should_close is False
    assert transition.should_reopen is True


def test_leaving_close_status_on_open_discussion_does_not_reopen() -> None:
    """Test that an open discussion is not reopened."""
    transition = decide_status_transition("Accepted", PROPOSED, CLOSE_STATUSES, [ACCEPTED], closed=False)
    assert transition.should_reopen is False
    assert transition.label_to_remove == ACCEPTED
    assert transition.label_to_add == PROPOSED


def test_between_close_statuses_only_swaps_labels() -> None:
    """Test that moving between two close statuses changes labels but not the closed state."""
    transition = decide_status_transition("Accepted", REJECTED, CLOSE_STATUSES, [ACCEPTED], closed=False)
    assert transition.label_to_remove == ACCEPTED
    assert transition.label_to_add == REJECTED
    assert transition.should_close is False
    assert transition.should_reopen is False


def test_previous_label_missing_is_not_removed() -> None:
    """Test that nothing is removed when the previous status label is not attached."""
    transition = decide_status_transition("Proposed", ACCEPTED, CLOSE_STATUSES, [MANUAL], closed=False)
    assert transition.label_to_remove is None
    assert transition.label_to_add == ACCEPTED


def test_current_label_already_attached_is_not_added() -> None:
    """Test that a label that is already attached is not added again."""
    transition = decide_status_transition("Proposed", ACCEPTED, CLOSE_STATUSES, [ACCEPTED], closed=True)
    assert transition.label_to_add is None
    assert transition.is_noop


@pytest.mark.asyncio
async def test_apply_status_transition_order() -> None:
    """Test that mutations are applied as remove, add, then close."""
    store = MagicMock()
    manager = MagicMock()
    store.remove_label = AsyncMock()
    store.add_label = AsyncMock()
    store.close_discussion = AsyncMock()
    store.reopen_discussion = AsyncMock()
    manager.attach_mock(store.remove_label, "remove_label")
    manager.attach_mock(store.add_label, "add_label")
    manager.attach_mock(store.close_discussion, "close_discussion")

    transition = StatusTransition(
        previous_status="Proposed",
        current_status="Accepted",
        label_to_remove=PROPOSED,
        label_to_add=ACCEPTED,
        should_close=True,
    )
    await apply_status_transition(store, "D_1", transition)

    assert [call[0] for call in manager.mock_calls] == ["remove_label", "add_label", "close_discussion"]
    store.remove_label.assert_awaited_once_with("D_1", PROPOSED.id)
    store.add_label.assert_awaited_once_with("D_1", ACCEPTED.id)
    store.close_discussion.assert_awaited_once_with("D_1")
    store.reopen_discussion.assert_not_awaited()


@pytest.mark.asyncio
async def test_apply_noop_transition_issues_no_calls() -> None:
    """Test that a no-op transition does not touch the store."""
    store = MagicMock()
    store.remove_label = AsyncMock()
    store.add_label = AsyncMock()
    store.close_discussion = AsyncMock()
    store.reopen_discussion = AsyncMock()

    await apply_status_transition(store, "D_1", StatusTransition(previous_status="Proposed", current_status="Proposed"))

    store.remove_label.assert_not_awaited()
    store.add_label.assert_not_awaited()
    store.close_discussion.assert_not_awaited()
    store.reopen_discussion.assert_not_awaited()
