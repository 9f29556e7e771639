"""Decision models produced by the synchronizers."""

import posixpath
import re
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict

from adr_sync.schemas.models import Label


class SyncDecision(str, Enum):
    """What a synchronizer decided to do with the body or file of the other side."""

    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"


class StatusTransition(BaseModel):
    """Label and open/closed changes derived from a status change."""

    model_config = ConfigDict(frozen=True)

    previous_status: str | None = None
    current_status: str | None = None
    label_to_remove: Label | None = None
    label_to_add: Label | None = None
    should_close: bool = False
    should_reopen: bool = False

    @property
    def is_noop(self) -> bool:
        """Whether applying this transition issues no mutations."""
        return self.label_to_remove is None and self.label_to_add is None and not self.should_close and not self.should_reopen


class ReconciliationResult(BaseModel):
    """The outcome of one document or discussion synchronization."""

    model_config = ConfigDict(frozen=True)

    decision: SyncDecision
    transition: StatusTransition

    @property
    def body_changed(self) -> bool:
        """Whether the body (or file) on the other side was created or updated."""
        return self.decision != SyncDecision.NOOP

    @property
    def label_to_remove(self) -> Label | None:
        """The status label that was detached, if any."""
        return self.transition.label_to_remove

    @property
    def label_to_add(self) -> Label | None:
        """The status label that was attached, if any."""
        return self.transition.label_to_add

    @property
    def should_close(self) -> bool:
        """Whether the discussion was closed."""
        return self.transition.should_close

    @property
    def should_reopen(self) -> bool:
        """Whether the discussion was reopened."""
        return self.transition.should_reopen


@dataclass(frozen=True)
class SyncContext:
    """Repository coordinates and policy shared by every synchronizer in a run."""

    owner: str
    repo: str
    adr_dir: str
    status_pattern: re.Pattern[str]
    close_statuses: tuple[str, ...] = field(default_factory=tuple)

    def adr_path(self, title: str) -> str:
        """Return the repository path of the ADR with this title."""
        return posixpath.join(self.adr_dir, title)
