"""Pydantic schema for the GitHub webhook payloads this tool reacts to.

Only the fields used during synchronization are modeled; everything else in
the payload is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

from adr_sync.schemas.models import Actor, Label


class EventLabel(BaseModel):
    """Pydantic model for a label embedded in a webhook payload."""

    node_id: str
    name: str

    def to_label(self) -> Label:
        """Convert the payload label into a store label keyed by its node ID."""
        return Label(id=self.node_id, name=self.name)


class EventCategory(BaseModel):
    """Pydantic model for the discussion category in a webhook payload."""

    name: str


class EventDiscussion(BaseModel):
    """Pydantic model for the discussion in a webhook payload."""

    node_id: str
    title: str
    raw_body: str | None = Field(default=None, alias="body")
    state: str = "open"
    category: EventCategory
    labels: list[EventLabel] = Field(default_factory=list)

    @property
    def body(self) -> str:
        """The discussion body, empty when the payload omits it or sends null."""
        return self.raw_body or ""

    @property
    def closed(self) -> bool:
        """Whether the discussion was closed when the event fired."""
        return self.state == "closed"


class BodyChange(BaseModel):
    """Pydantic model for the previous value of an edited body."""

    model_config = ConfigDict(populate_by_name=True)

    from_: str | None = Field(default=None, alias="from")


class DiscussionChanges(BaseModel):
    """Pydantic model for the changes recorded on a discussion edit."""

    body: BodyChange | None = None


class DiscussionEvent(BaseModel):
    """Pydantic model for a `discussion` webhook payload."""

    action: str
    discussion: EventDiscussion
    changes: DiscussionChanges | None = None
    sender: Actor | None = None

    @property
    def previous_body(self) -> str | None:
        """The discussion body before the edit, if this event recorded one."""
        if self.changes is None or self.changes.body is None:
            return None
        return self.changes.body.from_


class PushEvent(BaseModel):
    """Pydantic model for a `push` webhook payload."""

    ref: str
    before: str
    sender: Actor | None = None
