"""Pydantic models for records exchanged with the content and discussion stores."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class StoreRecord(BaseModel):
    """Base model for immutable store records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Label(StoreRecord):
    """Pydantic model for a repository label."""

    id: str
    name: str


class Category(StoreRecord):
    """Pydantic model for a discussion category."""

    id: str
    name: str


class PageInfo(StoreRecord):
    """Pagination continuation state for a GraphQL connection."""

    has_next_page: bool = Field(default=False, alias="hasNextPage")
    end_cursor: str | None = Field(default=None, alias="endCursor")


class Connection(StoreRecord, Generic[T]):
    """One page of a GraphQL connection."""

    nodes: list[T]
    page_info: PageInfo = Field(default_factory=PageInfo, alias="pageInfo")


class DiscussionNode(StoreRecord):
    """A discussion as returned by a search, with one page of labels."""

    id: str
    body: str
    closed: bool
    labels: Connection[Label]


class Discussion(StoreRecord):
    """A discussion with all of its labels collected."""

    id: str
    body: str
    closed: bool
    labels: list[Label] = Field(default_factory=list)


class RepositoryCategoriesAndLabels(StoreRecord):
    """One page of a repository's discussion categories and labels."""

    id: str
    categories: Connection[Category]
    labels: Connection[Label]


class RepositoryCategories(StoreRecord):
    """One page of a repository's discussion categories."""

    id: str
    categories: Connection[Category]


class RepositoryLabels(StoreRecord):
    """One page of a repository's labels."""

    id: str
    labels: Connection[Label]


class RepositoryFile(StoreRecord):
    """Decoded file content and the blob SHA used to guard updates."""

    content: str
    sha: str


class DirectoryEntry(StoreRecord):
    """An entry of a repository directory listing."""

    name: str
    type: str


class Actor(StoreRecord):
    """A GitHub account that authored a commit or triggered an event."""

    login: str


class CommitAuthor(StoreRecord):
    """The git identity recorded on a commit."""

    name: str | None = None
    email: str | None = None


class CommitRecord(StoreRecord):
    """A commit touching an ADR, reduced to what is needed for attribution."""

    url: str | None = None
    actor: Actor | None = None
    author: CommitAuthor | None = None
