"""Base ABCs for the repository content and discussion stores."""

from abc import ABC, abstractmethod

from adr_sync.schemas.models import (
    CommitRecord,
    DirectoryEntry,
    DiscussionNode,
    Label,
    RepositoryCategories,
    RepositoryCategoriesAndLabels,
    RepositoryFile,
    RepositoryLabels,
)


class ContentStoreBase(ABC):
    """Base ABC for a repository content store.

    Implementations raise ContentNotFoundError when a path is missing at a ref.
    """

    @abstractmethod
    async def get_file(self, path: str, ref: str) -> RepositoryFile:
        """Get the decoded content and SHA of a file at a ref."""
        pass

    @abstractmethod
    async def create_or_update_file(
        self,
        path: str,
        branch: str,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> CommitRecord:
        """Create a file, or update it when the SHA of the current revision is given."""
        pass

    @abstractmethod
    async def list_directory(self, path: str, ref: str) -> list[DirectoryEntry]:
        """List the entries of a directory at a ref."""
        pass

    @abstractmethod
    async def list_recent_commits(self, path: str, limit: int = 1) -> list[CommitRecord]:
        """List the most recent commits touching a path, newest first."""
        pass


class DiscussionStoreBase(ABC):
    """Base ABC for a discussion store."""

    # Discussion CRUD
    @abstractmethod
    async def search_discussion(self, search_query: str, labels_end_cursor: str | None = None) -> DiscussionNode | None:
        """Return the first discussion matching a search query, with one page of labels."""
        pass

    @abstractmethod
    async def create_discussion(self, repository_id: str, title: str, body: str, category_id: str) -> str:
        """Create a discussion and return its ID."""
        pass

    @abstractmethod
    async def update_discussion(self, discussion_id: str, body: str) -> None:
        """Replace the body of a discussion."""
        pass

    @abstractmethod
    async def add_discussion_comment(self, discussion_id: str, body: str) -> None:
        """Add a comment to a discussion."""
        pass

    @abstractmethod
    async def close_discussion(self, discussion_id: str) -> None:
        """Close a discussion."""
        pass

    @abstractmethod
    async def reopen_discussion(self, discussion_id: str) -> None:
        """Reopen a closed discussion."""
        pass

    # Label operations
    @abstractmethod
    async def add_label(self, discussion_id: str, label_id: str) -> None:
        """Attach a label to a discussion."""
        pass

    @abstractmethod
    async def remove_label(self, discussion_id: str, label_id: str) -> None:
        """Detach a label from a discussion."""
        pass

    @abstractmethod
    async def create_label(self, repository_id: str, name: str, color: str, description: str) -> Label:
        """Create a repository label."""
        pass

    # Repository listings
    @abstractmethod
    async def fetch_repository_categories_and_labels(
        self,
        categories_end_cursor: str | None = None,
        labels_end_cursor: str | None = None,
    ) -> RepositoryCategoriesAndLabels:
        """Fetch one page of discussion categories and labels in a single request."""
        pass

    @abstractmethod
    async def fetch_repository_categories(self, categories_end_cursor: str | None = None) -> RepositoryCategories:
        """Fetch one page of discussion categories."""
        pass

    @abstractmethod
    async def fetch_repository_labels(self, labels_end_cursor: str | None = None) -> RepositoryLabels:
        """Fetch one page of labels."""
        pass
