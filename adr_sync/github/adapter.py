"""GitHub store adapter for the githubkit library."""

import base64
import inspect
from functools import wraps
from pathlib import Path
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit.exception import RequestFailed

from adr_sync.configuration.models import GitHubAuthenticationType
from adr_sync.github import graphql
from adr_sync.github.exceptions import ContentNotDirectoryError, ContentNotFoundError, UnexpectedContentError
from adr_sync.schemas.models import (
    Actor,
    CommitAuthor,
    CommitRecord,
    DirectoryEntry,
    DiscussionNode,
    Label,
    RepositoryCategories,
    RepositoryCategoriesAndLabels,
    RepositoryFile,
    RepositoryLabels,
)
from adr_sync.utils.github import split_repository_in_configuration

from .abc import ContentStoreBase, DiscussionStoreBase
from .client import GitHubClient, get_github_client

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_404(func: F) -> F:
    """Decorator to translate GitHub 404 Not Found errors into ContentNotFoundError."""

    signature = inspect.signature(func)

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code != 404:
                raise
            arguments = signature.bind(*args, **kwargs).arguments
            path = arguments.get("path", "")
            ref = arguments.get("ref")
            logger.debug("GitHub content not found", function=func.__name__, path=path, ref=ref)
            raise ContentNotFoundError(path, ref) from exc

    return wrapper  # type: ignore


def handle_github_422(func: F) -> F:
    """Decorator to handle GitHub 422 Unprocessable Entity errors, logging and raising with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            if exc.response.status_code == 422:
                try:
                    error_data = exc.response.json()
                except ValueError:
                    error_data = {}
                message = error_data.get("message", "Unprocessable Entity")
                errors = error_data.get("errors", [])
                logger.error(
                    "GitHub 422 Unprocessable Entity",
                    function=func.__name__,
                    message=message,
                    errors=errors,
                    status_code=422,
                )
                raise ValueError(f"GitHub 422 error in {func.__name__}: {message} | errors: {errors}") from exc
            raise

    return wrapper  # type: ignore


def _parse_commit_record(commit_data: dict[str, Any], actor_data: dict[str, Any] | None = None) -> CommitRecord:
    """Reduce a REST commit payload to the fields used for attribution."""
    author_data = commit_data.get("author") or {}
    author = CommitAuthor(name=author_data.get("name"), email=author_data.get("email")) if author_data else None
    actor = Actor(login=actor_data["login"]) if actor_data and actor_data.get("login") else None
    return CommitRecord(url=commit_data.get("html_url"), actor=actor, author=author)


class GitHubKitAdapter(ContentStoreBase, DiscussionStoreBase):
    """Content and discussion store adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub store adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(
        cls,
        repo: str,
        github_auth_type: GitHubAuthenticationType,
        github_pat_token: str | None = None,
        github_app_id: int | None = None,
        github_app_private_key_path: Path | None = None,
        github_app_installation_id: int | None = None,
        github_api_url: str = "https://api.github.com",
    ) -> Self:
        """Create a new GitHub store adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_auth_type: Type of authentication (PAT or APP)
            github_pat_token: Token (required for PAT auth)
            github_app_id: GitHub App ID (required for APP auth)
            github_app_private_key_path: Path to private key file (required for APP auth)
            github_app_installation_id: Installation ID (required for APP auth)
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance
        """
        owner, repo_name = split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(
            github_auth_type=github_auth_type,
            github_pat_token=github_pat_token,
            github_app_id=github_app_id,
            github_app_private_key_path=github_app_private_key_path,
            github_app_installation_id=github_app_installation_id,
            github_api_url=github_api_url,
        )
        return cls(client, owner, repo_name)

    async def _graphql(self, query: str, **variables: Any) -> dict[str, Any]:
        """Run a GraphQL document against the API and return its data."""
        return await self.client.async_graphql(query, variables=variables)

    # Content operations
    @handle_github_404
    async def get_file(self, path: str, ref: str) -> RepositoryFile:
        """Get the decoded content and SHA of a file at a ref."""
        response = await self.client.rest.repos.async_get_content(owner=self.owner, repo=self.repo_name, path=path, ref=ref)
        data = response.json()
        if isinstance(data, list) or data.get("type") != "file" or not data.get("content"):
            raise UnexpectedContentError(f"Could not retrieve content at {path} in {ref}")
        content = base64.b64decode(data["content"]).decode("utf-8")
        return RepositoryFile(content=content, sha=data["sha"])

    @handle_github_422
    async def create_or_update_file(
        self,
        path: str,
        branch: str,
        content: str,
        message: str,
        sha: str | None = None,
    ) -> CommitRecord:
        """Create a file, or update it when the SHA of the current revision is given."""
        encoded_content = base64.b64encode(content.encode("utf-8")).decode("utf-8")
        params = self._omit_null_parameters(
            path=path,
            message=message,
            content=encoded_content,
            branch=branch,
            sha=sha,
        )
        response = await self.client.rest.repos.async_create_or_update_file_contents(owner=self.owner, repo=self.repo_name, **params)
        logger.info("Committed file to branch", path=path, branch=branch, updated=sha is not None)
        return _parse_commit_record(response.json().get("commit") or {})

    @handle_github_404
    async def list_directory(self, path: str, ref: str) -> list[DirectoryEntry]:
        """List the entries of a directory at a ref."""
        response = await self.client.rest.repos.async_get_content(owner=self.owner, repo=self.repo_name, path=path, ref=ref)
        data = response.json()
        if not isinstance(data, list):
            raise ContentNotDirectoryError(path)
        return [DirectoryEntry(name=item["name"], type=item["type"]) for item in data]

    async def list_recent_commits(self, path: str, limit: int = 1) -> list[CommitRecord]:
        """List the most recent commits touching a path, newest first."""
        response = await self.client.rest.repos.async_list_commits(owner=self.owner, repo=self.repo_name, path=path, per_page=limit)
        # Use raw JSON so that commits without a linked GitHub account still parse
        commits: list[dict[str, Any]] = response.json()
        return [
            _parse_commit_record({"html_url": commit.get("html_url"), "author": (commit.get("commit") or {}).get("author")}, commit.get("author"))
            for commit in commits[:limit]
        ]

    # Discussion operations
    async def search_discussion(self, search_query: str, labels_end_cursor: str | None = None) -> DiscussionNode | None:
        """Return the first discussion matching a search query, with one page of labels."""
        data = await self._graphql(graphql.SEARCH_DISCUSSIONS, searchQuery=search_query, labelsEndCursor=labels_end_cursor)
        nodes = [node for node in data["search"]["nodes"] if node]
        if not nodes:
            return None
        return DiscussionNode.model_validate(nodes[0])

    async def create_discussion(self, repository_id: str, title: str, body: str, category_id: str) -> str:
        """Create a discussion and return its ID."""
        data = await self._graphql(
            graphql.CREATE_DISCUSSION,
            repositoryId=repository_id,
            title=title,
            body=body,
            categoryId=category_id,
        )
        return data["createDiscussion"]["discussion"]["id"]

    async def update_discussion(self, discussion_id: str, body: str) -> None:
        """Replace the body of a discussion."""
        await self._graphql(graphql.UPDATE_DISCUSSION, discussionId=discussion_id, body=body)

    async def add_discussion_comment(self, discussion_id: str, body: str) -> None:
        """Add a comment to a discussion."""
        await self._graphql(graphql.ADD_DISCUSSION_COMMENT, discussionId=discussion_id, body=body)

    async def close_discussion(self, discussion_id: str) -> None:
        """Close a discussion."""
        await self._graphql(graphql.CLOSE_DISCUSSION, discussionId=discussion_id)

    async def reopen_discussion(self, discussion_id: str) -> None:
        """Reopen a closed discussion."""
        await self._graphql(graphql.REOPEN_DISCUSSION, discussionId=discussion_id)

    # Label operations
    async def add_label(self, discussion_id: str, label_id: str) -> None:
        """Attach a label to a discussion."""
        await self._graphql(graphql.ADD_LABEL, discussionId=discussion_id, labelId=label_id)

    async def remove_label(self, discussion_id: str, label_id: str) -> None:
        """Detach a label from a discussion."""
        await self._graphql(graphql.REMOVE_LABEL, discussionId=discussion_id, labelId=label_id)

    async def create_label(self, repository_id: str, name: str, color: str, description: str) -> Label:
        """Create a repository label."""
        data = await self._graphql(
            graphql.CREATE_LABEL,
            repositoryId=repository_id,
            name=name,
            color=color,
            description=description,
        )
        return Label.model_validate(data["createLabel"]["label"])

    # Repository listings
    async def fetch_repository_categories_and_labels(
        self,
        categories_end_cursor: str | None = None,
        labels_end_cursor: str | None = None,
    ) -> RepositoryCategoriesAndLabels:
        """Fetch one page of discussion categories and labels in a single request."""
        data = await self._graphql(
            graphql.REPOSITORY_CATEGORIES_AND_LABELS,
            owner=self.owner,
            repo=self.repo_name,
            categoriesEndCursor=categories_end_cursor,
            labelsEndCursor=labels_end_cursor,
        )
        repository = data["repository"]
        return RepositoryCategoriesAndLabels.model_validate(
            {"id": repository["id"], "categories": repository["discussionCategories"], "labels": repository["labels"]}
        )

    async def fetch_repository_categories(self, categories_end_cursor: str | None = None) -> RepositoryCategories:
        """Fetch one page of discussion categories."""
        data = await self._graphql(
            graphql.REPOSITORY_CATEGORIES,
            owner=self.owner,
            repo=self.repo_name,
            categoriesEndCursor=categories_end_cursor,
        )
        repository = data["repository"]
        return RepositoryCategories.model_validate({"id": repository["id"], "categories": repository["discussionCategories"]})

    async def fetch_repository_labels(self, labels_end_cursor: str | None = None) -> RepositoryLabels:
        """Fetch one page of labels."""
        data = await self._graphql(
            graphql.REPOSITORY_LABELS,
            owner=self.owner,
            repo=self.repo_name,
            labelsEndCursor=labels_end_cursor,
        )
        repository = data["repository"]
        return RepositoryLabels.model_validate({"id": repository["id"], "labels": repository["labels"]})
