"""Contains utility functions for GitHub interactions."""

from urllib.parse import quote, urljoin

from adr_sync.utils.constants import GITHUB_BASE_URL


def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository in the format 'owner/repo' is required.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def branch_from_ref(ref: str) -> str:
    """Strip the `refs/heads/` prefix from a git ref."""
    return ref.removeprefix("refs/heads/")


def build_blob_base_url(owner: str, repo: str, branch: str) -> str:
    """Build the blob URL that repository paths on a branch are resolved against.

    The branch is URL-encoded so that names containing slashes stay a single path segment.
    """
    return urljoin(GITHUB_BASE_URL, f"{owner}/{repo}/blob/{quote(branch, safe='')}/")


def build_title_search_query(owner: str, repo: str, title: str) -> str:
    """Build the discussion search query that matches a title within one repository."""
    return f"repo:{owner}/{repo} in:title {title}"
