"""Custom exceptions for the synchronize module."""


class ConfigurationMismatchError(Exception):
    """Raised when the repository does not match the configured layout."""

    pass


class DiscussionCategoryNotFoundError(ConfigurationMismatchError):
    """Raised when the configured discussion category does not exist."""

    def __init__(self, category: str) -> None:
        super().__init__(f"Could not find discussion category {category}")
        self.category = category


class AdrDirectoryNotFoundError(ConfigurationMismatchError):
    """Raised when the ADR directory does not exist at the pushed ref."""

    def __init__(self, adr_dir: str) -> None:
        super().__init__(f"Could not find directory at {adr_dir}")
        self.adr_dir = adr_dir


class AdrPathNotDirectoryError(ConfigurationMismatchError):
    """Raised when the ADR directory path resolves to a file."""

    def __init__(self, adr_dir: str) -> None:
        super().__init__(f"Expected directory but found a file at {adr_dir}")
        self.adr_dir = adr_dir


class BranchMismatchError(ConfigurationMismatchError):
    """Raised when a push event arrives for a branch other than the configured one."""

    def __init__(self, branch: str, configured_branch: str) -> None:
        super().__init__(f"Triggered on branch '{branch}', but configured to run only on branch '{configured_branch}'.")
        self.branch = branch
        self.configured_branch = configured_branch


class DiscussionNotFoundError(Exception):
    """Raised when a discussion disappears while its labels are being paged."""

    pass


class PaginationLimitExceededError(Exception):
    """Raised when a paginated listing does not terminate within the page limit."""

    def __init__(self, max_pages: int) -> None:
        super().__init__(f"Pagination did not finish within {max_pages} pages")
        self.max_pages = max_pages
