"""Contains exceptions raised at the boundary of the GitHub stores."""


class ContentNotFoundError(Exception):
    """Raised when a path does not exist at the requested ref."""

    def __init__(self, path: str, ref: str | None = None) -> None:
        """Initializes the exception with the missing path and ref."""
        location = f"{path} at {ref}" if ref else path
        super().__init__(f"Content not found: {location}")
        self.path = path
        self.ref = ref


class UnexpectedContentError(Exception):
    """Raised when a path exists but does not hold a readable file."""

    pass


class ContentNotDirectoryError(Exception):
    """Raised when a directory listing is requested for a path that holds a file."""

    def __init__(self, path: str) -> None:
        """Initializes the exception with the path that is not a directory."""
        super().__init__(f"Expected a directory but found a file at {path}")
        self.path = path
