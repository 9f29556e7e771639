"""Contains utility functions for synchronization actions."""

import structlog

from adr_sync.github.abc import ContentStoreBase
from adr_sync.github.exceptions import ContentNotFoundError
from adr_sync.schemas.models import RepositoryFile

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_file_or_none(content_store: ContentStoreBase, path: str, ref: str) -> RepositoryFile | None:
    """Fetch a file at a ref, returning None when it does not exist there."""
    try:
        return await content_store.get_file(path, ref)
    except ContentNotFoundError:
        logger.debug("File does not exist at ref", path=path, ref=ref)
        return None
