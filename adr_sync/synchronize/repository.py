"""Contains synchronization logic for every ADR document in the repository."""

import structlog

from adr_sync.github.abc import ContentStoreBase, DiscussionStoreBase
from adr_sync.github.exceptions import ContentNotDirectoryError, ContentNotFoundError, UnexpectedContentError
from adr_sync.schemas.models import Category, Connection, Label
from adr_sync.synchronize.documents import sync_document_to_discussion
from adr_sync.synchronize.exceptions import AdrDirectoryNotFoundError, AdrPathNotDirectoryError, DiscussionCategoryNotFoundError
from adr_sync.synchronize.labels import LabelEnsurer
from adr_sync.synchronize.models import SyncContext
from adr_sync.synchronize.pagination import merge_paginated_pair
from adr_sync.synchronize.results import DocumentSynchronizationResult, RepositorySynchronizationResults
from adr_sync.utils.constants import ADR_FILE_SUFFIX
from adr_sync.utils.helpers import extract_status

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_categories_and_labels(discussion_store: DiscussionStoreBase) -> tuple[str, list[Category], list[Label]]:
    """Fetch the repository ID with all of its discussion categories and labels."""
    repository = await discussion_store.fetch_repository_categories_and_labels()

    async def fetch_pair(
        categories_end_cursor: str | None, labels_end_cursor: str | None
    ) -> tuple[Connection[Category], Connection[Label]]:
        page = await discussion_store.fetch_repository_categories_and_labels(categories_end_cursor, labels_end_cursor)
        return page.categories, page.labels

    async def fetch_categories(categories_end_cursor: str | None) -> Connection[Category]:
        return (await discussion_store.fetch_repository_categories(categories_end_cursor)).categories

    async def fetch_labels(labels_end_cursor: str | None) -> Connection[Label]:
        return (await discussion_store.fetch_repository_labels(labels_end_cursor)).labels

    categories, labels = await merge_paginated_pair(repository.categories, repository.labels, fetch_pair, fetch_categories, fetch_labels)
    logger.debug("Fetched repository categories and labels", category_count=len(categories), label_count=len(labels))
    return repository.id, categories, labels


async def list_adr_titles(content_store: ContentStoreBase, adr_dir: str, ref: str) -> list[str]:
    """List the markdown files directly inside the ADR directory, in listing order."""
    try:
        entries = await content_store.list_directory(adr_dir, ref)
    except ContentNotFoundError as exc:
        raise AdrDirectoryNotFoundError(adr_dir) from exc
    except ContentNotDirectoryError as exc:
        raise AdrPathNotDirectoryError(adr_dir) from exc
    return [entry.name for entry in entries if entry.type == "file" and entry.name.endswith(ADR_FILE_SUFFIX)]


async def sync_repository_to_discussions(
    content_store: ContentStoreBase,
    discussion_store: DiscussionStoreBase,
    context: SyncContext,
    category_name: str,
    ref: str,
    before: str,
) -> RepositorySynchronizationResults:
    """Synchronize every ADR document at a pushed ref to its discussion.

    Documents are processed one after another so that a status shared by
    several documents creates its label only once.

    Raises:
        DiscussionCategoryNotFoundError: If the configured category does not exist.
        AdrDirectoryNotFoundError: If the ADR directory does not exist at the ref.
        AdrPathNotDirectoryError: If the ADR directory path is a file.
        UnexpectedContentError: If a listed document cannot be read as a file.
    """
    repository_id, categories, labels = await fetch_categories_and_labels(discussion_store)

    category = next((category for category in categories if category.name == category_name), None)
    if category is None:
        raise DiscussionCategoryNotFoundError(category_name)

    titles = await list_adr_titles(content_store, context.adr_dir, ref)
    logger.info("Found ADR documents", adr_dir=context.adr_dir, ref=ref, document_count=len(titles))

    label_ensurer = LabelEnsurer(discussion_store, repository_id, labels)
    results: list[DocumentSynchronizationResult] = []
    for title in titles:
        path = context.adr_path(title)
        try:
            document = await content_store.get_file(path, ref)
        except ContentNotFoundError as exc:
            raise UnexpectedContentError(f"Could not retrieve content for {title}") from exc

        status = extract_status(document.content, context.status_pattern)
        status_label = await label_ensurer.ensure_status_label(status)
        logger.info("Synchronizing document", title=title, status=status)
        result = await sync_document_to_discussion(
            content_store,
            discussion_store,
            context,
            repository_id=repository_id,
            category_id=category.id,
            ref=ref,
            before=before,
            title=title,
            content=document.content,
            status_label=status_label,
        )
        results.append(DocumentSynchronizationResult(title, status, result))

    return RepositorySynchronizationResults(
        context.adr_dir, results, created_labels=[label.name for label in label_ensurer.created_labels]
    )
