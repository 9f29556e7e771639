"""Contains synchronization logic from ADR documents to discussions."""

import structlog

from adr_sync.github.abc import ContentStoreBase, DiscussionStoreBase
from adr_sync.schemas.models import Connection, Discussion, Label
from adr_sync.synchronize.exceptions import DiscussionNotFoundError
from adr_sync.synchronize.models import ReconciliationResult, StatusTransition, SyncContext, SyncDecision
from adr_sync.synchronize.pagination import collect_pages
from adr_sync.synchronize.status import apply_status_transition, decide_status_transition
from adr_sync.synchronize.utils import fetch_file_or_none
from adr_sync.utils.github import branch_from_ref, build_blob_base_url, build_title_search_query
from adr_sync.utils.helpers import extract_status, generate_author, generate_comment, replace_links

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def find_discussion_by_title(discussion_store: DiscussionStoreBase, owner: str, repo: str, title: str) -> Discussion | None:
    """Search for the discussion titled after an ADR and collect all of its labels.

    Returns None when the search has no hits. Raises DiscussionNotFoundError if
    the discussion disappears while its labels are being paged.
    """
    search_query = build_title_search_query(owner, repo, title)
    node = await discussion_store.search_discussion(search_query)
    if node is None:
        return None

    async def fetch_next_labels(labels_end_cursor: str | None) -> Connection[Label]:
        next_node = await discussion_store.search_discussion(search_query, labels_end_cursor=labels_end_cursor)
        if next_node is None:
            raise DiscussionNotFoundError(f"Discussion '{title}' disappeared while fetching its labels")
        return next_node.labels

    labels = await collect_pages(node.labels, fetch_next_labels)
    return Discussion(id=node.id, body=node.body, closed=node.closed, labels=labels)


async def sync_document_to_discussion(
    content_store: ContentStoreBase,
    discussion_store: DiscussionStoreBase,
    context: SyncContext,
    repository_id: str,
    category_id: str,
    ref: str,
    before: str,
    title: str,
    content: str,
    status_label: Label | None,
) -> ReconciliationResult:
    """Make the discussion for one ADR document reflect the document's content and status.

    A missing discussion is created with the document's body and a comment
    crediting the author of the latest commit. An existing discussion has its
    body replaced when it differs, and its status is compared with the status
    of the document as it was at the `before` commit.

    Args:
        content_store: Store used to read the document history.
        discussion_store: Store holding the discussions.
        context: Repository coordinates and status policy.
        repository_id: Node ID of the repository, for discussion creation.
        category_id: Node ID of the category new discussions go into.
        ref: The pushed ref; its branch is used for rewritten links.
        before: The commit the push started from.
        title: The document's file name, used as the discussion title.
        content: The document's content at `ref`.
        status_label: The label for the document's current status, if it has one.

    Returns:
        ReconciliationResult: What was done to the discussion.
    """
    branch = branch_from_ref(ref)
    body = replace_links(content, build_blob_base_url(context.owner, context.repo, branch), context.adr_dir)
    path = context.adr_path(title)

    discussion = await find_discussion_by_title(discussion_store, context.owner, context.repo, title)

    if discussion is None:
        logger.info("Creating discussion for document", title=title, path=path)
        discussion_id = await discussion_store.create_discussion(repository_id, title, body, category_id)

        commits = await content_store.list_recent_commits(path, 1)
        comment = None
        if commits:
            commit = commits[0]
            comment = generate_comment(generate_author(commit.actor, commit.author), commit.url)
        if comment is not None:
            await discussion_store.add_discussion_comment(discussion_id, comment)
        else:
            logger.warning("Could not determine the author of the document", title=title, path=path)

        transition = decide_status_transition(None, status_label, context.close_statuses, [], False)
        await apply_status_transition(discussion_store, discussion_id, transition)
        return ReconciliationResult(decision=SyncDecision.CREATE, transition=transition)

    decision = SyncDecision.NOOP
    if discussion.body != body:
        logger.info("Updating discussion body from document", title=title, discussion_id=discussion.id)
        await discussion_store.update_discussion(discussion.id, body)
        decision = SyncDecision.UPDATE
    else:
        logger.debug("Discussion body is up to date", title=title, discussion_id=discussion.id)

    previous_file = await fetch_file_or_none(content_store, path, before)
    previous_status = extract_status(previous_file.content, context.status_pattern) if previous_file is not None else None

    transition: StatusTransition = decide_status_transition(
        previous_status, status_label, context.close_statuses, discussion.labels, discussion.closed
    )
    await apply_status_transition(discussion_store, discussion.id, transition)
    return ReconciliationResult(decision=decision, transition=transition)
