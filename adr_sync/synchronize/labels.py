"""Contains synchronization logic for status labels."""

import structlog

from adr_sync.github.abc import DiscussionStoreBase
from adr_sync.schemas.models import Label
from adr_sync.utils.constants import LABEL_DESCRIPTION
from adr_sync.utils.helpers import random_color

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class LabelEnsurer:
    """Get-or-create status labels against a label cache shared by one batch.

    The cache is consulted before every creation, so a status shared by many
    documents results in at most one created label per run.
    """

    def __init__(self, discussion_store: DiscussionStoreBase, repository_id: str, labels: list[Label]) -> None:
        """Initialize the ensurer with the repository's known labels."""
        self.discussion_store = discussion_store
        self.repository_id = repository_id
        self.labels = labels
        self.created_labels: list[Label] = []

    def find_label(self, name: str) -> Label | None:
        """Return the known label with exactly this name, if any."""
        return next((label for label in self.labels if label.name == name), None)

    async def ensure_status_label(self, status: str | None) -> Label | None:
        """Return the label named after a status, creating it when it does not exist yet."""
        if status is None:
            return None

        label = self.find_label(status)
        if label is not None:
            logger.debug("Status label already exists", label_name=status, label_id=label.id)
            return label

        color = random_color()
        logger.info("Creating status label", label_name=status, color=color)
        label = await self.discussion_store.create_label(self.repository_id, status, color, LABEL_DESCRIPTION)
        self.labels.append(label)
        self.created_labels.append(label)
        return label
