"""Contains results of application execution."""

from adr_sync.synchronize.models import ReconciliationResult


class DocumentSynchronizationResult:
    """Contains the result of synchronizing one ADR document to its discussion."""

    def __init__(self, title: str, status: str | None, result: ReconciliationResult) -> None:
        """Initialize the result with the document title, its status, and what was done."""
        self.title = title
        self.status = status
        self.result = result


class RepositorySynchronizationResults:
    """Contains results of synchronizing every ADR document in the repository."""

    def __init__(self, adr_dir: str, results: list[DocumentSynchronizationResult], created_labels: list[str] | None = None) -> None:
        """Initialize the results with the scanned directory and per-document results."""
        self.adr_dir = adr_dir
        self.results = results
        self.created_labels = created_labels or []


class DiscussionSynchronizationResult:
    """Contains the result of synchronizing one discussion to its ADR document.

    `result` is None when the discussion was not routed because its category or
    title does not identify it as an ADR.
    """

    def __init__(self, title: str, status: str | None, result: ReconciliationResult | None) -> None:
        """Initialize the result with the discussion title, its status, and what was done."""
        self.title = title
        self.status = status
        self.result = result

    @property
    def routed(self) -> bool:
        """Whether the discussion was recognized as an ADR and synchronized."""
        return self.result is not None


class EventSynchronizationResult:
    """Contains results of handling one GitHub event.

    Exactly one of `repository_results` and `discussion_result` is set when the
    event was handled; neither is set when the event was ignored.
    """

    def __init__(
        self,
        event_name: str,
        action: str | None = None,
        repository_results: RepositorySynchronizationResults | None = None,
        discussion_result: DiscussionSynchronizationResult | None = None,
    ) -> None:
        """Initialize the result with the event and the results of the workflow it triggered."""
        self.event_name = event_name
        self.action = action
        self.repository_results = repository_results
        self.discussion_result = discussion_result

    @property
    def handled(self) -> bool:
        """Whether the event triggered a synchronization workflow."""
        return self.repository_results is not None or self.discussion_result is not None
