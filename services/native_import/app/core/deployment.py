"""Import deployment: ambient state shared by the filters of one import."""

import threading

from services.native_import.app.core.schemas import AssocType, ImportIssue, ImportIssueKind
from services.native_import.app.db.models import ContextModel, SubmissionModel
from shared.utils.logging import get_logger, set_import_id

logger = get_logger(__name__)


class ImportDeployment:
    """Current context and submission of an import, plus its error sink.

    The error sink is append-only and guarded by a lock, so filters running
    concurrently against the same deployment can record issues safely.
    """

    def __init__(
        self,
        context: ContextModel,
        submission: SubmissionModel,
        import_id: str | None = None,
    ):
        """Initialize deployment.

        Args:
            context: Publishing context being imported into
            submission: Submission the imported objects attach to
            import_id: Correlation ID for this import (generated if omitted)
        """
        self.context = context
        self.submission = submission
        self.import_id = set_import_id(import_id)
        self._errors: list[ImportIssue] = []
        self._lock = threading.Lock()

    def add_error(
        self,
        assoc_type: AssocType,
        assoc_id: int,
        message: str,
        kind: ImportIssueKind = ImportIssueKind.OTHER,
    ) -> ImportIssue:
        """Record a non-fatal import error against an object.

        Args:
            assoc_type: Kind of object the error is about
            assoc_id: ID of that object
            message: Translated, human-readable message
            kind: Diagnostic kind for programmatic filtering

        Returns:
            The recorded issue
        """
        issue = ImportIssue(
            assoc_type=assoc_type,
            assoc_id=assoc_id,
            message=message,
            kind=kind,
        )
        with self._lock:
            self._errors.append(issue)

        logger.warning(
            "import_error_recorded",
            assoc_type=assoc_type.value,
            assoc_id=assoc_id,
            kind=kind.value,
            message=message,
        )
        return issue

    def get_errors(self, kind: ImportIssueKind | None = None) -> list[ImportIssue]:
        """Return recorded errors in insertion order, optionally of one kind."""
        with self._lock:
            errors = list(self._errors)
        if kind is None:
            return errors
        return [issue for issue in errors if issue.kind == kind]

    def has_errors(self) -> bool:
        """Whether any error has been recorded."""
        with self._lock:
            return bool(self._errors)
