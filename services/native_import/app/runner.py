"""Entry point: import the authors of a native XML document into a submission."""

from dataclasses import dataclass, field
from xml.etree import ElementTree

from sqlalchemy.ext.asyncio import AsyncSession

from services.native_import.app.config import Settings, get_settings
from services.native_import.app.core.deployment import ImportDeployment
from services.native_import.app.core.errors import SubmissionNotFoundError
from services.native_import.app.core.locale import LocaleCatalog
from services.native_import.app.core.schemas import ImportIssue
from services.native_import.app.db.repository import (
    AuthorRepository,
    ContextRepository,
    SubmissionRepository,
    UserGroupRepository,
)
from services.native_import.app.filters.author import AuthorElementMapper
from shared.schemas.author import AuthorSchema
from shared.utils.db import get_db_session
from shared.utils.logging import bind_import_context, clear_import_context, get_logger

logger = get_logger(__name__)


@dataclass
class AuthorImportResult:
    """Authors inserted by an import and the issues recorded along the way."""

    import_id: str
    authors: list[AuthorSchema] = field(default_factory=list)
    errors: list[ImportIssue] = field(default_factory=list)


async def import_authors(
    document: str | bytes | ElementTree.Element,
    submission_id: int,
    session: AsyncSession | None = None,
    settings: Settings | None = None,
    import_id: str | None = None,
) -> AuthorImportResult:
    """Import the <author>/<authors> document into an existing submission.

    When no session is given, one is opened from the initialized database and
    committed on success.

    Args:
        document: Native XML text or parsed element
        submission_id: Submission receiving the authors
        session: Open database session to run in
        settings: Service settings (defaults to environment settings)
        import_id: Correlation ID for logs and the result

    Returns:
        Imported authors and recorded errors

    Raises:
        SubmissionNotFoundError: If the submission (or its context) does not exist
        NativeImportError: If the document cannot be imported at all
    """
    if session is None:
        async with get_db_session() as new_session:
            return await import_authors(
                document,
                submission_id,
                session=new_session,
                settings=settings,
                import_id=import_id,
            )

    settings = settings or get_settings()

    submission = await SubmissionRepository(session).get_by_id(submission_id)
    if submission is None:
        raise SubmissionNotFoundError(submission_id)
    context = await ContextRepository(session).get_by_id(submission.context_id)
    if context is None:
        raise SubmissionNotFoundError(submission_id)

    deployment = ImportDeployment(context, submission, import_id=import_id)
    mapper = AuthorElementMapper(
        deployment,
        AuthorRepository(session),
        UserGroupRepository(session),
        LocaleCatalog.from_settings(settings),
    )

    bind_import_context(submission_id=submission_id, context_id=context.context_id)
    try:
        authors = await mapper.execute(document)
    finally:
        clear_import_context("submission_id", "context_id")

    return AuthorImportResult(
        import_id=deployment.import_id,
        authors=[AuthorSchema.model_validate(author) for author in authors],
        errors=deployment.get_errors(),
    )
