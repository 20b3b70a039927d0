"""Database models and repositories."""

from services.native_import.app.db.models import (
    AuthorModel,
    Base,
    ContextModel,
    PublicationModel,
    SubmissionModel,
    UserGroupModel,
)
from services.native_import.app.db.repository import (
    AuthorRepository,
    ContextRepository,
    SubmissionRepository,
    UserGroupRepository,
)

__all__ = [
    "AuthorModel",
    "Base",
    "ContextModel",
    "PublicationModel",
    "SubmissionModel",
    "UserGroupModel",
    "AuthorRepository",
    "ContextRepository",
    "SubmissionRepository",
    "UserGroupRepository",
]
