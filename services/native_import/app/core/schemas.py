"""Pydantic schemas for native XML import diagnostics."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class AssocType(str, Enum):
    """Kind of object an import diagnostic is attached to."""

    SUBMISSION = "submission"
    PUBLICATION = "publication"
    AUTHOR = "author"


class ImportIssueKind(str, Enum):
    """Known diagnostic kinds recorded during import."""

    UNKNOWN_USER_GROUP = "unknown_user_group"
    MISSING_GIVEN_NAME = "missing_given_name"
    OTHER = "other"


class ImportIssue(BaseModel):
    """A non-fatal diagnostic recorded against an imported object."""

    assoc_type: AssocType
    assoc_id: int
    message: str
    kind: ImportIssueKind = ImportIssueKind.OTHER
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
