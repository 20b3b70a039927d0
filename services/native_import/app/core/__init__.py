"""Core import state, diagnostics and localization."""

from services.native_import.app.core.deployment import ImportDeployment
from services.native_import.app.core.errors import (
    NativeImportError,
    SubmissionNotFoundError,
    UnexpectedRootElementError,
    XmlParseError,
)
from services.native_import.app.core.locale import LocaleCatalog
from services.native_import.app.core.schemas import AssocType, ImportIssue, ImportIssueKind

__all__ = [
    "ImportDeployment",
    "NativeImportError",
    "SubmissionNotFoundError",
    "UnexpectedRootElementError",
    "XmlParseError",
    "LocaleCatalog",
    "AssocType",
    "ImportIssue",
    "ImportIssueKind",
]
