"""Native XML import filters."""

from services.native_import.app.filters.author import AuthorElementMapper
from services.native_import.app.filters.base import NativeImportFilter

__all__ = [
    "AuthorElementMapper",
    "NativeImportFilter",
]
