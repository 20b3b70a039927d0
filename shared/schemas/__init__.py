"""Shared Pydantic schemas for native XML import services."""

from shared.schemas.author import AuthorSchema, LocalizedText

__all__ = [
    "AuthorSchema",
    "LocalizedText",
]
