"""SQLAlchemy models for the native XML import."""

from sqlalchemy import (
    JSON,
    Boolean,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.mutable import MutableDict
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Database-agnostic JSON type: JSONB on PostgreSQL, JSON on SQLite
JSONType = JSON().with_variant(JSONB(), "postgresql")
LocalizedJSON = MutableDict.as_mutable(JSONType)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def pick_localized(
    values: dict[str, str] | None,
    *preferred_locales: str | None,
) -> str | None:
    """Return the first non-empty value among preferred locales, then any locale."""
    if not values:
        return None
    for locale in preferred_locales:
        if locale and values.get(locale):
            return values[locale]
    for value in values.values():
        if value:
            return value
    return None


class ContextModel(Base):
    """A publishing context (journal, press or server)."""

    __tablename__ = "contexts"

    context_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    path: Mapped[str] = mapped_column(String(32), unique=True, nullable=False)
    primary_locale: Mapped[str] = mapped_column(String(14), nullable=False, default="en_US")


class SubmissionModel(Base):
    """A submission under editorial processing."""

    __tablename__ = "submissions"

    submission_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    context_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("contexts.context_id", ondelete="CASCADE"),
        nullable=False,
    )
    locale: Mapped[str] = mapped_column(String(14), nullable=False)
    # Points at publications.publication_id; no FK to avoid a creation cycle.
    current_publication_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    __table_args__ = (Index("idx_submissions_context_id", "context_id"),)


class PublicationModel(Base):
    """A versioned publication of a submission."""

    __tablename__ = "publications"

    publication_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    submission_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("submissions.submission_id", ondelete="CASCADE"),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)


class UserGroupModel(Base):
    """A named role (e.g. "Author") scoped to a context."""

    __tablename__ = "user_groups"

    user_group_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    context_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("contexts.context_id", ondelete="CASCADE"),
        nullable=False,
    )
    names: Mapped[dict[str, str]] = mapped_column(LocalizedJSON, default=dict, nullable=False)

    __table_args__ = (Index("idx_user_groups_context_id", "context_id"),)

    def get_name(self, locale: str | None = None) -> set[str]:
        """Return this group's names.

        Args:
            locale: Locale to read, or None for the names in every locale

        Returns:
            Set of names (empty when the locale has no name)
        """
        names = self.names or {}
        if locale is None:
            return {name for name in names.values() if name}
        name = names.get(locale)
        return {name} if name else set()


class AuthorModel(Base):
    """SQLAlchemy model for the authors table."""

    __tablename__ = "authors"

    author_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    publication_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("publications.publication_id", ondelete="CASCADE"),
        nullable=False,
    )
    seq: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    primary_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    include_in_browse: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    user_group_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("user_groups.user_group_id", ondelete="SET NULL"),
        nullable=True,
    )

    given_name: Mapped[dict[str, str]] = mapped_column(LocalizedJSON, default=dict, nullable=False)
    family_name: Mapped[dict[str, str]] = mapped_column(LocalizedJSON, default=dict, nullable=False)
    affiliation: Mapped[dict[str, str]] = mapped_column(LocalizedJSON, default=dict, nullable=False)
    biography: Mapped[dict[str, str]] = mapped_column(LocalizedJSON, default=dict, nullable=False)

    country: Mapped[str | None] = mapped_column(String(90), nullable=True)
    email: Mapped[str | None] = mapped_column(String(90), nullable=True)
    url: Mapped[str | None] = mapped_column(Text, nullable=True)
    orcid: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("idx_authors_publication_id", "publication_id"),
        Index("idx_authors_user_group_id", "user_group_id"),
    )

    def get_localized_given_name(self, *preferred_locales: str | None) -> str | None:
        """Given name in the first preferred locale that has one, else any locale."""
        return pick_localized(self.given_name, *preferred_locales)

    def get_localized_family_name(self, *preferred_locales: str | None) -> str | None:
        """Family name in the first preferred locale that has one, else any locale."""
        return pick_localized(self.family_name, *preferred_locales)

