"""Database repositories consumed by the native XML import filters."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from services.native_import.app.db.models import (
    AuthorModel,
    ContextModel,
    SubmissionModel,
    UserGroupModel,
)


class AuthorRepository:
    """Repository for author persistence."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    def new_data_object(self) -> AuthorModel:
        """Construct an empty, unsaved author with explicit defaults.

        Column defaults only apply on INSERT, so the flags and localized maps
        are set here to be readable while the author is being populated.
        """
        return AuthorModel(
            seq=0,
            primary_contact=False,
            include_in_browse=False,
            user_group_id=None,
            given_name={},
            family_name={},
            affiliation={},
            biography={},
        )

    async def insert_object(self, author: AuthorModel) -> int:
        """Insert an author and return its newly assigned identity.

        Args:
            author: Unsaved author model

        Returns:
            The author_id assigned by the database
        """
        self.session.add(author)
        await self.session.flush()
        return author.author_id

    async def get_by_id(self, author_id: int) -> AuthorModel | None:
        """Get author by ID."""
        result = await self.session.execute(
            select(AuthorModel).where(AuthorModel.author_id == author_id)
        )
        return result.scalar_one_or_none()

    async def get_by_publication_id(self, publication_id: int) -> list[AuthorModel]:
        """List a publication's authors in sequence order."""
        result = await self.session.execute(
            select(AuthorModel)
            .where(AuthorModel.publication_id == publication_id)
            .order_by(AuthorModel.seq, AuthorModel.author_id)
        )
        return list(result.scalars().all())


class UserGroupRepository:
    """Repository for user group lookups."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_by_context_id(self, context_id: int) -> list[UserGroupModel]:
        """Get a context's user groups.

        Groups are ordered by ID so name resolution is deterministic: when two
        groups share a name, the older group wins.

        Args:
            context_id: Context the groups belong to

        Returns:
            List of user group models
        """
        result = await self.session.execute(
            select(UserGroupModel)
            .where(UserGroupModel.context_id == context_id)
            .order_by(UserGroupModel.user_group_id)
        )
        return list(result.scalars().all())


class SubmissionRepository:
    """Repository for submission lookups."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_by_id(self, submission_id: int) -> SubmissionModel | None:
        """Get submission by ID."""
        result = await self.session.execute(
            select(SubmissionModel).where(SubmissionModel.submission_id == submission_id)
        )
        return result.scalar_one_or_none()


class ContextRepository:
    """Repository for context lookups."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_by_id(self, context_id: int) -> ContextModel | None:
        """Get context by ID."""
        result = await self.session.execute(
            select(ContextModel).where(ContextModel.context_id == context_id)
        )
        return result.scalar_one_or_none()
