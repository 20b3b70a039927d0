"""Pytest fixtures for native XML import tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from services.native_import.app.config import Settings
from services.native_import.app.core.deployment import ImportDeployment
from services.native_import.app.core.locale import LocaleCatalog
from services.native_import.app.db.models import (
    Base,
    ContextModel,
    PublicationModel,
    SubmissionModel,
    UserGroupModel,
)
from services.native_import.app.db.repository import AuthorRepository, UserGroupRepository
from services.native_import.app.filters.author import AuthorElementMapper

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_engine():
    """Create in-memory SQLite database engine for testing."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing."""
    session_factory = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return Settings(
        environment="test",
        database_url=TEST_DATABASE_URL,
        log_level="WARNING",
        log_json=False,
        default_locale="en_US",
        locale_names={"en_US": "English", "fr_CA": "Français (Canada)"},
    )


@pytest.fixture
def locale_catalog(test_settings) -> LocaleCatalog:
    """Locale catalog built from test settings."""
    return LocaleCatalog.from_settings(test_settings)


async def create_submission(
    session: AsyncSession,
    context: ContextModel,
    locale: str = "en_US",
) -> SubmissionModel:
    """Insert a submission with one current publication."""
    submission = SubmissionModel(context_id=context.context_id, locale=locale)
    session.add(submission)
    await session.flush()

    publication = PublicationModel(submission_id=submission.submission_id)
    session.add(publication)
    await session.flush()

    submission.current_publication_id = publication.publication_id
    await session.flush()
    return submission


async def create_user_group(
    session: AsyncSession,
    context: ContextModel,
    names: dict[str, str],
) -> UserGroupModel:
    """Insert a user group with localized names."""
    user_group = UserGroupModel(context_id=context.context_id, names=names)
    session.add(user_group)
    await session.flush()
    return user_group


@pytest.fixture
def make_submission(db_session):
    """Factory for submissions with a current publication."""

    async def factory(context: ContextModel, locale: str = "en_US") -> SubmissionModel:
        return await create_submission(db_session, context, locale=locale)

    return factory


@pytest.fixture
def make_user_group(db_session):
    """Factory for localized user groups."""

    async def factory(context: ContextModel, names: dict[str, str]) -> UserGroupModel:
        return await create_user_group(db_session, context, names)

    return factory


@pytest_asyncio.fixture
async def context(db_session) -> ContextModel:
    """A journal context."""
    context = ContextModel(path="jsp", primary_locale="en_US")
    db_session.add(context)
    await db_session.flush()
    return context


@pytest_asyncio.fixture
async def other_context(db_session) -> ContextModel:
    """A second, unrelated journal context."""
    context = ContextModel(path="other", primary_locale="en_US")
    db_session.add(context)
    await db_session.flush()
    return context


@pytest_asyncio.fixture
async def submission(db_session, context) -> SubmissionModel:
    """An English submission in the journal context."""
    return await create_submission(db_session, context)


@pytest_asyncio.fixture
async def user_groups(db_session, context) -> dict[str, UserGroupModel]:
    """Author and Translator groups of the journal context."""
    return {
        "author": await create_user_group(
            db_session, context, {"en_US": "Author", "fr_CA": "Auteur"}
        ),
        "translator": await create_user_group(
            db_session, context, {"en_US": "Translator", "fr_CA": "Traducteur"}
        ),
    }


@pytest.fixture
def deployment(context, submission) -> ImportDeployment:
    """Import deployment for the journal submission."""
    return ImportDeployment(context, submission, import_id="test-import")


@pytest.fixture
def mapper(db_session, deployment, locale_catalog) -> AuthorElementMapper:
    """Author mapper wired to the test database."""
    return AuthorElementMapper(
        deployment,
        AuthorRepository(db_session),
        UserGroupRepository(db_session),
        locale_catalog,
    )
