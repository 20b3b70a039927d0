"""Native XML author import: one <author> element to one persisted author."""

from typing import Callable
from xml.etree import ElementTree

from services.native_import.app.core.deployment import ImportDeployment
from services.native_import.app.core.locale import LocaleCatalog
from services.native_import.app.core.schemas import AssocType, ImportIssueKind
from services.native_import.app.db.models import AuthorModel
from services.native_import.app.db.repository import AuthorRepository, UserGroupRepository
from services.native_import.app.filters.base import (
    NativeImportFilter,
    child_elements,
    element_text,
    local_name,
)
from shared.utils.logging import get_logger

logger = get_logger(__name__)

# Sets a field on the author from (text, locale)
FieldSetter = Callable[[AuthorModel, str, str], None]


def _localized(field: str) -> FieldSetter:
    def setter(author: AuthorModel, text: str, locale: str) -> None:
        getattr(author, field)[locale] = text

    return setter


def _scalar(field: str) -> FieldSetter:
    def setter(author: AuthorModel, text: str, locale: str) -> None:
        setattr(author, field, text)

    return setter


LOCALIZED_ELEMENTS = {
    "givenname": "given_name",
    "familyname": "family_name",
    "affiliation": "affiliation",
    "biography": "biography",
}
SCALAR_ELEMENTS = {
    "country": "country",
    "email": "email",
    "url": "url",
    "orcid": "orcid",
}

ELEMENT_SETTERS: dict[str, FieldSetter] = {
    **{tag: _localized(field) for tag, field in LOCALIZED_ELEMENTS.items()},
    **{tag: _scalar(field) for tag, field in SCALAR_ELEMENTS.items()},
}


def attribute_flag(element: ElementTree.Element, name: str) -> bool:
    """True when the attribute is present and non-empty.

    Any non-empty value counts, including "0" and "false".
    """
    return bool(element.get(name))


class AuthorElementMapper(NativeImportFilter):
    """Convert native XML <author> elements into persisted authors."""

    display_name = "Native XML author import"
    plural_element_name = "authors"
    singular_element_name = "author"

    def __init__(
        self,
        deployment: ImportDeployment,
        author_repository: AuthorRepository,
        user_group_repository: UserGroupRepository,
        locales: LocaleCatalog,
    ):
        """Initialize mapper.

        Args:
            deployment: Import session carrying context, submission and error sink
            author_repository: Author persistence
            user_group_repository: User group lookup
            locales: Message catalog and locale names
        """
        super().__init__(deployment)
        self.authors = author_repository
        self.user_groups = user_group_repository
        self.locales = locales

    async def handle_element(self, element: ElementTree.Element, position: int = 0) -> AuthorModel:
        """Map one author element onto a new author and insert it.

        Unresolved user groups and missing given names are recorded on the
        deployment; neither stops the author from being inserted.

        Args:
            element: The <author> element
            position: Zero-based position among the imported authors

        Returns:
            The inserted author
        """
        submission = self.deployment.submission

        author = self.authors.new_data_object()
        author.publication_id = submission.current_publication_id
        author.seq = position
        if attribute_flag(element, "primary_contact"):
            author.primary_contact = True
        if attribute_flag(element, "include_in_browse"):
            author.include_in_browse = True

        user_group_name = element.get("user_group_ref", "")
        author.user_group_id = await self._resolve_user_group(user_group_name)
        if author.user_group_id is None:
            self.deployment.add_error(
                AssocType.SUBMISSION,
                submission.submission_id,
                self.locales.translate(
                    "importexport.error.unknownUserGroup",
                    {"param": user_group_name},
                ),
                kind=ImportIssueKind.UNKNOWN_USER_GROUP,
            )

        for child in child_elements(element):
            setter = ELEMENT_SETTERS.get(local_name(child))
            if setter is None:
                continue
            locale = child.get("locale") or submission.locale
            setter(author, element_text(child), locale)

        if not author.given_name.get(submission.locale):
            self.deployment.add_error(
                AssocType.SUBMISSION,
                submission.submission_id,
                self.locales.translate(
                    "importexport.error.missingGivenName",
                    {
                        "authorName": author.get_localized_given_name(
                            self.locales.current_locale, submission.locale
                        ),
                        "localeName": self.locales.all_locales().get(
                            submission.locale, submission.locale
                        ),
                    },
                ),
                kind=ImportIssueKind.MISSING_GIVEN_NAME,
            )

        await self.authors.insert_object(author)

        logger.info(
            "author_imported",
            author_id=author.author_id,
            submission_id=submission.submission_id,
            publication_id=author.publication_id,
            family_name=author.get_localized_family_name(submission.locale),
            user_group_id=author.user_group_id,
        )
        return author

    async def _resolve_user_group(self, name: str) -> int | None:
        """ID of the first context user group with ``name`` in any locale."""
        for user_group in await self.user_groups.get_by_context_id(
            self.deployment.context.context_id
        ):
            if name in user_group.get_name(None):
                return user_group.user_group_id

        logger.debug(
            "user_group_unresolved",
            user_group_ref=name,
            context_id=self.deployment.context.context_id,
        )
        return None
