"""Tests for document-level dispatch in the native import filter."""

from xml.etree import ElementTree

import pytest

from services.native_import.app.core.errors import UnexpectedRootElementError, XmlParseError
from services.native_import.app.core.schemas import ImportIssueKind
from services.native_import.app.db.repository import AuthorRepository
from services.native_import.app.filters.base import child_elements, element_text, local_name

AUTHORS_DOCUMENT = """<?xml version="1.0" encoding="utf-8"?>
<authors xmlns="http://pkp.sfu.ca">
  <author primary_contact="true" user_group_ref="Author">
    <givenname>Jane</givenname>
    <familyname>Doe</familyname>
  </author>
  <!-- second author -->
  <author user_group_ref="Translator">
    <givenname>Ana</givenname>
    <familyname>Silva</familyname>
  </author>
  <note>not an author</note>
  <author user_group_ref="Author">
    <givenname>Bo</givenname>
    <familyname>Chen</familyname>
  </author>
</authors>
"""


class TestExecute:
    """Tests for NativeImportFilter.execute."""

    @pytest.mark.asyncio
    async def test_plural_document_imports_each_author_in_order(
        self, db_session, mapper, user_groups, submission, deployment
    ):
        """Test that every <author> under <authors> is imported in document order."""
        authors = await mapper.execute(AUTHORS_DOCUMENT)

        assert [a.given_name["en_US"] for a in authors] == ["Jane", "Ana", "Bo"]
        assert [a.seq for a in authors] == [0, 1, 2]
        assert authors[0].primary_contact is True
        assert authors[1].user_group_id == user_groups["translator"].user_group_id
        assert deployment.get_errors() == []

        stored = await AuthorRepository(db_session).get_by_publication_id(
            submission.current_publication_id
        )
        assert [a.family_name["en_US"] for a in stored] == ["Doe", "Silva", "Chen"]

    @pytest.mark.asyncio
    async def test_singular_document(self, mapper, user_groups):
        """Test that a bare <author> root is imported."""
        authors = await mapper.execute(
            b'<author user_group_ref="Author"><givenname>Jane</givenname></author>'
        )

        assert len(authors) == 1
        assert authors[0].given_name == {"en_US": "Jane"}

    @pytest.mark.asyncio
    async def test_accepts_parsed_element(self, mapper, user_groups):
        """Test that an already parsed element is used as-is."""
        root = ElementTree.fromstring(
            '<authors><author user_group_ref="Author"><givenname>Jane</givenname></author></authors>'
        )

        authors = await mapper.execute(root)

        assert len(authors) == 1

    @pytest.mark.asyncio
    async def test_empty_wrapper(self, mapper):
        """Test that an empty <authors> imports nothing."""
        assert await mapper.execute("<authors/>") == []

    @pytest.mark.asyncio
    async def test_errors_accumulate_across_authors(self, mapper, user_groups, deployment):
        """Test that diagnostics from several authors share the deployment."""
        await mapper.execute(
            "<authors>"
            '<author user_group_ref="Nobody"><givenname>A</givenname></author>'
            '<author user_group_ref="Author"/>'
            "</authors>"
        )

        kinds = [issue.kind for issue in deployment.get_errors()]
        assert kinds == [ImportIssueKind.UNKNOWN_USER_GROUP, ImportIssueKind.MISSING_GIVEN_NAME]

    @pytest.mark.asyncio
    async def test_unexpected_root_raises(self, mapper):
        """Test that a foreign root element is rejected."""
        with pytest.raises(UnexpectedRootElementError) as exc_info:
            await mapper.execute("<article><author/></article>")

        assert exc_info.value.tag == "article"
        assert exc_info.value.expected == ("authors", "author")

    @pytest.mark.asyncio
    async def test_malformed_xml_raises(self, mapper):
        """Test that malformed XML raises XmlParseError."""
        with pytest.raises(XmlParseError):
            await mapper.execute("<authors><author></authors>")


class TestElementHelpers:
    """Tests for element helper functions."""

    def test_local_name_strips_namespace(self):
        """Test that the namespace prefix is removed."""
        element = ElementTree.fromstring('<author xmlns="http://pkp.sfu.ca"/>')

        assert local_name(element) == "author"

    def test_child_elements_skips_comments(self):
        """Test that comments are not yielded as children."""
        parser = ElementTree.XMLParser(target=ElementTree.TreeBuilder(insert_comments=True))
        root = ElementTree.fromstring("<a><!-- c --><b/><c/></a>", parser=parser)

        assert [child.tag for child in child_elements(root)] == ["b", "c"]

    def test_element_text_concatenates_descendants(self):
        """Test that text of nested elements is included."""
        element = ElementTree.fromstring("<bio>Hello <i>brave</i> world</bio>")

        assert element_text(element) == "Hello brave world"
