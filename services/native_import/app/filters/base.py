"""Base class for filters that import native XML documents."""

from abc import ABC, abstractmethod
from typing import Any
from xml.etree import ElementTree

from services.native_import.app.core.deployment import ImportDeployment
from services.native_import.app.core.errors import UnexpectedRootElementError, XmlParseError
from shared.utils.logging import get_logger

logger = get_logger(__name__)


def local_name(element: ElementTree.Element) -> str:
    """Tag name without its ``{namespace}`` prefix."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def child_elements(element: ElementTree.Element):
    """Yield element children in document order, skipping comments and PIs."""
    for child in element:
        if isinstance(child.tag, str):
            yield child


def element_text(element: ElementTree.Element) -> str:
    """Concatenated text of the element and all of its descendants."""
    return "".join(element.itertext())


class NativeImportFilter(ABC):
    """Import a document holding one object or a wrapper of several.

    Subclasses name the wrapper (plural) and object (singular) elements and
    implement ``handle_element`` for a single object.
    """

    display_name: str = "Native XML import"
    plural_element_name: str = ""
    singular_element_name: str = ""

    def __init__(self, deployment: ImportDeployment):
        """Initialize filter.

        Args:
            deployment: Import session shared by all filters of one import
        """
        self.deployment = deployment

    def parse(self, document: str | bytes | ElementTree.Element) -> ElementTree.Element:
        """Return the root element of a document.

        Raises:
            XmlParseError: If the document is not well-formed
        """
        if isinstance(document, ElementTree.Element):
            return document
        try:
            return ElementTree.fromstring(document)
        except ElementTree.ParseError as e:
            logger.error("native_xml_parse_error", filter=self.display_name, error=str(e))
            raise XmlParseError(str(e)) from e

    async def execute(self, document: str | bytes | ElementTree.Element) -> list[Any]:
        """Import every object element in the document, in document order.

        Args:
            document: XML text or an already parsed element

        Returns:
            Objects produced by ``handle_element``

        Raises:
            XmlParseError: If the document is not well-formed
            UnexpectedRootElementError: If the root is neither wrapper nor object
        """
        root = self.parse(document)
        root_name = local_name(root)

        if root_name == self.plural_element_name:
            elements = [
                child
                for child in child_elements(root)
                if local_name(child) == self.singular_element_name
            ]
        elif root_name == self.singular_element_name:
            elements = [root]
        else:
            raise UnexpectedRootElementError(
                root_name,
                (self.plural_element_name, self.singular_element_name),
            )

        logger.info(
            "native_import_started",
            filter=self.display_name,
            root=root_name,
            element_count=len(elements),
        )

        results = []
        for position, element in enumerate(elements):
            results.append(await self.handle_element(element, position))

        logger.info(
            "native_import_completed",
            filter=self.display_name,
            imported=len(results),
            error_count=len(self.deployment.get_errors()),
        )
        return results

    @abstractmethod
    async def handle_element(self, element: ElementTree.Element, position: int = 0) -> Any:
        """Import a single object element.

        Args:
            element: The singular element
            position: Zero-based position of the element within the document

        Returns:
            The imported object
        """
        pass
