"""Access to an EDIFACT message schema stored as XML."""

from __future__ import annotations

from os import PathLike

from lxml import etree

from .common import replace_whitespaces

PATH_SEPARATOR = "/"
SCHEMA_ROOT_TAG = "EdifactMessage"
COMPOSITE_TAG = "Composite"


class SchemaFile:
    """A loaded message schema with an ``EdifactMessage`` root element."""

    def __init__(self) -> None:
        self._tree: etree._ElementTree | None = None
        self.file_loaded = False

    def load_from_file(self, file_name: str | PathLike) -> None:
        """Parse a schema file; raises OSError or XMLSyntaxError on failure."""
        self.file_loaded = False
        self._tree = etree.parse(str(file_name))
        self.file_loaded = True

    def load_from_string(self, text: str | bytes) -> None:
        """Parse a schema from text; raises XMLSyntaxError on failure."""
        self.file_loaded = False
        data = text.encode("utf-8") if isinstance(text, str) else text
        self._tree = etree.ElementTree(etree.fromstring(data))
        self.file_loaded = True

    def root_node(self) -> etree._Element | None:
        """The ``EdifactMessage`` root element, or None if there is none."""
        if self._tree is None:
            return None
        root = self._tree.getroot()
        return root if root.tag == SCHEMA_ROOT_TAG else None

    def _root_attribute(self, attribute_name: str) -> str | None:
        if not self.file_loaded:
            return None
        root = self.root_node()
        if root is None:
            return None
        return root.get(attribute_name)

    def message_type(self) -> str | None:
        return self._root_attribute("type")

    def message_version(self) -> str | None:
        return self._root_attribute("version")

    def get_edi_path(self, xpath: str) -> str:
        """Map an XPath into the schema to its path in EDI XML; "" if nothing matches."""
        if self._tree is None:
            return ""
        node = next(
            (
                item
                for item in self._tree.xpath(xpath)
                if isinstance(item, etree._Element) and isinstance(item.tag, str)
            ),
            None,
        )
        if node is None:
            return ""
        path = PATH_SEPARATOR + node.get("name", "")
        while True:
            parent = node.getparent()
            if parent is None or parent.tag == SCHEMA_ROOT_TAG:
                path = PATH_SEPARATOR + (self.message_type() or "") + path
                return replace_whitespaces(path)
            if node.tag != COMPOSITE_TAG:
                path = PATH_SEPARATOR + parent.get("name", "") + path
            node = parent