"""Conversion of a parsed EDIFACT interchange into EDI XML, driven by a schema."""

from __future__ import annotations

import logging

from lxml import etree

from .common import replace_whitespaces
from .edifile import EdiFile, Segment
from .schemafile import SchemaFile

log = logging.getLogger(__name__)

SEGMENT_TAG = "Segment"
SEGMENT_GROUP_TAG = "SegmentGroup"
ELEMENT_TAG = "Element"
COMPOSITE_TAG = "Composite"
COMPONENT_TAG = "Component"


class MissingSegmentError(LookupError):
    """A segment the schema marks as required does not occur in the EDI data."""


def _child_elements(node: etree._Element):
    """Yield the element children of ``node``, skipping comments and instructions."""
    return (child for child in node if isinstance(child.tag, str))


class Edi2XmlProcessor:
    """Walks a schema and the segments of an EDI file together, building EDI XML."""

    def __init__(self) -> None:
        self._edi: EdiFile | None = None
        self._schema: SchemaFile | None = None

    def process(self, edi: EdiFile, schema: SchemaFile) -> etree._ElementTree:
        """Convert ``edi`` to an XML document shaped by ``schema``.

        Reading starts at the EDI file's current cursor position. Raises
        MissingSegmentError when a required segment cannot be found.
        """
        self._edi = edi
        self._schema = schema
        message_root = schema.root_node()
        if message_root is None:
            return etree.ElementTree()
        xml_root = etree.Element(message_root.get("type", ""))
        self._process_children(message_root, xml_root)
        return etree.ElementTree(xml_root)

    def _process_children(self, schema_parent: etree._Element, xml_parent: etree._Element) -> None:
        for schema_node in _child_elements(schema_parent):
            name = schema_node.get("name", "")
            if schema_node.tag == SEGMENT_TAG:
                target = _append_node(xml_parent, name)
                self._process_data_segment(schema_node, target)
            elif schema_node.tag == SEGMENT_GROUP_TAG:
                self._process_group_repetitions(schema_node, xml_parent, name)

    def _process_group_repetitions(
        self, group_node: etree._Element, xml_parent: etree._Element, name: str
    ) -> None:
        start = group_node.get("start", "")
        while self._current_matches(start):
            target = _append_node(xml_parent, name)
            log.debug("entering segment group %s starting with %s", name, start)
            self._process_children(group_node, target)
            log.debug("leaving segment group %s starting with %s", name, start)

    def _process_data_segment(self, segment_node: etree._Element, xml_parent: etree._Element) -> None:
        name = segment_node.get("name", "")
        required = segment_node.get("required", "") == "true"
        max_occurs = _as_int(segment_node.get("maxOccurs"))
        log.debug("processing schema segment %s", name)
        if required:
            self._skip_to_segment(name)
        occurrences = 0
        while self._current_matches(name) and occurrences < max_occurs:
            self._process_elements(segment_node, xml_parent)
            self._edi.goto_next_segment()
            occurrences += 1

    def _skip_to_segment(self, name: str) -> None:
        while not self._current_matches(name):
            current = self._edi.current_segment()
            if current is None:
                raise MissingSegmentError(f"required segment {name!r} not found")
            log.debug("skipping edi segment %s", current.name or "")
            self._edi.goto_next_segment()

    def _current_matches(self, name: str) -> bool:
        current = self._edi.current_segment()
        return current is not None and current.name == name

    def _current(self) -> Segment:
        current = self._edi.current_segment()
        if current is None:
            raise MissingSegmentError("no EDI segment left to read")
        return current

    def _process_elements(self, segment_node: etree._Element, xml_parent: etree._Element) -> None:
        for element_index, element_node in enumerate(_child_elements(segment_node), start=1):
            if element_node.tag != ELEMENT_TAG:
                continue
            composite = element_node.find(COMPOSITE_TAG)
            if composite is not None:
                self._process_composite(composite, element_index, xml_parent)
                continue
            name = element_node.get("name", "")
            value = self._current().get_element_value(element_index)
            _append_text_node(xml_parent, name, value)
            _add_qualifier(element_node, xml_parent, name, value)

    def _process_composite(
        self, composite: etree._Element, element_index: int, xml_parent: etree._Element
    ) -> None:
        target = _append_node(xml_parent, composite.get("name", ""))
        for component_index, component_node in enumerate(_child_elements(composite)):
            if component_node.tag != COMPONENT_TAG:
                continue
            name = component_node.get("name", "")
            value = self._current().get_element_value(element_index, component_index)
            _append_text_node(target, name, value)
            _add_qualifier(component_node, target, name, value)


def _as_int(text: str | None) -> int:
    if text is None:
        return 0
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _append_node(parent: etree._Element, name: str) -> etree._Element:
    return etree.SubElement(parent, replace_whitespaces(name))


def _append_text_node(parent: etree._Element, name: str, value: str) -> etree._Element:
    node = _append_node(parent, name)
    node.text = value
    return node


def _add_qualifier(schema_node: etree._Element, xml_parent: etree._Element, name: str, value: str) -> None:
    if schema_node.get("isQualifier", "") == "true":
        xml_parent.set(replace_whitespaces(name), value)