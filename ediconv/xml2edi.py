"""Conversion of EDI XML back into an EDIFACT interchange, driven by a schema."""

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


def _children(node: etree._Element | None, tag: str | None = None):
    """Element children of ``node``, optionally only those named ``tag``."""
    if node is None:
        return []
    return [
        child
        for child in node
        if isinstance(child.tag, str) and (tag is None or child.tag == tag)
    ]


def _child(node: etree._Element | None, tag: str) -> etree._Element | None:
    found = _children(node, tag)
    return found[0] if found else None


def _text(node: etree._Element | None) -> str:
    if node is None:
        return ""
    return node.text or ""


class Xml2EdiProcessor:
    """Walks a schema and an EDI XML document together, building EDI segments."""

    def __init__(self) -> None:
        self._edi: EdiFile | None = None

    def process(self, edi_xml: etree._ElementTree | etree._Element, schema: SchemaFile) -> EdiFile:
        """Return a new EdiFile holding the segments described by ``edi_xml``."""
        self._edi = EdiFile()
        schema_root = schema.root_node()
        xml_root = edi_xml.getroot() if isinstance(edi_xml, etree._ElementTree) else edi_xml
        if schema_root is not None and xml_root is not None:
            self._process_segments_and_groups(schema_root, xml_root)
        return self._edi

    def _process_segments_and_groups(self, schema_node: etree._Element, xml_node: etree._Element) -> None:
        for item in _children(schema_node):
            if item.tag == SEGMENT_TAG:
                self._process_segment(item, xml_node)
            elif item.tag == SEGMENT_GROUP_TAG:
                self._process_groups(item, xml_node)

    def _process_segment(self, schema_node: etree._Element, xml_node: etree._Element) -> None:
        name = schema_node.get("name", "")
        occurrences = _children(xml_node, name)
        if not occurrences:
            log.debug("skipped segment %r, not found in EDI XML", name)
        for xml_segment in occurrences:
            log.debug("processing segment %r", xml_segment.tag)
            self._process_data_elements(schema_node, xml_segment, name)

    def _process_data_elements(
        self, schema_node: etree._Element, xml_segment: etree._Element, name: str
    ) -> None:
        segment = self._edi.new_segment(name)
        for schema_element in _children(schema_node, ELEMENT_TAG):
            composite = _child(schema_element, COMPOSITE_TAG)
            if composite is not None:
                _add_composite(composite, xml_segment, segment)
            else:
                element_name = replace_whitespaces(schema_element.get("name", ""))
                segment.new_element(_text(_child(xml_segment, element_name)))

    def _process_groups(self, group_node: etree._Element, xml_node: etree._Element) -> None:
        name = group_node.get("name", "")
        occurrences = _children(xml_node, name)
        for xml_group in occurrences:
            log.debug("entering segment group %r", name)
            self._process_segments_and_groups(group_node, xml_group)
            log.debug("leaving segment group %r", name)
        log.debug("processed %d segment groups %r", len(occurrences), name)


def _add_composite(composite: etree._Element, xml_segment: etree._Element, segment: Segment) -> None:
    xml_composite = _child(xml_segment, replace_whitespaces(composite.get("name", "")))
    element = segment.new_element()
    for component in _children(composite, COMPONENT_TAG):
        component_name = replace_whitespaces(component.get("name", ""))
        element.add_component(_text(_child(xml_composite, component_name)))