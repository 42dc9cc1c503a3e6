"""Meta-file model built from EDI XML documents."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from lxml import etree


@dataclass
class MetaFileLine:
    """One line of a meta file."""


class MetaFile:
    """An EDI XML document together with the meta-file lines derived from it."""

    def __init__(self) -> None:
        self._document: etree._ElementTree | None = None
        self._loaded = False
        self._lines: list[MetaFileLine] = []

    def load_from_xml_file(self, file_name: str | PathLike) -> None:
        """Parse an XML file; raises OSError or XMLSyntaxError on failure."""
        self._loaded = False
        self._document = etree.parse(str(file_name))
        self._loaded = True

    def xml_file_loaded(self) -> bool:
        return self._loaded

    def metafile_lines(self) -> list[MetaFileLine]:
        return self._lines


class Xml2MetaProcessor:
    """Holds the EDI XML document that meta lines are produced from."""

    def __init__(self) -> None:
        self.xml_document: etree._ElementTree | None = None

    def process(self, edi_xml: etree._ElementTree) -> None:
        self.xml_document = edi_xml