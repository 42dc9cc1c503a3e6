"""Convert EDIFACT messages to XML and back, guided by an XML message schema."""

__version__ = "0.1.0"

__all__ = ["common", "edifile", "schemafile", "meta", "edi2xml", "xml2edi"]