# ediconv

Convert EDIFACT messages to XML and back. An XML schema describes the message,
and it drives the conversion in both directions.

## Installation

```
pip install .
```

## The EDIFACT model

`ediconv.edifile` reads and writes EDIFACT text. Segments end with `'`,
elements within a segment are separated by `+`, and components within an
element are separated by `:`.

```python
from ediconv.edifile import EdiFile

edi = EdiFile()
unh = edi.new_segment("UNH")
unh.new_element("1")
identifier = unh.new_element("PRICAT")
identifier.add_component("D")
identifier.add_component("96A")
identifier.add_component("UN")
unt = edi.new_segment("UNT")
unt.new_element("23").add_component("5")

print(edi.as_string())   # UNH+1+PRICAT:D:96A:UN'UNT+23:5'
```

`EdiFile.load_from_file(path)` reads a file and appends its segments.
Whitespace around each segment is stripped and empty segments are dropped.
If the file cannot be read, it raises `OSError`. After a successful load,
`file_loaded` is `True`.

You can walk the segments with `current_segment()` and `goto_next_segment()`.
`current_segment()` returns `None` once the cursor is past the end. To pick out
a single segment, use `get_segment(index)`, which also returns `None` when the
index is out of range.

A `Segment` has these members:

- `name`: its first element. You can read and set it.
- `elements`: a list of `Element` objects.
- `get_element_value(element_index, component_index=None)`: returns the raw
  element text, or one of its components. When an index is out of range it
  returns `""`.

An `Element` keeps its `raw` text and its list of `Component` values.

## Schemas

`ediconv.schemafile.SchemaFile` loads a message schema. The root element of the
schema is `EdifactMessage`, and it carries `type` and `version` attributes.
Inside it are `Segment` and `SegmentGroup` nodes, which hold `Element`,
`Composite` and `Component` nodes.

```python
from ediconv.schemafile import SchemaFile

schema = SchemaFile()
schema.load_from_file("pricatSchema.xml")   # or schema.load_from_string(text)
schema.message_type()      # e.g. "PRICAT"
schema.message_version()   # e.g. "D96A"
schema.get_edi_path(
    "/EdifactMessage/Segment[@name='UNH']/Element[@name='Message Reference Number']"
)                          # "/PRICAT/UNH/Message_Reference_Number"
```

`get_edi_path` maps a node in the schema to the path of the matching node in
EDI XML. A `Composite` level adds its own name to the path but not the name of
the element that holds it. If nothing matches, `get_edi_path` returns `""`.

## Converting

EDIFACT to XML:

```python
from lxml import etree
from ediconv.edi2xml import Edi2XmlProcessor

xml_tree = Edi2XmlProcessor().process(edi, schema)
print(etree.tostring(xml_tree, pretty_print=True).decode())
```

Reading starts at the EDI file's current cursor, and the cursor moves forward
as segments are consumed. When a segment is marked `required="true"`, the
processor skips EDI segments until it finds that segment. If it runs out of
segments first, it raises `ediconv.edi2xml.MissingSegmentError`. A segment is
repeated at most `maxOccurs` times. A `SegmentGroup` is repeated for as long as
the current segment matches its `start` attribute.

XML back to EDIFACT:

```python
from ediconv.xml2edi import Xml2EdiProcessor

edi = Xml2EdiProcessor().process(xml_tree, schema)
print(edi.as_string())
```

`process` accepts either an lxml element tree or its root element. It returns a
new `EdiFile`.

In the XML, element and attribute names are the schema names with spaces
replaced by underscores (`ediconv.common.replace_whitespaces`). Elements that
the schema marks with `isQualifier="true"` are also written as attributes on
their parent node.

## What the package does not do

- There is no command-line program. Use the classes from Python.
- `ediconv.meta.MetaFile` can load an XML file (`load_from_xml_file`,
  `xml_file_loaded`). However, it does not derive any meta-file lines:
  `metafile_lines()` always returns an empty list.
- `ediconv.meta.Xml2MetaProcessor.process` only stores the document it is given.
- The separators `'`, `+` and `:` are fixed. A `UNA` service string advice in
  the data is not interpreted.

## Running the tests

```
pip install .[test]
pytest
```