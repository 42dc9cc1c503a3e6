import pytest
from lxml import etree

from ediconv.edi2xml import Edi2XmlProcessor
from ediconv.edifile import EdiFile
from ediconv.schemafile import SchemaFile
from ediconv.xml2edi import Xml2EdiProcessor

SCHEMA = """<EdifactMessage type="PRICAT" version="D96A">
  <Segment name="UNH" required="true" maxOccurs="1">
    <Element name="Message Reference Number"/>
    <Element name="Message Identifier">
      <Composite name="S009 - Message Identifier">
        <Component name="Message Type" isQualifier="true"/>
        <Component name="Version"/>
        <Component name="Release"/>
        <Component name="Controlling Agency"/>
      </Composite>
    </Element>
  </Segment>
  <Segment name="BGM" required="true" maxOccurs="1">
    <Element name="Document Name Code" isQualifier="true"/>
    <Element name="Document Number"/>
  </Segment>
  <SegmentGroup name="SG22_ProductLineItem" start="LIN">
    <Segment name="LIN" required="true" maxOccurs="1">
      <Element name="Line Item Number"/>
    </Segment>
    <Segment name="PIA" required="false" maxOccurs="5">
      <Element name="Product ID Function Code"/>
    </Segment>
  </SegmentGroup>
  <Segment name="UNT" required="true" maxOccurs="1">
    <Element name="Segment Count"/>
    <Element name="Message Reference Number"/>
  </Segment>
</EdifactMessage>"""

EDI_XML = """<PRICAT>
  <UNH>
    <Message_Reference_Number>1</Message_Reference_Number>
    <S009_-_Message_Identifier Message_Type="PRICAT">
      <Message_Type>PRICAT</Message_Type>
      <Version>D</Version>
      <Release>96A</Release>
      <Controlling_Agency>UN</Controlling_Agency>
    </S009_-_Message_Identifier>
  </UNH>
  <BGM Document_Name_Code="9">
    <Document_Name_Code>9</Document_Name_Code>
    <Document_Number>DOC1</Document_Number>
  </BGM>
  <SG22_ProductLineItem>
    <LIN><Line_Item_Number>1</Line_Item_Number></LIN>
    <PIA><Product_ID_Function_Code>5</Product_ID_Function_Code></PIA>
  </SG22_ProductLineItem>
  <SG22_ProductLineItem>
    <LIN><Line_Item_Number>2</Line_Item_Number></LIN>
    <PIA><Product_ID_Function_Code>1</Product_ID_Function_Code></PIA>
  </SG22_ProductLineItem>
  <UNT>
    <Segment_Count>8</Segment_Count>
    <Message_Reference_Number>1</Message_Reference_Number>
  </UNT>
</PRICAT>"""

EXPECTED_EDI = "UNH+1+PRICAT:D:96A:UN'BGM+9+DOC1'LIN+1'PIA+5'LIN+2'PIA+1'UNT+8+1'"


@pytest.fixture
def schema():
    s = SchemaFile()
    s.load_from_string(SCHEMA)
    return s


def test_processing_matches_nominal_edi(tmp_path, schema):
    xml_path = tmp_path / "message.xml"
    xml_path.write_text(EDI_XML, encoding="utf-8")
    edi_path = tmp_path / "message.edi"
    edi_path.write_text(EXPECTED_EDI + "\n", encoding="utf-8")

    result = Xml2EdiProcessor().process(etree.parse(str(xml_path)), schema)
    nominal = EdiFile()
    nominal.load_from_file(edi_path)
    assert result.as_string() == nominal.as_string()


def test_accepts_root_element(schema):
    result = Xml2EdiProcessor().process(etree.fromstring(EDI_XML), schema)
    assert result.as_string() == EXPECTED_EDI
    assert [s.name for s in result.segments] == ["UNH", "BGM", "LIN", "PIA", "LIN", "PIA", "UNT"]


def test_segment_absent_from_xml_is_skipped(schema):
    xml = "<PRICAT><BGM><Document_Name_Code>9</Document_Name_Code></BGM></PRICAT>"
    result = Xml2EdiProcessor().process(etree.fromstring(xml), schema)
    assert result.as_string() == "BGM+9+'"


def test_missing_composite_gives_empty_components(schema):
    xml = "<PRICAT><UNH><Message_Reference_Number>7</Message_Reference_Number></UNH></PRICAT>"
    result = Xml2EdiProcessor().process(etree.fromstring(xml), schema)
    assert result.as_string() == "UNH+7+:::'"


def test_schema_without_message_root_yields_nothing():
    other = SchemaFile()
    other.load_from_string("<Other/>")
    result = Xml2EdiProcessor().process(etree.fromstring(EDI_XML), other)
    assert result.segments == []


def test_round_trip_through_xml(tmp_path, schema):
    edi_path = tmp_path / "message.edi"
    edi_path.write_text(EXPECTED_EDI, encoding="utf-8")
    source = EdiFile()
    source.load_from_file(edi_path)
    xml = Edi2XmlProcessor().process(source, schema)
    result = Xml2EdiProcessor().process(xml, schema)
    assert result.as_string() == EXPECTED_EDI