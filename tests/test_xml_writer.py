import xml.etree.ElementTree as ET

from fmt_extractor import AudioFormat, FmtData
from xml_writer import build_xml, write_xml

XS = "{http://www.w3.org/2001/XMLSchema}"

DATA = FmtData(
    audio_format=AudioFormat.PCM,
    channel_count=2,
    sampling_rate=44_100,
    byte_rate=176_400,
    bit_depth=16,
    bit_rate=1_411_200,
)


def test_document_layout():
    lines = build_xml(DATA).splitlines()
    assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
    assert lines[1] == '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
    assert lines[2] == '  <track>'
    assert lines[7].strip().startswith(
        '<element name="byte_rate" type="xs:positiveInteger" minOccurs="0" content="176400"')
    assert lines[-2] == '  </track>'
    assert lines[-1] == '</xs:schema>'


def test_elements_in_order():
    root = ET.fromstring(build_xml(DATA).split("\n", 1)[1])
    assert root.tag == XS + "schema"
    elements = root.find("track").findall("element")
    assert [(e.get("name"), e.get("type"), e.get("content")) for e in elements] == [
        ("format", "xs:string", "PCM"),
        ("channel_count", "xs:positiveInteger", "2"),
        ("sampling_rate", "xs:positiveInteger", "44100"),
        ("bit_depth", "xs:positiveInteger", "16"),
        ("byte_rate", "xs:positiveInteger", "176400"),
        ("bit_rate", "xs:positiveInteger", "1411200"),
    ]
    assert elements[4].get("minOccurs") == "0"
    assert all(e.get("minOccurs") is None for i, e in enumerate(elements) if i != 4)


def test_compressed_format_label():
    data = FmtData(AudioFormat.COMPRESSED, 1, 8000, 8000, 8, 64_000)
    assert 'content="Compressed"' in build_xml(data)


def test_write_xml_replaces_atomically(tmp_path):
    target = tmp_path / "tone.xml"
    target.write_text("stale")
    assert write_xml(DATA, target) == target
    assert ET.parse(target).getroot().tag == XS + "schema"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tone.xml"]
