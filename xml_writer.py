"""Render FmtData records as XML schema descriptors."""

import xml.etree.ElementTree as ET
from pathlib import Path

from wav_config import XML_DECLARATION, XML_INDENT, XML_SCHEMA_NS


def _element(track: ET.Element, name: str, type_: str, content, **extra) -> ET.Element:
    # Attribute order is name, type, extras, content.
    attrs = {'name': name, 'type': type_}
    attrs.update(extra)
    attrs['content'] = str(content)
    return ET.SubElement(track, 'element', attrs)


def build_xml(data) -> str:
    """Return the descriptor document for one FmtData record."""
    root = ET.Element('xs:schema', {'xmlns:xs': XML_SCHEMA_NS})
    track = ET.SubElement(root, 'track')
    _element(track, 'format', 'xs:string', data.audio_format.value)
    _element(track, 'channel_count', 'xs:positiveInteger', data.channel_count)
    _element(track, 'sampling_rate', 'xs:positiveInteger', data.sampling_rate)
    _element(track, 'bit_depth', 'xs:positiveInteger', data.bit_depth)
    _element(track, 'byte_rate', 'xs:positiveInteger', data.byte_rate, minOccurs='0')
    _element(track, 'bit_rate', 'xs:positiveInteger', data.bit_rate)
    ET.indent(root, space=XML_INDENT)
    return XML_DECLARATION + "\n" + ET.tostring(root, encoding='unicode') + "\n"


def write_xml(data, output_path: Path) -> Path:
    """Write the descriptor for data to output_path via a temporary sibling file."""
    output_path = Path(output_path)
    tmp_path = output_path.with_name(output_path.name + '.tmp')
    tmp_path.write_text(build_xml(data), encoding='utf-8')
    tmp_path.replace(output_path)
    return output_path
