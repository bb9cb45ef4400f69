"""
Constants shared by the WAV scanner, reader and XML writer.
"""

RIFF_FILE_TYPE = b"RIFF"
WAVE_FILE_FORMAT = b"WAVE"
FMT_CHUNK = b"fmt "

# The 16-byte PCM layout is the smallest fmt body we can decode.
MIN_FMT_CHUNK_SIZE = 16
PCM_FORMAT_CODE = 1

FILE_HEADER_SIZE = 12
CHUNK_HEADER_SIZE = 8

WAV_SUFFIX = ".wav"
XML_SUFFIX = ".xml"
XML_SCHEMA_NS = "http://www.w3.org/2001/XMLSchema"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_INDENT = "  "

DEFAULT_OUTPUT_ROOT = "output"
OUTPUT_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

LOG_LEVEL_ENV = "WAV2XML_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
