"""
Format extraction for WAV files.

Validates the RIFF/WAVE header of each file, walks its chunks until the first
``fmt `` chunk, decodes that chunk into an FmtData record and hands the record
to the XML writer. Files that cannot be used are logged and skipped; only an
invalid input directory stops a batch.

Usage:
    written = process_directory(Path("recordings"), Path("output/20240101_120000"))
"""

import logging
import struct
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional

from chunk_reader import ChunkReader
from wav_config import (
    FMT_CHUNK,
    MIN_FMT_CHUNK_SIZE,
    PCM_FORMAT_CODE,
    RIFF_FILE_TYPE,
    WAV_SUFFIX,
    WAVE_FILE_FORMAT,
    XML_SUFFIX,
)
from wav_errors import FmtChunkTooSmall, InvalidInputDirectory, NotWaveFormat, WavFileError
from xml_writer import write_xml

logger = logging.getLogger(__name__)

# wFormatTag, nChannels, nSamplesPerSec, nAvgBytesPerSec, nBlockAlign, wBitsPerSample
_FMT_PCM = struct.Struct('<HHIIHH')


class AudioFormat(Enum):
    """Audio encoding named in the fmt chunk."""

    PCM = "PCM"
    COMPRESSED = "Compressed"

    @classmethod
    def from_code(cls, code: int) -> "AudioFormat":
        return cls.PCM if code == PCM_FORMAT_CODE else cls.COMPRESSED


@dataclass(frozen=True)
class FmtData:
    """Fields decoded from a fmt chunk.

    byte_rate is the value declared in the file. bit_rate is derived as
    sampling_rate * channel_count * bit_depth, in bits per second.
    """

    audio_format: AudioFormat
    channel_count: int
    sampling_rate: int
    byte_rate: int
    bit_depth: int
    bit_rate: int


def decode_fmt_chunk(payload: bytes) -> FmtData:
    if len(payload) < MIN_FMT_CHUNK_SIZE:
        raise FmtChunkTooSmall(
            f"fmt chunk has {len(payload)} bytes, need at least {MIN_FMT_CHUNK_SIZE}")
    code, channels, rate, byte_rate, _block_align, bits = _FMT_PCM.unpack_from(payload)
    return FmtData(
        audio_format=AudioFormat.from_code(code),
        channel_count=channels,
        sampling_rate=rate,
        byte_rate=byte_rate,
        bit_depth=bits,
        bit_rate=rate * channels * bits,
    )


def extract_fmt(stream: BinaryIO) -> Optional[FmtData]:
    """Return the first fmt chunk of a RIFF/WAVE stream, or None if it has none.

    Raises NotWaveFormat, FmtChunkTooSmall or TruncatedInput when the stream
    cannot be used.
    """
    reader = ChunkReader(stream)
    header = reader.read_file_header()
    if header.chunk_id != RIFF_FILE_TYPE or header.format != WAVE_FILE_FORMAT:
        raise NotWaveFormat(
            f"not a WAV file (type {header.chunk_id!r}, format {header.format!r})")

    while not reader.at_end():
        chunk = reader.read_chunk_header()
        if chunk.chunk_id == FMT_CHUNK:
            if chunk.chunk_size < MIN_FMT_CHUNK_SIZE:
                raise FmtChunkTooSmall(
                    f"fmt chunk size {chunk.chunk_size} is less than {MIN_FMT_CHUNK_SIZE} bytes")
            # Only the PCM layout is decoded; a body cut short past it is still usable.
            return decode_fmt_chunk(reader.read_chunk_body(MIN_FMT_CHUNK_SIZE))
        logger.debug("Skipping %r chunk (%d bytes)", chunk.chunk_id, chunk.chunk_size)
        reader.skip_chunk(chunk.chunk_size)
    return None


def find_wav_files(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir()
                  if p.is_file() and p.suffix == WAV_SUFFIX)


def process_file(wav_path: Path, output_directory: Path) -> Optional[Path]:
    """Write the XML descriptor for one WAV file; return its path or None if skipped."""
    logger.info("Parsing %s", wav_path)
    try:
        with open(wav_path, 'rb') as f:
            data = extract_fmt(f)
    except WavFileError as e:
        e.path = wav_path
        logger.warning("Skipping %s: %s", wav_path, e)
        return None
    except OSError as e:
        logger.warning("Skipping %s: cannot read file (%s)", wav_path, e)
        return None

    if data is None:
        logger.debug("No fmt chunk in %s, nothing to write", wav_path)
        return None

    out_path = write_xml(data, output_directory / f"{wav_path.stem}{XML_SUFFIX}")
    logger.info("Wrote %s", out_path)
    return out_path


def process_directory(directory: Path, output_directory: Path) -> list[Path]:
    """Process every .wav file directly inside directory.

    Raises InvalidInputDirectory before touching any file if directory is not
    a directory. Returns the descriptor paths that were written.
    """
    directory = Path(directory)
    output_directory = Path(output_directory)
    if not directory.is_dir():
        raise InvalidInputDirectory(directory)

    output_directory.mkdir(parents=True, exist_ok=True)
    written = []
    for wav_path in find_wav_files(directory):
        out_path = process_file(wav_path, output_directory)
        if out_path is not None:
            written.append(out_path)
    return written
