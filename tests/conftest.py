"""Shared pytest fixtures for the wav2xml test suite."""

import struct
import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def fmt_payload(code=1, channels=2, rate=44_100, byte_rate=176_400, block_align=4, bits=16):
    return struct.pack('<HHIIHH', code, channels, rate, byte_rate, block_align, bits)


def chunk(tag: bytes, body: bytes, size=None) -> bytes:
    return tag + struct.pack('<I', len(body) if size is None else size) + body


def wav_bytes(*chunks: bytes, riff=b"RIFF", wave=b"WAVE", riff_size=0) -> bytes:
    return riff + struct.pack('<I', riff_size) + wave + b"".join(chunks)


@pytest.fixture
def input_dir(tmp_path) -> Path:
    d = tmp_path / "input"
    d.mkdir()
    return d


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "output"


@pytest.fixture
def write_wav(input_dir):
    """Write raw bytes to input_dir/<name> and return the path."""
    def _write(name: str, data: bytes) -> Path:
        path = input_dir / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def pcm_wav() -> bytes:
    """RIFF/WAVE with a 16-byte PCM fmt chunk: 2ch, 44.1kHz, 16-bit."""
    return wav_bytes(chunk(b"fmt ", fmt_payload()))
