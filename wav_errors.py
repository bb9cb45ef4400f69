"""Exceptions raised while scanning and parsing WAV files."""

from pathlib import Path
from typing import Optional


class Wav2XmlError(Exception):
    """Base class for every error raised by wav2xml."""


class InvalidInputDirectory(Wav2XmlError):
    """The input path is not a directory. Aborts the whole run."""

    def __init__(self, path):
        self.path = Path(path)
        super().__init__(f"Input must be a directory! ({self.path})")


class WavFileError(Wav2XmlError):
    """A single file could not be used. The batch skips it and carries on."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class NotWaveFormat(WavFileError):
    """The outer header is not RIFF/WAVE."""


class FmtChunkTooSmall(WavFileError):
    """The fmt chunk declares fewer bytes than the PCM layout needs."""


class TruncatedInput(WavFileError):
    """A read needed more bytes than the stream had left."""
