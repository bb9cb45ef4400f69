"""
Binary cursor over a RIFF container.

ChunkReader walks a RIFF stream one header at a time: the 12-byte file header
first, then 8-byte chunk headers. Bodies are either read whole or skipped with
a relative seek. Chunk sizes are never checked against the bytes that are
actually left; a bad size simply makes the next read come up short, which is
reported as TruncatedInput.
"""

import io
import struct
from typing import BinaryIO, Iterator, NamedTuple

from wav_config import CHUNK_HEADER_SIZE, FILE_HEADER_SIZE
from wav_errors import TruncatedInput

_FILE_HEADER = struct.Struct('<4sI4s')
_CHUNK_HEADER = struct.Struct('<4sI')


class FileHeader(NamedTuple):
    chunk_id: bytes
    chunk_size: int
    format: bytes


class ChunkHeader(NamedTuple):
    chunk_id: bytes
    chunk_size: int


class ChunkReader:
    """Reads RIFF headers and chunk bodies from a seekable binary stream."""

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        start = stream.tell()
        self._length = stream.seek(0, io.SEEK_END)
        stream.seek(start)

    @property
    def position(self) -> int:
        return self._stream.tell()

    def _read_exact(self, size: int, what: str) -> bytes:
        offset = self._stream.tell()
        data = self._stream.read(size)
        if len(data) < size:
            raise TruncatedInput(
                f"{what} at offset {offset:#x} needs {size} bytes, only {len(data)} left")
        return data

    def read_file_header(self) -> FileHeader:
        raw = self._read_exact(FILE_HEADER_SIZE, "file header")
        return FileHeader(*_FILE_HEADER.unpack(raw))

    def read_chunk_header(self) -> ChunkHeader:
        raw = self._read_exact(CHUNK_HEADER_SIZE, "chunk header")
        return ChunkHeader(*_CHUNK_HEADER.unpack(raw))

    def read_chunk_body(self, chunk_size: int) -> bytes:
        return self._read_exact(chunk_size, "chunk body")

    def skip_chunk(self, chunk_size: int):
        # Seeking past EOF is legal; at_end() picks it up on the next loop.
        self._stream.seek(chunk_size, io.SEEK_CUR)

    def at_end(self) -> bool:
        return self._stream.tell() >= self._length

    def iter_chunks(self) -> Iterator[tuple[int, ChunkHeader]]:
        """Yield (offset, header) for every chunk left.

        The cursor is moved to the end of the body before the next header is
        read, so the consumer may read the body in between.
        """
        while not self.at_end():
            offset = self.position
            header = self.read_chunk_header()
            yield offset, header
            self._stream.seek(offset + CHUNK_HEADER_SIZE + header.chunk_size)
