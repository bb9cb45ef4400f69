import sys
from pathlib import Path

from chunk_reader import ChunkReader
from fmt_extractor import decode_fmt_chunk
from wav_config import FMT_CHUNK, MIN_FMT_CHUNK_SIZE, RIFF_FILE_TYPE
from wav_errors import WavFileError


def list_chunks(path):
    """Return (riff_size, [(offset, header, fmt), ...], truncated) for a RIFF file.

    fmt is the decoded FmtData for fmt chunks large enough to hold the PCM
    layout, None otherwise. riff_size is None when the file does not start
    with RIFF. The listing stops at the first truncated read and truncated
    is set.
    """
    chunks = []
    truncated = False
    with open(path, 'rb') as f:
        reader = ChunkReader(f)
        header = reader.read_file_header()
        if header.chunk_id != RIFF_FILE_TYPE:
            return None, chunks, truncated
        try:
            for offset, chunk in reader.iter_chunks():
                fmt = None
                if chunk.chunk_id == FMT_CHUNK and chunk.chunk_size >= MIN_FMT_CHUNK_SIZE:
                    fmt = decode_fmt_chunk(reader.read_chunk_body(MIN_FMT_CHUNK_SIZE))
                chunks.append((offset, chunk, fmt))
        except WavFileError:
            truncated = True
    return header.chunk_size, chunks, truncated


def analyze(path):
    print(f"--- {path} ---")
    try:
        riff_size, chunks, truncated = list_chunks(path)
    except WavFileError as e:
        print(f"Unreadable: {e}")
        return
    if riff_size is None:
        print("Not a RIFF file")
        return
    print(f"RIFF size: {riff_size}")

    for offset, chunk, fmt in chunks:
        tag = chunk.chunk_id.decode(errors='replace')
        print(f"Chunk: {tag} at {offset:x}, size: {chunk.chunk_size}")
        if fmt is not None:
            print(f"  fmt: {fmt.audio_format.value}, channels={fmt.channel_count}, "
                  f"rate={fmt.sampling_rate}, bits={fmt.bit_depth}")
    if truncated:
        print("Truncated chunk, listing stops here")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python3 analyze_chunks.py <file.wav>")
        sys.exit(1)
    analyze(Path(sys.argv[1]))
