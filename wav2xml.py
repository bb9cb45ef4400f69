#!/usr/bin/env python3
"""
wav2xml.py - WAV format descriptor generator

Scans a directory for .wav files, reads the fmt chunk of each one and writes
an XML descriptor per file (format, channel count, sampling rate, bit depth,
byte rate and bit rate) into a timestamped output directory.

Files that are not RIFF/WAVE, are truncated, or carry a fmt chunk that is too
small are skipped with a warning; the rest of the directory is still
processed.

Usage:
    python3 wav2xml.py /path/to/wavs
    python3 wav2xml.py /path/to/wavs -o descriptors --log-level DEBUG
"""
import argparse
import datetime as _dt
import logging
import os
from pathlib import Path

from fmt_extractor import process_directory
from wav_config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_ROOT,
    LOG_FORMAT,
    LOG_LEVEL_ENV,
    OUTPUT_TIMESTAMP_FORMAT,
)
from wav_errors import InvalidInputDirectory

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Write an XML format descriptor for every WAV file in a folder")
    ap.add_argument('directory', type=Path, help='Folder to scan for .wav files (not recursive)')
    ap.add_argument('-o', '--output-root', type=Path, default=Path(DEFAULT_OUTPUT_ROOT),
                    help='Root for the timestamped output folder (default: %(default)s)')
    ap.add_argument('--log-level', default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
                    choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                    help=f'Logging level to use (default from ${LOG_LEVEL_ENV}, else {DEFAULT_LOG_LEVEL})')
    return ap.parse_args(argv)


def make_output_dir(output_root: Path) -> Path:
    ts = _dt.datetime.now().strftime(OUTPUT_TIMESTAMP_FORMAT)
    out_dir = output_root / ts
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def run(directory: Path, output_root: Path) -> tuple[Path, list[Path]]:
    """Check the input folder, create the output folder and process the batch.

    Returns the output folder and the descriptors written into it.
    """
    if not directory.is_dir():
        raise InvalidInputDirectory(directory)
    out_dir = make_output_dir(output_root)
    return out_dir, process_directory(directory, out_dir)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        out_dir, written = run(args.directory, args.output_root)
    except InvalidInputDirectory as e:
        logger.error("%s", e)
        raise SystemExit("Input must be a directory!")

    print(f"Wrote {len(written)} descriptor(s) to {out_dir}")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
