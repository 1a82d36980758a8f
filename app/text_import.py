"""Reading workout notes from files or standard input."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from loguru import logger

from core.exceptions import TextImportError

STDIN_PATH = "-"

# latin-1 decodes any byte sequence, so it must stay last
FALLBACK_ENCODINGS: Tuple[str, ...] = ("utf-8-sig", "cp1252", "latin-1")


def decode_workout_bytes(data: bytes, encoding: Optional[str] = None) -> str:
    """Decode raw bytes into text.

    Args:
        data: File contents
        encoding: Encoding to use; None tries FALLBACK_ENCODINGS in order

    Returns:
        Decoded text with Windows line endings converted to "\\n"

    Raises:
        TextImportError: If the forced encoding cannot decode the data
    """
    if encoding is not None:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise TextImportError(f"Cannot decode input as {encoding}: {e}")
    else:
        text = None
        for candidate in FALLBACK_ENCODINGS:
            try:
                text = data.decode(candidate)
            except UnicodeDecodeError:
                continue
            if candidate != FALLBACK_ENCODINGS[0]:
                logger.info(f"Input decoded as {candidate}")
            break
        if text is None:
            raise TextImportError("Cannot decode input with any supported encoding")

    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_workout_text(
    path: str,
    encoding: Optional[str] = None,
    stdin: Optional[BinaryIO] = None,
) -> str:
    """Read a workout log.

    Args:
        path: File path, or "-" for standard input
        encoding: Forced encoding (see decode_workout_bytes)
        stdin: Binary stream used for "-" (sys.stdin.buffer if None)

    Returns:
        The decoded text

    Raises:
        TextImportError: If the file cannot be read or decoded
    """
    if path == STDIN_PATH:
        stream = stdin if stdin is not None else sys.stdin.buffer
        data = stream.read()
        logger.debug(f"Read {len(data)} bytes from standard input")
    else:
        file_path = Path(path)
        if not file_path.is_file():
            raise TextImportError(f"No such file: {path}")
        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise TextImportError(f"Cannot read {path}: {e}")
        logger.debug(f"Read {len(data)} bytes from {path}")

    return decode_workout_bytes(data, encoding)
