"""Lazy line reader for byte streams.

Splits a binary stream on line breaks and decodes each line on its own, so a
single malformed line is skipped instead of aborting the whole stream.
"""

from __future__ import annotations

import logging
from typing import IO, Iterator, Optional

from common.exceptions import LineDecodeError

logger = logging.getLogger(__name__)


def decode_line(
    raw: bytes, encoding: str = "utf-8", line_number: Optional[int] = None
) -> str:
    """Decode one raw line, dropping its line terminator.

    Args:
        raw: Bytes of the line, possibly ending in ``\\n`` or ``\\r\\n``
        encoding: Text encoding of the stream
        line_number: 1-based position of the line, used in error messages

    Returns:
        Decoded line without the terminator

    Raises:
        LineDecodeError: If the bytes are not valid in `encoding`
    """
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as ex:
        where = f"line {line_number}" if line_number is not None else "line"
        raise LineDecodeError(f"Cannot decode {where}: {ex}", line_number) from ex


def iter_lines(stream: IO[bytes], encoding: str = "utf-8") -> Iterator[str]:
    """Yield decoded lines from a binary stream.

    Undecodable lines are skipped. A read error ends iteration quietly; lines
    already yielded are unaffected.
    """
    line_number = 0
    try:
        for raw in stream:
            line_number += 1
            try:
                yield decode_line(raw, encoding, line_number)
            except LineDecodeError as ex:
                logger.debug(f"Skipping {ex}")
    except OSError as ex:
        logger.warning(f"Read failed after line {line_number}, stopping: {ex}")
