"""Decode newline-delimited JSON response streams into a single answer."""

from __future__ import annotations

import codecs
import logging
from typing import Iterable

from pydantic import ValidationError

from .models import ResponseChunk

logger = logging.getLogger(__name__)


def decode_stream(chunks: Iterable[bytes]) -> str:
    """Accumulate the ``response`` fragments of a streamed generation.

    Chunks may split lines or multi-byte characters anywhere. Invalid byte
    sequences are replaced rather than rejected. Reading stops at the first
    record whose ``done`` flag is set; remaining chunks are left unread.

    Args:
        chunks: Raw body chunks in arrival order

    Returns:
        Concatenated text of every well-formed record seen
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    full_text: list[str] = []
    buffer = ""

    for chunk in chunks:
        if not chunk:
            continue
        buffer += decoder.decode(chunk)

        while True:
            pos = buffer.find("\n")
            if pos == -1:
                break
            line = buffer[:pos].strip()
            buffer = buffer[pos + 1:]
            if not line:
                continue

            try:
                record = ResponseChunk.model_validate_json(line)
            except ValidationError as exc:
                logger.warning("Failed to parse stream line as JSON: %s (%s)", line, exc)
                continue

            full_text.append(record.response)
            if record.done:
                return "".join(full_text)

    buffer += decoder.decode(b"", final=True)
    if buffer.strip():
        logger.warning("Stream ended with an unterminated line, ignoring it: %s", buffer.strip())

    return "".join(full_text)


__all__ = ["decode_stream"]
