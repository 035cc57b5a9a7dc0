# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Walks an MPEG audio stream and collects frames and tags."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from . import id3v1, id3v2
from ._errors import DuplicatedIDV3, FileError, InvalidData, NotMP3
from ._types import MP3Metadata
from ._util import convert_error
from .mpeg import parse_frame

logger = logging.getLogger(__name__)


def _read_tags(data: bytes, offset: int, meta: MP3Metadata,
               known_fields: Mapping[str, tuple[id3v2.FieldKind, str]] | None
               ) -> int:
    """Reads any tag at `offset` into `meta` and returns the offset after
    it, or `offset` if there is none."""

    if id3v1.has_id3v1(data, offset):
        if meta.tag is not None:
            raise DuplicatedIDV3(f"second ID3v1 tag at {offset}")
        meta.tag = id3v1.parse_id3v1(data, offset)
        return offset + id3v1.TAG_SIZE

    end, tags = id3v2.read_tag(data, offset, len(meta.frames), known_fields)
    if tags is not None:
        meta.optional_info.append(tags)
    return end


def read_from_slice(data: bytes,
                    known_fields: Mapping[str, tuple[id3v2.FieldKind, str]]
                    | None = None) -> MP3Metadata:
    """Parses an in-memory MPEG audio stream.

    Args:
        data: the complete stream
        known_fields: replaces :data:`mp3metadata.Fields`, the mapping of
            ID3v2 frame IDs to the attributes they get stored in
    Returns:
        MP3Metadata
    Raises:
        NotMP3: if no frame was found
        DuplicatedIDV3: if there is more than one ID3v1 tag
        InvalidData: if the stream is inconsistent
    """

    meta = MP3Metadata()
    length = len(data)
    i = 0
    skipped_from = None

    while i < length:
        i = _read_tags(data, i, meta, known_fields)
        if i + 3 >= length:
            break

        frame = parse_frame(data, i, meta.duration)
        if frame is not None:
            if skipped_from is not None:
                logger.debug("resynchronised after skipping %d bytes at %d",
                             i - skipped_from, skipped_from)
                skipped_from = None
            meta.frames.append(frame)
            meta.duration += frame.duration or 0.0
            i += frame.size
            continue

        old = i
        i = _read_tags(data, i, meta, known_fields)
        if i == old:
            if skipped_from is None:
                skipped_from = i
            i += 1

    if skipped_from is not None:
        logger.debug("skipped %d trailing bytes at %d",
                     min(i, length) - skipped_from, skipped_from)

    if meta.tag is None and meta.frames and i <= meta.frames[-1].size:
        raise InvalidData("stream ends inside the last frame")
    if not meta.frames:
        raise NotMP3()
    return meta


@convert_error(OSError, FileError)
def read_from_file(path: str | os.PathLike[str],
                   known_fields: Mapping[str, tuple[id3v2.FieldKind, str]]
                   | None = None) -> MP3Metadata:
    """Like :func:`read_from_slice` but reads the file at `path` first.

    Raises:
        FileError: if the file can't be read
    """

    with open(path, "rb") as fileobj:
        data = fileobj.read()
    return read_from_slice(data, known_fields)
