# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""ID3v1 and ID3v1.1 tags.

http://id3.org/ID3v1
"""

from __future__ import annotations

import struct

from ._enums import Genre
from ._text import decode_fixed
from ._types import AudioTag

TAG_SIZE = 128
MAGIC = b"TAG"

_ID3V1 = struct.Struct(">3s30s30s30s4s30sB")


def has_id3v1(data: bytes, offset: int) -> bool:
    """If an ID3v1 tag starts at `offset` and fits into `data`"""

    return (len(data) - offset >= TAG_SIZE and
            data[offset:offset + 3] == MAGIC)


def _parse_year(data: bytes) -> int:
    try:
        year = int(decode_fixed(data))
    except ValueError:
        return 0
    if not 0 <= year <= 0xFFFF:
        return 0
    return year


def parse_id3v1(data: bytes, offset: int = 0) -> AudioTag | None:
    """Parses the 128 byte ID3v1 tag at `offset`.

    Returns None if there is no tag there.
    """

    if not has_id3v1(data, offset):
        return None

    tag, title, artist, album, year, comment, genre = _ID3V1.unpack_from(
        data, offset)

    # ID3v1.1: a zero byte followed by the track number ends the comment
    if comment[28] == 0:
        comment = comment[:28]

    return AudioTag(
        title=decode_fixed(title),
        artist=decode_fixed(artist),
        album=decode_fixed(album),
        year=_parse_year(year),
        comment=decode_fixed(comment),
        genre=Genre.from_code(genre),
    )
