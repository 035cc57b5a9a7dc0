# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""ID3v2 tag reading.

This is based off of the following references:

* http://id3.org/id3v2.4.0-structure
* http://id3.org/id3v2.3.0
* http://id3.org/id3v2-00

Only text and URL frames are read, see :data:`Fields` for the supported
ones. Everything else (pictures, comments, binary data) is skipped.
Unlike the standard says for ID3v2.3 and v2.4, the "/" character is
treated as a value separator for multi value frames.

APEv2 tags are recognized only so they can be skipped.
"""

from __future__ import annotations

import logging
import struct
from collections.abc import Iterator, Mapping
from enum import Enum

from ._enums import CustomGenre, Genre
from ._errors import error
from ._text import decode_text, decode_url, split_values
from ._types import OptionalAudioTags
from ._util import BitPaddedInt, cdata, unsynch

logger = logging.getLogger(__name__)

ID3_MAGIC = b"ID3"
APE_MAGIC = b"APETAGEX"

HEADER_SIZE = 10
"""Size of the ID3v2 header and footer"""

APE_HEADER_SIZE = 32


class ID3NoHeaderError(error, ValueError):
    description = "no ID3v2 header"


class ID3UnsupportedVersionError(error, NotImplementedError):
    description = "unsupported ID3v2 version"


class ID3BadExtendedHeader(error, ValueError):
    description = "malformed ID3v2 extended header"


class FieldKind(Enum):
    """How a frame gets stored in :class:`OptionalAudioTags`"""

    TEXT = 0
    """A single string, the first frame wins"""

    TEXT_LIST = 1
    """A list of strings, split on '/'"""

    GENRES = 2
    """A list of genres, see :func:`parse_genres`"""

    URL = 3
    """A single URL, the first frame wins"""

    URL_LIST = 4
    """A list of URLs"""


Fields: dict[str, tuple[FieldKind, str]] = {
    "TALB": (FieldKind.TEXT, "album_movie_show"),
    "TBPM": (FieldKind.TEXT, "bpm"),
    "TCOM": (FieldKind.TEXT_LIST, "composers"),
    "TCON": (FieldKind.GENRES, "content_type"),
    "TCOP": (FieldKind.TEXT, "copyright"),
    "TDAT": (FieldKind.TEXT, "date"),
    "TDLY": (FieldKind.TEXT, "playlist_delay"),
    "TENC": (FieldKind.TEXT, "encoded_by"),
    "TEXT": (FieldKind.TEXT_LIST, "text_writers"),
    "TFLT": (FieldKind.TEXT, "file_type"),
    "TIME": (FieldKind.TEXT, "time"),
    "TIT1": (FieldKind.TEXT, "content_group_description"),
    "TIT2": (FieldKind.TEXT, "title"),
    "TIT3": (FieldKind.TEXT, "subtitle_refinement_description"),
    "TKEY": (FieldKind.TEXT, "initial_key"),
    "TLAN": (FieldKind.TEXT, "language"),
    "TLEN": (FieldKind.TEXT, "length"),
    "TMED": (FieldKind.TEXT, "media_type"),
    "TOAL": (FieldKind.TEXT, "original_album_move_show_title"),
    "TOFN": (FieldKind.TEXT, "original_filename"),
    "TOLY": (FieldKind.TEXT_LIST, "original_text_writers"),
    "TOPE": (FieldKind.TEXT_LIST, "original_artists"),
    "TORY": (FieldKind.TEXT, "original_release_year"),
    "TOWN": (FieldKind.TEXT, "file_owner"),
    "TPE1": (FieldKind.TEXT_LIST, "performers"),
    "TPE2": (FieldKind.TEXT, "band"),
    "TPE3": (FieldKind.TEXT, "conductor"),
    "TPE4": (FieldKind.TEXT, "interpreted"),
    "TPOS": (FieldKind.TEXT, "part_of_a_set"),
    "TPUB": (FieldKind.TEXT, "publisher"),
    "TRCK": (FieldKind.TEXT, "track_number"),
    "TRDA": (FieldKind.TEXT, "recording_dates"),
    "TRSN": (FieldKind.TEXT, "internet_radio_station_name"),
    "TRSO": (FieldKind.TEXT, "internet_radio_station_owner"),
    "TSIZ": (FieldKind.TEXT, "size"),
    "TSRC": (FieldKind.TEXT, "international_standard_recording_code"),
    "TSSE": (FieldKind.TEXT, "soft_hard_setting"),
    "TYER": (FieldKind.TEXT, "year"),
    "IPLS": (FieldKind.TEXT, "involved_people"),
    "WCOM": (FieldKind.URL_LIST, "commercial_info_url"),
    "WCOP": (FieldKind.URL, "copyright_info_url"),
    "WOAF": (FieldKind.URL, "official_webpage"),
    "WOAR": (FieldKind.URL_LIST, "official_artist_webpage"),
    "WOAS": (FieldKind.URL, "official_audio_source_webpage"),
    "WORS": (FieldKind.URL, "official_internet_radio_webpage"),
    "WPAY": (FieldKind.URL, "payment_url"),
    "WPUB": (FieldKind.URL, "publishers_official_webpage"),
}
"""Frame IDs mapped to their kind and target attribute.

Covers ID3v2.3/v2.4 and the three character IDs of ID3v2.2.
"""

_V22_IDS = {
    "TIT": "TIT2",
    "TT1": "TIT1", "TT2": "TIT2", "TT3": "TIT3", "TP1": "TPE1",
    "TP2": "TPE2", "TP3": "TPE3", "TP4": "TPE4", "TCM": "TCOM",
    "TXT": "TEXT", "TLA": "TLAN", "TCO": "TCON", "TAL": "TALB",
    "TPA": "TPOS", "TRK": "TRCK", "TRC": "TSRC", "TYE": "TYER",
    "TDA": "TDAT", "TIM": "TIME", "TRD": "TRDA", "TMT": "TMED",
    "TFT": "TFLT", "TBP": "TBPM", "TCR": "TCOP", "TPB": "TPUB",
    "TEN": "TENC", "TSS": "TSSE", "TOF": "TOFN", "TLE": "TLEN",
    "TSI": "TSIZ", "TDY": "TDLY", "TKE": "TKEY", "TOT": "TOAL",
    "TOA": "TOPE", "TOL": "TOLY", "TOR": "TORY", "IPL": "IPLS",
    "WAF": "WOAF", "WAR": "WOAR", "WAS": "WOAS", "WCM": "WCOM",
    "WCP": "WCOP", "WPB": "WPUB",
}

Fields.update({v22: Fields[v23] for v22, v23 in _V22_IDS.items()})


class ID3Header:
    """The 10 byte ID3v2 header.

    Raises ID3NoHeaderError if there is no header at `offset` and
    ID3UnsupportedVersionError for anything newer than ID3v2.4.
    """

    _V24 = (2, 4, 0)

    version: tuple[int, int, int]
    size: int
    """Size of the tag body, excluding header and footer"""

    offset: int

    def __init__(self, data: bytes, offset: int = 0):
        header = bytes(data[offset:offset + HEADER_SIZE])
        if len(header) != HEADER_SIZE or not header.startswith(ID3_MAGIC):
            raise ID3NoHeaderError(f"no ID3v2 header at {offset}")

        _, vmaj, vrev, flags, size = struct.unpack(">3sBBB4s", header)
        self.version = (2, vmaj, vrev)
        if self.version > (2, 4, 0xFF):
            raise ID3UnsupportedVersionError(f"ID3v2.{vmaj} not supported")

        self._flags = flags
        self.size = BitPaddedInt(size)
        self.offset = offset

    @property
    def major_version(self) -> int:
        return self.version[1]

    @property
    def minor_version(self) -> int:
        return self.version[2]

    @property
    def f_unsynch(self) -> bool:
        return bool(self._flags & 0x80)

    @property
    def f_extended(self) -> bool:
        return bool(self._flags & 0x40)

    @property
    def f_footer(self) -> bool:
        return self.version >= self._V24 and bool(self._flags & 0x10)

    @property
    def end(self) -> int:
        """Offset right after the tag, including a footer"""

        end = self.offset + HEADER_SIZE + self.size
        if self.f_footer:
            end += HEADER_SIZE
        return end

    def extended_header_size(self, body: bytes) -> int:
        """Returns the number of bytes the extended header at the start
        of `body` occupies.

        ID3v2.4 stores a sync-safe size counting the whole extended
        header, ID3v2.3 a plain one not counting the size field itself.
        Raises ID3BadExtendedHeader.
        """

        if len(body) < 4:
            raise ID3BadExtendedHeader("extended header truncated")

        if self.version >= self._V24:
            declared = BitPaddedInt(body[:4])
            size = declared
        else:
            declared = cdata.uint32_be(body[:4])
            size = declared + 4

        if declared < 4:
            raise ID3BadExtendedHeader(
                f"extended header size {declared} too small")
        if size > len(body):
            raise ID3BadExtendedHeader("extended header exceeds tag")
        return size


def parse_genres(text: str) -> list[Genre | CustomGenre]:
    """Resolves the text of a TCON frame to a list of genres.

    "(51)(39)" references ID3v1 genres by number, a plain number does the
    same for a single genre, anything else is a :class:`CustomGenre`.
    """

    if not text:
        return []

    if text.startswith("(") and text.endswith(")"):
        genres: list[Genre | CustomGenre] = []
        for part in text.split(")"):
            part = part.replace("(", "")
            if part.isdecimal():
                genre = Genre.from_text(part)
                if isinstance(genre, Genre):
                    genres.append(genre)
        if genres:
            return genres

    return [Genre.from_text(text)]


def iter_frames(body: bytes,
                major_version: int) -> Iterator[tuple[str, bytes]]:
    """Yields (frame ID, frame payload) for each frame in the tag body.

    Stops at padding, at anything not looking like a frame ID and at a
    frame claiming more data than left.
    """

    if major_version < 3:
        header_size = 6
        id_size = 3
    else:
        header_size = 10
        id_size = 4

    pos = 0
    while len(body) - pos >= header_size:
        # frame IDs start with an uppercase letter, this also ends
        # the loop at the padding
        if not 0x41 <= body[pos] <= 0x5A:
            break

        frame_id = body[pos:pos + id_size].decode("latin-1")
        raw_size = body[pos + id_size:pos + id_size + 4]
        if major_version < 3:
            size = cdata.uint24_be(body[pos + 3:pos + 6])
        elif major_version == 3:
            size = cdata.uint32_be(raw_size)
        else:
            size = BitPaddedInt(raw_size)

        pos += header_size
        if pos + size > len(body):
            break

        yield frame_id, body[pos:pos + size]
        pos += size


def _store(tags: OptionalAudioTags, kind: FieldKind, attr: str,
           payload: bytes) -> bool:
    """Stores the frame payload in `tags`. Returns True if it was
    accepted."""

    if len(payload) < 2:
        return False

    if kind is FieldKind.URL:
        if getattr(tags, attr) is not None:
            return False
        setattr(tags, attr, decode_url(payload))
        return True
    elif kind is FieldKind.URL_LIST:
        getattr(tags, attr).append(decode_url(payload))
        return True

    if kind is FieldKind.TEXT and getattr(tags, attr) is not None:
        return False

    text = decode_text(payload)
    if text is None:
        return False

    if kind is FieldKind.TEXT:
        setattr(tags, attr, text)
    elif kind is FieldKind.TEXT_LIST:
        getattr(tags, attr).extend(split_values(text))
    else:
        getattr(tags, attr).extend(parse_genres(text))
    return True


def read_frames(body: bytes, header: ID3Header,
                known_fields: Mapping[str, tuple[FieldKind, str]] | None = None
                ) -> OptionalAudioTags | None:
    """Reads all supported frames of the (already unsynchronised) tag body.

    Returns None if no supported frame was found.
    """

    if known_fields is None:
        known_fields = Fields

    tags = OptionalAudioTags(
        major_version=header.major_version,
        minor_version=header.minor_version)
    changes = False
    for frame_id, payload in iter_frames(body, header.major_version):
        try:
            kind, attr = known_fields[frame_id]
        except KeyError:
            continue
        if _store(tags, kind, attr, payload):
            changes = True

    if not changes:
        return None
    return tags


def skip_apev2(data: bytes, offset: int) -> int:
    """Returns the offset after the APEv2 header or footer at `offset`.

    A header is followed by the items and the footer, so the whole tag is
    skipped; a footer ends the tag, so only the footer is skipped.
    """

    if len(data) - offset < APE_HEADER_SIZE:
        return offset + len(APE_MAGIC)

    size = cdata.uint32_le_from(data, offset + 12)[0]
    flags = cdata.uint32_le(data[offset + 20:offset + 24])
    if flags & (1 << 29):
        logger.debug("skipping APEv2 tag at %d (%d bytes)", offset, size)
        return offset + APE_HEADER_SIZE + size
    return offset + APE_HEADER_SIZE


def read_tag(data: bytes, offset: int, frame_count: int = 0,
             known_fields: Mapping[str, tuple[FieldKind, str]] | None = None
             ) -> tuple[int, OptionalAudioTags | None]:
    """Reads the ID3v2 tag at `offset`, or skips an APEv2 tag there.

    Returns the offset after the tag and the found frames, or None if
    there weren't any supported ones. If there is no tag at `offset` it is
    returned unchanged. `frame_count` gets stored as the tag position.
    """

    if data[offset:offset + len(APE_MAGIC)] == APE_MAGIC:
        return skip_apev2(data, offset), None

    if data[offset:offset + 3] != ID3_MAGIC:
        return offset, None

    try:
        header = ID3Header(data, offset)
    except ID3NoHeaderError:
        return offset, None
    except ID3UnsupportedVersionError as e:
        logger.debug("ignoring tag at %d: %s", offset, e)
        return offset, None

    end = header.end
    if end > len(data):
        logger.debug("ID3v2 tag at %d truncated, skipping", offset)
        return end, None

    body_start = offset + HEADER_SIZE
    body = data[body_start:body_start + header.size]

    if header.f_extended:
        try:
            body = body[header.extended_header_size(body):]
        except ID3BadExtendedHeader as e:
            logger.debug("skipping ID3v2 tag at %d: %s", offset, e)
            return end, None

    if header.f_unsynch:
        body = unsynch.decode(body)

    tags = read_frames(body, header, known_fields)
    if tags is not None:
        tags.position = frame_count
    return end, tags
