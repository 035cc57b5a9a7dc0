# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Decoding of ID3 text."""

from __future__ import annotations

import codecs
from enum import IntEnum

from ._types import Url


class Encoding(IntEnum):
    """Text encoding selector, the first byte of an ID3v2 text frame"""

    LATIN1 = 0
    """ISO-8859-1"""

    UTF16 = 1
    """UTF-16 with BOM"""

    UTF16BE = 2
    """UTF-16BE without BOM, ID3v2.4 only"""

    UTF8 = 3
    """UTF-8, ID3v2.4 only"""


def _decode_utf16(data: bytes) -> str:
    if data.startswith(codecs.BOM_UTF16_BE):
        encoding = "utf-16-be"
    else:
        # little endian is what everyone writes if the BOM is missing
        encoding = "utf-16-le"
    data = data[:len(data) & ~1]
    return data.decode(encoding, "replace")


def decode_text(payload: bytes) -> str | None:
    """Decodes the body of a text frame: an encoding byte followed by
    the encoded text.

    Returns None if the encoding byte is unknown. Malformed UTF-8 gives an
    empty string, malformed UTF-16 is decoded with replacement characters.
    Trailing NUL terminators are removed.
    """

    if not payload:
        return None

    try:
        encoding = Encoding(payload[0])
    except ValueError:
        return None
    data = bytes(payload[1:])

    if encoding == Encoding.LATIN1:
        text = data.decode("latin-1")
    elif encoding == Encoding.UTF16:
        text = _decode_utf16(data)
    elif encoding == Encoding.UTF16BE:
        text = data[:len(data) & ~1].decode("utf-16-be", "replace")
    else:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            text = ""

    if text.startswith("\ufeff"):
        text = text[1:]
    return text.rstrip("\x00")


def split_values(text: str) -> list[str]:
    """Splits a multi value text frame on '/', dropping empty values"""

    return [v for v in text.split("/") if v]


def decode_url(payload: bytes) -> Url:
    """URL frames have no encoding byte and are supposed to be Latin-1,
    but UTF-8 is common.
    """

    data = bytes(payload)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        text = data.decode("latin-1")
    return Url(text.rstrip("\x00"))


def decode_fixed(data: bytes) -> str:
    """Decodes a NUL padded ID3v1 field"""

    data = bytes(data).split(b"\x00", 1)[0]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")
