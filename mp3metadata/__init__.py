# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""mp3metadata reads the metadata of MPEG audio streams.

::

    import mp3metadata
    meta = mp3metadata.read_from_file("song.mp3")
    print(meta.duration, meta.tag, meta.optional_info)

The whole stream is walked: every MPEG frame header is decoded and
ID3v1, ID3v2.2/3/4 tags are read wherever they show up. APEv2 tags and
garbage between frames are skipped.
"""

from ._enums import (
    CRC,
    ChannelType,
    Copyright,
    CustomGenre,
    Emphasis,
    Genre,
    Layer,
    Status,
    Version,
)
from ._errors import (
    DuplicatedIDV3,
    FileError,
    InvalidData,
    NoHeader,
    NotMP3,
    error,
)
from ._scanner import read_from_file, read_from_slice
from ._types import AudioTag, Frame, MP3Metadata, OptionalAudioTags, Url
from .id3v2 import FieldKind, Fields

version = (0, 1, 0)
"""Version tuple."""

version_string = ".".join(map(str, version))
"""Version string."""

__all__ = [
    "read_from_file",
    "read_from_slice",
    "MP3Metadata",
    "Frame",
    "AudioTag",
    "OptionalAudioTags",
    "Url",
    "Version",
    "Layer",
    "CRC",
    "ChannelType",
    "Copyright",
    "Status",
    "Emphasis",
    "Genre",
    "CustomGenre",
    "error",
    "FileError",
    "NotMP3",
    "NoHeader",
    "DuplicatedIDV3",
    "InvalidData",
    "Fields",
    "FieldKind",
    "version",
    "version_string",
]
