# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""MPEG audio frame header decoding.

http://mpgedit.org/mpgedit/mpeg_format/mpeghdr.htm
http://www.codeproject.com/Articles/8295/MPEG-Audio-Frame-Header
"""

from __future__ import annotations

from ._constants import BITRATES, SAMPLES_PER_FRAME, SAMPLING_FREQ
from ._enums import (
    CRC,
    ChannelType,
    Copyright,
    Emphasis,
    Layer,
    Status,
    Version,
)
from ._types import Frame
from ._util import cdata

SYNC_MASK = 0xFFE00000

_LAYER_COLUMN = {Layer.LAYER1: 0, Layer.LAYER2: 1, Layer.LAYER3: 2}
_FREQ_ROW = {Version.MPEG1: 0, Version.MPEG2: 1, Version.MPEG2_5: 2}
_LSF_VERSIONS = (Version.MPEG2, Version.MPEG2_5)


def bitrate_row(version: Version, layer: Layer) -> int:
    """The row of BITRATES to use for a version/layer combination"""

    if version == Version.MPEG1:
        return _LAYER_COLUMN.get(layer, 4)
    elif version in _LSF_VERSIONS and layer == Layer.LAYER1:
        return 3
    return 4


def sampling_row(version: Version) -> int:
    """The row of SAMPLING_FREQ to use for a version"""

    return _FREQ_ROW.get(version, 3)


def samples_per_frame(version: Version, layer: Layer) -> int:
    """Number of samples a frame holds, 0 if unknown"""

    column = _LAYER_COLUMN.get(layer, 3)
    if version == Version.MPEG1:
        return SAMPLES_PER_FRAME[0][column]
    elif version in _LSF_VERSIONS:
        return SAMPLES_PER_FRAME[1][column]
    return 0


def compute_duration(version: Version, layer: Layer,
                     sampling_freq: int) -> float | None:
    """Playback duration of one frame in seconds, truncated to whole
    nanoseconds. None if it can't be known."""

    if sampling_freq == 0:
        return None
    if version not in (Version.MPEG1, Version.MPEG2, Version.MPEG2_5):
        return None
    nanoseconds = samples_per_frame(version, layer) * 1_000_000_000
    return nanoseconds // sampling_freq / 1e9


def is_frame_header(header: int) -> bool:
    """If the 32 bit word looks like an MPEG audio frame header: sync
    bits set, no reserved layer, no bad bitrate index and no reserved
    sampling frequency.
    """

    return ((header & SYNC_MASK) == SYNC_MASK and
            (header >> 17) & 0x3 != 0 and
            (header >> 12) & 0xF != 0xF and
            (header >> 10) & 0x3 != 0x3)


def parse_frame(data: bytes, offset: int,
                position: float = 0.0) -> Frame | None:
    """Decodes the frame header at `offset`.

    Returns None if there is no valid frame header or if the frame size
    can't be computed (free format, invalid sampling frequency).
    `position` is stored as the playback time at which the frame starts.
    """

    if offset < 0 or len(data) - offset < 4:
        return None

    header = cdata.uint32_be_from(data, offset)[0]
    if not is_frame_header(header):
        return None

    version = Version.from_bits((header >> 19) & 0x3)
    layer = Layer.from_bits((header >> 17) & 0x3)

    bitrate = BITRATES[bitrate_row(version, layer)][(header >> 12) & 0xF]
    sampling_freq = SAMPLING_FREQ[sampling_row(version)][(header >> 10) & 0x3]
    padding = bool((header >> 9) & 0x1)

    if sampling_freq == 0:
        return None
    size = (samples_per_frame(version, layer) // 8 * bitrate * 1000 //
            sampling_freq)
    if size < 1:
        return None
    if padding:
        size += 1

    chan_type = ChannelType.from_bits((header >> 6) & 0x3)
    intensity_stereo = ms_stereo = False
    if chan_type == ChannelType.JOINT_STEREO:
        mode_extension = (header >> 4) & 0x3
        intensity_stereo = bool(mode_extension & 0x1)
        ms_stereo = bool(mode_extension & 0x2)

    return Frame(
        size=size,
        version=version,
        layer=layer,
        crc=CRC.from_bits((header >> 16) & 0x1),
        bitrate=bitrate,
        sampling_freq=sampling_freq,
        padding=padding,
        private_bit=bool((header >> 8) & 0x1),
        chan_type=chan_type,
        intensity_stereo=intensity_stereo,
        ms_stereo=ms_stereo,
        copyright=Copyright.from_bits((header >> 3) & 0x1),
        status=Status.from_bits((header >> 2) & 0x1),
        emphasis=Emphasis.from_bits(header & 0x3),
        duration=compute_duration(version, layer, sampling_freq),
        position=position,
        offset=offset,
    )
