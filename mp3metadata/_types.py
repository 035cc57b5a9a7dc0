# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Result types.

Everything here is a plain dataclass, two parses of the same data compare
equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import override

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


class Url(str):
    """A URL taken from an ID3v2 URL frame. It isn't validated in any way."""

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


@dataclass
class Frame:
    """A decoded MPEG audio frame header"""

    size: int = 0
    """Frame size in bytes, including the header"""

    version: Version = Version.UNKNOWN
    layer: Layer = Layer.UNKNOWN
    crc: CRC = CRC.NOT_ADDED

    bitrate: int = 0
    """Bitrate in kbit/s, 0 for free format"""

    sampling_freq: int = 0
    """Sample rate in Hz, 0 if invalid"""

    padding: bool = False
    private_bit: bool = False
    chan_type: ChannelType = ChannelType.UNKNOWN

    intensity_stereo: bool = False
    """Only set for joint stereo"""

    ms_stereo: bool = False
    """Only set for joint stereo"""

    copyright: Copyright = Copyright.SOME
    status: Status = Status.UNKNOWN
    emphasis: Emphasis = Emphasis.UNKNOWN

    duration: float | None = None
    """Playback duration in seconds, None if the sample rate or version
    is invalid"""

    position: float = 0.0
    """Playback time in seconds at which this frame starts"""

    offset: int = 0
    """Byte offset of the frame header in the parsed data"""


@dataclass
class AudioTag:
    """An ID3v1 tag"""

    title: str = ""
    artist: str = ""
    album: str = ""
    year: int = 0
    comment: str = ""
    genre: Genre = Genre.UNKNOWN


@dataclass
class OptionalAudioTags:
    """The supported frames of one ID3v2 tag.

    Single value frames are None if missing, multi value frames empty
    lists. See http://id3.org/id3v2.3.0#Declared_ID3v2_frames for the
    meaning of each frame.
    """

    position: int = 0
    """Number of MPEG frames found before this tag"""

    major_version: int = 0
    minor_version: int = 0

    album_movie_show: str | None = None
    """TALB"""

    bpm: str | None = None
    """TBPM"""

    composers: list[str] = field(default_factory=list)
    """TCOM"""

    content_type: list[Genre | CustomGenre] = field(default_factory=list)
    """TCON, the genres"""

    copyright: str | None = None
    """TCOP"""

    date: str | None = None
    """TDAT, DDMM"""

    playlist_delay: str | None = None
    """TDLY, in milliseconds"""

    encoded_by: str | None = None
    """TENC"""

    text_writers: list[str] = field(default_factory=list)
    """TEXT, lyricists"""

    file_type: str | None = None
    """TFLT"""

    time: str | None = None
    """TIME, HHMM"""

    content_group_description: str | None = None
    """TIT1"""

    subtitle_refinement_description: str | None = None
    """TIT3"""

    title: str | None = None
    """TIT2"""

    initial_key: str | None = None
    """TKEY"""

    language: str | None = None
    """TLAN, ISO-639-2 codes"""

    length: str | None = None
    """TLEN, in milliseconds"""

    media_type: str | None = None
    """TMED"""

    original_album_move_show_title: str | None = None
    """TOAL"""

    original_filename: str | None = None
    """TOFN"""

    original_text_writers: list[str] = field(default_factory=list)
    """TOLY"""

    original_artists: list[str] = field(default_factory=list)
    """TOPE"""

    original_release_year: str | None = None
    """TORY"""

    file_owner: str | None = None
    """TOWN"""

    performers: list[str] = field(default_factory=list)
    """TPE1, lead artists"""

    band: str | None = None
    """TPE2"""

    conductor: str | None = None
    """TPE3"""

    interpreted: str | None = None
    """TPE4, remixed or otherwise modified by"""

    part_of_a_set: str | None = None
    """TPOS, e.g. 1/2"""

    publisher: str | None = None
    """TPUB"""

    track_number: str | None = None
    """TRCK, e.g. 4/9"""

    recording_dates: str | None = None
    """TRDA"""

    internet_radio_station_name: str | None = None
    """TRSN"""

    internet_radio_station_owner: str | None = None
    """TRSO"""

    size: str | None = None
    """TSIZ, audio size in bytes excluding the ID3v2 tag"""

    international_standard_recording_code: str | None = None
    """TSRC"""

    soft_hard_setting: str | None = None
    """TSSE, encoder and settings"""

    year: str | None = None
    """TYER"""

    involved_people: str | None = None
    """IPLS"""

    commercial_info_url: list[Url] = field(default_factory=list)
    """WCOM"""

    copyright_info_url: Url | None = None
    """WCOP"""

    official_webpage: Url | None = None
    """WOAF"""

    official_artist_webpage: list[Url] = field(default_factory=list)
    """WOAR"""

    official_audio_source_webpage: Url | None = None
    """WOAS"""

    official_internet_radio_webpage: Url | None = None
    """WORS"""

    payment_url: Url | None = None
    """WPAY"""

    publishers_official_webpage: Url | None = None
    """WPUB"""


@dataclass
class MP3Metadata:
    """Everything found in one MPEG audio stream"""

    duration: float = 0.0
    """Sum of all frame durations in seconds"""

    frames: list[Frame] = field(default_factory=list)
    tag: AudioTag | None = None

    optional_info: list[OptionalAudioTags] = field(default_factory=list)
    """One entry per ID3v2 tag with at least one supported frame"""

    def pprint(self) -> str:
        """A short human readable summary"""

        if self.frames:
            first = self.frames[0]
            s = "%s %s, %d kbps, %d Hz, %d frames, %.2f seconds" % (
                first.version.name, first.layer.name, first.bitrate,
                first.sampling_freq, len(self.frames), self.duration)
        else:
            s = "%d frames, %.2f seconds" % (len(self.frames), self.duration)
        if self.tag is not None:
            s += "\nID3v1: %s - %s (%s, %d, %s)" % (
                self.tag.artist, self.tag.title, self.tag.album,
                self.tag.year, self.tag.genre)
        for info in self.optional_info:
            s += "\nID3v2.%d.%d at frame %d" % (
                info.major_version, info.minor_version, info.position)
        return s
