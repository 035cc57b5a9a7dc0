# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Enumerations decoded from MPEG frame headers and ID3 tags.

The frame header fields are 1 or 2 bits wide, so every ``from_bits``
mapping below covers all possible inputs. Values outside of the mapping
can only come from a caller passing unmasked data and map to the
``UNKNOWN`` (or otherwise conservative) member instead of raising.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import override

from ._constants import GENRES


class Version(Enum):
    """MPEG audio version"""

    RESERVED = 0
    MPEG1 = 1
    MPEG2 = 2
    MPEG2_5 = 3
    UNKNOWN = 4

    @classmethod
    def from_bits(cls, bits: int) -> Version:
        return _VERSION_BITS.get(bits, cls.UNKNOWN)


_VERSION_BITS = {
    0b00: Version.MPEG2_5,
    0b01: Version.RESERVED,
    0b10: Version.MPEG2,
    0b11: Version.MPEG1,
}


class Layer(Enum):
    """MPEG audio layer"""

    RESERVED = 0
    LAYER1 = 1
    LAYER2 = 2
    LAYER3 = 3
    UNKNOWN = 4

    @classmethod
    def from_bits(cls, bits: int) -> Layer:
        return _LAYER_BITS.get(bits, cls.UNKNOWN)


_LAYER_BITS = {
    0b00: Layer.RESERVED,
    0b01: Layer.LAYER3,
    0b10: Layer.LAYER2,
    0b11: Layer.LAYER1,
}


class CRC(Enum):
    """Whether the frame is protected by a 16 bit CRC following the
    header"""

    ADDED = 0
    """Redundancy added"""

    NOT_ADDED = 1
    """Redundancy not added"""

    @classmethod
    def from_bits(cls, bits: int) -> CRC:
        # the header bit is "protection absent"
        return cls.ADDED if bits == 0 else cls.NOT_ADDED


class ChannelType(Enum):
    """Channel mode"""

    STEREO = 0
    JOINT_STEREO = 1
    DUAL_CHANNEL = 2
    SINGLE_CHANNEL = 3
    UNKNOWN = 4

    @classmethod
    def from_bits(cls, bits: int) -> ChannelType:
        try:
            return cls(bits)
        except ValueError:
            return cls.UNKNOWN


class Copyright(Enum):

    NONE = 0
    SOME = 1

    @classmethod
    def from_bits(cls, bits: int) -> Copyright:
        return cls.NONE if bits == 0 else cls.SOME


class Status(Enum):
    """Whether the stream is a copy or the original media"""

    COPY = 0
    ORIGINAL = 1
    UNKNOWN = 2

    @classmethod
    def from_bits(cls, bits: int) -> Status:
        return _STATUS_BITS.get(bits, cls.UNKNOWN)


_STATUS_BITS = {
    0b0: Status.COPY,
    0b1: Status.ORIGINAL,
}


class Emphasis(Enum):

    NONE = 0
    """No emphasis"""

    MICRO_SECONDS = 1
    """50/15 micro seconds"""

    RESERVED = 2

    CCITT = 3
    """CCITT J.17"""

    UNKNOWN = 4

    @classmethod
    def from_bits(cls, bits: int) -> Emphasis:
        if 0 <= bits <= 3:
            return cls(bits)
        return cls.UNKNOWN


class CustomGenre(str):
    """A free text genre which doesn't refer to one of the ID3v1 genres.

    ::

        Genre.from_text("Foobar") == CustomGenre("Foobar")
    """

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"


class Genre(IntEnum):
    """The ID3v1 genres, valued by their numeric code.

    :attr:`UNKNOWN` stands for codes outside of the list (usually 255,
    meaning "no genre").
    """

    BLUES = 0
    CLASSIC_ROCK = 1
    COUNTRY = 2
    DANCE = 3
    DISCO = 4
    FUNK = 5
    GRUNGE = 6
    HIP_HOP = 7
    JAZZ = 8
    METAL = 9
    NEW_AGE = 10
    OLDIES = 11
    OTHER = 12
    POP = 13
    R_AND_B = 14
    RAP = 15
    REGGAE = 16
    ROCK = 17
    TECHNO = 18
    INDUSTRIAL = 19
    ALTERNATIVE = 20
    SKA = 21
    DEATH_METAL = 22
    PRANKS = 23
    SOUNDTRACK = 24
    EURO_TECHNO = 25
    AMBIENT = 26
    TRIP_HOP = 27
    VOCAL = 28
    JAZZ_FUNK = 29
    FUSION = 30
    TRANCE = 31
    CLASSICAL = 32
    INSTRUMENTAL = 33
    ACID = 34
    HOUSE = 35
    GAME = 36
    SOUND_CLIP = 37
    GOSPEL = 38
    NOISE = 39
    ALTERN_ROCK = 40
    BASS = 41
    SOUL = 42
    PUNK = 43
    SPACE = 44
    MEDITATIVE = 45
    INSTRUMENTAL_POP = 46
    INSTRUMENTAL_ROCK = 47
    ETHNIC = 48
    GOTHIC = 49
    DARKWAVE = 50
    TECHNO_INDUSTRIAL = 51
    ELECTRONIC = 52
    POP_FOLK = 53
    EURODANCE = 54
    DREAM = 55
    SOUTHERN_ROCK = 56
    COMEDY = 57
    CULT = 58
    GANGSTA = 59
    TOP40 = 60
    CHRISTIAN_RAP = 61
    POP_FUNK = 62
    JUNGLE = 63
    NATIVE_AMERICAN = 64
    CABARET = 65
    NEW_WAVE = 66
    PSYCHADELIC = 67
    RAVE = 68
    SHOWTUNES = 69
    TRAILER = 70
    LO_FI = 71
    TRIBAL = 72
    ACID_PUNK = 73
    ACID_JAZZ = 74
    POLKA = 75
    RETRO = 76
    MUSICAL = 77
    ROCK_AND_ROLL = 78
    HARD_ROCK = 79
    # extensions, not part of the original ID3v1 list
    FOLK = 80
    FOLK_ROCK = 81
    NATIONAL_FOLK = 82
    SWING = 83
    FAST_FUSION = 84
    BEBOB = 85
    LATIN = 86
    REVIVAL = 87
    CELTIC = 88
    BLUEGRASS = 89
    AVANTGARDE = 90
    GOTHIC_ROCK = 91
    PROGRESSIVE_ROCK = 92
    PSYCHEDELIC_ROCK = 93
    SYMPHONIC_ROCK = 94
    SLOW_ROCK = 95
    BIG_BAND = 96
    CHORUS = 97
    EASY_LISTENING = 98
    ACOUSTIC = 99
    HUMOUR = 100
    SPEECH = 101
    CHANSON = 102
    OPERA = 103
    CHAMBER_MUSIC = 104
    SONATA = 105
    SYMPHONY = 106
    BOOTY_BRASS = 107
    PRIMUS = 108
    PORN_GROOVE = 109
    SATIRE = 110
    SLOW_JAM = 111
    CLUB = 112
    TANGO = 113
    SAMBA = 114
    FOLKLORE = 115
    BALLAD = 116
    POWER_BALLAD = 117
    RHYTMIC_SOUL = 118
    FREESTYLE = 119
    DUET = 120
    PUNK_ROCK = 121
    DRUM_SOLO = 122
    A_CAPELA = 123
    EURO_HOUSE = 124
    DANCE_HALL = 125
    UNKNOWN = 255

    @classmethod
    def from_code(cls, code: int) -> Genre:
        """Maps an ID3v1 genre byte, anything not in the list is
        :attr:`UNKNOWN`."""

        if 0 <= code < len(GENRES):
            return cls(code)
        return cls.UNKNOWN

    @classmethod
    def from_text(cls, text: str) -> Genre | CustomGenre:
        """Maps the text of a genre frame.

        A number which fits into a byte refers to an ID3v1 genre,
        everything else is kept as a :class:`CustomGenre`.
        """

        if text.isdecimal() and len(text.lstrip("0")) <= 3:
            code = int(text)
            if code <= 0xFF:
                return cls.from_code(code)
        return CustomGenre(text)

    @property
    def display_name(self) -> str:
        if self is Genre.UNKNOWN:
            return "Unknown"
        return GENRES[self.value]

    @override
    def __str__(self) -> str:
        return self.display_name
