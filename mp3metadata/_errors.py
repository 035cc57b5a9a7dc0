# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.


class error(Exception):
    """Base class for all errors raised by mp3metadata.

    Catching this is enough to handle anything a parse can fail with.
    """

    __module__ = "mp3metadata"

    description = "mp3metadata error"
    """A human readable description of the error kind"""

    def __init__(self, *args: object):
        if not args:
            args = (self.description,)
        super().__init__(*args)


class FileError(error, IOError):
    """The file couldn't be opened or read"""

    description = "the file couldn't be opened or read"


class NotMP3(error, ValueError):
    """No MPEG audio frame was found in the data"""

    description = "not an MPEG audio stream"


class NoHeader(error, ValueError):
    """No recognizable header was found"""

    description = "no header found"


class DuplicatedIDV3(error, ValueError):
    """More than one ID3v1 tag was found"""

    description = "the stream contains more than one ID3v1 tag"


class InvalidData(error, ValueError):
    """The stream is structurally inconsistent"""

    description = "the stream contains invalid data"
