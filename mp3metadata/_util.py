# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Utility classes for mp3metadata.

You should not rely on the interfaces here being stable. They are
intended for internal use in mp3metadata only.
"""

from __future__ import annotations

import struct
from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

P = ParamSpec("P")
R = TypeVar("R")


def convert_error(exc_src: type[BaseException] |
                  tuple[type[BaseException], ...],
                  exc_dest: type[Exception]
                  ) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """A decorator for reraising exceptions with a different type.
    Mostly useful for IOError.

    Args:
        exc_src (type): The source exception type
        exc_dest (type): The target exception type.
    """

    def wrap(func: Callable[P, R]) -> Callable[P, R]:

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return func(*args, **kwargs)
            except exc_dest:
                raise
            except exc_src as err:
                raise exc_dest(err) from err

        return wrapper

    return wrap


def _create_struct_funcs(prefix: str, fmt: str):
    s = struct.Struct(fmt)

    def unpack_from(data: bytes, offset: int = 0) -> tuple[int, int]:
        return s.unpack_from(data, offset)[0], offset + s.size

    return {
        prefix: lambda data: s.unpack(data)[0],
        prefix + "_from": unpack_from,
    }


class cdata:
    """C character buffer to Python numeric type conversions.

    For each type there is a plain function taking exactly the right
    amount of bytes and a ``*_from`` variant taking a buffer and an offset
    which returns the value and the offset past it.
    """

    uint32_be: Callable[[bytes], int]
    uint32_be_from: Callable[[bytes, int], tuple[int, int]]
    uint32_le: Callable[[bytes], int]
    uint32_le_from: Callable[[bytes, int], tuple[int, int]]

    for _name, _fmt in [("uint32_be", ">I"), ("uint32_le", "<I")]:
        for _key, _func in _create_struct_funcs(_name, _fmt).items():
            locals()[_key] = staticmethod(_func)
    del _name, _fmt, _key, _func

    @staticmethod
    def uint24_be(data: bytes) -> int:
        """Three byte unsigned big endian integer (ID3v2.2 frame sizes)"""

        return struct.unpack(">I", b"\x00" + data)[0]


class BitPaddedInt(int):
    """An integer stored using only the low `bits` bits of each byte.

    ID3v2 stores its sizes as "sync-safe" integers: four bytes with the
    top bit cleared, giving 28 significant bits.
    """

    bits: int
    bigendian: bool

    def __new__(cls, value: int | bytes, bits: int = 7,
                bigendian: bool = True) -> BitPaddedInt:

        mask = (1 << bits) - 1
        numeric_value = 0
        shift = 0

        if isinstance(value, int):
            while value:
                numeric_value += (value & mask) << shift
                value >>= 8
                shift += bits
        elif isinstance(value, (bytes, bytearray, memoryview)):
            data = bytes(value)
            if bigendian:
                data = data[::-1]
            for byte in data:
                numeric_value += (byte & mask) << shift
                shift += bits
        else:
            raise TypeError

        self = int.__new__(cls, numeric_value)
        self.bits = bits
        self.bigendian = bigendian
        return self


class unsynch:

    @staticmethod
    def decode(value: bytes) -> bytes:
        """Reverses ID3v2 unsynchronisation: every ``FF 00`` becomes ``FF``.

        Unlike a strict decoder this never rejects input, any other byte
        sequence is passed through unchanged.
        """

        output = bytearray()
        append = output.append
        skip = False
        for val in value:
            if skip:
                skip = False
                if val == 0x00:
                    continue
            append(val)
            skip = val == 0xFF
        return bytes(output)
