# Copyright 2026 The mp3metadata authors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Prints frames and tags of MPEG audio files."""

from __future__ import annotations

import argparse
import logging
import os
import signal
import sys
from dataclasses import fields
from types import FrameType

from mp3metadata import Frame, MP3Metadata, OptionalAudioTags


class Arguments(argparse.Namespace):
    files: list[str] = []
    frames: int = 5
    debug: bool = False


def _abort(signum: int, frame: FrameType | None) -> None:
    raise SystemExit("Aborted...")


def install_signal_handlers() -> None:
    _ = signal.signal(signal.SIGINT, _abort)
    _ = signal.signal(signal.SIGTERM, _abort)
    if os.name != "nt":
        _ = signal.signal(signal.SIGHUP, _abort)


def format_frame(frame: Frame) -> str:
    duration = "?" if frame.duration is None else "%.4fs" % frame.duration
    return "@%d %s %s %d kbps %d Hz %s %s (%d bytes, %s at %.3fs)" % (
        frame.offset, frame.version.name, frame.layer.name, frame.bitrate,
        frame.sampling_freq, frame.chan_type.name, frame.crc.name,
        frame.size, duration, frame.position)


def format_optional(info: OptionalAudioTags) -> list[str]:
    lines = ["ID3v2.%d.%d at frame %d" % (
        info.major_version, info.minor_version, info.position)]
    for f in fields(info):
        if f.name in ("position", "major_version", "minor_version"):
            continue
        value = getattr(info, f.name)
        if value is None or value == []:
            continue
        if isinstance(value, list):
            value = ", ".join(map(str, value))
        lines.append("  %s=%s" % (f.name, value))
    return lines


def format_metadata(meta: MP3Metadata, max_frames: int) -> list[str]:
    lines = meta.pprint().splitlines()
    for frame in meta.frames[:max_frames]:
        lines.append("  " + format_frame(frame))
    if len(meta.frames) > max_frames:
        lines.append("  ... %d more" % (len(meta.frames) - max_frames))
    if meta.tag is not None:
        lines.append("ID3v1 comment=%s" % meta.tag.comment)
    for info in meta.optional_info:
        lines.extend(format_optional(info))
    return lines


def main(argv: list[str]) -> None:
    from mp3metadata import error, read_from_file

    parser = argparse.ArgumentParser(usage="%(prog)s [options] FILE [FILE...]")
    parser.add_argument(
        "--frames", type=int, default=5, metavar="N",
        help="Number of frames to print per file (default 5)")
    parser.add_argument(
        "--debug", action="store_true", help="Print debug messages")
    parser.add_argument(
        "files", nargs="+", metavar="FILE", help="Files to inspect")

    args = parser.parse_args(argv[1:], namespace=Arguments())

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    for filename in args.files:
        print("--", filename)
        try:
            meta = read_from_file(filename)
        except error as err:
            print("-", str(err))
        else:
            for line in format_metadata(meta, max(args.frames, 0)):
                print("-", line)
        print("")


def entry_point() -> None:
    install_signal_handlers()
    return main(sys.argv)
