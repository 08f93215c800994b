# Copyright 2005 Joe Wreschnig
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Loop points for any given Ogg Vorbis file."""

from __future__ import annotations

import argparse
import logging
import sys

from ._util import SignalHandler

_sig = SignalHandler()


class Arguments(argparse.Namespace):
    files: list[str] = []
    raw: bool = False
    debug: bool = False


def main(argv: list[str]) -> int:
    from oggloop import OggLoop, OggLoopError

    parser = argparse.ArgumentParser(usage="%(prog)s [options] FILE [FILE...]")
    parser.add_argument(
        "--raw", action="store_true",
        help="Print only the loop start and length in samples")
    parser.add_argument(
        "--debug", action="store_true", help="Log how the file is read")
    parser.add_argument(
        "files", nargs="+", metavar="FILE", help="Files to inspect")

    args = parser.parse_args(argv[1:], namespace=Arguments())

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    status = 0
    for filename in args.files:
        try:
            loop = OggLoop(filename)
        except OggLoopError as err:
            status = 1
            if args.raw:
                print(f"{filename}: {err}", file=sys.stderr)
            else:
                print("--", filename)
                print(str(err))
                print("")
            continue

        if args.raw:
            print(loop.loop_start, loop.loop_length)
        else:
            print("--", filename)
            print("-", loop.pprint())
            print("")

    return status


def entry_point() -> int:
    _sig.init()
    return main(sys.argv)
