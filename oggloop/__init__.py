# Copyright (C) 2005  Michael Urman
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""oggloop reads the loop points of Ogg Vorbis files.

    import oggloop
    info = oggloop.read(fileobj)
    info.loop_start, info.loop_length

The loop points are the LOOPSTART and LOOPLENGTH Vorbis comments as used
by RPG Maker and compatible players, in samples. Missing tags read as 0.
"""

from oggloop._util import OggLoopError
from oggloop.loop import OggLoop, Open, read
from oggloop.vorbis import LoopInfo

version: tuple[int, int, int] = (1, 0, 0)
"""Version tuple."""

version_string = ".".join(map(str, version))
"""Version string."""

__all__ = ["OggLoopError", "OggLoop", "Open", "LoopInfo", "read",
           "version", "version_string"]
