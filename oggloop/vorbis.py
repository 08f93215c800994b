# Copyright 2005 Joe Wreschnig
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Recognize Vorbis header packets and read loop tags from comments.

Only the first five bytes of a header packet (the packet type and the
start of the codec signature) are looked at. The comment header is not
parsed as a list of Vorbis comments; its payload is searched for
``LOOPSTART=<digits>`` and ``LOOPLENGTH=<digits>`` as RPG Maker does.

Specification at http://www.xiph.org/vorbis/doc/v-comment.html.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from oggloop._util import ByteSource
from oggloop.ogg import read_exact

logger = logging.getLogger(__name__)

HEADER_IDENTIFICATION = 1
HEADER_COMMENT = 3
HEADER_SETUP = 5

# Only "vorb" of "vorbis" is compared; looser than the codec identification
# but what existing players accept.
SIGNATURE = b"vorb"
DISCRIMINATOR_SIZE = 1 + len(SIGNATURE)

_LOOP_START_RE = re.compile(rb"LOOPSTART=([0-9]+)")
_LOOP_LENGTH_RE = re.compile(rb"LOOPLENGTH=([0-9]+)")


class VorbisHeader(NamedTuple):
    """The leading bytes of a packet.

    Attributes:
        packet_type (`int`): the first byte of the packet
        signature (`bytes`): the following four bytes
    """

    packet_type: int
    signature: bytes

    @classmethod
    def read(cls, fileobj: ByteSource) -> VorbisHeader:
        """Consumes DISCRIMINATOR_SIZE bytes.

        Raises OggTruncatedError
        """

        data = read_exact(fileobj, DISCRIMINATOR_SIZE)
        return cls(data[0], data[1:])

    @property
    def is_vorbis(self) -> bool:
        return self.signature == SIGNATURE

    @property
    def is_comment(self) -> bool:
        return self.is_vorbis and self.packet_type == HEADER_COMMENT


class LoopInfo(NamedTuple):
    """Loop points of a stream in samples.

    A value of 0 means either that the tag was missing or that it was
    present and set to 0; the two cases can't be told apart.

    Attributes:
        loop_start (`int`): first sample of the loop
        loop_length (`int`): number of samples in the loop
    """

    loop_start: int = 0
    loop_length: int = 0

    @property
    def loop_end(self) -> int:
        """First sample after the loop."""

        return self.loop_start + self.loop_length

    def pprint(self) -> str:
        return "Ogg Vorbis loop, start %d, length %d samples" % (
            self.loop_start, self.loop_length)


def _search_int(pattern: re.Pattern[bytes], data: bytes) -> int | None:
    match = pattern.search(data)
    if match is None:
        return None
    digits = match.group(1)
    # the pattern only captures ASCII digits
    assert digits.isdigit(), digits
    return int(digits)


def parse_loop_tags(payload: bytes, info: LoopInfo = LoopInfo()) -> LoopInfo:
    """Returns `info` updated with the loop tags found in `payload`.

    Each tag is looked up independently and only its first occurrence is
    used. Fields without a matching tag keep their value from `info`.
    """

    loop_start = _search_int(_LOOP_START_RE, payload)
    if loop_start is not None:
        logger.debug("found LOOPSTART=%d", loop_start)
        info = info._replace(loop_start=loop_start)

    loop_length = _search_int(_LOOP_LENGTH_RE, payload)
    if loop_length is not None:
        logger.debug("found LOOPLENGTH=%d", loop_length)
        info = info._replace(loop_length=loop_length)

    return info
