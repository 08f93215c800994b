# Copyright 2006 Joe Wreschnig
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Read loop points from the Vorbis comment of an Ogg Vorbis stream.

The stream is read once from the start, without seeking, and only as far
as the Vorbis header packets go. Pages are walked segment by segment; the
scan stops at the first page that does not start with "OggS" or that
carries no Vorbis header packet at all, since all headers come before the
audio data.
"""

from __future__ import annotations

import logging

from oggloop._filething import FileThing
from oggloop._util import ByteSource, OggLoopError, loadfile
from oggloop.ogg import OggPageHeader, packet_size, read_exact, skip
from oggloop.vorbis import (
    DISCRIMINATOR_SIZE,
    HEADER_COMMENT,
    HEADER_IDENTIFICATION,
    HEADER_SETUP,
    LoopInfo,
    VorbisHeader,
    parse_loop_tags,
)

logger = logging.getLogger(__name__)

_HEADER_NAMES = {
    HEADER_IDENTIFICATION: "identification",
    HEADER_COMMENT: "comment",
    HEADER_SETUP: "setup",
}


def _scan_page(fileobj: ByteSource, page: OggPageHeader,
               info: LoopInfo) -> tuple[bool, LoopInfo]:
    """Consume the data of `page`.

    Returns whether a Vorbis header was seen and the updated loop info.
    """

    lacings = page.lacings
    header_found = False
    index = 0
    while index < len(lacings):
        header = VorbisHeader.read(fileobj)
        if not header.is_vorbis:
            skip(fileobj, lacings[index] - DISCRIMINATOR_SIZE)
            index += 1
            continue

        header_found = True
        if header.packet_type != HEADER_COMMENT:
            logger.debug("skipping Vorbis %s header", _HEADER_NAMES.get(
                header.packet_type, "unknown (%d)" % header.packet_type))
            skip(fileobj, lacings[index] - DISCRIMINATOR_SIZE)
            index += 1
            continue

        size, index = packet_size(lacings, index)
        logger.debug("reading Vorbis comment header, %d bytes", size)
        payload = read_exact(fileobj, size - DISCRIMINATOR_SIZE)
        info = parse_loop_tags(payload, info)

    return header_found, info


def read(fileobj: ByteSource) -> LoopInfo:
    """Read the LOOPSTART and LOOPLENGTH tags of an Ogg Vorbis stream.

    `fileobj` needs a ``read(size)`` method and has to be positioned at
    the start of an Ogg page. Missing tags are returned as 0. Data that
    isn't Ogg at all results in ``LoopInfo(0, 0)``.

    Raises:
        oggloop.ogg.OggTruncatedError: the stream ended inside a page
        oggloop.ogg.OggLengthError: the segment table is inconsistent
        OSError: reading from `fileobj` failed
    """

    info = LoopInfo()
    for page in OggPageHeader.iter_pages(fileobj):
        header_found, info = _scan_page(fileobj, page, info)
        if not header_found:
            logger.debug("no Vorbis header in page, stopping")
            break
    return info


class OggLoop:
    """OggLoop(filething)

    Loop points of an Ogg Vorbis file.

    Arguments:
        filething (filething)

    Attributes:
        info (`LoopInfo`)
        filename (`str` or `None`)
    """

    info: LoopInfo = LoopInfo()
    filename: str | bytes | None = None

    def __init__(self, *args, **kwargs):
        if args or kwargs:
            self.load(*args, **kwargs)

    def __repr__(self):
        return "<%s filename=%r start=%d length=%d>" % (
            type(self).__name__, self.filename, self.loop_start,
            self.loop_length)

    @loadfile()
    def load(self, filething: FileThing) -> None:
        """load(filething)

        Raises:
            OggLoopError: reading failed or the stream is broken
        """

        self.filename = filething.filename
        try:
            self.info = read(filething.fileobj)
        except OSError as e:
            raise OggLoopError(e) from e

    @property
    def loop_start(self) -> int:
        return self.info.loop_start

    @property
    def loop_length(self) -> int:
        return self.info.loop_length

    def pprint(self) -> str:
        """Print loop information."""

        return self.info.pprint()


Open = OggLoop
