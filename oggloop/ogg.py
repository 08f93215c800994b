# Copyright (C) 2006  Joe Wreschnig
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Read Ogg page headers and segment tables from a forward-only stream.

This module reads the subset of the Ogg bitstream format version 0 needed
to walk the header packets at the start of a stream. Nothing is ever
written, and the page CRC, granule position, serial and sequence numbers
are skipped without being looked at.

This implementation is based on the RFC 3533 standard found at
http://www.xiph.org/ogg/doc/rfc3533.txt.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from oggloop._util import ByteSource, OggLoopError, read_full, skip_bytes

logger = logging.getLogger(__name__)


class error(OggLoopError):
    """Ogg stream parsing errors."""

    pass


class OggTruncatedError(error):
    """The stream ended before a page or segment was complete."""

    pass


class OggLengthError(error, ValueError):
    """A read or skip length derived from the segment table is negative."""

    pass


class OggEndOfStream(EOFError):
    """No further Ogg page starts at the current position."""

    pass


def read_exact(fileobj: ByteSource, size: int) -> bytes:
    """Returns exactly `size` bytes.

    Raises OggLengthError, OggTruncatedError
    """

    if size < 0:
        raise OggLengthError(f"read length should be positive: {size}")
    data = read_full(fileobj, size)
    if len(data) != size:
        raise OggTruncatedError(
            f"unable to read {size} bytes; got {len(data)}")
    return data


def skip(fileobj: ByteSource, size: int) -> None:
    """Discards exactly `size` bytes.

    Raises OggLengthError, OggTruncatedError
    """

    if size < 0:
        raise OggLengthError(f"skip length should be positive: {size}")
    skipped = skip_bytes(fileobj, size)
    if skipped != size:
        raise OggTruncatedError(
            f"unable to skip {size} bytes; stream ended after {skipped}")


def packet_size(lacings: bytes, index: int = 0) -> tuple[int, int]:
    """Sum up the lacing values of the packet starting at `index`.

    A lacing value of 255 means the packet continues in the next segment,
    anything smaller ends it. A packet still open at the end of the table
    is cut off there; the continuation on the next page is not followed.

    Returns a tuple of the packet size and the index of the first lacing
    value after the packet.
    """

    size = 0
    while index < len(lacings):
        value = lacings[index]
        size += value
        index += 1
        if value < 255:
            break
    return size, index


class OggPageHeader:
    """The header of a single Ogg page, up to and including its segment table.

    A page header is 27 bytes, followed by the segment table, followed by
    the page data. Only the capture pattern and the segment table are
    interpreted; the other 22 bytes are skipped.

    The constructor is given a file-like object pointing to the start
    of an Ogg page. After the constructor is finished it is pointing
    to the start of the page data.

    Attributes:
        lacings (`bytes`): the segment table, one lacing value per segment
    """

    CAPTURE_PATTERN = b"OggS"
    # version, header type, granule position, serial, sequence, crc
    FIXED_SIZE = 22

    lacings: bytes

    def __init__(self, fileobj: ByteSource):
        """Raises OggEndOfStream, OggTruncatedError"""

        oggs = read_full(fileobj, len(self.CAPTURE_PATTERN))
        if oggs != self.CAPTURE_PATTERN:
            raise OggEndOfStream(
                f"read {oggs!r}, expected {self.CAPTURE_PATTERN!r}")

        skip(fileobj, self.FIXED_SIZE)
        segments = read_exact(fileobj, 1)[0]
        self.lacings = read_exact(fileobj, segments)

    def __repr__(self):
        return "<%s %d segments, %d bytes in %d packets>" % (
            type(self).__name__, len(self.lacings), self.data_size,
            len(self.packet_sizes()))

    @property
    def data_size(self) -> int:
        """Total size of the page data following the header."""

        return sum(self.lacings)

    def packet_sizes(self) -> list[int]:
        """Partition the segment table into packet sizes."""

        sizes: list[int] = []
        index = 0
        while index < len(self.lacings):
            size, index = packet_size(self.lacings, index)
            sizes.append(size)
        return sizes

    @classmethod
    def iter_pages(cls, fileobj: ByteSource) -> Iterator[OggPageHeader]:
        """Yield page headers until no capture pattern is found.

        The page data has to be consumed before asking for the next page.
        """

        while True:
            try:
                page = cls(fileobj)
            except OggEndOfStream as e:
                logger.debug("end of Ogg pages: %s", e)
                return
            logger.debug("read %r", page)
            yield page
