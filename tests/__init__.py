import re
import os
import sys
import struct
import contextlib
from io import StringIO
from tempfile import mkstemp
from unittest import TestCase as BaseTestCase

try:
    import pytest
except ImportError:
    raise SystemExit("pytest missing: sudo apt-get install python3-pytest")


def get_temp_empty(ext=""):
    """Returns an empty file with the extension"""

    fd, filename = mkstemp(suffix=ext)
    os.close(fd)
    return filename


def get_temp_file(data, ext=".ogg"):
    """Returns a file containing data with the extension"""

    filename = get_temp_empty(ext)
    with open(filename, "wb") as h:
        h.write(data)
    return filename


@contextlib.contextmanager
def capture_output():
    """
    with capture_output() as (stdout, stderr):
        some_action()
    print stdout.getvalue(), stderr.getvalue()
    """

    err = StringIO()
    out = StringIO()
    old_err = sys.stderr
    old_out = sys.stdout
    sys.stderr = err
    sys.stdout = out

    try:
        yield (out, err)
    finally:
        sys.stderr = old_err
        sys.stdout = old_out


def lacing_values(packets, complete=True):
    """The segment table for a list of packets"""

    lacings = []
    for packet in packets:
        quot, rem = divmod(len(packet), 255)
        lacings.extend([255] * quot + [rem])
    if not complete and lacings and lacings[-1] == 0:
        lacings.pop()
    return bytes(lacings)


def raw_page(lacings, data, sequence=0, capture=b"OggS"):
    """An Ogg page with the given segment table and data, CRC left 0"""

    header = capture + struct.pack(
        "<BBqIIi", 0, 0, 0, 0x1234, sequence, 0)
    return header + bytes([len(lacings)]) + bytes(lacings) + data


def ogg_page(packets, sequence=0, complete=True):
    """An Ogg page containing packets"""

    return raw_page(lacing_values(packets, complete), b"".join(packets),
                    sequence)


def vorbis_id_packet():
    return (b"\x01vorbis" + struct.pack("<IBIiii", 0, 2, 44100, 0, 128000, 0)
            + b"\xb8\x01")


def vorbis_comment_packet(comments=(), vendor=b"Xiph.Org libVorbis"):
    data = [b"\x03vorbis", struct.pack("<I", len(vendor)), vendor,
            struct.pack("<I", len(comments))]
    for comment in comments:
        data.append(struct.pack("<I", len(comment)))
        data.append(comment)
    data.append(b"\x01")
    return b"".join(data)


def vorbis_setup_packet(size=300):
    # last lacing value has to be >= 5, see the segment walk in loop.py
    assert size % 255 >= 5
    return b"\x05vorbis" + b"\x42" * (size - 7)


def vorbis_stream(comments=(), audio_pages=1):
    """A minimal Ogg Vorbis stream layout: id page, comment+setup page,
    audio pages"""

    pages = [
        ogg_page([vorbis_id_packet()], 0),
        ogg_page([vorbis_comment_packet(comments), vorbis_setup_packet()], 1),
    ]
    for i in range(audio_pages):
        pages.append(ogg_page([b"\x00" * 40, b"\x10" * 60], i + 2))
    return b"".join(pages)


class TestCase(BaseTestCase):

    def failUnlessRaisesRegexp(self, exc, re_, fun, *args, **kwargs):
        def wrapped(*args, **kwargs):
            try:
                fun(*args, **kwargs)
            except Exception as e:
                self.failUnless(re.search(re_, str(e)))
                raise
        self.failUnlessRaises(exc, wrapped, *args, **kwargs)

    # silence deprec warnings about useless renames
    failUnless = BaseTestCase.assertTrue
    failIf = BaseTestCase.assertFalse
    failUnlessEqual = BaseTestCase.assertEqual
    failUnlessRaises = BaseTestCase.assertRaises
    failIfEqual = BaseTestCase.assertNotEqual


def unit(run=[], exitfirst=False):
    args = []

    if run:
        args.append("-k")
        args.append(" or ".join(run))

    if exitfirst:
        args.append("-x")

    args.append("tests")

    return pytest.main(args=args)
