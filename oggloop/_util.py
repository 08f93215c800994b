# Copyright 2006 Joe Wreschnig
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.

"""Utility classes for oggloop.

You should not rely on the interfaces here being stable. They are
intended for internal use in oggloop only.
"""

from __future__ import annotations

import contextlib
import os
from collections.abc import Callable, Iterator
from functools import wraps
from typing import Any, Protocol, TypeVar

from oggloop._filething import FileThing


class OggLoopError(Exception):
    """Base class for all custom exceptions in oggloop

    .. versionadded:: 1.0
    """

    __module__ = "oggloop"


class ByteSource(Protocol):
    """Anything with a blocking ``read(size)`` returning bytes."""

    def read(self, size: int = -1, /) -> bytes: ...


# chunk size used when discarding data
_SKIP_BUFFER_SIZE = 2 ** 16


def read_full(fileobj: ByteSource, size: int) -> bytes:
    """Read exactly `size` bytes from `fileobj`.

    Keeps reading until enough data is collected, so sources returning
    partial reads (pipes, sockets) work too. Returns less than `size`
    bytes only if the source is exhausted; the caller decides whether
    that is an error.

    Raises:
        ValueError: if size is negative
    """

    if size < 0:
        raise ValueError(f"negative read size: {size}")

    data = fileobj.read(size)
    if len(data) == size:
        return data

    parts = [data]
    missing = size - len(data)
    while missing > 0 and data:
        data = fileobj.read(missing)
        parts.append(data)
        missing -= len(data)
    return b"".join(parts)


def skip_bytes(fileobj: ByteSource, size: int,
               BUFFER_SIZE: int = _SKIP_BUFFER_SIZE) -> int:
    """Read and discard `size` bytes without seeking.

    Returns the number of bytes actually discarded, which is smaller
    than `size` if the source ran out of data.

    Raises:
        ValueError: if size is negative
    """

    if size < 0:
        raise ValueError(f"negative skip size: {size}")

    skipped = 0
    while skipped < size:
        data = read_full(fileobj, min(size - skipped, BUFFER_SIZE))
        skipped += len(data)
        if not data:
            break
    return skipped


@contextlib.contextmanager
def _openfile(filething: Any, filename: Any,
              fileobj: Any) -> Iterator[FileThing]:
    """yields a FileThing

    Args:
        filething: Either a file name, a file object or None
        filename: Either a file name or None
        fileobj: Either a file object or None
    Raises:
        OggLoopError: In case opening the file failed
        TypeError: in case neither a file name or a file object is passed
    """

    if filething is not None:
        if hasattr(filething, "read"):
            fileobj = filething
        else:
            filename = filething

    if fileobj is not None:
        name = getattr(fileobj, "name", None)
        if not isinstance(name, (str, bytes)):
            name = None
        yield FileThing(fileobj, None, name)
        return

    if filename is None:
        raise TypeError("Missing filename or fileobj argument")

    filename = os.fspath(filename)
    try:
        fileobj = open(filename, "rb")
    except OSError as e:
        raise OggLoopError(e) from e

    with fileobj:
        yield FileThing(fileobj, filename, filename)


_F = TypeVar("_F", bound=Callable[..., Any])


def loadfile(method: bool = True) -> Callable[[_F], _F]:
    """A decorator for functions taking a `filething` as a first argument.

    Passes a FileThing instance as the first argument to the wrapped
    function. A file object passed in is left open, a file opened from a
    file name is closed once the wrapped function returns.

    Args:
        method (bool): If the wrapped functions is a method
    """

    def convert_file_args(args: tuple[Any, ...],
                          kwargs: dict[str, Any]) -> tuple[Any, Any, Any]:
        filething = args[0] if args else None
        filename = kwargs.pop("filename", None)
        fileobj = kwargs.pop("fileobj", None)
        return filething, filename, fileobj

    def wrap(func: _F) -> _F:

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            filething, filename, fileobj = convert_file_args(args, kwargs)
            with _openfile(filething, filename, fileobj) as h:
                return func(self, h, *args[1:], **kwargs)

        @wraps(func)
        def wrapper_func(*args, **kwargs):
            filething, filename, fileobj = convert_file_args(args, kwargs)
            with _openfile(filething, filename, fileobj) as h:
                return func(h, *args[1:], **kwargs)

        return wrapper if method else wrapper_func  # type: ignore

    return wrap
