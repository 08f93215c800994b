from typing import Any, NamedTuple


class FileThing(NamedTuple):
    """
    filename is None if the source is not a filename.
    name is a filename which can be used in messages.
    """
    fileobj: Any
    filename: str | bytes | None
    name: str | bytes | None
