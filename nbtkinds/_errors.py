"""NBT tag-registry error codes and exception classes.

Only one failure originates in the registry itself: a byte that names no
tag kind.  The name lookup used by diagnostics adds a second.  Both carry
a stable `.code` string so callers compare codes, not messages.
"""

from __future__ import annotations

from typing import Any

ERR_UNKNOWN_TAG: str = "ERR_UNKNOWN_TAG"    # byte outside the code space
ERR_UNKNOWN_NAME: str = "ERR_UNKNOWN_NAME"  # name matches no kind


class NbtError(Exception):
    """Base exception for NBT processing errors.

    The `.code` attribute is one of the ERR_* strings above.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code


class UnknownTagCode(NbtError, LookupError):
    """A tag code outside the defined kinds was looked up.

    Raised by the code-to-kind direction only.  The offending value is
    kept verbatim in `.tag_code` so a reader can report the stream
    offset and byte together.
    """

    def __init__(self, tag_code: Any) -> None:
        super().__init__(ERR_UNKNOWN_TAG, "unknown tag type {!r}".format(tag_code))
        self.tag_code = tag_code


class UnknownTagName(NbtError, LookupError):
    """A kind name given to the diagnostic lookup matched nothing."""

    def __init__(self, name: str) -> None:
        super().__init__(ERR_UNKNOWN_NAME, "unknown tag name {!r}".format(name))
        self.name = name
