"""nbtkinds — the NBT tag-type registry.

Maps the single-byte type codes of the NBT binary format to the twelve
value kinds and back.  Readers, writers and value models build on this
module to decide which payload parser to run next.

Quick start:
    >>> from nbtkinds import TagKind, code_for_kind, find_kind, kind_for_code
    >>> kind_for_code(10)
    <TagKind.COMPOUND: 10>
    >>> code_for_kind(TagKind.STRING)
    8

Unknown codes are reported, never defaulted:
    >>> find_kind(12) is None
    True
    >>> kind_for_code(12)
    Traceback (most recent call last):
      ...
    nbtkinds._errors.UnknownTagCode: unknown tag type 12
"""

from __future__ import annotations

from ._constants import (
    MAX_TAG_CODE,
    MIN_TAG_CODE,
    TAG_BYTE,
    TAG_BYTE_ARRAY,
    TAG_COMPOUND,
    TAG_DOUBLE,
    TAG_END,
    TAG_FLOAT,
    TAG_INT,
    TAG_INT_ARRAY,
    TAG_KIND_COUNT,
    TAG_LIST,
    TAG_LONG,
    TAG_SHORT,
    TAG_STRING,
    __format_version__,
)
from ._errors import (
    ERR_UNKNOWN_NAME,
    ERR_UNKNOWN_TAG,
    NbtError,
    UnknownTagCode,
    UnknownTagName,
)
from ._kinds import (
    TagKind,
    all_kinds,
    code_for_kind,
    find_kind,
    is_valid_code,
    kind_for_code,
    kind_for_name,
    parse_code,
)

__version__ = "1.0.0"

__all__ = [
    # Registry
    "TagKind",
    "find_kind",
    "kind_for_code",
    "code_for_kind",
    "all_kinds",
    "is_valid_code",
    "kind_for_name",
    "parse_code",
    # Exceptions
    "NbtError",
    "UnknownTagCode",
    "UnknownTagName",
    # Error codes
    "ERR_UNKNOWN_TAG",
    "ERR_UNKNOWN_NAME",
    # Wire codes
    "TAG_END",
    "TAG_BYTE",
    "TAG_SHORT",
    "TAG_INT",
    "TAG_LONG",
    "TAG_FLOAT",
    "TAG_DOUBLE",
    "TAG_BYTE_ARRAY",
    "TAG_STRING",
    "TAG_LIST",
    "TAG_COMPOUND",
    "TAG_INT_ARRAY",
    "MIN_TAG_CODE",
    "MAX_TAG_CODE",
    "TAG_KIND_COUNT",
]
