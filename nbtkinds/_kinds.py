"""NBT tag-type registry — the closed set of kinds and the code bijection.

The twelve kinds and their wire codes:

    END         (0x00)  — closes a Compound, carries nothing
    BYTE        (0x01)  — int8
    SHORT       (0x02)  — int16
    INT         (0x03)  — int32
    LONG        (0x04)  — int64
    FLOAT       (0x05)  — IEEE-754 binary32
    DOUBLE      (0x06)  — IEEE-754 binary64
    BYTE_ARRAY  (0x07)  — length-prefixed int8 sequence
    STRING      (0x08)  — length-prefixed text
    LIST        (0x09)  — sequence of one element kind
    COMPOUND    (0x0A)  — named fields, END-terminated
    INT_ARRAY   (0x0B)  — length-prefixed int32 sequence

Lookup philosophy: the code space is dense, so code -> kind is a range
check plus a tuple index.  An unknown code is an expected outcome when
reading untrusted streams; it is never mapped to a default kind, because
treating garbage as END would silently close a Compound early.
"""

from __future__ import annotations

import enum
import string
from typing import Any, Dict, Optional, Tuple

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
)
from ._errors import UnknownTagCode, UnknownTagName


# ── Per-code facts ────────────────────────────────────────────
# Indexed by code.  Diagnostic names follow the spelling NBT tooling
# has always printed.

_TAG_NAMES: Tuple[str, ...] = (
    "TAG_End",
    "TAG_Byte",
    "TAG_Short",
    "TAG_Int",
    "TAG_Long",
    "TAG_Float",
    "TAG_Double",
    "TAG_Byte_Array",
    "TAG_String",
    "TAG_List",
    "TAG_Compound",
    "TAG_Int_Array",
)

# Fixed payload width in bytes; None where a length prefix decides.
_PAYLOAD_SIZES: Tuple[Optional[int], ...] = (
    0, 1, 2, 4, 8, 4, 8,
    None, None, None, None, None,
)

_NUMERIC_CODES = frozenset(
    (TAG_BYTE, TAG_SHORT, TAG_INT, TAG_LONG, TAG_FLOAT, TAG_DOUBLE))
_ARRAY_CODES = frozenset((TAG_BYTE_ARRAY, TAG_INT_ARRAY))
_CONTAINER_CODES = frozenset((TAG_LIST, TAG_COMPOUND))


class TagKind(enum.Enum):
    """One of the twelve NBT value kinds.

    The member value is the wire code.  This is a plain Enum, not an
    IntEnum: a kind never compares equal to its code, so a stray int
    cannot stand in for a kind by accident.
    """

    END = TAG_END
    BYTE = TAG_BYTE
    SHORT = TAG_SHORT
    INT = TAG_INT
    LONG = TAG_LONG
    FLOAT = TAG_FLOAT
    DOUBLE = TAG_DOUBLE
    BYTE_ARRAY = TAG_BYTE_ARRAY
    STRING = TAG_STRING
    LIST = TAG_LIST
    COMPOUND = TAG_COMPOUND
    INT_ARRAY = TAG_INT_ARRAY

    @property
    def code(self) -> int:
        return self.value

    @property
    def tag_name(self) -> str:
        return _TAG_NAMES[self.value]

    @property
    def payload_size(self) -> Optional[int]:
        return _PAYLOAD_SIZES[self.value]

    @property
    def is_sentinel(self) -> bool:
        """True for END only.

        END terminates a Compound's field list.  Whether a standalone
        END value is acceptable is up to the value model.
        """
        return self is TagKind.END

    @property
    def is_numeric(self) -> bool:
        return self.value in _NUMERIC_CODES

    @property
    def is_array(self) -> bool:
        return self.value in _ARRAY_CODES

    @property
    def is_container(self) -> bool:
        return self.value in _CONTAINER_CODES

    @property
    def element_kind(self) -> Optional["TagKind"]:
        """Element kind of a primitive array, None for everything else.

        LIST elements are declared per list on the wire, so LIST has no
        fixed element kind here.
        """
        if self is TagKind.BYTE_ARRAY:
            return TagKind.BYTE
        if self is TagKind.INT_ARRAY:
            return TagKind.INT
        return None

    def __str__(self) -> str:
        return self.tag_name


# ── Lookup tables (built once, never mutated) ─────────────────

_BY_CODE: Tuple[TagKind, ...] = tuple(
    sorted(TagKind, key=lambda k: k.value))


def _name_key(name: str) -> str:
    """Fold "IntArray", "INT_ARRAY" and "TAG_Int_Array" to one key."""
    key = name.strip().lower()
    if key.startswith("tag_"):
        key = key[4:]
    return key.replace("_", "")


_BY_NAME: Dict[str, TagKind] = {_name_key(k.name): k for k in TagKind}


def _check_table() -> None:
    """Fail at import if the table is not a bijection over the code space."""
    codes = [k.value for k in _BY_CODE]
    if codes != list(range(MIN_TAG_CODE, MAX_TAG_CODE + 1)):
        raise RuntimeError("tag codes are not dense over {}..{}: {}".format(
            MIN_TAG_CODE, MAX_TAG_CODE, codes))
    if len(_BY_CODE) != TAG_KIND_COUNT:
        raise RuntimeError("expected {} tag kinds, found {}".format(
            TAG_KIND_COUNT, len(_BY_CODE)))
    for table in (_TAG_NAMES, _PAYLOAD_SIZES):
        if len(table) != TAG_KIND_COUNT:
            raise RuntimeError("per-code table has {} rows, expected {}".format(
                len(table), TAG_KIND_COUNT))
    if len(_BY_NAME) != TAG_KIND_COUNT:
        raise RuntimeError("tag kind names collide after folding")


_check_table()


# ── Public helpers ────────────────────────────────────────────

def _as_code(code: Any) -> int:
    """Normalize a lookup argument to an int code.

    A single raw byte (bytes of length 1) reads as unsigned.  bool is
    rejected even though it subclasses int: True is not tag code 1.
    """
    if isinstance(code, (bytes, bytearray)):
        if len(code) != 1:
            raise TypeError("expected a single byte, got {} bytes".format(len(code)))
        return code[0]
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError("tag code must be int, not {}".format(type(code).__name__))
    return code


def find_kind(code: Any) -> Optional[TagKind]:
    """Return the kind for a tag code, or None if no kind has that code.

    Defined for every integer.  Negative values, values above the code
    space and arbitrarily large ints all return None.
    """
    c = _as_code(code)
    if MIN_TAG_CODE <= c <= MAX_TAG_CODE:
        return _BY_CODE[c]
    return None


def kind_for_code(code: Any) -> TagKind:
    """Return the kind for a tag code.

    Raises UnknownTagCode when the code names no kind.  `.tag_code` on the
    error is always the int code, even when a raw byte was passed in.
    """
    c = _as_code(code)
    kind = find_kind(c)
    if kind is None:
        raise UnknownTagCode(c)
    return kind


def code_for_kind(kind: TagKind) -> int:
    """Return the wire code for a kind.  Total over TagKind."""
    if not isinstance(kind, TagKind):
        raise TypeError("expected TagKind, not {}".format(type(kind).__name__))
    return kind.value


def is_valid_code(code: Any) -> bool:
    return find_kind(code) is not None


def all_kinds() -> Tuple[TagKind, ...]:
    """All kinds, ordered by code ascending."""
    return _BY_CODE


def parse_code(text: str) -> int:
    """Parse a tag code written as decimal ("9", "09", "-1") or hex ("0x0a").

    A leading zero is still decimal.  Raises ValueError for anything else.
    """
    if not isinstance(text, str):
        raise TypeError("expected str, not {}".format(type(text).__name__))
    s = text.strip()
    sign = 1
    if s.startswith("-"):
        sign, s = -1, s[1:]
    if s[:2].lower() == "0x":
        digits, base, allowed = s[2:], 16, string.hexdigits
    else:
        digits, base, allowed = s, 10, string.digits
    if not digits or any(ch not in allowed for ch in digits):
        raise ValueError("not a tag code: {!r}".format(text))
    return sign * int(digits, base)


def kind_for_name(name: str) -> TagKind:
    """Resolve a kind from text, for diagnostics and the CLI.

    Accepts the member name ("INT_ARRAY"), its CamelCase form
    ("IntArray"), the diagnostic name ("TAG_Int_Array") in any case, or
    a code in any form parse_code() reads ("11", "0x0b").
    """
    if not isinstance(name, str):
        raise TypeError("expected str, not {}".format(type(name).__name__))
    try:
        code = parse_code(name)
    except ValueError:
        code = None
    if code is not None:
        return kind_for_code(code)
    kind = _BY_NAME.get(_name_key(name))
    if kind is None:
        raise UnknownTagName(name)
    return kind
