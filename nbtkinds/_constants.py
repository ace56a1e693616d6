"""NBT constants — wire tag codes and the bounds of the code space.

Every serialized NBT value is preceded by one of these bytes (except
List elements, which share the element code written once in the list
header).  The numbering is part of the wire format and is shared with
every other NBT implementation.
"""

from __future__ import annotations

__format_version__ = "1"

# ── Tag codes (single byte each) ─────────────────────────────
# Never renumber.  Existing files on disk depend on these values.
TAG_END: int = 0x00         # closes a Compound, no payload
TAG_BYTE: int = 0x01
TAG_SHORT: int = 0x02
TAG_INT: int = 0x03
TAG_LONG: int = 0x04
TAG_FLOAT: int = 0x05
TAG_DOUBLE: int = 0x06
TAG_BYTE_ARRAY: int = 0x07
TAG_STRING: int = 0x08
TAG_LIST: int = 0x09
TAG_COMPOUND: int = 0x0A
TAG_INT_ARRAY: int = 0x0B

# ── Code space ───────────────────────────────────────────────
# Dense and closed: every code in [MIN_TAG_CODE, MAX_TAG_CODE] is
# assigned, nothing outside it is.
MIN_TAG_CODE: int = TAG_END
MAX_TAG_CODE: int = TAG_INT_ARRAY
TAG_KIND_COUNT: int = MAX_TAG_CODE - MIN_TAG_CODE + 1
