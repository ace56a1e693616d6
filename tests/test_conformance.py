"""nbtkinds conformance test suite.

Checks the registry against the golden code table in
conformance/tag_codes_v1.json: one test per assigned code, one per
known-unassigned code.

Usage:
    python tests/test_conformance.py [--vectors-dir DIR]
    python -m pytest tests/test_conformance.py -v
    NBTKINDS_VECTORS_DIR=../conformance python tests/test_conformance.py
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import unittest
from typing import Any, Dict, List, Optional, Tuple

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from nbtkinds import (
    NbtError,
    __format_version__,
    all_kinds,
    find_kind,
    kind_for_code,
)

# ── Locate conformance data ───────────────────────────────────

_VECTORS_DIR: Optional[str] = os.environ.get("NBTKINDS_VECTORS_DIR", None)
_TABLE_FILE = "tag_codes_v1.json"


def _find_vectors_dir() -> str:
    if _VECTORS_DIR:
        return _VECTORS_DIR
    candidates = [
        os.path.join(os.path.dirname(__file__), "..", "conformance"),
        os.path.join(os.path.dirname(__file__), "conformance"),
    ]
    for d in candidates:
        if os.path.isfile(os.path.join(d, _TABLE_FILE)):
            return d
    raise FileNotFoundError(
        "Cannot find conformance table. Set NBTKINDS_VECTORS_DIR or --vectors-dir."
    )


def _load_data() -> Tuple[List[dict], List[int], str]:
    """Load the table.  Returns (kind rows, unknown codes, format version)."""
    path = os.path.join(_find_vectors_dir(), _TABLE_FILE)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return data["kinds"], data["unknown_codes"], data["format_version"]


def _describe(code: int) -> Dict[str, Any]:
    """Run one code through the registry.  Returns the row it produces or {"err": ...}."""
    try:
        kind = kind_for_code(code)
    except NbtError as e:
        return {"err": e.code}
    element = kind.element_kind
    return {
        "code": kind.code,
        "kind": kind.name,
        "tag_name": kind.tag_name,
        "payload_size": kind.payload_size,
        "element_kind": element.name if element is not None else None,
    }


# ── unittest integration ──────────────────────────────────────

class ConformanceTests(unittest.TestCase):
    """Dynamically generated: one test method per table entry."""

    def test_table_is_complete(self):
        rows, _unknown, version = _load_data()
        self.assertEqual(version, __format_version__)
        self.assertEqual([r["code"] for r in rows], [k.code for k in all_kinds()])


def _make_known_test(row: dict):
    def test_fn(self: unittest.TestCase) -> None:
        got = _describe(row["code"])
        self.assertEqual(got, row,
                         "code {}: got {} expected {}".format(row["code"], got, row))
    return test_fn


def _make_unknown_test(code: int):
    def test_fn(self: unittest.TestCase) -> None:
        self.assertIsNone(find_kind(code))
        self.assertEqual(_describe(code), {"err": "ERR_UNKNOWN_TAG"})
    return test_fn


def _attach(name: str, fn) -> None:
    fn.__name__ = name
    fn.__qualname__ = "ConformanceTests.{}".format(name)
    setattr(ConformanceTests, name, fn)


# Attach test methods at import time.
try:
    _rows, _unknown, _version = _load_data()
    for _row in _rows:
        _attach("test_code_{}_{}".format(_row["code"], _row["kind"].lower()),
                _make_known_test(_row))
    for _code in _unknown:
        _label = "neg{}".format(-_code) if _code < 0 else str(_code)
        _attach("test_unknown_{}".format(_label), _make_unknown_test(_code))
except FileNotFoundError:
    pass


# ── Standalone CLI runner ─────────────────────────────────────

def main() -> None:
    global _VECTORS_DIR

    parser = argparse.ArgumentParser(description="nbtkinds conformance runner")
    parser.add_argument("--vectors-dir", default=None,
                        help="Directory with the conformance table")
    args, _remaining = parser.parse_known_args()

    if args.vectors_dir:
        _VECTORS_DIR = args.vectors_dir
        os.environ["NBTKINDS_VECTORS_DIR"] = args.vectors_dir

    rows, unknown, version = _load_data()

    passed = 0
    failed = 0
    failures: List[Tuple[int, dict, dict]] = []

    cases = [(r["code"], r) for r in rows]
    cases += [(c, {"err": "ERR_UNKNOWN_TAG"}) for c in unknown]
    for code, exp in cases:
        got = _describe(code)
        if got == exp:
            passed += 1
        else:
            failed += 1
            failures.append((code, got, exp))

    total = passed + failed
    print("CONFORMANCE (format {}): {}/{} PASS".format(version, passed, total))
    for code, got, exp in failures:
        print("  FAIL {}: got={} expected={}".format(code, got, exp))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
