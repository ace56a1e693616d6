"""nbtkinds command-line interface.

Usage:
    nbtkinds list [--json]
    nbtkinds lookup 10 0x09 12
    nbtkinds code Compound TAG_Int_Array
    nbtkinds version
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional, Union

from . import (
    NbtError,
    TagKind,
    __format_version__,
    __version__,
    all_kinds,
    kind_for_code,
    kind_for_name,
    parse_code,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nbtkinds",
        description="NBT tag-type registry — inspect tag codes and kinds",
    )
    sub = parser.add_subparsers(dest="command")

    # ── list ──
    list_p = sub.add_parser("list", help="List every tag kind by code")
    list_p.add_argument("--json", action="store_true",
                        help="Emit the table as JSON")

    # ── lookup ──
    lookup_p = sub.add_parser("lookup", help="Resolve tag codes to kinds")
    lookup_p.add_argument("codes", nargs="+", metavar="CODE",
                          help="Tag code, decimal or 0x-prefixed hex")

    # ── code ──
    code_p = sub.add_parser("code", help="Resolve kind names to tag codes")
    code_p.add_argument("names", nargs="+", metavar="NAME",
                        help="Kind name, e.g. Compound or TAG_Int_Array")

    # ── version ──
    sub.add_parser("version", help="Print version and exit")

    return parser


def _kind_row(kind: TagKind) -> Dict[str, Union[int, str, bool, None]]:
    element = kind.element_kind
    return {
        "code": kind.code,
        "kind": kind.name,
        "tag_name": kind.tag_name,
        "payload_size": kind.payload_size,
        "element_kind": element.name if element is not None else None,
    }


def _cmd_list(args: argparse.Namespace) -> int:
    rows = [_kind_row(k) for k in all_kinds()]
    if args.json:
        print(json.dumps(rows, indent=2))
        return 0
    for row in rows:
        size = "var" if row["payload_size"] is None else row["payload_size"]
        print("{:>3}  0x{:02x}  {:<11} {:<15} {}".format(
            row["code"], row["code"], row["kind"], row["tag_name"], size))
    return 0


def _cmd_lookup(args: argparse.Namespace) -> int:
    status = 0
    for text in args.codes:
        try:
            kind = kind_for_code(parse_code(text))
        except ValueError:
            print(f"nbtkinds: not a tag code: {text!r}", file=sys.stderr)
            status = 2
            continue
        except NbtError as e:
            print(f"nbtkinds: error [{e.code}]: {e}", file=sys.stderr)
            status = 2
            continue
        print(f"{text}\t{kind.name}\t{kind.tag_name}")
    return status


def _cmd_code(args: argparse.Namespace) -> int:
    status = 0
    for name in args.names:
        try:
            kind = kind_for_name(name)
        except NbtError as e:
            print(f"nbtkinds: error [{e.code}]: {e}", file=sys.stderr)
            status = 2
            continue
        print(f"{name}\t{kind.code}")
    return status


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "version":
        print(f"nbtkinds {__version__} (format {__format_version__})")
        return

    if args.command == "list":
        status = _cmd_list(args)
    elif args.command == "lookup":
        status = _cmd_lookup(args)
    else:
        status = _cmd_code(args)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
