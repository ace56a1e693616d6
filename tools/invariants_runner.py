#!/usr/bin/env python3
# tools/invariants_runner.py
#
# Tag registry invariants (property checks) + threaded agreement check.
#
# This runner:
# - checks the code <-> kind bijection exhaustively over the byte range
# - probes random integers far outside the code space
# - hammers the lookups from several threads and compares every result
#   against the single-threaded answer
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import os, sys, random, threading
from typing import Any, Dict, List, Optional

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from nbtkinds import (
    MAX_TAG_CODE,
    MIN_TAG_CODE,
    TagKind,
    UnknownTagCode,
    all_kinds,
    code_for_kind,
    find_kind,
    kind_for_code,
)

SEED = int(os.environ.get("NBT_SEED", "1337"))
TRIALS = int(os.environ.get("NBT_TRIALS", "20000"))
THREADS = int(os.environ.get("NBT_THREADS", "8"))
ROUNDS = int(os.environ.get("NBT_THREAD_ROUNDS", "500"))

random.seed(SEED)

def fail(label: str, context: Dict[str, Any]) -> None:
    print("INVARIANT FAIL:", label)
    print("CTX:", context)
    raise SystemExit(1)

def rand_code() -> int:
    r = random.random()
    if r < 0.50:
        return random.randint(-128, 255)
    if r < 0.80:
        return random.randint(-(2**31), 2**31 - 1)
    return random.getrandbits(80) * random.choice((-1, 1))

def check_code(c: int) -> Optional[TagKind]:
    k = find_kind(c)
    in_space = MIN_TAG_CODE <= c <= MAX_TAG_CODE

    # (1) found exactly on the code space, never a default elsewhere
    if (k is not None) != in_space:
        fail("find_kind domain", {"code": c, "kind": k})

    # (2) raising form agrees with the optional form
    try:
        raised = kind_for_code(c)
    except UnknownTagCode as e:
        if k is not None or e.tag_code != c:
            fail("kind_for_code raised for known code", {"code": c, "err": repr(e)})
        raised = None
    if raised is not k:
        fail("kind_for_code disagrees with find_kind", {"code": c})

    # (3) round trip
    if k is not None and code_for_kind(k) != c:
        fail("code round trip", {"code": c, "kind": k})
    return k

def check_kinds() -> None:
    kinds = all_kinds()
    codes = [code_for_kind(k) for k in kinds]
    if len(kinds) != 12 or len(set(kinds)) != 12:
        fail("kind count", {"kinds": kinds})
    if codes != list(range(12)):
        fail("codes not dense and ascending", {"codes": codes})
    for k in TagKind:
        if kind_for_code(code_for_kind(k)) is not k:
            fail("kind round trip", {"kind": k})

def check_threads() -> None:
    probe: List[int] = list(range(-16, 32))
    expected = [find_kind(c) for c in probe]
    mismatches: List[int] = []
    lock = threading.Lock()

    def worker(tid: int) -> None:
        rng = random.Random(SEED + tid)
        for _ in range(ROUNDS):
            order = list(range(len(probe)))
            rng.shuffle(order)
            for i in order:
                if find_kind(probe[i]) is not expected[i]:
                    with lock:
                        mismatches.append(probe[i])

    threads = [threading.Thread(target=worker, args=(t,)) for t in range(THREADS)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    if mismatches:
        fail("threaded lookups disagree", {"codes": sorted(set(mismatches))})

def main() -> int:
    check_kinds()

    for c in range(-128, 256):
        check_code(c)

    for _ in range(TRIALS):
        check_code(rand_code())

    check_threads()

    print(f"OK: invariants passed for TRIALS={TRIALS} THREADS={THREADS} seed={SEED}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
