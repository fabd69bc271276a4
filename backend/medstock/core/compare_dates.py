"""Date Comparator — total ordering over YYYY-MM-DD strings.

Invariants:
    - Pure and deterministic; never raises for any pair of strings
    - Parsed triples compare numerically (year, then month, then day)
    - If either side fails to parse, raw strings compare byte-wise (UTF-8)

Design Decisions:
    - Lenient parse mirrors scanf "%d-%d-%d": optional leading whitespace and
      sign per number, trailing text ignored, no calendar validity check
      ("2024-02-30" is a valid triple)
"""

import re

_DATE_PARTS = re.compile(r"\s*([+-]?[0-9]+)-\s*([+-]?[0-9]+)-\s*([+-]?[0-9]+)")


def parse_date_parts(text: str) -> tuple[int, int, int] | None:
    """Parse (year, month, day) or None when fewer than three integers match."""
    match = _DATE_PARTS.match(text)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    return year, month, day


def compare_dates(d1: str, d2: str) -> int:
    """Negative if d1 < d2, zero if equal, positive if d1 > d2."""
    p1 = parse_date_parts(d1)
    p2 = parse_date_parts(d2)
    if p1 is None or p2 is None:
        return _compare_bytes(d1, d2)
    for a, b in zip(p1, p2):
        if a != b:
            return a - b
    return 0


def _compare_bytes(d1: str, d2: str) -> int:
    b1, b2 = d1.encode("utf-8"), d2.encode("utf-8")
    return (b1 > b2) - (b1 < b2)
