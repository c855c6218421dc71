from __future__ import annotations
from typing import Iterable, List

from proofline.services.matcher import Match


def _precedence(m: Match):
    # leftmost first, then the longer (more specific) span, then catalog order
    return (m.start, -m.length, m.priority)


def resolve(matches: Iterable[Match]) -> List[Match]:
    """Greedy interval scheduling: keep a match only if it starts at or after the last kept end."""
    kept: List[Match] = []
    last_end = 0
    for m in sorted(matches, key=_precedence):
        if m.start >= last_end:
            kept.append(m)
            last_end = m.end
    return kept
