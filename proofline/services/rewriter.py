from __future__ import annotations
from typing import List, Sequence, Tuple

from proofline.models.correction import CorrectionError
from proofline.services.matcher import Match


def apply(text: str, resolved: Sequence[Match]) -> Tuple[str, List[CorrectionError]]:
    """
    Build the corrected text from non-overlapping matches.
    Error offsets are the matches' own offsets into `text`; nothing is re-based.
    """
    parts: List[str] = []
    errors: List[CorrectionError] = []
    cursor = 0
    for k, m in enumerate(sorted(resolved, key=lambda m: m.start)):
        if m.start < cursor:
            raise ValueError(f"Overlapping match at {m.start} (previous edit ends at {cursor})")
        parts.append(text[cursor:m.start])
        parts.append(m.suggestion)
        cursor = m.end
        errors.append(CorrectionError(
            id=f"error-{k}",
            type=m.category,
            severity=m.severity,
            rule=m.rule_id,
            original=m.original,
            suggestion=m.suggestion,
            explanation=m.explanation,
            start=m.start,
            end=m.end,
        ))
    parts.append(text[cursor:])
    return "".join(parts), errors
