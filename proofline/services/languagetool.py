from __future__ import annotations
from typing import List
import logging
import os
from language_tool_python import LanguageTool

from proofline.models.correction import CorrectionResult
from proofline.services.engine import FallbackCorrector, build_result
from proofline.services.matcher import Match
from proofline.services.resolver import resolve
from proofline.services.rewriter import apply

log = logging.getLogger("languagetool")

# Lazy singleton
_LT = None
def LT():
    global _LT
    if _LT is None:
        _LT = LanguageTool(os.getenv("LANGUAGETOOL_LANG", "en-US"))
    return _LT

ISSUE_CATEGORIES = {
    "misspelling": "spelling",
    "typographical": "punctuation",
    "whitespace": "punctuation",
    "style": "style",
    "locale-violation": "style",
    "register": "style",
    "duplication": "style",
}


def lt_matches(text: str) -> List[Match]:
    matches: List[Match] = []
    for k, m in enumerate(LT().check(text)):
        if not m.replacements or m.errorLength <= 0:
            continue
        start, end = m.offset, m.offset + m.errorLength
        original = text[start:end]
        suggestion = m.replacements[0]
        if suggestion == original:
            continue
        issue_type = (m.ruleIssueType or "").lower()
        matches.append(Match(
            rule_id=m.ruleId,
            priority=k,
            category=ISSUE_CATEGORIES.get(issue_type, "grammar"),
            severity="error" if issue_type in ("misspelling", "grammar") else "warning",
            explanation=m.message,
            original=original,
            suggestion=suggestion,
            start=start,
            end=end,
        ))
    return matches


class LanguageToolCorrector(FallbackCorrector):
    name = "languagetool"

    def _correct(self, text: str) -> CorrectionResult:
        matches = lt_matches(text)
        log.info("LanguageTool matches=%d", len(matches))
        corrected, errors = apply(text, resolve(matches))
        return build_result(text, corrected, errors, self.mode)
