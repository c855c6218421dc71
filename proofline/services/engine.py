from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Optional
import logging
import os

from proofline.core.config import DEFAULT_CORRECTOR, READABILITY_TARGET, WEIGHTS
from proofline.models.correction import (
    CorrectionError,
    CorrectionFailure,
    CorrectionOutcome,
    CorrectionResult,
    CorrectionSuccess,
)
from proofline.services import style
from proofline.services.catalog import CATEGORIES, catalog_for
from proofline.services.matcher import find_matches
from proofline.services.resolver import resolve
from proofline.services.rewriter import apply
from proofline.services.statistics import compute_statistics
from proofline.services.validation import sanitize, validate

log = logging.getLogger("engine")


def score_from_counts(counts: Dict[str, int], flesch: float) -> int:
    # Simple weighted score: start at 100 and subtract penalties
    penalties = sum(WEIGHTS.get(category, 1.0) * n for category, n in counts.items())
    # Readability penalty if below target
    if flesch < READABILITY_TARGET:
        penalties += (READABILITY_TARGET - flesch) * 0.3
    return max(0, int(100 - min(100, penalties)))


def build_result(
    text: str,
    corrected: str,
    errors: List[CorrectionError],
    mode: str,
    extra_improvements: Iterable[str] = (),
) -> CorrectionResult:
    stats = compute_statistics(text)
    tally = Counter(e.type for e in errors)
    totals = {category: tally.get(category, 0) for category in sorted(CATEGORIES)}

    tips = list(dict.fromkeys(list(extra_improvements) + style.improvements(text, len(errors))))

    result = CorrectionResult(
        original=text,
        corrected=corrected,
        errors=errors,
        improvements=tips,
        readability_score=stats.flesch_score,
        score=score_from_counts(totals, stats.flesch_score),
        totals=totals,
        mode=mode,
    )
    if mode == "extended":
        result.style_suggestions = style.style_suggestions(text)
        result.advanced_stats = style.advanced_stats(text)
    return result


class Corrector:
    """Turns sanitized text into a CorrectionResult whose offsets index that text."""

    name = "base"

    def __init__(self, mode: str = "basic"):
        self.catalog = catalog_for(mode)
        self.mode = mode

    def correct(self, text: str) -> CorrectionResult:
        raise NotImplementedError


class RuleBasedCorrector(Corrector):
    name = "rules"

    def correct(self, text: str) -> CorrectionResult:
        matches = find_matches(text, self.catalog)
        resolved = resolve(matches)
        log.info("mode=%s matches=%d resolved=%d", self.mode, len(matches), len(resolved))
        corrected, errors = apply(text, resolved)
        return build_result(text, corrected, errors, self.mode)


class FallbackCorrector(Corrector):
    """A corrector backed by an external tool; any failure degrades to the rule engine."""

    def _correct(self, text: str) -> CorrectionResult:
        raise NotImplementedError

    def correct(self, text: str) -> CorrectionResult:
        try:
            return self._correct(text)
        except Exception:
            log.exception("%s corrector failed, falling back to rules", self.name)
            return RuleBasedCorrector(self.mode).correct(text)


def get_corrector(mode: str = "basic") -> Corrector:
    name = os.getenv("PROOFLINE_CORRECTOR", DEFAULT_CORRECTOR).strip().lower()
    if name == "languagetool":
        from proofline.services.languagetool import LanguageToolCorrector
        return LanguageToolCorrector(mode)
    if name == "llm":
        from proofline.services.llm import LLMCorrector, llm_configured
        if llm_configured():
            return LLMCorrector(mode)
        log.info("OPENAI_API_KEY missing, using rule-based corrector.")
    elif name != "rules":
        log.warning("Unknown corrector %r, using rule-based corrector.", name)
    return RuleBasedCorrector(mode)


def correct(raw_text: str, mode: str = "basic", corrector: Optional[Corrector] = None) -> CorrectionOutcome:
    """
    Validate -> sanitize -> correct. Hard validation errors reject the request
    before any matching; warnings ride along with a successful result.
    Offsets in the result refer to the sanitized text (`result.original`).
    """
    validation = validate(raw_text)
    if not validation.is_valid:
        log.info("Rejected input: %s", validation.errors[0])
        return CorrectionFailure(reason=validation.errors[0], errors=validation.errors)

    text = sanitize(raw_text)
    if not text:
        reason = "Text cannot be empty"
        return CorrectionFailure(reason=reason, errors=[reason])

    corrector = corrector or get_corrector(mode)
    result = corrector.correct(text)
    return CorrectionSuccess(result=result, warnings=validation.warnings)
