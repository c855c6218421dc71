# proofline/services/llm.py
import json
import os
import time
import re
import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI

from proofline.models.correction import CorrectionResult
from proofline.services.catalog import CATEGORIES
from proofline.services.engine import FallbackCorrector, build_result
from proofline.services.matcher import Match
from proofline.services.resolver import resolve
from proofline.services.rewriter import apply

log = logging.getLogger("llm")

DEFAULT_MODEL = "gpt-4o-mini"

SYSTEM = (
    "You are an advanced grammar correction assistant.\n"
    "Correct grammar, spelling, punctuation, and sentence structure in the user's text.\n"
    "Keep the meaning and tone the same.\n"
    "Do NOT change names, numbers, or factual details.\n"
    "Return ONLY valid JSON with this exact shape:\n"
    '{"corrected":str,"errors":[{"type":"grammar"|"spelling"|"punctuation"|"style"|"clarity",'
    '"original":str,"suggestion":str,"explanation":str,"position":{"start":int,"end":int}}],'
    '"improvements":[str],"readabilityScore":int}\n'
    "Positions are character offsets into the user's text.\n"
    "No prose, no markdown, no extra keys."
)

# grab the last {...} block to be resilient to any prefacing text
_JSON_FENCE = re.compile(r"\{.*\}\s*$", re.DOTALL)

_client = None


def client() -> OpenAI:
    """OpenAI-compatible client; OPENAI_BASE_URL points it at other providers."""
    global _client
    if _client is None:
        _client = OpenAI(
            timeout=60.0,   # more forgiving network timeout
            max_retries=3,  # let the SDK retry transient failures
        )
    return _client


def llm_configured() -> bool:
    return bool(os.getenv("OPENAI_API_KEY"))


def _extract_json(text: str) -> dict:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    m = _JSON_FENCE.search(text)
    if m:
        return json.loads(m.group(0))
    raise ValueError("Model output was not valid JSON")


def _chat(messages: list) -> str:
    """Single call to the Chat Completions API."""
    model = os.getenv("OPENAI_MODEL", DEFAULT_MODEL)
    log.info("LLM chat call model=%s, messages=%d", model, len(messages))
    resp = client().chat.completions.create(
        model=model, messages=messages, temperature=0.1, max_tokens=2000
    )
    return resp.choices[0].message.content or ""


def request_corrections(text: str, max_retries: int = 2) -> Dict[str, Any]:
    last_err: Optional[Exception] = None
    for attempt in range(max_retries + 1):
        try:
            messages = [
                {"role": "system", "content": SYSTEM},
                {"role": "user", "content": text},
            ]
            data = _extract_json(_chat(messages))
            if not isinstance(data, dict):
                raise ValueError("Model output was not a JSON object")
            return data
        except Exception as e:
            last_err = e
            # exponential-ish backoff
            time.sleep(1.0 + 0.75 * attempt)
    raise RuntimeError(f"LLM correction failed: {last_err}")


def _nearest(text: str, needle: str, hint: int) -> int:
    """Offset of the occurrence of `needle` closest to `hint`, or -1."""
    best = -1
    pos = text.find(needle)
    while pos >= 0:
        if best < 0 or abs(pos - hint) < abs(best - hint):
            best = pos
        pos = text.find(needle, pos + 1)
    return best


def anchor_errors(text: str, items: List[Any]) -> List[Match]:
    """
    Re-anchor model-reported errors to `text`. Reported positions are only a
    hint; an error whose original cannot be found in the text is dropped.
    """
    matches: List[Match] = []
    for k, item in enumerate(items):
        if not isinstance(item, dict):
            continue
        original = str(item.get("original") or "")
        suggestion = str(item.get("suggestion") or "")
        if not original or original == suggestion:
            continue
        position = item.get("position") or {}
        hint = position.get("start") if isinstance(position, dict) else None
        if isinstance(hint, bool) or not isinstance(hint, int):
            hint = 0
        hint = max(hint, 0)
        start = hint if text[hint:hint + len(original)] == original else _nearest(text, original, hint)
        if start < 0:
            log.warning("Dropping LLM error not present in text: %r", original)
            continue
        category = item.get("type")
        matches.append(Match(
            rule_id="LLM",
            priority=k,
            category=category if category in CATEGORIES else "grammar",
            severity="error",
            explanation=str(item.get("explanation") or "Suggested correction"),
            original=original,
            suggestion=suggestion,
            start=start,
            end=start + len(original),
        ))
    return matches


class LLMCorrector(FallbackCorrector):
    name = "llm"

    def _correct(self, text: str) -> CorrectionResult:
        data = request_corrections(text)
        matches = anchor_errors(text, data.get("errors") or [])
        corrected, errors = apply(text, resolve(matches))
        tips = [str(t) for t in data.get("improvements") or [] if t]
        return build_result(text, corrected, errors, self.mode, extra_improvements=tips)
