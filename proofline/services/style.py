from __future__ import annotations
from typing import List, Dict
import re
import textstat
import spacy
from proofline.core.config import LONG_SENTENCE_THRESHOLD, MANY_ERRORS_THRESHOLD
from proofline.models.correction import AdvancedStats, StyleSuggestion
from proofline.services import statistics as S

# load spaCy once
_nlp = None
def nlp():
    global _nlp
    if _nlp is None:
        _nlp = spacy.load("en_core_web_sm", disable=["ner"])
    return _nlp

WEASEL = {"very", "really", "quite", "basically", "actually", "clearly", "obviously"}
JARGON = {"utilize": "use", "leverage": "use", "synergy": "cooperation", "paradigm": "model"}
INFORMAL = {"gonna": "going to", "wanna": "want to", "gotta": "have to", "kinda": "kind of"}
WORDY = {
    "a lot of": "many",
    "in order to": "to",
    "due to the fact that": "because",
    "at this point in time": "now",
    "is able to": "can",
    "has the ability to": "can",
}

_WEASEL_RE = re.compile(r"\b(%s)\s+([A-Za-z']+)" % "|".join(sorted(WEASEL)), re.IGNORECASE)
_JARGON_RE = re.compile(r"\b(%s)\b" % "|".join(JARGON), re.IGNORECASE)
_INFORMAL_RE = re.compile(r"\b(%s)\b" % "|".join(INFORMAL), re.IGNORECASE)
_WORDY_RE = re.compile(
    r"\b(%s)\b" % "|".join(r"\s+".join(p.split()) for p in WORDY), re.IGNORECASE
)
_CONTRACTION_RE = re.compile(r"[A-Za-z]+['’](?:t|re|m|ll|ve|d|s)\b", re.IGNORECASE)


def _normalize(phrase: str) -> str:
    return " ".join(phrase.lower().split())


def improvements(text: str, error_count: int) -> List[str]:
    """Free-text tips that are not tied to a position."""
    tips = []
    ws = S.words(text)
    if any(len(S.words(s)) > LONG_SENTENCE_THRESHOLD for s in S.sentences(text)):
        tips.append("Consider breaking long sentences into shorter ones for better readability")
    if not re.search(r"[.!?]", text) and len(text) > 50:
        tips.append("Add proper sentence endings with periods")
    if len(ws) > 15 and not re.search(r"[,;:]", text):
        tips.append("Consider using punctuation marks like commas to separate ideas")
    if text.lower() == text and len(text) > 10:
        tips.append("Consider proper capitalization at the beginning of sentences")
    if error_count > MANY_ERRORS_THRESHOLD:
        tips.append("Multiple errors detected - consider proofreading more carefully")
    return tips


def style_weasel_jargon(text: str) -> List[StyleSuggestion]:
    found = []
    for m in _WEASEL_RE.finditer(text):
        found.append(StyleSuggestion(
            type="clarity",
            original=m.group(0),
            suggestion=m.group(2),
            explanation=f"'{m.group(1)}' weakens the statement. Drop it or pick a more precise word.",
            start=m.start(), end=m.end(),
        ))
    for m in _JARGON_RE.finditer(text):
        found.append(StyleSuggestion(
            type="formality",
            original=m.group(0),
            suggestion=JARGON[m.group(1).lower()],
            explanation="Jargon detected. A plain word reads better.",
            start=m.start(), end=m.end(),
        ))
    for m in _INFORMAL_RE.finditer(text):
        found.append(StyleSuggestion(
            type="formality",
            original=m.group(0),
            suggestion=INFORMAL[m.group(1).lower()],
            explanation="Informal wording. Spell it out in formal writing.",
            start=m.start(), end=m.end(),
        ))
    for m in _WORDY_RE.finditer(text):
        found.append(StyleSuggestion(
            type="conciseness",
            original=m.group(0),
            suggestion=WORDY[_normalize(m.group(1))],
            explanation="Remove unnecessary words to improve conciseness",
            start=m.start(), end=m.end(),
        ))
    return found


def is_passive(sent_doc) -> bool:
    # heuristic: look for auxpass or passive dependency
    for token in sent_doc:
        if token.dep_ in {"auxpass"} or token.tag_ in {"VBN"} and any(t.dep_ == "aux" for t in token.head.children):
            return True
    return False


def long_sentence_suggestions(text: str) -> List[StyleSuggestion]:
    found = []
    for s in nlp()(text).sents:
        n = len([t for t in s if t.is_alpha])
        if n > LONG_SENTENCE_THRESHOLD:
            found.append(StyleSuggestion(
                type="clarity",
                original=s.text,
                suggestion="Split this sentence into two or more shorter ones.",
                explanation=f"Long sentence ({n} words). Consider splitting.",
                start=s.start_char, end=s.end_char,
            ))
    return found


def passive_voice_suggestions(text: str) -> List[StyleSuggestion]:
    found = []
    for s in nlp()(text).sents:
        if is_passive(s):
            found.append(StyleSuggestion(
                type="engagement",
                original=s.text,
                suggestion="Rewrite in active voice.",
                explanation="Passive voice detected. Prefer active voice where possible.",
                start=s.start_char, end=s.end_char,
            ))
    return found


def style_suggestions(text: str) -> List[StyleSuggestion]:
    found = (
        style_weasel_jargon(text)
        + long_sentence_suggestions(text)
        + passive_voice_suggestions(text)
    )
    return sorted(found, key=lambda s: (s.start, s.end))


def readability_metrics(text: str) -> Dict:
    return {
        "flesch_reading_ease": textstat.flesch_reading_ease(text),
        "smog_index": textstat.smog_index(text),
        "automated_readability_index": textstat.automated_readability_index(text),
        "difficult_words": textstat.difficult_words(text),
        "lexicon_count": textstat.lexicon_count(text),
    }


def _clamp(value: float) -> int:
    return max(0, min(100, int(round(value))))


def advanced_stats(text: str) -> AdvancedStats:
    """
    Extended-mode analytics. Built on textstat heuristics and not part of the
    statistics determinism guarantees.
    """
    stats = S.compute_statistics(text)
    readability = readability_metrics(text)
    ws = S.words(text)
    n_words = max(len(ws), 1)

    hard_ratio = readability["difficult_words"] / max(readability["lexicon_count"], 1)
    if hard_ratio < 0.1:
        vocabulary = "Elementary"
    elif hard_ratio < 0.25:
        vocabulary = "Intermediate"
    else:
        vocabulary = "Advanced"

    informal = len(_CONTRACTION_RE.findall(text)) + len(_INFORMAL_RE.findall(text))
    formality = _clamp(100 - 1000 * informal / n_words)
    if formality >= 80 and vocabulary == "Advanced":
        tone = "Academic"
    elif formality >= 80:
        tone = "Formal"
    elif formality >= 60:
        tone = "Professional"
    else:
        tone = "Casual"

    hedges = len(_WEASEL_RE.findall(text))
    distinct = len({w.lower().strip(".,!?;:\"'()") for w in ws})

    return AdvancedStats(
        sentence_complexity=_clamp(stats.average_words_per_sentence / 40 * 100),
        vocabulary_level=vocabulary,
        tone=tone,
        formality_score=formality,
        clarity_score=_clamp(stats.flesch_score - 5 * hedges),
        engagement_score=_clamp(40 + 60 * distinct / n_words),
        readability=readability,
    )
