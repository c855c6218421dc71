"""
Deterministic text statistics and writing-goal tracking.

Everything here is a pure function of its input text: no randomness, no clock.
"""
from __future__ import annotations

import math
import re
import uuid
from typing import List

from proofline.core.config import EASY_THRESHOLD, MEDIUM_THRESHOLD, WORDS_PER_MINUTE
from proofline.models.analytics import TextStatistics, WritingGoal

VOWELS = "aeiouy"

_SENTENCE_END = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_NON_LETTERS = re.compile(r"[^a-z]")


def _round_half_up(value: float, ndigits: int = 0) -> float:
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def words(text: str) -> List[str]:
    return text.split()


def sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_END.split(text) if s.strip()]


def paragraphs(text: str) -> List[str]:
    return [p for p in _PARAGRAPH_BREAK.split(text) if p.strip()]


def count_syllables(word: str) -> int:
    word = _NON_LETTERS.sub("", word.lower())
    if not word:
        return 0
    if len(word) <= 3:
        return 1

    syllables = 0
    previous_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            syllables += 1
        previous_was_vowel = is_vowel

    # silent e
    if word.endswith("e") and syllables > 1:
        syllables -= 1
    return max(1, syllables)


def flesch_reading_ease(avg_words_per_sentence: float, avg_syllables_per_word: float) -> float:
    score = 206.835 - 1.015 * avg_words_per_sentence - 84.6 * avg_syllables_per_word
    return max(0.0, min(100.0, score))


def difficulty_for(score: float) -> str:
    if score >= EASY_THRESHOLD:
        return "Easy"
    if score >= MEDIUM_THRESHOLD:
        return "Medium"
    return "Hard"


def compute_statistics(text: str) -> TextStatistics:
    ws = words(text)
    word_count = len(ws)
    sentence_count = len(sentences(text))
    paragraph_count = max(len(paragraphs(text)), 1) if text.strip() else 0

    avg_words = word_count / sentence_count if sentence_count else 0.0
    avg_syllables = sum(count_syllables(w) for w in ws) / word_count if word_count else 0.0
    flesch = flesch_reading_ease(avg_words, avg_syllables)

    return TextStatistics(
        word_count=word_count,
        character_count=len(text),
        character_count_no_spaces=len(re.sub(r"\s", "", text)),
        sentence_count=sentence_count,
        paragraph_count=paragraph_count,
        average_words_per_sentence=_round_half_up(avg_words, 1),
        reading_time_minutes=math.ceil(word_count / WORDS_PER_MINUTE),
        difficulty=difficulty_for(flesch),
        flesch_score=int(_round_half_up(flesch)),
    )


# ---------------------------------------------------------------------------
# Writing goals
# ---------------------------------------------------------------------------

GOAL_METRICS = {
    "wordCount": "word_count",
    "readingTime": "reading_time_minutes",
    "sentences": "sentence_count",
}


def create_goal(goal_type: str, target: int) -> WritingGoal:
    if goal_type not in GOAL_METRICS:
        raise ValueError(f"Unknown goal type: {goal_type!r}")
    if target <= 0:
        raise ValueError("Goal target must be positive")
    return WritingGoal(id=uuid.uuid4().hex[:12], type=goal_type, target=target)


def update_goal_progress(goal: WritingGoal, stats: TextStatistics) -> WritingGoal:
    """
    Recompute progress from scratch. A completed goal goes back to incomplete
    when the tracked metric drops below target again.
    """
    current = getattr(stats, GOAL_METRICS[goal.type])
    return goal.model_copy(update={"current": current, "completed": current >= goal.target})
