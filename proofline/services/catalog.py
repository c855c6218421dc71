"""
Correction rule catalogs.

A catalog is an ordered, immutable tuple of CorrectionRule. Order only matters
as a tie-break when two rules match the same span (earlier rule wins).
Catalogs are built once at import time; a broken rule raises CatalogError
and stops the process from starting.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Pattern, Tuple, Union

CATEGORIES = {"grammar", "spelling", "punctuation", "style", "clarity"}
SEVERITIES = {"error", "warning", "suggestion"}


class CatalogError(RuntimeError):
    ...


@dataclass(frozen=True)
class LiteralText:
    """Replace the whole match with a fixed string."""
    text: str

    def __call__(self, matched: str) -> str:
        return self.text


@dataclass(frozen=True)
class Transform:
    """Replace the match with a pure function of the matched text."""
    fn: Callable[[str], str]

    def __call__(self, matched: str) -> str:
        return self.fn(matched)


Replacement = Union[LiteralText, Transform]


@dataclass(frozen=True)
class CorrectionRule:
    rule_id: str
    pattern: str
    category: str
    severity: str
    replace: Replacement
    explanation: str  # str.format template, fields: original, suggestion
    ignore_case: bool = False
    fold_case: bool = False  # no-op check ignores case
    regex: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.category not in CATEGORIES:
            raise CatalogError(f"Rule {self.rule_id}: unknown category {self.category!r}")
        if self.severity not in SEVERITIES:
            raise CatalogError(f"Rule {self.rule_id}: unknown severity {self.severity!r}")
        if not isinstance(self.replace, (LiteralText, Transform)):
            raise CatalogError(f"Rule {self.rule_id}: replace must be LiteralText or Transform")
        try:
            compiled = re.compile(self.pattern, re.IGNORECASE if self.ignore_case else 0)
        except re.error as e:
            raise CatalogError(f"Rule {self.rule_id}: invalid pattern {self.pattern!r}: {e}") from e
        if isinstance(self.replace, LiteralText) and any(m.group(0) for m in compiled.finditer(self.replace.text)):
            raise CatalogError(f"Rule {self.rule_id}: pattern matches its own replacement")
        object.__setattr__(self, "regex", compiled)

    def suggest(self, matched: str) -> str:
        return self.replace(matched)

    def is_noop(self, matched: str, suggestion: str) -> bool:
        if self.fold_case:
            return matched.casefold() == suggestion.casefold()
        return matched == suggestion

    def explain(self, original: str, suggestion: str) -> str:
        return self.explanation.format(original=original, suggestion=suggestion)


def build_catalog(rules: Iterable[CorrectionRule]) -> Tuple[CorrectionRule, ...]:
    catalog = tuple(rules)
    seen = set()
    for rule in catalog:
        if rule.rule_id in seen:
            raise CatalogError(f"Duplicate rule id: {rule.rule_id}")
        seen.add(rule.rule_id)
    return catalog


# ---------------------------------------------------------------------------
# Replacement helpers
# ---------------------------------------------------------------------------

def preserve_case(target: str) -> Callable[[str], str]:
    """Return a function that spells `target` with the capitalisation of its input."""
    def _apply(matched: str) -> str:
        if len(matched) > 1 and matched.isupper():
            return target.upper()
        if matched[:1].isupper():
            return target[:1].upper() + target[1:]
        return target
    return _apply


def _swap_first_word(target: str) -> Callable[[str], str]:
    # "your going" -> "you're going", keeps the tail and its spacing
    def _apply(matched: str) -> str:
        head, sep, tail = re.split(r"(\s+)", matched, maxsplit=1)
        return preserve_case(target)(head) + sep + tail
    return _apply


def _third_person(matched: str) -> str:
    subject, sep, verb = re.split(r"(\s+)", matched, maxsplit=1)
    if verb.lower() == "have":
        fixed = preserve_case("has")(verb)
    else:
        fixed = verb + ("S" if verb.isupper() else "s")
    return subject + sep + fixed


_STRONGER = {"good": "excellent", "bad": "terrible", "nice": "wonderful", "great": "outstanding"}


def _stronger_adjective(matched: str) -> str:
    adjective = matched.split()[-1]
    return preserve_case(_STRONGER[adjective.lower()])(matched)


def _first_word(matched: str) -> str:
    return matched.split()[0]


def _word_rule(rule_id: str, wrong: str, right: str, category: str, explanation: str,
               severity: str = "error") -> CorrectionRule:
    return CorrectionRule(
        rule_id=rule_id,
        pattern=rf"\b{wrong}\b",
        category=category,
        severity=severity,
        replace=Transform(preserve_case(right)),
        explanation=explanation,
        ignore_case=True,
    )


def _phrase_rule(rule_id: str, phrase: str, right: str, explanation: str) -> CorrectionRule:
    pattern = r"\b" + r"\s+".join(phrase.split()) + r"\b"
    return CorrectionRule(
        rule_id=rule_id,
        pattern=pattern,
        category="clarity",
        severity="suggestion",
        replace=Transform(preserve_case(right)),
        explanation=explanation,
        ignore_case=True,
    )


# ---------------------------------------------------------------------------
# Rule data
# ---------------------------------------------------------------------------

CONTRACTIONS: Dict[str, str] = {
    "dont": "don't", "cant": "can't", "wont": "won't", "isnt": "isn't",
    "arent": "aren't", "wasnt": "wasn't", "werent": "weren't", "havent": "haven't",
    "hasnt": "hasn't", "hadnt": "hadn't", "doesnt": "doesn't", "didnt": "didn't",
    "couldnt": "couldn't", "shouldnt": "shouldn't", "wouldnt": "wouldn't",
    "im": "I'm",
}

MISSPELLINGS: Dict[str, str] = {
    "teh": "the", "recieve": "receive", "becaus": "because", "occured": "occurred",
    "seperate": "separate", "definately": "definitely", "neccessary": "necessary",
    "thier": "their", "grammer": "grammar", "checkc": "check", "wiht": "with",
    "adn": "and", "yuo": "you", "thsi": "this", "enhancemnet": "enhancement",
    "applicayion": "application", "hii": "hi", "gope": "hope", "letr": "let",
    "untill": "until", "accomodate": "accommodate", "goverment": "government",
    "wierd": "weird", "beleive": "believe", "tommorow": "tomorrow", "acheive": "achieve",
}

SPELLING_NOTES = {
    "recieve": "Common spelling mistake: 'i' before 'e' except after 'c'",
    "accomodate": "Spelling error: 'accommodate' has a double 'c' and a double 'm'",
}

BASIC_WORDY_PHRASES: Dict[str, str] = {
    "in order to": "to",
}

WORDY_PHRASES: Dict[str, str] = {
    "due to the fact that": "because",
    "at this point in time": "now",
    "for the purpose of": "for",
    "in the event that": "if",
    "with regard to": "regarding",
    "in spite of the fact that": "although",
    "which is why": "therefore",
}

_AUXILIARIES = ("does", "did", "do", "can", "could", "will", "would", "should", "may",
                "might", "must", "let", "make", "help", "to",
                "dont", "doesnt", "didnt", "cant", "wont", "couldnt", "wouldnt", "shouldnt")
# "didn't she like", "doesn’t he want": any negated auxiliary
_NOT_AFTER_AUX = "".join(rf"(?<!\b{aux} )" for aux in _AUXILIARIES) + r"(?<!n['’]t )"

_ABBREVIATIONS = ("e.g.", "i.e.", "etc.", "vs.", "cf.", "approx.")
_NOT_AFTER_ABBREV = "".join(rf"(?<!\b{re.escape(abbr)} )" for abbr in _ABBREVIATIONS)


def _basic_rules():
    for wrong, right in CONTRACTIONS.items():
        yield _word_rule(
            f"CONTRACTION_{wrong.upper()}", wrong, right, "grammar",
            "Missing apostrophe in contraction '{suggestion}'",
        )
    yield CorrectionRule(
        rule_id="PRONOUN_I",
        pattern=r"(?<![\w'’.-])i(?![\w'’-])(?!\.e\b)",
        category="grammar",
        severity="error",
        replace=LiteralText("I"),
        explanation="The pronoun 'I' is always capitalized",
    )
    yield CorrectionRule(
        rule_id="PRONOUN_I_CONTRACTION",
        pattern=r"(?<![\w'’.-])i(?=['’](?:m|ve|ll|d)\b)",
        category="grammar",
        severity="error",
        replace=LiteralText("I"),
        explanation="The pronoun 'I' is always capitalized",
    )
    for wrong, right in MISSPELLINGS.items():
        yield _word_rule(
            f"SPELLING_{wrong.upper()}", wrong, right, "spelling",
            SPELLING_NOTES.get(wrong, "Spelling error: '{original}' should be '{suggestion}'"),
        )
    yield CorrectionRule(
        rule_id="THEIR_THERE",
        pattern=r"\btheir\s+(?:is|are|was|were)\b",
        category="grammar",
        severity="error",
        replace=Transform(_swap_first_word("there")),
        explanation="Incorrect use of 'their' instead of 'there'",
        ignore_case=True,
    )
    yield CorrectionRule(
        rule_id="YOUR_YOURE",
        pattern=r"\byour\s+(?:going|coming|running|welcome)\b",
        category="grammar",
        severity="error",
        replace=Transform(_swap_first_word("you're")),
        explanation="Use 'you're' (you are) instead of 'your' (possessive)",
        ignore_case=True,
    )
    yield CorrectionRule(
        rule_id="ITS_ITS",
        pattern=r"\bits\s+(?:going|coming|running|boring|a\s+good)\b",
        category="grammar",
        severity="error",
        replace=Transform(_swap_first_word("it's")),
        explanation="Use 'it's' (it is) instead of 'its' (possessive)",
        ignore_case=True,
    )
    yield CorrectionRule(
        rule_id="THERE_THEYRE",
        pattern=r"\bthere\s+going\b",
        category="grammar",
        severity="error",
        replace=Transform(_swap_first_word("they're")),
        explanation="Use 'they're' (they are) instead of 'there'",
        ignore_case=True,
    )
    yield CorrectionRule(
        rule_id="TO_TOO",
        pattern=r"\bto\s+much\b",
        category="grammar",
        severity="warning",
        replace=Transform(_swap_first_word("too")),
        explanation="Use 'too' (excessive) instead of 'to'",
        ignore_case=True,
    )
    yield CorrectionRule(
        rule_id="SUBJECT_VERB_AGREEMENT",
        pattern=_NOT_AFTER_AUX + r"\b(?:he|she|it)\s+(?:think|like|want|need|have)\b",
        category="grammar",
        severity="error",
        replace=Transform(_third_person),
        explanation="Subject-verb disagreement: third person singular requires '{suggestion}'",
        ignore_case=True,
    )
    yield CorrectionRule(
        rule_id="REPEATED_WORD",
        pattern=r"\b(the|a|an|that|to|of|and|is|in)(?:\s+\1\b)+",
        category="style",
        severity="warning",
        replace=Transform(_first_word),
        explanation="Redundant word repetition",
        ignore_case=True,
    )
    yield CorrectionRule(
        rule_id="SPACE_BEFORE_PUNCT",
        pattern=r"[ \t]+[,.!?;:](?!\d)",
        category="punctuation",
        severity="error",
        replace=Transform(lambda matched: matched.lstrip()),
        explanation="Remove space before '{suggestion}'",
    )
    yield CorrectionRule(
        rule_id="MULTI_SPACE",
        pattern=r"(?<=\S) {2,}(?=\S)",
        category="punctuation",
        severity="suggestion",
        replace=LiteralText(" "),
        explanation="Use a single space between words",
    )
    yield CorrectionRule(
        rule_id="WEAK_INTENSIFIER",
        pattern=r"\b(?:very|really|quite)\s+(?:good|bad|nice|great)\b",
        category="style",
        severity="suggestion",
        replace=Transform(_stronger_adjective),
        explanation="Consider using a stronger adjective instead of intensifier + basic adjective",
        ignore_case=True,
        fold_case=True,
    )
    yield from _wordy_rules(BASIC_WORDY_PHRASES)


def _wordy_rules(phrases: Dict[str, str]):
    for phrase, right in phrases.items():
        yield _phrase_rule(
            "WORDY_" + "_".join(phrase.upper().split()), phrase, right,
            "Simplify: '{suggestion}' is more concise than '{original}'",
        )


def _advanced_rules():
    yield from _wordy_rules(WORDY_PHRASES)
    yield CorrectionRule(
        rule_id="SENTENCE_CAPITAL",
        pattern=r"(?m)(?:^|(?<=[.!?] ))" + _NOT_AFTER_ABBREV + r"[a-z]",
        category="grammar",
        severity="warning",
        replace=Transform(str.upper),
        explanation="Capitalize the first word of a sentence",
    )


BASIC_CATALOG = build_catalog(_basic_rules())
ADVANCED_RULES = tuple(_advanced_rules())
# extended = basic + advanced, never a substitution
EXTENDED_CATALOG = build_catalog(BASIC_CATALOG + ADVANCED_RULES)

CATALOGS = {"basic": BASIC_CATALOG, "extended": EXTENDED_CATALOG}


def catalog_for(mode: str) -> Tuple[CorrectionRule, ...]:
    try:
        return CATALOGS[mode]
    except KeyError:
        raise ValueError(f"Unknown mode: {mode!r}") from None
