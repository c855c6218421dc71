from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List

from proofline.services.catalog import CorrectionRule


@dataclass(frozen=True)
class Match:
    """One rule occurrence; [start, end) indexes the original text."""
    rule_id: str
    priority: int  # position of the rule in its catalog, lower wins ties
    category: str
    severity: str
    explanation: str
    original: str
    suggestion: str
    start: int
    end: int

    def __post_init__(self):
        if not 0 <= self.start < self.end:
            raise ValueError(f"Invalid match span [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start


def find_matches(text: str, catalog: Iterable[CorrectionRule]) -> List[Match]:
    """
    Scan `text` with every rule of `catalog`.
    Matches of different rules may overlap; matches of one rule never do.
    No-op occurrences (suggestion equal to the matched text) are dropped.
    """
    matches: List[Match] = []
    for priority, rule in enumerate(catalog):
        for m in rule.regex.finditer(text):
            if m.start() == m.end():
                continue
            original = m.group(0)
            suggestion = rule.suggest(original)
            if rule.is_noop(original, suggestion):
                continue
            matches.append(Match(
                rule_id=rule.rule_id,
                priority=priority,
                category=rule.category,
                severity=rule.severity,
                explanation=rule.explain(original, suggestion),
                original=original,
                suggestion=suggestion,
                start=m.start(),
                end=m.end(),
            ))
    return matches
