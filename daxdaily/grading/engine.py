"""
Heuristic answer scoring for DAX practice submissions.

The engine never parses or runs DAX. It combines two signals:

1. Rule compliance: share of the challenge's required patterns present in
   the submission (weight 0.6).
2. Keyword similarity: share of the reference solution's longer tokens that
   appear in the submission (weight 0.4).

The composite score (0-100) maps to a pass flag (>= 70) and a feedback tier.
evaluate() is total: empty or odd input degrades to a low score, never an
exception. It keeps no state and does no I/O, so it is safe to call from
any number of request handlers at once.
"""

import math
import re
from dataclasses import dataclass, field
from typing import List, Sequence

from .rules import Rule, check_rule


PASS_THRESHOLD = 70
RULE_WEIGHT = 0.6
SIMILARITY_WEIGHT = 0.4
MIN_KEYWORD_LENGTH = 4  # tokens of length <= 3 are dropped

# Characters treated as token separators in addition to whitespace.
# Tuned for DAX content; changing this changes scores for existing days.
_KEYWORD_SEPARATORS = re.compile(r"[#\n\r/]")

# (minimum score, message), checked high to low
FEEDBACK_TIERS = (
    (90, "Excellent work! Your DAX covers all the key patterns perfectly."),
    (70, "Good job! Your DAX hits most of the important patterns. "
         "Review the missing items below."),
    (40, "You're on the right track. Check the hints and try to include "
         "the missing patterns."),
    (0, "Keep going! Review the lesson and hints, then try incorporating "
        "the expected patterns."),
)

MISSING_PATTERN_PREFIX = "Missing pattern: "


@dataclass(frozen=True)
class RuleDetail:
    """Outcome of one rule, in ruleset order."""
    pattern: str
    passed: bool


@dataclass
class Verdict:
    """Result of scoring a submission."""
    score: int
    passed: bool
    feedback: str
    improvements: List[str] = field(default_factory=list)
    rule_details: List[RuleDetail] = field(default_factory=list)
    rule_score: int = 0
    similarity: int = 0


def round_half_up(value: float) -> int:
    """Round with .5 going up, unlike the builtin round()."""
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """Whole-number percentage; 0 when there is nothing to measure."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def extract_keywords(solution: str) -> List[str]:
    """
    Split a reference solution into scoring keywords.

    Duplicates are kept: a token appearing three times counts three times.
    """
    tokens = _KEYWORD_SEPARATORS.sub(" ", solution or "").split()
    return [t for t in tokens if len(t) >= MIN_KEYWORD_LENGTH]


def check_rules(submission: str, rules: Sequence[Rule]) -> List[RuleDetail]:
    lowered = (submission or "").lower()
    return [RuleDetail(pattern=r.value, passed=check_rule(lowered, r)) for r in rules]


def keyword_similarity(submission: str, solution: str) -> int:
    keywords = extract_keywords(solution)
    lowered = (submission or "").lower()
    matched = sum(1 for kw in keywords if kw.lower() in lowered)
    return percentage(matched, len(keywords))


def feedback_for(score: int) -> str:
    for minimum, message in FEEDBACK_TIERS:
        if score >= minimum:
            return message
    return FEEDBACK_TIERS[-1][1]


def evaluate(submission: str, solution: str, rules: Sequence[Rule]) -> Verdict:
    """
    Score a submission against a challenge's solution and ruleset.

    Args:
        submission: Learner's DAX text (may be empty)
        solution: Reference DAX text for the day
        rules: Required-pattern checklist; an empty ruleset confirms nothing
            and contributes 0, not 100

    Returns:
        Verdict with score, pass flag, feedback and per-rule detail
    """
    details = check_rules(submission, rules)
    passed_count = sum(1 for d in details if d.passed)
    rule_score = percentage(passed_count, len(details))

    similarity = keyword_similarity(submission, solution)

    score = round_half_up(
        rule_score * RULE_WEIGHT + min(similarity, 100) * SIMILARITY_WEIGHT
    )
    score = max(0, min(score, 100))

    improvements = [
        f"{MISSING_PATTERN_PREFIX}{d.pattern}" for d in details if not d.passed
    ]

    return Verdict(
        score=score,
        passed=score >= PASS_THRESHOLD,
        feedback=feedback_for(score),
        improvements=improvements,
        rule_details=details,
        rule_score=rule_score,
        similarity=similarity,
    )
