"""Answer grading for DAX practice submissions."""

from .engine import Verdict, RuleDetail, evaluate, extract_keywords, PASS_THRESHOLD
from .rules import Rule, RuleKind

__all__ = ["Verdict", "RuleDetail", "evaluate", "extract_keywords", "PASS_THRESHOLD", "Rule", "RuleKind"]
