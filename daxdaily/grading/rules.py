"""
Rule vocabulary for answer checking.

A rule is a (kind, value) pair attached to a day's challenge. Kinds are an
open tag in the content files: anything this version does not recognise
parses to RuleKind.UNKNOWN and is checked leniently (always passes), so a
ruleset written for a newer vocabulary still grades on older code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional


class RuleKind(str, Enum):
    """Known rule kinds plus the lenient fallback."""

    CONTAINS = "contains"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, tag: Optional[str]) -> "RuleKind":
        """Map a content tag to a kind. Unrecognised tags become UNKNOWN."""
        if tag == cls.CONTAINS.value:
            return cls.CONTAINS
        return cls.UNKNOWN


@dataclass(frozen=True)
class Rule:
    """A single required-pattern check."""
    kind: RuleKind
    value: str
    tag: str  # kind as written in the content, kept for round-tripping

    @classmethod
    def from_tag(cls, tag: str, value: str) -> "Rule":
        return cls(kind=RuleKind.parse(tag), value=value, tag=tag)

    @classmethod
    def contains(cls, value: str) -> "Rule":
        return cls.from_tag(RuleKind.CONTAINS.value, value)

    @classmethod
    def from_dict(cls, data: dict) -> "Rule":
        """Build from a content record ({"kind": ..., "value": ...})."""
        if not isinstance(data, dict):
            raise TypeError(f"rule must be an object, got {type(data).__name__}")
        tag = data.get("kind", data.get("type", ""))
        return cls.from_tag(str(tag), str(data.get("value", "")))

    def to_dict(self) -> dict:
        return {"kind": self.tag, "value": self.value}


def _check_contains(submission_lower: str, rule: Rule) -> bool:
    return rule.value.lower() in submission_lower


def _check_unknown(submission_lower: str, rule: Rule) -> bool:
    return True


# Check registry: one entry per RuleKind. New kinds go here.
RULE_CHECKS: Dict[RuleKind, Callable[[str, Rule], bool]] = {
    RuleKind.CONTAINS: _check_contains,
    RuleKind.UNKNOWN: _check_unknown,
}


def check_rule(submission_lower: str, rule: Rule) -> bool:
    """
    Run one rule against an already-lowercased submission.

    Kinds missing from the registry fall back to the UNKNOWN check.
    """
    check = RULE_CHECKS.get(rule.kind, _check_unknown)
    return check(submission_lower, rule)
