"""Content records: tiers, day summaries and daily challenges."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from ..grading import Rule


class ContentError(Exception):
    """Raised when the content catalog cannot be loaded."""

    def __init__(self, message: str, source: str):
        self.message = message
        self.source = source
        super().__init__(f"{message} ({source})")


class Tier(str, Enum):
    FOUNDATION = "foundation"
    BUILDER = "builder"
    ARCHITECT = "architect"


@dataclass(frozen=True)
class TierInfo:
    tier: Tier
    label: str
    description: str
    first_day: int
    last_day: int


TIERS: Tuple[TierInfo, ...] = (
    TierInfo(Tier.FOUNDATION, "Foundation", "Data Modeling & Core DAX", 1, 10),
    TierInfo(Tier.BUILDER, "Builder", "Intermediate DAX Patterns & Visualization", 11, 20),
    TierInfo(Tier.ARCHITECT, "Architect", "Advanced DAX, Optimization & Governance", 21, 30),
)


@dataclass
class DayInfo:
    """Curriculum entry for one day."""
    day: int
    tier: Tier
    title: str
    concept_topic: str
    dax_focus: str
    concepts: List[str] = field(default_factory=list)


@dataclass
class Challenge:
    """
    The practice half of a day: lesson text, the DAX task, and what the
    grader checks it against.
    """
    day: int
    concept_lesson: str
    scenario: str
    instructions: str
    starter_code: str
    solution: str
    rules: List[Rule] = field(default_factory=list)
    key_takeaways: List[str] = field(default_factory=list)
    expected_output: str = ""
    hints: List[str] = field(default_factory=list)
    sample_model: str = ""
    notes: str = ""
