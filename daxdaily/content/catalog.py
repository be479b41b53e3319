"""
Read-only content catalog.

Day records live in a JSON file bundled with the package (or the file named
by DAXDAILY_CONTENT_FILE). The file is read once on first access and cached.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..config import CONTENT_FILE
from ..grading import Rule
from .base import Challenge, ContentError, DayInfo, Tier

logger = logging.getLogger(__name__)


class ContentCatalog:
    """Day summaries and challenges keyed by day number."""

    def __init__(self, content_file: Optional[Path] = None):
        self._content_file = Path(content_file or CONTENT_FILE)
        self._days: Optional[Dict[int, DayInfo]] = None
        self._challenges: Dict[int, Challenge] = {}

    def _load(self) -> None:
        source = str(self._content_file)
        try:
            raw = json.loads(self._content_file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ContentError("Content file not found", source)
        except json.JSONDecodeError as e:
            raise ContentError(f"Content file is not valid JSON: {e}", source)

        if not isinstance(raw, dict) or not isinstance(raw.get("days", []), list):
            raise ContentError("Content file must be an object with a 'days' list", source)

        days: Dict[int, DayInfo] = {}
        challenges: Dict[int, Challenge] = {}
        for record in raw.get("days", []):
            if not isinstance(record, dict):
                raise ContentError(f"Malformed day record: {record!r}", source)
            try:
                info = _parse_day(record)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise ContentError(f"Malformed day record: {e}", source)
            if info.day in days:
                raise ContentError(f"Duplicate day {info.day}", source)
            days[info.day] = info
            if record.get("challenge"):
                try:
                    challenges[info.day] = _parse_challenge(info.day, record["challenge"])
                except (AttributeError, KeyError, TypeError) as e:
                    raise ContentError(f"Malformed challenge for day {info.day}: {e}", source)

        self._days = dict(sorted(days.items()))
        self._challenges = challenges
        logger.info(f"[Catalog] Loaded {len(days)} days ({len(challenges)} challenges) from {source}")

    @property
    def days(self) -> Dict[int, DayInfo]:
        if self._days is None:
            self._load()
        return self._days

    def list_days(self) -> List[DayInfo]:
        return list(self.days.values())

    def get_day(self, day: int) -> Optional[DayInfo]:
        return self.days.get(day)

    def get_challenge(self, day: int) -> Optional[Challenge]:
        self.days  # ensure loaded
        return self._challenges.get(day)

    def days_in_tier(self, tier: Tier) -> List[DayInfo]:
        return [d for d in self.days.values() if d.tier == tier]

    def total_days(self) -> int:
        return len(self.days)

    def neighbours(self, day: int) -> tuple:
        """(previous day, next day) present in the catalog, None at the ends."""
        numbers = list(self.days)
        prev_day = max((n for n in numbers if n < day), default=None)
        next_day = min((n for n in numbers if n > day), default=None)
        return prev_day, next_day


def _parse_day(record: dict) -> DayInfo:
    return DayInfo(
        day=int(record["day"]),
        tier=Tier(record["tier"]),
        title=record["title"],
        concept_topic=record.get("concept_topic", ""),
        dax_focus=record.get("dax_focus", ""),
        concepts=list(record.get("concepts", [])),
    )


def _parse_challenge(day: int, record: dict) -> Challenge:
    if not isinstance(record, dict):
        raise TypeError(f"challenge must be an object, got {type(record).__name__}")
    return Challenge(
        day=day,
        concept_lesson=record.get("concept_lesson", ""),
        scenario=record.get("scenario", ""),
        instructions=record.get("instructions", ""),
        starter_code=record.get("starter_code", ""),
        solution=record["solution"],
        rules=[Rule.from_dict(r) for r in record.get("rules", [])],
        key_takeaways=list(record.get("key_takeaways", [])),
        expected_output=record.get("expected_output", ""),
        hints=list(record.get("hints", [])),
        sample_model=record.get("sample_model", ""),
        notes=record.get("notes", ""),
    )


_default_catalog: Optional[ContentCatalog] = None


def get_catalog() -> ContentCatalog:
    """Process-wide catalog over the configured content file."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = ContentCatalog()
    return _default_catalog
