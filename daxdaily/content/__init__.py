"""Lesson and challenge content."""

from .base import Challenge, ContentError, DayInfo, Tier, TierInfo, TIERS
from .catalog import ContentCatalog, get_catalog

__all__ = [
    "Challenge", "ContentError", "DayInfo", "Tier", "TierInfo", "TIERS",
    "ContentCatalog", "get_catalog",
]
