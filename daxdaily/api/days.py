"""Curriculum API endpoints."""

from fastapi import APIRouter, HTTPException, Depends

from ..content import Challenge, ContentCatalog, DayInfo, TIERS, get_catalog
from .schemas import DayDetail, DayHints, DaySolution, DaySummary, TierSummary

router = APIRouter(tags=["curriculum"])


def get_day_or_404(catalog: ContentCatalog, day: int) -> tuple[DayInfo, Challenge]:
    """Get a day and its challenge or raise 404."""
    info = catalog.get_day(day)
    challenge = catalog.get_challenge(day)
    if info is None or challenge is None:
        raise HTTPException(
            status_code=404,
            detail={"error_code": "DAY_NOT_FOUND", "message": f"Day {day} not found"},
        )
    return info, challenge


def _summary(info: DayInfo) -> DaySummary:
    return DaySummary(
        day=info.day,
        tier=info.tier.value,
        title=info.title,
        concept_topic=info.concept_topic,
        dax_focus=info.dax_focus,
        concepts=info.concepts,
    )


@router.get("/tiers", response_model=list[TierSummary])
async def list_tiers(catalog: ContentCatalog = Depends(get_catalog)):
    """The three course tiers and how many days each holds."""
    return [
        TierSummary(
            tier=t.tier.value,
            label=t.label,
            description=t.description,
            first_day=t.first_day,
            last_day=t.last_day,
            day_count=len(catalog.days_in_tier(t.tier)),
        )
        for t in TIERS
    ]


@router.get("/days", response_model=list[DaySummary])
async def list_days(tier: str = None, catalog: ContentCatalog = Depends(get_catalog)):
    """List all days, optionally for one tier."""
    days = catalog.list_days()
    if tier:
        days = [d for d in days if d.tier.value == tier]
    return [_summary(d) for d in days]


@router.get("/days/{day}", response_model=DayDetail)
async def get_day(day: int, catalog: ContentCatalog = Depends(get_catalog)):
    """Lesson and DAX task for a day."""
    info, challenge = get_day_or_404(catalog, day)
    prev_day, next_day = catalog.neighbours(day)

    return DayDetail(
        **_summary(info).model_dump(),
        concept_lesson=challenge.concept_lesson,
        key_takeaways=challenge.key_takeaways,
        scenario=challenge.scenario,
        instructions=challenge.instructions,
        starter_code=challenge.starter_code,
        sample_model=challenge.sample_model,
        notes=challenge.notes,
        rule_count=len(challenge.rules),
        hint_count=len(challenge.hints),
        prev_day=prev_day,
        next_day=next_day,
    )


@router.get("/days/{day}/hints", response_model=DayHints)
async def get_hints(day: int, catalog: ContentCatalog = Depends(get_catalog)):
    _, challenge = get_day_or_404(catalog, day)
    return DayHints(day=day, hints=challenge.hints)


@router.get("/days/{day}/solution", response_model=DaySolution)
async def get_solution(day: int, catalog: ContentCatalog = Depends(get_catalog)):
    """Reveal the reference solution."""
    _, challenge = get_day_or_404(catalog, day)
    return DaySolution(day=day, solution=challenge.solution, expected_output=challenge.expected_output)
