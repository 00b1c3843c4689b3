"""
Heuristic match scoring.

A destination earns points on four independent dimensions. Each dimension is
all-or-nothing except past-vacation similarity, which accrues per matching
(vacation, tag) pair up to its cap.

    climate 30 + budget 25 + region 25 + similarity (<= 20)  ->  0..100
"""
from __future__ import annotations

from collections.abc import Sequence

from .models import Destination, TravelFilters

CLIMATE_WEIGHT = 30
BUDGET_WEIGHT = 25
REGION_WEIGHT = 25
SIMILARITY_WEIGHT = 20
SIMILARITY_POINTS_PER_MATCH = 3
MAX_SCORE = 100

WILDCARD = "any"
FALLBACK_SIMILAR_TO = "Based on your travel preferences"


def _prefix(text: str) -> str:
    """Lowercased text before the first comma (not stripped)."""
    return text.lower().split(",")[0]


def _normalise(value: str | None) -> str:
    return (value or "").lower().strip()


def _matches_category(wanted: str | None, actual: str) -> bool:
    wanted_norm = _normalise(wanted)
    return not wanted_norm or wanted_norm == WILDCARD or wanted_norm == _normalise(actual)


def parse_regions(raw: str | None) -> set[str]:
    return {r.strip() for r in (raw or "").lower().split(",") if r.strip()}


def _matches_region(raw_regions: str | None, region: str) -> bool:
    regions = parse_regions(raw_regions)
    return not regions or WILDCARD in regions or region.lower() in regions


def similarity_bonus(destination: Destination, past_vacations: Sequence[str]) -> int:
    """Uncapped similarity points for ``destination`` against past trips."""
    bonus = 0
    for vacation in past_vacations:
        vacation_lower = vacation.lower()
        vacation_prefix = _prefix(vacation)
        for tag in destination.tags:
            tag_lower = tag.lower()
            if tag_lower in vacation_lower or vacation_prefix in tag_lower:
                bonus += SIMILARITY_POINTS_PER_MATCH
    return bonus


def score(
    destination: Destination,
    past_vacations: Sequence[str],
    filters: TravelFilters,
) -> int:
    """Return the 0-100 match score of one destination for one profile."""
    total = 0

    if _matches_category(filters.climate, destination.climate):
        total += CLIMATE_WEIGHT

    if _matches_category(filters.budget, destination.budget):
        total += BUDGET_WEIGHT

    if _matches_region(filters.region, destination.region):
        total += REGION_WEIGHT

    total += min(similarity_bonus(destination, past_vacations), SIMILARITY_WEIGHT)

    return min(total, MAX_SCORE)


def is_already_visited(destination: Destination, past_vacations: Sequence[str]) -> bool:
    """
    Loose two-way substring check between destination name and past trips.

    Only the text before the first comma of each side is used as the probe,
    so "Bali, Indonesia" excludes the catalog's "Bali, Indonesia" and a bare
    "Japan" excludes "Japan". Short names can produce false positives.
    """
    dest_name_lower = destination.name.lower()
    dest_prefix = destination.name_prefix
    for vacation in past_vacations:
        if _prefix(vacation) in dest_name_lower or dest_prefix in vacation.lower():
            return True
    return False


def similar_to(
    destination: Destination,
    past_vacations: Sequence[str],
    limit: int = 2,
) -> tuple[str, ...]:
    """Past vacations that share a tag with ``destination``, in input order."""
    tags_lower = [t.lower() for t in destination.tags]
    matched = [
        vacation for vacation in past_vacations
        if any(tag in vacation.lower() for tag in tags_lower)
    ]
    if not matched:
        return (FALLBACK_SIMILAR_TO,)
    return tuple(matched[:limit])
