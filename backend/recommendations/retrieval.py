from __future__ import annotations

import logging
from typing import NamedTuple

from .config import DEFAULT_RECOMMENDATION_CONFIG, RecommendationConfig
from .data_store import Catalog
from .models import (
    Destination,
    MatchResult,
    NoMatchResult,
    Recommendation,
    RecommendationRequest,
    TravelFilters,
)
from .patterns import analyze_patterns
from .scoring import WILDCARD, is_already_visited, score, similar_to

logger = logging.getLogger(__name__)

SUGGEST_WIDER_REGION = "Consider expanding your region preferences to include more areas"
SUGGEST_HIGHER_BUDGET = "Try 'medium' or 'high' budget range for more luxury options"
SUGGEST_TEMPERATE = "Consider 'temperate' climate for more variety"
SUGGEST_GENERIC = "Try different filter combinations or expand your criteria"


class _Candidate(NamedTuple):
    score: int
    recommendation: Recommendation


def _is_constrained(value: str | None) -> bool:
    return bool(value) and value.lower() not in (WILDCARD, "")


def build_suggestions(filters: TravelFilters) -> list[str]:
    """Hints for loosening filters that produced no matches."""
    suggestions: list[str] = []
    if _is_constrained(filters.region):
        suggestions.append(SUGGEST_WIDER_REGION)
    if filters.budget and filters.budget.lower() == "low":
        suggestions.append(SUGGEST_HIGHER_BUDGET)
    if _is_constrained(filters.climate):
        suggestions.append(SUGGEST_TEMPERATE)
    if not suggestions:
        suggestions.append(SUGGEST_GENERIC)
    return suggestions


def recommend(
    profile: RecommendationRequest,
    catalog: Catalog,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> MatchResult | NoMatchResult:
    past = profile.past_vacations
    filters = profile.filters

    candidates: list[_Candidate] = []
    for destination in catalog:
        if is_already_visited(destination, past):
            continue
        match_score = score(destination, past, filters)
        if match_score < config.min_score:
            continue
        candidates.append(_Candidate(
            score=match_score,
            recommendation=Recommendation(
                **destination.model_dump(),
                match_score=f"{match_score}%",
                similar_to=similar_to(destination, past, config.similar_to_limit),
            ),
        ))

    # list.sort is stable: ties keep catalog order
    candidates.sort(key=lambda c: c.score, reverse=True)
    top = [c.recommendation for c in candidates[: config.max_results]]

    logger.debug(
        "user=%s candidates=%d returned=%d", profile.user_id, len(candidates), len(top)
    )

    if not top:
        return NoMatchResult(suggestions=build_suggestions(filters))

    return MatchResult(
        recommendations=top,
        based_on_pattern=analyze_patterns(past),
        filters=filters.echo(),
    )


def filter_destinations(
    catalog: Catalog,
    region: str | None = None,
    budget: str | None = None,
    climate: str | None = None,
) -> list[Destination]:
    """Exact, case-insensitive browse filter; empty or "any" means no constraint."""

    def _accepts(wanted: str | None, actual: str) -> bool:
        return not _is_constrained(wanted) or actual.lower() == wanted.lower()

    return [
        d for d in catalog
        if _accepts(region, d.region)
        and _accepts(budget, d.budget)
        and _accepts(climate, d.climate)
    ]
