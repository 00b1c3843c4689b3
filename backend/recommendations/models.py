from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Destination(_CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    name: str
    image: str
    description: str
    tags: tuple[str, ...]
    climate: str
    budget: str
    region: str
    estimated_budget: str
    best_time_to_visit: str
    activities: tuple[str, ...]

    @property
    def name_prefix(self) -> str:
        """Lowercased display name up to its first comma."""
        return self.name.lower().split(",")[0]


class TravelFilters(BaseModel):
    """User filters; unknown keys are kept so they can be echoed back."""

    model_config = ConfigDict(extra="allow")

    climate: StrictStr | None = None
    budget: StrictStr | None = None
    region: StrictStr | None = Field(
        default=None, description='Comma separated regions, e.g. "Asia, Africa"'
    )

    def echo(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class RecommendationRequest(_CamelModel):
    user_id: StrictStr = Field(..., min_length=1)
    past_vacations: list[StrictStr] = Field(
        ..., min_length=1, description='Free text, conventionally "City, Country"'
    )
    filters: TravelFilters


class Recommendation(Destination):
    match_score: str
    similar_to: tuple[str, ...]


class MatchResult(BaseModel):
    recommendations: list[Recommendation]
    based_on_pattern: str
    filters: dict[str, Any]


class NoMatchResult(BaseModel):
    suggestions: list[str]


# ── HTTP payloads ────────────────────────────────────────────────────────


class HealthResponse(_CamelModel):
    status: Literal["healthy"] = "healthy"
    service: str
    version: str
    timestamp: str
    uptime: float


class DestinationListResponse(_CamelModel):
    status: Literal["success"] = "success"
    total: int
    destinations: list[Destination]


class RecommendationResponse(_CamelModel):
    status: Literal["success"] = "success"
    user_id: str
    total_recommendations: int
    recommendations: list[Recommendation]
    based_on_pattern: str
    filters: dict[str, Any]
    generated_at: str
    response_time_ms: int
