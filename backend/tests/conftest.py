from __future__ import annotations

import pytest

from backend.recommendations.models import Destination


def _make_destination(
    id: int = 1,
    name: str = "Testville, Nowhere",
    tags: tuple[str, ...] = (),
    climate: str = "warm",
    budget: str = "medium",
    region: str = "Asia",
) -> Destination:
    return Destination(
        id=id,
        name=name,
        image=f"https://images.example.com/{id}.jpg",
        description=f"Description of {name}",
        tags=tags,
        climate=climate,
        budget=budget,
        region=region,
        estimated_budget="$1000-2000",
        best_time_to_visit="All year",
        activities=("sightseeing",),
    )


@pytest.fixture
def make_destination():
    return _make_destination
