from __future__ import annotations

import pytest

from backend.recommendations.data_store import get_catalog
from backend.recommendations.models import TravelFilters
from backend.recommendations.scoring import (
    FALLBACK_SIMILAR_TO,
    is_already_visited,
    parse_regions,
    score,
    similar_to,
    similarity_bonus,
)

NO_FILTERS = TravelFilters()


# ── score ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("filters", [
    TravelFilters(),
    TravelFilters(climate="", budget="", region=""),
    TravelFilters(climate="any", budget="ANY", region=" Any "),
])
def test_unconstrained_filters_score_80_for_every_destination(filters):
    for destination in get_catalog():
        assert score(destination, [], filters) == 80


def test_each_dimension_weight(make_destination):
    dest = make_destination(climate="warm", budget="medium", region="Asia")
    miss_all = TravelFilters(climate="cold", budget="high", region="Europe")
    assert score(dest, [], miss_all) == 0
    assert score(dest, [], miss_all.model_copy(update={"climate": "warm"})) == 30
    assert score(dest, [], miss_all.model_copy(update={"budget": "medium"})) == 25
    assert score(dest, [], miss_all.model_copy(update={"region": "asia"})) == 25


def test_climate_and_budget_are_case_insensitive_and_trimmed(make_destination):
    dest = make_destination(climate="warm", budget="low", region="Asia")
    filters = TravelFilters(climate="  WARM ", budget="Low", region="Europe")
    assert score(dest, [], filters) == 55


def test_region_accepts_comma_separated_list(make_destination):
    dest = make_destination(region="Africa")
    assert score(dest, [], TravelFilters(climate="cold", budget="high", region="Asia, Africa")) == 25
    assert score(dest, [], TravelFilters(climate="cold", budget="high", region="Asia,,Europe")) == 0
    assert score(dest, [], TravelFilters(climate="cold", budget="high", region="Europe, any")) == 25
    assert score(dest, [], TravelFilters(climate="cold", budget="high", region=" , ")) == 25


def test_parse_regions_drops_empty_tokens():
    assert parse_regions(" Asia , ,AFRICA,") == {"asia", "africa"}
    assert parse_regions(None) == set()


def test_similarity_tag_inside_vacation(make_destination):
    dest = make_destination(tags=("temples", "beaches"))
    assert similarity_bonus(dest, ["Kyoto temples"]) == 3
    assert similarity_bonus(dest, ["Kyoto temples and beaches"]) == 6


def test_similarity_vacation_prefix_inside_tag(make_destination):
    dest = make_destination(tags=("northern lights",))
    # "lights" (text before the comma) is contained in the tag
    assert similarity_bonus(dest, ["Lights, Finland"]) == 3


def test_similarity_is_capped_at_20(make_destination):
    dest = make_destination(tags=("warm", "tropical", "beaches"))
    past = ["warm tropical beaches"] * 3
    assert similarity_bonus(dest, past) == 27
    assert score(dest, past, NO_FILTERS) == 100


def test_score_never_exceeds_100(make_destination):
    dest = make_destination(tags=tuple(f"tag{i}" for i in range(20)))
    past = [" ".join(dest.tags)] * 5
    assert score(dest, past, NO_FILTERS) == 100


def test_score_grows_with_matching_dimensions(make_destination):
    dest = make_destination(climate="warm", budget="low", region="Asia")
    steps = [
        TravelFilters(climate="cold", budget="high", region="Europe"),
        TravelFilters(climate="warm", budget="high", region="Europe"),
        TravelFilters(climate="warm", budget="low", region="Europe"),
        TravelFilters(climate="warm", budget="low", region="Asia"),
    ]
    scores = [score(dest, [], f) for f in steps]
    assert scores == sorted(scores)
    assert all(0 <= s <= 100 for s in scores)


# ── is_already_visited ───────────────────────────────────────────────────


def test_visited_when_destination_name_contains_vacation(make_destination):
    dest = make_destination(name="Chiang Mai, Thailand")
    assert is_already_visited(dest, ["Chiang Mai"])


def test_visited_when_vacation_contains_destination_name(make_destination):
    dest = make_destination(name="Japan")
    assert is_already_visited(dest, ["Tokyo, Japan"])


def test_not_visited_for_unrelated_trips(make_destination):
    dest = make_destination(name="Japan")
    assert not is_already_visited(dest, ["Rome, Italy", "Paris, France"])


def test_not_visited_without_past_vacations(make_destination):
    assert not is_already_visited(make_destination(), [])


def test_visited_only_compares_text_before_comma(make_destination):
    dest = make_destination(name="Bali, Indonesia")
    # "jakarta" is not part of the destination name, "bali" is not in the vacation
    assert not is_already_visited(dest, ["Jakarta, Indonesia"])
    assert is_already_visited(dest, ["bali, somewhere else"])


def test_visited_short_names_match_loosely(make_destination):
    dest = make_destination(name="Iceland")
    assert is_already_visited(dest, ["Ice"])


# ── similar_to ───────────────────────────────────────────────────────────


def test_similar_to_returns_first_two_matching_vacations(make_destination):
    dest = make_destination(tags=("Beaches", "temples"))
    past = ["Rome, Italy", "Phuket beaches", "Angkor temples", "Goa beaches"]
    assert similar_to(dest, past) == ("Phuket beaches", "Angkor temples")


def test_similar_to_fallback(make_destination):
    dest = make_destination(tags=("wine",))
    assert similar_to(dest, ["Rome, Italy"]) == (FALLBACK_SIMILAR_TO,)
