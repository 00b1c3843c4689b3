from __future__ import annotations

from collections.abc import Sequence

MIN_VACATIONS = 2
PATTERN_THRESHOLD = 2

ESTABLISHING_LABEL = "Establishing travel preferences"
DIVERSE_LABEL = "Diverse international travel experiences"

PATTERN_KEYWORDS: dict[str, tuple[str, ...]] = {
    # Regions
    "asia": ("japan", "thailand", "china", "korea", "vietnam", "asia", "bali", "indonesia"),
    "europe": ("italy", "france", "spain", "germany", "uk", "europe", "prague", "portugal"),
    "africa": ("africa", "morocco", "egypt", "kenya", "tanzania"),
    "americas": ("usa", "canada", "mexico", "brazil", "america"),
    # Themes
    "cultural": ("temple", "museum", "culture", "history", "art"),
    "beaches": ("beach", "island", "tropical", "coast"),
    "nature": ("mountain", "nature", "hiking", "wildlife"),
}

# africa and americas are counted but never chosen.
PATTERN_PRIORITY: tuple[tuple[str, str], ...] = (
    ("asia", "Asian cultural and adventure destinations"),
    ("europe", "European historical and cultural destinations"),
    ("cultural", "Cultural and historical destinations"),
    ("beaches", "Tropical and beach destinations"),
    ("nature", "Nature and adventure destinations"),
)


def tally_patterns(past_vacations: Sequence[str]) -> dict[str, int]:
    """Count, per bucket, how many vacations mention any of its keywords."""
    counts = {bucket: 0 for bucket in PATTERN_KEYWORDS}
    for vacation in past_vacations:
        vacation_lower = vacation.lower()
        for bucket, keywords in PATTERN_KEYWORDS.items():
            if any(k in vacation_lower for k in keywords):
                counts[bucket] += 1
    return counts


def analyze_patterns(past_vacations: Sequence[str]) -> str:
    """Summarise past trips as a short travel-pattern label."""
    if len(past_vacations) < MIN_VACATIONS:
        return ESTABLISHING_LABEL

    counts = tally_patterns(past_vacations)
    for bucket, label in PATTERN_PRIORITY:
        if counts[bucket] >= PATTERN_THRESHOLD:
            return label

    return DIVERSE_LABEL
