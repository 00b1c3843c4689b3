from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "destinations.csv"


@dataclass(frozen=True)
class RecommendationConfig:
    """
    Tunables for the recommendation pipeline.

    ``min_score`` is the inclusive threshold a destination must reach to
    become a candidate; ``max_results`` caps the ranked list.
    """

    min_score: int = 60
    max_results: int = 10
    similar_to_limit: int = 2
    catalog_path: Path = Path(os.getenv("CATALOG_PATH", str(_BUNDLED_CATALOG)))


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
