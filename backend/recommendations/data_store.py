from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

import pandas as pd

from .config import DEFAULT_RECOMMENDATION_CONFIG
from .models import Destination

logger = logging.getLogger(__name__)

CATALOG_COLUMNS = [
    "id",
    "name",
    "image",
    "description",
    "tags",
    "climate",
    "budget",
    "region",
    "estimatedBudget",
    "bestTimeToVisit",
    "activities",
]

_LIST_SEPARATOR = "|"

_catalog: Catalog | None = None


class CatalogError(RuntimeError):
    """Raised when the destination catalog cannot be loaded or is inconsistent."""


class Catalog:
    """Immutable, ordered collection of destinations."""

    __slots__ = ("_destinations", "_by_id")

    def __init__(self, destinations: Iterable[Destination]) -> None:
        items = tuple(destinations)
        by_id: dict[int, Destination] = {}
        for dest in items:
            if dest.id in by_id:
                raise CatalogError(f"Duplicate destination id {dest.id}")
            by_id[dest.id] = dest
        self._destinations = items
        self._by_id = by_id

    def __iter__(self) -> Iterator[Destination]:
        return iter(self._destinations)

    def __len__(self) -> int:
        return len(self._destinations)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} destinations)"

    @property
    def destinations(self) -> tuple[Destination, ...]:
        return self._destinations

    def get(self, destination_id: int) -> Destination | None:
        return self._by_id.get(destination_id)


def _split_list(cell: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in cell.split(_LIST_SEPARATOR) if part.strip())


def load_catalog(path: Path) -> Catalog:
    """Read a destination CSV into a :class:`Catalog`."""
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    missing = [c for c in CATALOG_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog file {path} is missing columns: {', '.join(missing)}")

    destinations: list[Destination] = []
    for row in df.to_dict(orient="records"):
        try:
            destinations.append(Destination(
                id=int(row["id"]),
                name=row["name"].strip(),
                image=row["image"],
                description=row["description"],
                tags=_split_list(row["tags"]),
                climate=row["climate"].strip(),
                budget=row["budget"].strip(),
                region=row["region"].strip(),
                estimated_budget=row["estimatedBudget"],
                best_time_to_visit=row["bestTimeToVisit"],
                activities=_split_list(row["activities"]),
            ))
        except ValueError as exc:
            raise CatalogError(f"Invalid catalog row {row.get('id')!r}: {exc}") from exc

    catalog = Catalog(destinations)
    logger.info("Loaded %d destinations from %s", len(catalog), path)
    return catalog


def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(DEFAULT_RECOMMENDATION_CONFIG.catalog_path)
    return _catalog
