"""Category registry — the ordered predicate table that drives classification.

Usage:
    @category(id="road", rank=1, when=lambda f: f.properties.highway not in _NOT_ROADS)
    def build_road(feature: MapFeature, points: NDArray) -> Shape:
        return Road(screen_coordinates=points)

Categories are evaluated by ascending rank and the first predicate that holds
wins, so a feature never produces more than one shape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from tilerender.engine.shapes import Shape
    from tilerender.models.feature import MapFeature

logger = logging.getLogger(__name__)

Predicate = Callable[["MapFeature"], bool]
Builder = Callable[["MapFeature", NDArray[np.float64]], "Shape"]


@dataclass(frozen=True)
class CategorySpec:
    id: str
    rank: int
    predicate: Predicate
    build: Builder
    description: str = ""


class CategoryRegistry:
    """Ordered table of (predicate, builder) pairs."""

    def __init__(self) -> None:
        self._categories: dict[str, CategorySpec] = {}
        # Rank order, rebuilt on register
        self._ordered: list[CategorySpec] = []

    def register(self, spec: CategorySpec) -> None:
        if spec.id in self._categories:
            raise ValueError(f"Duplicate category ID: {spec.id}")
        for existing in self._categories.values():
            if existing.rank == spec.rank:
                raise ValueError(
                    f"Category {spec.id} reuses rank {spec.rank} of {existing.id}"
                )
        self._categories[spec.id] = spec
        self._ordered = sorted(self._categories.values(), key=lambda s: s.rank)
        logger.debug("Registered category %s (rank %d)", spec.id, spec.rank)

    def get(self, category_id: str) -> CategorySpec:
        return self._categories[category_id]

    def ordered(self) -> list[CategorySpec]:
        return list(self._ordered)

    def match(self, feature: MapFeature) -> CategorySpec | None:
        """First category, by rank, whose predicate accepts ``feature``."""
        for spec in self._ordered:
            if spec.predicate(feature):
                return spec
        return None

    @property
    def count(self) -> int:
        return len(self._categories)


# Module-level singleton
_registry = CategoryRegistry()


def get_registry() -> CategoryRegistry:
    return _registry


def category(
    *,
    id: str,
    rank: int,
    when: Predicate,
    description: str = "",
    registry: CategoryRegistry | None = None,
):
    """Decorator to register a shape builder under a predicate."""

    def decorator(fn: Builder) -> Builder:
        spec = CategorySpec(id=id, rank=rank, predicate=when, build=fn, description=description)
        (registry or _registry).register(spec)
        return fn

    return decorator
