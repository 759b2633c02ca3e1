"""Classifier/tessellator — one feature in, at most one shape out."""

from __future__ import annotations

import logging

from tilerender.engine.context import RenderContext
from tilerender.engine.registry import CategoryRegistry, get_registry
from tilerender.engine.shapes import Shape
from tilerender.models.feature import MapFeature
from tilerender.utils.projection import MercatorProjection, Projection, project

logger = logging.getLogger(__name__)


class Classifier:
    """Turns tagged features into projected shapes using a category table."""

    def __init__(
        self,
        registry: CategoryRegistry | None = None,
        projection: Projection | None = None,
    ) -> None:
        if registry is None:
            # Importing the module registers the default categories.
            import tilerender.engine.categories  # noqa: F401

            registry = get_registry()
        self.registry = registry
        self.projection = projection or MercatorProjection()

    def classify(self, feature: MapFeature) -> Shape | None:
        """Build the shape for ``feature`` without touching any pass state."""
        spec = self.registry.match(feature)
        if spec is None:
            return None
        points = project(feature.coordinates, self.projection)
        return spec.build(feature, points)

    def tessellate(self, feature: MapFeature, ctx: RenderContext) -> Shape | None:
        """Classify ``feature``, enqueue the shape and fold it into the bounds."""
        spec = self.registry.match(feature)
        if spec is None:
            ctx.dropped += 1
            logger.debug("No category for %s feature", feature.geometry_type.value)
            return None

        shape = spec.build(feature, project(feature.coordinates, self.projection))
        ctx.queue.push(shape, shape.z_index)
        ctx.bounds.include(shape.screen_coordinates)
        ctx.category_counts[spec.id] += 1
        return shape


def classify(feature: MapFeature, ctx: RenderContext, classifier: Classifier | None = None) -> Shape | None:
    """Module-level shortcut for ``Classifier().tessellate``."""
    return (classifier or Classifier()).tessellate(feature, ctx)
