"""Render pipeline — classify every feature, then composite the tile."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from PIL import Image

from tilerender.engine.bounds import BoundingBox
from tilerender.engine.classifier import Classifier
from tilerender.engine.compositor import composite
from tilerender.engine.config import RenderConfig
from tilerender.engine.context import RenderContext
from tilerender.models.feature import MapFeature

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Output of one full pass."""

    image: Image.Image
    bounds: BoundingBox = field(default_factory=BoundingBox)
    category_counts: dict[str, int] = field(default_factory=dict)
    dropped: int = 0
    elapsed_ms: float = 0.0

    @property
    def num_shapes(self) -> int:
        return sum(self.category_counts.values())


class RenderPipeline:
    """Orchestrates one classify-all, composite-all pass per call."""

    def __init__(
        self,
        classifier: Classifier | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.classifier = classifier or Classifier()
        self.config = config or RenderConfig()

    def classify_all(self, features: Iterable[MapFeature]) -> RenderContext:
        ctx = RenderContext()
        for feature in features:
            self.classifier.tessellate(feature, ctx)
        return ctx

    def classify_sharded(self, shards: Iterable[Iterable[MapFeature]]) -> RenderContext:
        """Classify each shard into its own context, then merge in shard order.

        Equal-priority shapes keep input order as long as the shards are
        contiguous slices of the feature sequence.
        """
        merged = RenderContext()
        for shard in shards:
            merged.merge(self.classify_all(shard))
        return merged

    def run(
        self,
        features: Iterable[MapFeature],
        width: int | None = None,
        height: int | None = None,
    ) -> RenderResult:
        """Run the full pass. A fresh context is built on every call."""
        start = time.perf_counter()
        width = width or self.config.width
        height = height or self.config.height

        ctx = self.classify_all(features)
        logger.info(
            "Classified %d features: %d shapes, %d dropped",
            ctx.num_features,
            ctx.num_shapes,
            ctx.dropped,
        )

        image = composite(ctx.queue, ctx.bounds, width, height, self.config)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info("Render complete: %dx%d in %.0fms", width, height, elapsed)
        return RenderResult(
            image=image,
            bounds=ctx.bounds,
            category_counts=dict(ctx.category_counts),
            dropped=ctx.dropped,
            elapsed_ms=elapsed,
        )


def create_pipeline(config: RenderConfig | None = None) -> RenderPipeline:
    """Factory function for creating a pipeline instance."""
    return RenderPipeline(config=config)
