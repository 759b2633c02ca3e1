"""RenderContext — the per-pass mutable state threaded through classification.

One context per render pass. Bounds and queue are never shared between passes,
so independent tiles can be classified side by side.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from tilerender.engine.bounds import BoundingBox
from tilerender.engine.queue import DrawQueue


@dataclass
class RenderContext:
    """Shared state for one classify-then-composite pass."""

    bounds: BoundingBox = field(default_factory=BoundingBox)
    queue: DrawQueue = field(default_factory=DrawQueue)
    # Shapes emitted per category ID
    category_counts: Counter[str] = field(default_factory=Counter)
    # Features that matched no category
    dropped: int = 0

    @property
    def num_shapes(self) -> int:
        return len(self.queue)

    @property
    def num_features(self) -> int:
        return sum(self.category_counts.values()) + self.dropped

    def merge(self, other: RenderContext) -> None:
        """Absorb another shard's results. ``other``'s shapes order after ours on ties."""
        self.bounds.merge(other.bounds)
        self.queue.merge(other.queue)
        self.category_counts.update(other.category_counts)
        self.dropped += other.dropped
