"""Draw-order queue: ascending z-index, insertion order breaks ties."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator

from tilerender.engine.shapes import Shape


class DrawQueue:
    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Shape]] = []
        self._counter = itertools.count()

    def push(self, shape: Shape, priority: int | None = None) -> None:
        z = shape.z_index if priority is None else priority
        heapq.heappush(self._heap, (z, next(self._counter), shape))

    def pop(self) -> Shape:
        if not self._heap:
            raise IndexError("pop from an empty DrawQueue")
        return heapq.heappop(self._heap)[2]

    def drain(self) -> Iterator[Shape]:
        """Pop every shape in paint order. The queue is empty afterwards."""
        while self._heap:
            yield self.pop()

    def merge(self, other: DrawQueue) -> None:
        """Take all of ``other``'s entries, ordered after this queue's on ties.

        ``other`` is left empty.
        """
        for z, _, shape in sorted(other._heap, key=lambda e: e[1]):
            heapq.heappush(self._heap, (z, next(self._counter), shape))
        other._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
