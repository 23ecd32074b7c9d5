"""Line-segment obstacles and collision checks against them."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


def _cross(o: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def _within_box(p: Sequence[float], q: Sequence[float], r: Sequence[float]) -> bool:
    """Whether ``r`` lies in the bounding box of segment ``p``-``q``."""
    return (
        min(p[0], q[0]) <= r[0] <= max(p[0], q[0])
        and min(p[1], q[1]) <= r[1] <= max(p[1], q[1])
    )


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def segments_intersect(a_start, a_end, b_start, b_end) -> bool:
    """Return True if the closed segments a and b share at least one point."""
    d1 = _sign(_cross(b_start, b_end, a_start))
    d2 = _sign(_cross(b_start, b_end, a_end))
    d3 = _sign(_cross(a_start, a_end, b_start))
    d4 = _sign(_cross(a_start, a_end, b_end))

    if d1 * d2 < 0 and d3 * d4 < 0:
        return True
    if d1 == 0 and _within_box(b_start, b_end, a_start):
        return True
    if d2 == 0 and _within_box(b_start, b_end, a_end):
        return True
    if d3 == 0 and _within_box(a_start, a_end, b_start):
        return True
    if d4 == 0 and _within_box(a_start, a_end, b_end):
        return True
    return False


class ObstacleManager:
    """A collection of line-segment obstacles that paths must not cross."""

    def __init__(self, obstacles: Iterable[Segment] = ()) -> None:
        self._obstacles: list[Segment] = []
        for start, end in obstacles:
            self.add_obstacle(start, end)

    def add_obstacle(self, start, end) -> None:
        """Add the segment from ``start`` to ``end`` as an obstacle."""
        self._obstacles.append((tuple(start), tuple(end)))

    def clear(self) -> None:
        """Remove every obstacle."""
        self._obstacles.clear()

    def is_colliding(self, origin, destination) -> bool:
        """Return True if the segment origin-destination touches any obstacle."""
        return any(
            segments_intersect(start, end, origin, destination)
            for start, end in self._obstacles
        )

    def __len__(self) -> int:
        return len(self._obstacles)