"""Removal of unnecessary waypoints from a path."""

from __future__ import annotations

from typing import Optional, Sequence

from .obstacles import ObstacleManager, Point


def smooth_path(path: Sequence[Point], obstacles: Optional[ObstacleManager] = None) -> list[Point]:
    """Drop every waypoint that can be skipped without hitting an obstacle.

    The first and last points are always kept.
    """
    if not path:
        raise ValueError("cannot smooth an empty path")
    if obstacles is None:
        obstacles = ObstacleManager()

    smoothed = [path[0]]
    for point, following in zip(path[1:-1], path[2:]):
        if obstacles.is_colliding(smoothed[-1], following):
            smoothed.append(point)
    smoothed.append(path[-1])
    return smoothed


class SmoothPath:
    """A path held together with the obstacles used to smooth it."""

    def __init__(self, path: Sequence[Point] = (), obstacles: Optional[ObstacleManager] = None) -> None:
        self.path = list(path)
        self.obstacles = obstacles if obstacles is not None else ObstacleManager()

    def smoothed(self) -> list[Point]:
        """Return the held path with unnecessary waypoints removed."""
        return smooth_path(self.path, self.obstacles)