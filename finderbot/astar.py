"""Grid A* path search over the playing field with line obstacles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

from .config import FIELD_HEIGHT, FIELD_WIDTH
from .obstacles import ObstacleManager, Point

Heuristic = Callable[[Point, Point], int]

_DIRECTIONS = (
    (0, 1), (1, 0), (0, -1), (-1, 0),
    (-1, -1), (1, 1), (-1, 1), (1, -1),
)
_STRAIGHT_COST = 10
_DIAGONAL_COST = 14


def _delta(source, target) -> tuple[float, float]:
    return abs(source[0] - target[0]), abs(source[1] - target[1])


def manhattan(source, target) -> int:
    """Manhattan distance scaled by ten."""
    dx, dy = _delta(source, target)
    return int(10 * (dx + dy))


def euclidean(source, target) -> int:
    """Straight-line distance scaled by ten."""
    dx, dy = _delta(source, target)
    return int(10 * math.sqrt(dx * dx + dy * dy))


def octagonal(source, target) -> int:
    """Octagonal distance scaled by ten."""
    dx, dy = _delta(source, target)
    return int(10 * (dx + dy) - 6 * min(dx, dy))


@dataclass(eq=False)
class _Node:
    coordinates: Point
    parent: Optional["_Node"] = None
    g: int = 0
    h: int = 0

    @property
    def score(self) -> int:
        return self.g + self.h


def _as_point(point) -> Point:
    x, y = point
    return (x, y)


class Generator:
    """A* path generator on an integer-step grid bounded by the world size."""

    def __init__(self, obstacles: Optional[ObstacleManager] = None) -> None:
        self.obstacles = obstacles if obstacles is not None else ObstacleManager()
        # Recorded collision points; the search itself consults only the
        # world bounds and the obstacle manager.
        self.walls: list[Point] = []
        self._heuristic: Heuristic = manhattan
        self._world_size: tuple[float, float] = (FIELD_WIDTH, FIELD_HEIGHT)
        self._directions = len(_DIRECTIONS)

    def set_world_size(self, width, height) -> None:
        self._world_size = (width, height)

    def set_diagonal_movement(self, enable: bool) -> None:
        self._directions = 8 if enable else 4

    def set_heuristic(self, heuristic: Heuristic) -> None:
        self._heuristic = heuristic

    def add_collision(self, point) -> None:
        self.walls.append(_as_point(point))

    def remove_collision(self, point) -> None:
        """Remove the first recorded collision at ``point``, if any."""
        point = _as_point(point)
        if point in self.walls:
            self.walls.remove(point)

    def clear_collisions(self) -> None:
        self.walls.clear()

    def _detect_collision(self, candidate: Point, origin: Point) -> bool:
        width, height = self._world_size
        x, y = candidate
        if x < 0 or x >= width or y < 0 or y >= height:
            return True
        return self.obstacles.is_colliding(candidate, origin)

    def find_path(self, source, target) -> list[Point]:
        """Search from ``source`` to ``target``.

        The path is returned target first, ending at ``source``. If the target
        cannot be reached, the path leads back from the last node explored.
        """
        source = _as_point(source)
        target = _as_point(target)
        open_nodes: dict[Point, _Node] = {source: _Node(source)}
        closed: set[Point] = set()
        moves = _DIRECTIONS[: self._directions]
        current: Optional[_Node] = None

        while open_nodes:
            current = None
            for node in open_nodes.values():
                if current is None or node.score <= current.score:
                    current = node

            if current.coordinates == target:
                break

            closed.add(current.coordinates)
            del open_nodes[current.coordinates]

            cx, cy = current.coordinates
            for index, (dx, dy) in enumerate(moves):
                candidate = (cx + dx, cy + dy)
                if self._detect_collision(candidate, current.coordinates) or candidate in closed:
                    continue

                total = current.g + (_STRAIGHT_COST if index < 4 else _DIAGONAL_COST)
                successor = open_nodes.get(candidate)
                if successor is None:
                    open_nodes[candidate] = _Node(
                        candidate, current, total, self._heuristic(candidate, target)
                    )
                elif total < successor.g:
                    successor.parent = current
                    successor.g = total

        path: list[Point] = []
        while current is not None:
            path.append(current.coordinates)
            current = current.parent
        return path