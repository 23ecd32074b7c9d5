"""Path computation services: A* search followed by waypoint smoothing."""

from __future__ import annotations

from typing import Optional, Sequence

from .astar import Generator
from .obstacles import ObstacleManager, Point
from .smoothing import smooth_path as _smooth

INVALID_RESPONSE = "invalid"


def _parse_point(text: str) -> Point:
    x_text, sep, y_text = text.partition(",")
    if not sep:
        raise ValueError(f"point {text!r} has no ',' separator")
    return float(x_text), float(y_text)


def parse_request(message: str) -> tuple[Point, Point]:
    """Parse a request of the form ``"start_x,start_y;end_x,end_y"``.

    Raises ValueError if the message is malformed.
    """
    start_text, sep, end_text = message.partition(";")
    if not sep:
        raise ValueError(f"request {message!r} has no ';' separator")
    return _parse_point(start_text), _parse_point(end_text)


def format_response(path: Sequence[Point]) -> str:
    """Format a path as ``"x1,y1;x2,y2;...;xn,yn"`` with six decimals."""
    if not path:
        raise ValueError("cannot format an empty path")
    return ";".join(f"{float(x):f},{float(y):f}" for x, y in path)


class PathComputer:
    """Computes obstacle-avoiding paths between points on the field."""

    def __init__(self, obstacles: Optional[ObstacleManager] = None) -> None:
        self.obstacles = obstacles if obstacles is not None else ObstacleManager()
        self.generator = Generator(self.obstacles)

    def smooth_path(self, path: Sequence[Point]) -> list[Point]:
        """Remove unneeded waypoints, running the smoothing pass twice."""
        once = _smooth(path, self.obstacles)
        return _smooth(once, self.obstacles)

    def astar_path(self, start, end) -> list[Point]:
        """Find a path with diagonal moves; it is returned end first."""
        return self.generator.find_path(start, end)

    def handle_message(self, message: str) -> str:
        """Answer a textual path request.

        The response lists the smoothed path from start to end, or is
        ``"invalid"`` when the request cannot be parsed.
        """
        try:
            start, end = parse_request(message)
        except ValueError:
            return INVALID_RESPONSE
        path = self.astar_path(start, end)
        smoothed = _smooth(path, self.obstacles)
        smoothed.reverse()
        return format_response(smoothed)