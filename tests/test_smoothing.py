import pytest

from finderbot.obstacles import ObstacleManager
from finderbot.smoothing import SmoothPath, smooth_path

DIAGONAL_PATH = [
    (12, 15), (12, 14), (12, 13), (11, 12), (10, 11), (9, 10), (8, 9),
    (7, 8), (6, 7), (5, 6), (4, 5), (3, 4), (2, 3), (1, 2),
]


def test_smooth_path():
    result = smooth_path(DIAGONAL_PATH)
    expected = [(12, 15), (1, 2)]
    assert len(result) == len(expected)
    assert result == expected


def test_class_matches_function():
    assert SmoothPath(DIAGONAL_PATH).smoothed() == smooth_path(DIAGONAL_PATH)


def test_obstacle_keeps_corner():
    obstacles = ObstacleManager([((1, -1), (1, 1.5))])
    path = [(0, 0), (0, 2), (2, 2)]
    assert smooth_path(path, obstacles) == path


def test_smoothed_segments_avoid_obstacles():
    obstacles = ObstacleManager([((5, 0), (5, 8))])
    path = [(0, 0), (0, 5), (0, 9), (5, 9), (9, 9), (9, 5), (9, 0)]
    result = smooth_path(path, obstacles)
    assert result[0] == path[0]
    assert result[-1] == path[-1]
    assert len(result) < len(path)
    assert all(point in path for point in result)
    for a, b in zip(result, result[1:]):
        assert not obstacles.is_colliding(a, b)


def test_empty_path_raises():
    with pytest.raises(ValueError):
        smooth_path([])
    with pytest.raises(ValueError):
        SmoothPath().smoothed()