from finderbot.astar import Generator, euclidean, manhattan, octagonal
from finderbot.obstacles import ObstacleManager


def _steps(path):
    return list(zip(path, path[1:]))


def test_find_path():
    astar = Generator()
    path = astar.find_path((0, 0), (1, 1))
    assert len(path) == 2
    assert path[0] == (1, 1)
    assert path[1] == (0, 0)


def test_find_path_with_obstacle():
    obstacles = ObstacleManager([((0.5, 0.5), (1.5, 1.5))])
    astar = Generator(obstacles)
    path = astar.find_path((0, 2), (2, 1))
    assert path == [(2, 1), (2, 2), (1, 2), (0, 2)]


def test_path_steps_never_cross_obstacles():
    obstacles = ObstacleManager([((0.5, 0.5), (1.5, 1.5))])
    astar = Generator(obstacles)
    path = astar.find_path((0, 2), (2, 1))
    for a, b in _steps(path):
        assert not obstacles.is_colliding(a, b)


def test_same_source_and_target():
    assert Generator().find_path((3, 4), (3, 4)) == [(3, 4)]


def test_without_diagonals_steps_are_axis_aligned():
    astar = Generator()
    astar.set_diagonal_movement(False)
    path = astar.find_path((0, 0), (1, 1))
    assert path[0] == (1, 1)
    assert path[-1] == (0, 0)
    assert len(path) == 3
    for (ax, ay), (bx, by) in _steps(path):
        assert abs(ax - bx) + abs(ay - by) == 1


def test_path_stays_inside_world():
    astar = Generator()
    astar.set_world_size(3, 3)
    path = astar.find_path((0, 0), (2, 2))
    assert path[0] == (2, 2)
    assert path[-1] == (0, 0)
    for x, y in path:
        assert 0 <= x < 3 and 0 <= y < 3


def test_float_coordinates_match_integer_target():
    path = Generator().find_path((1.0, 2.0), (12.0, 15.0))
    assert path[0] == (12.0, 15.0)
    assert path[-1] == (1.0, 2.0)
    for (ax, ay), (bx, by) in _steps(path):
        assert max(abs(ax - bx), abs(ay - by)) == 1


def test_custom_heuristic_still_reaches_target():
    astar = Generator()
    astar.set_heuristic(euclidean)
    path = astar.find_path((0, 0), (4, 2))
    assert path[0] == (4, 2)
    assert path[-1] == (0, 0)


def test_heuristics():
    assert manhattan((0, 0), (3, 4)) == 70
    assert euclidean((0, 0), (3, 4)) == 50
    assert octagonal((0, 0), (3, 4)) == 52
    assert manhattan((3, 4), (0, 0)) == manhattan((0, 0), (3, 4))


def test_collision_bookkeeping():
    astar = Generator()
    astar.add_collision((1, 1))
    astar.add_collision((2, 2))
    assert astar.walls == [(1, 1), (2, 2)]
    astar.remove_collision((1, 1))
    astar.remove_collision((9, 9))
    assert astar.walls == [(2, 2)]
    astar.clear_collisions()
    assert astar.walls == []