import pytest

from finderbot.compute import PathComputer, format_response, parse_request
from finderbot.obstacles import ObstacleManager


def test_handle_message_source_case():
    computer = PathComputer()
    response = computer.handle_message("1.0,2.0;12.0,15.0")
    assert response == "1.000000,2.000000;12.000000,15.000000"


@pytest.mark.parametrize(
    "message",
    ["1.0,2.0", "1.0 2.0;3.0,4.0", "1.0,2.0;3.0 4.0", "a,b;c,d"],
)
def test_handle_message_invalid(message):
    assert PathComputer().handle_message(message) == "invalid"


def test_parse_request():
    assert parse_request("1.0,2.0;12.0,15.0") == ((1.0, 2.0), (12.0, 15.0))


@pytest.mark.parametrize("message", ["", "1,2", "1;2,3", "1,2;3"])
def test_parse_request_rejects_malformed(message):
    with pytest.raises(ValueError):
        parse_request(message)


def test_format_response():
    assert format_response([(1, 2), (3.5, 4)]) == "1.000000,2.000000;3.500000,4.000000"


def test_format_response_empty():
    with pytest.raises(ValueError):
        format_response([])


def test_format_parse_round_trip():
    text = format_response([(1.5, 2.25), (7.0, 8.0)])
    assert parse_request(text) == ((1.5, 2.25), (7.0, 8.0))


def test_astar_path_adjacent():
    assert PathComputer().astar_path((0, 0), (1, 1)) == [(1, 1), (0, 0)]


def test_smooth_path_without_obstacles_keeps_ends():
    path = [(12, 15), (12, 14), (11, 13), (5, 6), (1, 2)]
    assert PathComputer().smooth_path(path) == [(12, 15), (1, 2)]


def test_smooth_path_keeps_corner_around_obstacle():
    obstacles = ObstacleManager([((0.5, 0.5), (1.5, 1.5))])
    computer = PathComputer(obstacles)
    path = [(0, 2), (1, 2), (2, 2), (2, 1)]
    assert computer.smooth_path(path) == [(0, 2), (2, 2), (2, 1)]


def test_handle_message_path_avoids_obstacle():
    obstacles = ObstacleManager([((0.5, 0.5), (1.5, 1.5))])
    computer = PathComputer(obstacles)
    response = computer.handle_message("0,2;2,1")
    points = [tuple(float(v) for v in pair.split(",")) for pair in response.split(";")]
    assert points[0] == (0.0, 2.0)
    assert points[-1] == (2.0, 1.0)
    for a, b in zip(points, points[1:]):
        assert not obstacles.is_colliding(a, b)