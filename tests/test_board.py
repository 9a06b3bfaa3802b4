import pytest

from snakerules.board import (
    BoardState,
    Point,
    Snake,
    eliminate_snake,
    get_distance_between_points,
    get_even_unoccupied_points,
    get_unoccupied_points,
    initialize_snakes,
    is_square_board,
    place_snake,
)
from snakerules.constants import (
    BOARD_SIZE_LARGE,
    BOARD_SIZE_MEDIUM,
    BOARD_SIZE_SMALL,
    ELIMINATED_BY_COLLISION,
    NOT_ELIMINATED,
    SNAKE_MAX_HEALTH,
)


def _full_board():
    return (
        BoardState(11, 11)
        .with_turn(99)
        .with_food([Point(1, 2, ttl=10, value=100)])
        .with_hazards([Point(3, 4, ttl=5, value=50)])
        .with_snakes(
            [
                Snake(
                    id="1",
                    body=[Point(1, 2)],
                    health=99,
                    eliminated_cause=ELIMINATED_BY_COLLISION,
                    eliminated_on_turn=45,
                    eliminated_by="2",
                )
            ]
        )
        .with_game_state({"example": "game data"})
        .with_point_state({Point(1, 1): 42})
    )


def test_clone_of_empty_equals_new_board():
    assert BoardState().clone() == BoardState(0, 0)


def test_clone_of_full_board_is_equal():
    full = _full_board()
    assert full.clone() == full
    assert full.turn == 99
    assert full.point_state == {Point(1, 1): 42}


def test_clone_is_independent():
    full = _full_board()
    copy = full.clone()
    copy.snakes[0].body.append(Point(5, 5))
    copy.snakes[0].health = 1
    copy.food.append(Point(0, 0))
    copy.game_state["other"] = "x"
    copy.point_state[Point(2, 2)] = 1
    assert full.snakes[0].body == [Point(1, 2)]
    assert full.snakes[0].health == 99
    assert full.food == [Point(1, 2, ttl=10, value=100)]
    assert full.game_state == {"example": "game data"}
    assert full.point_state == {Point(1, 1): 42}


def test_point_repr():
    assert repr(Point(1, 2)) == "{X:1, Y:2}"
    assert repr(Point(1, 2, ttl=10, value=100)) == "{X:1, Y:2, TTL:10, Value:100}"


def test_place_snake():
    board = BoardState(BOARD_SIZE_SMALL, BOARD_SIZE_SMALL)
    assert board.snakes == []

    place_snake(board, "a", [Point(0, 0), Point(1, 0), Point(1, 1)])
    assert len(board.snakes) == 1
    assert board.snakes[0] == Snake(
        id="a",
        body=[Point(0, 0), Point(1, 0), Point(1, 1)],
        health=SNAKE_MAX_HEALTH,
        eliminated_cause=NOT_ELIMINATED,
        eliminated_by="",
    )

    place_snake(board, "b", [Point(0, 2), Point(1, 2), Point(3, 2)])
    assert len(board.snakes) == 2
    assert board.snakes[1] == Snake(
        id="b",
        body=[Point(0, 2), Point(1, 2), Point(3, 2)],
        health=SNAKE_MAX_HEALTH,
    )


def test_place_snake_updates_existing():
    board = BoardState(BOARD_SIZE_SMALL, BOARD_SIZE_SMALL)
    initialize_snakes(board, ["a", "b"])
    place_snake(board, "b", [Point(3, 3)])
    assert len(board.snakes) == 2
    assert board.snakes[1].body == [Point(3, 3)]
    assert board.snakes[0].body == []


def test_initialize_snakes():
    board = BoardState(BOARD_SIZE_SMALL, BOARD_SIZE_SMALL)
    initialize_snakes(board, ["x", "y"])
    assert [s.id for s in board.snakes] == ["x", "y"]
    assert all(s.health == SNAKE_MAX_HEALTH and s.body == [] for s in board.snakes)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Point(0, 0), Point(0, 0), 0),
        (Point(0, 0), Point(1, 0), 1),
        (Point(0, 0), Point(0, 1), 1),
        (Point(0, 0), Point(1, 1), 2),
        (Point(0, 0), Point(4, 4), 8),
        (Point(0, 0), Point(4, 6), 10),
        (Point(8, 0), Point(8, 0), 0),
        (Point(8, 0), Point(8, 8), 8),
        (Point(8, 0), Point(0, 8), 16),
    ],
)
def test_get_distance_between_points(a, b, expected):
    assert get_distance_between_points(a, b) == expected
    assert get_distance_between_points(b, a) == expected


@pytest.mark.parametrize(
    "width, height, expected",
    [
        (1, 1, True),
        (0, 0, True),
        (0, 45, False),
        (45, 1, False),
        (7, 7, True),
        (11, 11, True),
        (19, 19, True),
        (7, 11, False),
        (11, 19, False),
        (19, 7, False),
    ],
)
def test_is_square_board(width, height, expected):
    assert is_square_board(BoardState(width=width, height=height)) is expected


@pytest.mark.parametrize(
    "board, expected",
    [
        (BoardState(width=1, height=1), [Point(0, 0)]),
        (BoardState(width=2, height=1), [Point(0, 0), Point(1, 0)]),
        (
            BoardState(width=1, height=1, food=[Point(0, 0), Point(101, 202), Point(-4, -5)]),
            [],
        ),
        (
            BoardState(width=2, height=2, food=[Point(0, 0), Point(1, 0)]),
            [Point(0, 1), Point(1, 1)],
        ),
        (
            BoardState(
                width=2, height=2, food=[Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)]
            ),
            [],
        ),
        (
            BoardState(width=1, height=4, snakes=[Snake(body=[Point(0, 0)])]),
            [Point(0, 1), Point(0, 2), Point(0, 3)],
        ),
        (
            BoardState(
                width=3, height=2, snakes=[Snake(body=[Point(0, 0), Point(1, 0), Point(1, 1)])]
            ),
            [Point(0, 1), Point(2, 0), Point(2, 1)],
        ),
        (
            BoardState(
                width=3,
                height=2,
                food=[Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 0)],
                snakes=[
                    Snake(body=[Point(0, 0), Point(1, 0), Point(1, 1)]),
                    Snake(body=[Point(0, 1)]),
                ],
            ),
            [Point(2, 1)],
        ),
        (BoardState(width=1, height=1, hazards=[Point(0, 0)]), []),
        (
            BoardState(width=2, height=2, hazards=[Point(1, 1)]),
            [Point(0, 0), Point(0, 1), Point(1, 0)],
        ),
        (
            BoardState(
                width=3,
                height=2,
                food=[Point(1, 1), Point(2, 0)],
                snakes=[
                    Snake(body=[Point(0, 0), Point(1, 0), Point(1, 1)]),
                    Snake(body=[Point(0, 1)]),
                ],
                hazards=[Point(0, 0), Point(1, 0)],
            ),
            [Point(2, 1)],
        ),
    ],
)
def test_get_unoccupied_points(board, expected):
    assert get_unoccupied_points(board, True, True) == expected


def test_unoccupied_points_excludes_head_neighbours():
    board = BoardState(width=3, height=1, snakes=[Snake(body=[Point(1, 0)])])
    assert get_unoccupied_points(board, False, False) == []
    assert get_unoccupied_points(board, True, False) == [Point(0, 0), Point(2, 0)]


def test_unoccupied_points_ignores_eliminated_snakes():
    board = BoardState(
        width=1,
        height=1,
        snakes=[Snake(body=[Point(0, 0)], eliminated_cause=ELIMINATED_BY_COLLISION)],
    )
    assert get_unoccupied_points(board, False, False) == [Point(0, 0)]


def test_hazards_ignored_unless_requested():
    board = BoardState(width=1, height=1, hazards=[Point(0, 0)])
    assert get_unoccupied_points(board, True, False) == [Point(0, 0)]


@pytest.mark.parametrize(
    "width, height",
    [
        (1, 1),
        (10, 5),
        (5, 10),
        (25, 2),
        (BOARD_SIZE_SMALL, BOARD_SIZE_SMALL),
        (BOARD_SIZE_MEDIUM, BOARD_SIZE_MEDIUM),
        (BOARD_SIZE_LARGE, BOARD_SIZE_LARGE),
    ],
)
def test_empty_board_is_fully_unoccupied(width, height):
    board = BoardState(width=width, height=height)
    assert len(get_unoccupied_points(board, True, False)) == width * height


@pytest.mark.parametrize(
    "board, expected",
    [
        (BoardState(width=1, height=1), [Point(0, 0)]),
        (BoardState(width=2, height=2), [Point(0, 0), Point(1, 1)]),
        (
            BoardState(width=1, height=1, food=[Point(0, 0), Point(101, 202), Point(-4, -5)]),
            [],
        ),
        (
            BoardState(width=2, height=2, food=[Point(0, 0), Point(1, 0)]),
            [Point(1, 1)],
        ),
        (
            BoardState(
                width=4,
                height=4,
                food=[
                    Point(0, 0),
                    Point(0, 2),
                    Point(1, 1),
                    Point(1, 3),
                    Point(2, 0),
                    Point(2, 2),
                    Point(3, 1),
                    Point(3, 3),
                ],
            ),
            [],
        ),
        (
            BoardState(width=1, height=4, snakes=[Snake(body=[Point(0, 0)])]),
            [Point(0, 2)],
        ),
        (
            BoardState(
                width=3, height=2, snakes=[Snake(body=[Point(0, 0), Point(1, 0), Point(1, 1)])]
            ),
            [Point(2, 0)],
        ),
        (
            BoardState(
                width=3,
                height=2,
                food=[Point(0, 0), Point(1, 0), Point(1, 1), Point(2, 1)],
                snakes=[
                    Snake(body=[Point(0, 0), Point(1, 0), Point(1, 1)]),
                    Snake(body=[Point(0, 1)]),
                ],
            ),
            [Point(2, 0)],
        ),
    ],
)
def test_get_even_unoccupied_points(board, expected):
    assert get_even_unoccupied_points(board) == expected


def test_eliminate_snake():
    snake = Snake()
    eliminate_snake(snake, "test-cause", "", 2)
    assert snake.eliminated_cause == "test-cause"
    assert snake.eliminated_by == ""
    assert snake.eliminated_on_turn == 2