"""Randomness sources and the automatic placement of snakes and food."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .board import (
    BoardState,
    Point,
    Snake,
    get_even_unoccupied_points,
    get_unoccupied_points,
    is_square_board,
)
from .constants import (
    BOARD_SIZE_MEDIUM,
    BOARD_SIZE_SMALL,
    SNAKE_MAX_HEALTH,
    SNAKE_START_SIZE,
    NoRoomForFoodError,
    NoRoomForSnakeError,
    RulesetError,
    TooManySnakesError,
)

Swap = Callable[[int, int], None]


class Rand(ABC):
    """A source of random choices used by the placement algorithms."""

    @abstractmethod
    def intn(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""

    @abstractmethod
    def shuffle(self, n: int, swap: Swap) -> None:
        """Permute ``n`` elements by calling ``swap(i, j)``."""


class MinRand(Rand):
    """Always picks the lowest choice and never reorders anything."""

    def intn(self, n: int) -> int:
        return 0

    def shuffle(self, n: int, swap: Swap) -> None:
        """Leave the order unchanged."""
        return None


class MaxRand(Rand):
    """Always picks the highest choice; shuffling rotates elements left by one."""

    def intn(self, n: int) -> int:
        return n - 1

    def shuffle(self, n: int, swap: Swap) -> None:
        for i in range(n - 1):
            swap(i, i + 1)


class SeededRand(Rand):
    """Pseudo-random choices that repeat for the same seed."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def intn(self, n: int) -> int:
        if n <= 0:
            raise ValueError("invalid argument to intn: n must be positive")
        return self._rng.randrange(n)

    def shuffle(self, n: int, swap: Swap) -> None:
        if n < 0:
            raise ValueError("invalid argument to shuffle: n must be non-negative")
        for i in range(n - 1, 0, -1):
            swap(i, self._rng.randrange(i + 1))


def _shuffled(rand: Rand, items: Sequence[Point]) -> list[Point]:
    result = list(items)

    def swap(i: int, j: int) -> None:
        result[i], result[j] = result[j], result[i]

    rand.shuffle(len(result), swap)
    return result


def _halve(n: int) -> int:
    """Integer division by two, truncating toward zero."""
    return -((-n) // 2) if n < 0 else n // 2


def _center(board: BoardState) -> Point:
    return Point(_halve(board.width - 1), _halve(board.height - 1))


def _fresh_snakes(snake_ids: Sequence[str]) -> list[Snake]:
    return [Snake(id=snake_id, health=SNAKE_MAX_HEALTH) for snake_id in snake_ids]


def _start_body(point: Point) -> list[Point]:
    return [point] * SNAKE_START_SIZE


@dataclass
class RandomPositionBucket:
    """A pool of positions that are drawn at random without replacement."""

    positions: list[Point] = field(default_factory=list)

    def fill(self, *points: Point) -> None:
        self.positions.extend(points)

    def take(self, rand: Rand) -> Point:
        if not self.positions:
            raise RulesetError("no more positions available")
        idx = rand.intn(len(self.positions))
        point = self.positions[idx]
        self.positions[idx] = self.positions[-1]
        self.positions.pop()
        return point


def create_default_board_state(
    rand: Rand, width: int, height: int, snake_ids: Sequence[str]
) -> BoardState:
    """Build a board of the given size with snakes and food placed on it."""
    board = BoardState(width=width, height=height)
    place_snakes_automatically(rand, board, snake_ids)
    place_food_automatically(rand, board)
    return board


def place_snakes_automatically(rand: Rand, board: BoardState, snake_ids: Sequence[str]) -> None:
    """Create the board's snakes and place them according to the board size."""
    if is_square_board(board):
        if len(snake_ids) > 8 and board.width < BOARD_SIZE_SMALL:
            raise TooManySnakesError()
        if len(snake_ids) <= 8 and board.width >= BOARD_SIZE_SMALL:
            place_snakes_fixed(rand, board, snake_ids)
            return
        if board.width >= BOARD_SIZE_MEDIUM:
            place_many_snakes_distributed(rand, board, snake_ids)
            return
    place_snakes_randomly(rand, board, snake_ids)


def place_snakes_fixed(rand: Rand, board: BoardState, snake_ids: Sequence[str]) -> None:
    """Place up to eight snakes on the corner and edge-centre start points."""
    board.snakes = _fresh_snakes(snake_ids)

    mn, md, mx = 1, _halve(board.width - 1), board.width - 2
    corners = [Point(mn, mn), Point(mn, mx), Point(mx, mn), Point(mx, mx)]
    cardinals = [Point(mn, md), Point(md, mn), Point(md, mx), Point(mx, md)]

    if len(board.snakes) > len(corners) + len(cardinals):
        raise TooManySnakesError()

    corners = _shuffled(rand, corners)
    cardinals = _shuffled(rand, cardinals)

    if rand.intn(2) == 0:
        start_points = corners + cardinals
    else:
        start_points = cardinals + corners

    for snake, start in zip(board.snakes, start_points):
        snake.body = _start_body(start)


def place_many_snakes_distributed(
    rand: Rand, board: BoardState, snake_ids: Sequence[str]
) -> None:
    """Spread up to sixteen snakes evenly across the four quadrants of the board."""
    if len(snake_ids) > 16:
        raise TooManySnakesError()

    board.snakes = _fresh_snakes(snake_ids)

    quad_h = board.width // 2
    quad_v = board.height // 2
    h_offset = quad_h // 3
    v_offset = quad_v // 3

    first = RandomPositionBucket()
    first.fill(
        Point(h_offset, v_offset),
        Point(quad_h - h_offset, v_offset),
        Point(h_offset, quad_v - v_offset),
        Point(quad_h - h_offset, quad_v - v_offset),
    )
    base = list(first.positions)
    quads = [
        first,
        RandomPositionBucket([Point(board.width - p.x - 1, p.y) for p in base]),
        RandomPositionBucket([Point(p.x, board.height - p.y - 1) for p in base]),
        RandomPositionBucket(
            [Point(board.width - p.x - 1, board.height - p.y - 1) for p in base]
        ),
    ]

    current = rand.intn(4)
    for snake in board.snakes:
        snake.body = _start_body(quads[current].take(rand))
        current = (current + 1) % 4


def place_snakes_randomly(rand: Rand, board: BoardState, snake_ids: Sequence[str]) -> None:
    """Place each snake on a random free even square other than the centre."""
    board.snakes = _fresh_snakes(snake_ids)
    center = _center(board)

    for snake in board.snakes:
        candidates = [p for p in get_even_unoccupied_points(board) if p != center]
        if not candidates:
            raise NoRoomForSnakeError()
        snake.body = _start_body(candidates[rand.intn(len(candidates))])


def place_food_automatically(rand: Rand, board: BoardState) -> None:
    """Place starting food according to the board size and number of snakes."""
    if is_square_board(board) and board.width >= BOARD_SIZE_SMALL:
        place_food_fixed(rand, board)
        return
    place_food_randomly(rand, board, len(board.snakes))


def _is_away_from_center(p: Point, head: Point, center: Point) -> bool:
    return (
        p.x < head.x < center.x
        or center.x < head.x < p.x
        or p.y < head.y < center.y
        or center.y < head.y < p.y
    )


def place_food_fixed(rand: Rand, board: BoardState) -> None:
    """Place food two moves from each snake, away from the centre, plus one in the centre."""
    center = _center(board)
    is_small_board = board.width * board.height < BOARD_SIZE_MEDIUM * BOARD_SIZE_MEDIUM

    if len(board.snakes) <= 4 or not is_small_board:
        for snake in board.snakes:
            head = snake.body[0]
            possible = [
                Point(head.x - 1, head.y - 1),
                Point(head.x - 1, head.y + 1),
                Point(head.x + 1, head.y - 1),
                Point(head.x + 1, head.y + 1),
            ]
            available = [
                p
                for p in possible
                if p != center
                and not any(f.x == p.x and f.y == p.y for f in board.food)
                and _is_away_from_center(p, head, center)
                and not (
                    p.x in (0, board.width - 1) and p.y in (0, board.height - 1)
                )
            ]
            if not available:
                raise NoRoomForFoodError()
            board.food.append(available[rand.intn(len(available))])

    if center not in get_unoccupied_points(board, True, False):
        raise NoRoomForFoodError()
    board.food.append(center)


def place_food_randomly(rand: Rand, board: BoardState, n: int) -> None:
    """Add up to ``n`` food on random squares away from snake heads."""
    for _ in range(n):
        free = get_unoccupied_points(board, False, False)
        if free:
            board.food.append(free[rand.intn(len(free))])