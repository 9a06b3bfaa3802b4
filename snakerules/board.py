"""Board state, points and snakes, plus the basic queries over a board."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import NOT_ELIMINATED, SNAKE_MAX_HEALTH


@dataclass(frozen=True)
class Point:
    """A board coordinate, optionally carrying a time-to-live and a value."""

    x: int = 0
    y: int = 0
    ttl: int = 0
    value: int = 0

    def __repr__(self) -> str:
        if self.ttl or self.value:
            return f"{{X:{self.x}, Y:{self.y}, TTL:{self.ttl}, Value:{self.value}}}"
        return f"{{X:{self.x}, Y:{self.y}}}"


@dataclass
class Snake:
    """A snake on the board; the first body point is the head."""

    id: str = ""
    body: list[Point] = field(default_factory=list)
    health: int = 0
    eliminated_cause: str = NOT_ELIMINATED
    eliminated_on_turn: int = 0
    eliminated_by: str = ""


@dataclass
class BoardState:
    """The full state of a game board at one turn."""

    width: int = 0
    height: int = 0
    turn: int = 0
    food: list[Point] = field(default_factory=list)
    snakes: list[Snake] = field(default_factory=list)
    hazards: list[Point] = field(default_factory=list)
    game_state: dict[str, str] = field(default_factory=dict)
    point_state: dict[Point, int] = field(default_factory=dict)

    def clone(self) -> BoardState:
        """Return a deep copy that can be modified without touching this one."""
        return BoardState(
            width=self.width,
            height=self.height,
            turn=self.turn,
            food=list(self.food),
            snakes=[
                Snake(
                    id=snake.id,
                    body=list(snake.body),
                    health=snake.health,
                    eliminated_cause=snake.eliminated_cause,
                    eliminated_on_turn=snake.eliminated_on_turn,
                    eliminated_by=snake.eliminated_by,
                )
                for snake in self.snakes
            ],
            hazards=list(self.hazards),
            game_state=dict(self.game_state),
            point_state=dict(self.point_state),
        )

    def with_turn(self, turn: int) -> BoardState:
        self.turn = turn
        return self

    def with_food(self, food: list[Point]) -> BoardState:
        self.food = food
        return self

    def with_hazards(self, hazards: list[Point]) -> BoardState:
        self.hazards = hazards
        return self

    def with_snakes(self, snakes: list[Snake]) -> BoardState:
        self.snakes = snakes
        return self

    def with_game_state(self, game_state: dict[str, str]) -> BoardState:
        self.game_state = game_state
        return self

    def with_point_state(self, point_state: dict[Point, int]) -> BoardState:
        self.point_state = point_state
        return self


def get_unoccupied_points(
    board: BoardState, include_possible_moves: bool, include_hazards: bool
) -> list[Point]:
    """Return every free square, column by column.

    Food and living snakes always occupy squares. Unless
    ``include_possible_moves`` is set, the squares next to each head count as
    occupied too. Hazards count only when ``include_hazards`` is set.
    """
    occupied: set[tuple[int, int]] = {(p.x, p.y) for p in board.food}

    for snake in board.snakes:
        if snake.eliminated_cause != NOT_ELIMINATED:
            continue
        occupied.update((p.x, p.y) for p in snake.body)
        if snake.body and not include_possible_moves:
            head = snake.body[0]
            occupied.update(
                {
                    (head.x - 1, head.y),
                    (head.x + 1, head.y),
                    (head.x, head.y - 1),
                    (head.x, head.y + 1),
                }
            )

    if include_hazards:
        occupied.update((p.x, p.y) for p in board.hazards)

    return [
        Point(x, y)
        for x in range(board.width)
        for y in range(board.height)
        if (x, y) not in occupied
    ]


def get_even_unoccupied_points(board: BoardState) -> list[Point]:
    """Return the free squares whose coordinates add up to an even number."""
    return [p for p in get_unoccupied_points(board, True, False) if (p.x + p.y) % 2 == 0]


def get_distance_between_points(a: Point, b: Point) -> int:
    """Manhattan distance between two points."""
    return abs(a.x - b.x) + abs(a.y - b.y)


def is_square_board(board: BoardState) -> bool:
    return board.width == board.height


def eliminate_snake(snake: Snake, cause: str, by: str, turn: int) -> None:
    """Mark a snake as eliminated by ``cause`` on ``turn``, by snake ``by`` (or "")."""
    snake.eliminated_cause = cause
    snake.eliminated_by = by
    snake.eliminated_on_turn = turn


def initialize_snakes(board: BoardState, snake_ids: list[str]) -> None:
    """Replace the board's snakes with bodiless, full-health snakes."""
    board.snakes = [Snake(id=snake_id, health=SNAKE_MAX_HEALTH) for snake_id in snake_ids]


def place_snake(board: BoardState, snake_id: str, body: list[Point]) -> None:
    """Give an existing snake a body, or add a new full-health snake."""
    for snake in board.snakes:
        if snake.id == snake_id:
            snake.body = body
            return
    board.snakes.append(Snake(id=snake_id, body=body, health=SNAKE_MAX_HEALTH))