"""Per-snake client state and its conversion into API and board structures."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import timedelta

from . import client
from .api import Death, FrameSnake, GameEvent, GameEventType, GameFrame
from .board import BoardState, Snake
from .constants import NOT_ELIMINATED

_HTTP_OK = 200
_MILLISECOND = timedelta(milliseconds=1)


@dataclass
class SnakeState:
    """What the runner knows about one snake's server while a game is played."""

    url: str = ""
    name: str = ""
    id: str = ""
    last_move: str = ""
    character: str = ""
    color: str = ""
    head: str = ""
    tail: str = ""
    author: str = ""
    version: str = ""
    error: BaseException | None = None
    status_code: int = 0
    latency: timedelta = timedelta(0)

    @property
    def latency_ms(self) -> int:
        return int(self.latency / _MILLISECOND)


def convert_rules_snake(snake: Snake, snake_state: SnakeState) -> client.Snake:
    """Describe a rules snake the way the snake API presents it."""
    return client.Snake(
        id=snake.id,
        name=snake_state.name,
        health=snake.health,
        body=client.coord_from_points(snake.body),
        latency=str(snake_state.latency_ms),
        head=client.coord_from_point(snake.body[0]),
        length=len(snake.body),
        shout="",
        customizations=client.Customizations(
            head=snake_state.head,
            tail=snake_state.tail,
            color=snake_state.color,
        ),
    )


def convert_rules_snakes(
    snakes: Iterable[Snake], snake_states: Mapping[str, SnakeState]
) -> list[client.Snake]:
    """Convert the snakes still in the game, dropping eliminated ones."""
    return [
        convert_rules_snake(snake, snake_states.get(snake.id, SnakeState()))
        for snake in snakes
        if snake.eliminated_cause == NOT_ELIMINATED
    ]


def convert_state_to_board(
    board: BoardState, snake_states: Mapping[str, SnakeState]
) -> client.Board:
    """Describe a board state the way the snake API presents it."""
    return client.Board(
        height=board.height,
        width=board.width,
        food=client.coord_from_points(board.food),
        hazards=client.coord_from_points(board.hazards),
        snakes=convert_rules_snakes(board.snakes, snake_states),
    )


def _frame_snake(snake: Snake, state: SnakeState) -> FrameSnake:
    # A latency of 0 would be shown as a legacy error by the board.
    latency_ms = state.latency_ms or 1
    frame_snake = FrameSnake(
        id=snake.id,
        name=state.name,
        body=list(snake.body),
        health=snake.health,
        color=state.color,
        head_type=state.head,
        tail_type=state.tail,
        author=state.author,
        status_code=state.status_code,
        latency=str(latency_ms),
    )
    if state.error is not None:
        frame_snake.error = "0:Error communicating with server"
    elif state.status_code != _HTTP_OK:
        frame_snake.error = f"7:Bad HTTP status code {state.status_code}"
    if snake.eliminated_cause != NOT_ELIMINATED:
        frame_snake.death = Death(
            cause=snake.eliminated_cause,
            turn=snake.eliminated_on_turn,
            eliminated_by=snake.eliminated_by,
        )
    return frame_snake


def build_frame_event(
    board: BoardState, snake_states: Mapping[str, SnakeState]
) -> GameEvent:
    """Build the board-viewer frame event for the given board state."""
    frame = GameFrame(
        turn=board.turn,
        snakes=[
            _frame_snake(snake, snake_states.get(snake.id, SnakeState()))
            for snake in board.snakes
        ],
        food=list(board.food),
        hazards=list(board.hazards),
    )
    return GameEvent(GameEventType.FRAME, frame)