"""Text views of a board for the terminal."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from .board import BoardState, Point
from .constants import NOT_ELIMINATED
from .frames import SnakeState

TERM_RESET = "\033[0m"

TERM_BG_GRAY = "\033[48;2;127;127;127m"
TERM_BG_WHITE = "\033[107m"

TERM_FG_GRAY = "\033[38;2;127;127;127m"
TERM_FG_LIGHTGRAY = "\033[38;2;200;200;200m"
TERM_FG_FOOD = "\033[38;2;255;92;117m"
TERM_FG_RGB = "\033[38;2;{};{};{}m"

DEFAULT_SNAKE_COLOR = (136, 136, 136)

_HEX_COMPONENT = re.compile(rb"[+-]?[0-9A-Fa-f]+")


def parse_snake_color(color: str) -> tuple[int, int, int]:
    """Parse a colour like "#ef03d3" into RGB values, or return the board's default grey."""
    raw = color.encode()
    if len(raw) == 7:
        parts = (raw[1:3], raw[3:5], raw[5:])
        if all(_HEX_COMPONENT.fullmatch(part) for part in parts):
            red, green, blue = (int(part, 16) for part in parts)
            return red, green, blue
    return DEFAULT_SNAKE_COLOR


def _format_points(points: Iterable[Point]) -> str:
    return "[" + " ".join(f"{{{p.x} {p.y} {p.ttl} {p.value}}}" for p in points) + "]"


def _put(grid: list[list[str]], board: BoardState, point: Point, cell: str) -> None:
    if not (0 <= point.x < board.width and 0 <= point.y < board.height):
        raise IndexError(f"point {point!r} is outside the {board.width}x{board.height} board")
    grid[point.x][point.y] = cell


def render_map(
    board: BoardState, snake_states: Mapping[str, SnakeState], use_color: bool
) -> str:
    """Draw the board, its legend and each snake's status, top row first."""
    empty_cell = TERM_FG_LIGHTGRAY + "□" if use_color else "◦"
    grid = [[empty_cell] * board.height for _ in range(board.width)]
    out = [f"Turn: {board.turn}\n"]

    hazard_cell = TERM_BG_GRAY + " " + TERM_BG_WHITE if use_color else "░"
    for hazard in board.hazards:
        _put(grid, board, hazard, hazard_cell)
    if use_color:
        out.append(f"Hazards {TERM_BG_GRAY} {TERM_RESET}: {_format_points(board.hazards)}\n")
    else:
        out.append(f"Hazards ░: {_format_points(board.hazards)}\n")

    food_cell = TERM_FG_FOOD + "●" if use_color else "⚕"
    for food in board.food:
        _put(grid, board, food, food_cell)
    if use_color:
        out.append(
            f"Food {TERM_FG_FOOD}{TERM_BG_WHITE}●{TERM_RESET}: {_format_points(board.food)}\n"
        )
    else:
        out.append(f"Food ⚕: {_format_points(board.food)}\n")

    for snake in board.snakes:
        state = snake_states.get(snake.id, SnakeState())
        character = state.character or "\x00"
        rgb = TERM_FG_RGB.format(*parse_snake_color(state.color))
        body_cell = rgb + "■" if use_color else character
        for point in snake.body:
            if 0 <= point.x < board.width and 0 <= point.y < board.height:
                grid[point.x][point.y] = body_cell
        if use_color:
            out.append(f"{state.name} {rgb}{TERM_BG_WHITE}■■■{TERM_RESET}: ")
        else:
            out.append(f"{state.name} {character}: ")
        out.append(f"Health: {snake.health}")
        if snake.eliminated_cause != NOT_ELIMINATED:
            out.append(
                f", Eliminated: {snake.eliminated_cause}, Turn: {snake.eliminated_on_turn}"
            )
        out.append("\n")

    for y in reversed(range(board.height)):
        row = "".join(grid[x][y] for x in range(board.width))
        if use_color:
            row = TERM_BG_WHITE + row + TERM_RESET
        out.append(row + "\n")

    return "".join(out)


def render_state(board: BoardState, snake_states: Mapping[str, SnakeState]) -> str:
    """Summarise the turn in one line: living snakes, food and hazards."""
    alive = ", ".join(
        snake_states.get(snake.id, SnakeState()).name
        for snake in board.snakes
        if snake.eliminated_cause == NOT_ELIMINATED
    )
    return (
        f"Turn: {board.turn}, Snakes Alive: [{alive}], "
        f"Food: {len(board.food)}, Hazards: {len(board.hazards)}"
    )