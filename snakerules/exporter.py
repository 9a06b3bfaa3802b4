"""Recording a finished game as JSON lines."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, TextIO

from . import client
from .frames import SnakeState


def _compact(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


@dataclass
class GameExporter:
    """Collects a game and its per-turn requests, then writes them one per line.

    The first line is the game, then one snake request per recorded turn,
    and finally the result of the game.
    """

    game: client.Game = field(default_factory=client.Game)
    snake_requests: list[client.SnakeRequest] = field(default_factory=list)
    winner: SnakeState = field(default_factory=SnakeState)
    is_draw: bool = False

    def add_snake_request(self, snake_request: client.SnakeRequest) -> None:
        self.snake_requests.append(snake_request)

    def convert_to_json(self) -> list[str]:
        """Return the game, each recorded request and the result as JSON strings."""
        lines = [_compact(self.game.to_dict())]
        lines.extend(request.to_json() for request in self.snake_requests)
        lines.append(
            _compact(
                {
                    "winnerId": self.winner.id,
                    "winnerName": self.winner.name,
                    "isDraw": self.is_draw,
                }
            )
        )
        return lines

    def flush_to_file(self, output: TextIO) -> int:
        """Write every line to ``output`` and return how many were written."""
        lines = self.convert_to_json()
        for line in lines:
            output.write(f"{line}\n")
        return len(lines)