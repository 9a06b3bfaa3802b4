"""JSON structures served to the browser board viewer."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from .board import Point


def _point_dict(point: Point) -> dict[str, int]:
    data = {"X": point.x, "Y": point.y}
    if point.ttl:
        data["TTL"] = point.ttl
    if point.value:
        data["Value"] = point.value
    return data


class GameEventType(str, Enum):
    """Kinds of events carried over the board's event stream."""

    FRAME = "frame"
    GAME_END = "game_end"


@dataclass
class Game:
    """Game metadata returned by the game status endpoint."""

    id: str = ""
    status: str = ""
    width: int = 0
    height: int = 0
    ruleset: dict[str, str] = field(default_factory=dict)
    snake_timeout: int = 0
    source: str = ""
    ruleset_name: str = ""
    rules_stages: list[str] = field(default_factory=list)
    map: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "Status": self.status,
            "Width": self.width,
            "Height": self.height,
            "Ruleset": dict(self.ruleset),
            "SnakeTimeout": self.snake_timeout,
            "Source": self.source,
            "RulesetName": self.ruleset_name,
            "RulesStages": list(self.rules_stages),
            "Map": self.map,
        }


@dataclass
class Death:
    """How and when a snake was eliminated."""

    cause: str = ""
    turn: int = 0
    eliminated_by: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"Cause": self.cause, "Turn": self.turn, "EliminatedBy": self.eliminated_by}


@dataclass
class FrameSnake:
    """A snake as shown in one frame of the board viewer."""

    id: str = ""
    name: str = ""
    body: list[Point] = field(default_factory=list)
    health: int = 0
    death: Death | None = None
    color: str = ""
    head_type: str = ""
    tail_type: str = ""
    latency: str = ""
    shout: str = ""
    squad: str = ""
    author: str = ""
    status_code: int = 0
    error: str = ""
    is_bot: bool = False
    is_environment: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "ID": self.id,
            "Name": self.name,
            "Body": [_point_dict(p) for p in self.body],
            "Health": self.health,
            "Death": None if self.death is None else self.death.to_dict(),
            "Color": self.color,
            "HeadType": self.head_type,
            "TailType": self.tail_type,
            "Latency": self.latency,
            "Shout": self.shout,
            "Squad": self.squad,
            "Author": self.author,
            "StatusCode": self.status_code,
            "Error": self.error,
            "IsBot": self.is_bot,
            "IsEnvironment": self.is_environment,
        }


@dataclass
class GameFrame:
    """A single turn of the game."""

    turn: int = 0
    snakes: list[FrameSnake] = field(default_factory=list)
    food: list[Point] = field(default_factory=list)
    hazards: list[Point] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "Turn": self.turn,
            "Snakes": [s.to_dict() for s in self.snakes],
            "Food": [_point_dict(p) for p in self.food],
            "Hazards": [_point_dict(p) for p in self.hazards],
        }


@dataclass
class GameEnd:
    """Payload announcing the end of a game."""

    game: Game = field(default_factory=Game)

    def to_dict(self) -> dict[str, Any]:
        return {"game": self.game.to_dict()}


EventData = Union[GameFrame, Game, GameEnd]


@dataclass
class GameEvent:
    """Top-level message sent in each event-stream frame."""

    event_type: GameEventType
    data: EventData

    def to_dict(self) -> dict[str, Any]:
        return {"Type": self.event_type.value, "Data": self.data.to_dict()}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)