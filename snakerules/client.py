"""Request and response bodies of the snake HTTP API."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from .board import Point
from .constants import (
    PARAM_FOOD_SPAWN_CHANCE,
    PARAM_HAZARD_DAMAGE_PER_TURN,
    PARAM_MINIMUM_FOOD,
    PARAM_SHRINK_EVERY_N_TURNS,
)


@dataclass
class Coord:
    """A point on the board as the API presents it."""

    x: int = 0
    y: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass
class Customizations:
    color: str = ""
    head: str = ""
    tail: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color, "head": self.head, "tail": self.tail}


@dataclass
class RoyaleSettings:
    shrink_every_n_turns: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"shrinkEveryNTurns": self.shrink_every_n_turns}


@dataclass
class SquadSettings:
    allow_body_collisions: bool = False
    shared_elimination: bool = False
    shared_health: bool = False
    shared_length: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "allowBodyCollisions": self.allow_body_collisions,
            "sharedElimination": self.shared_elimination,
            "sharedHealth": self.shared_health,
            "sharedLength": self.shared_length,
        }


@dataclass
class RulesetSettings:
    """The fixed set of ruleset settings exposed through the API."""

    food_spawn_chance: int = 0
    minimum_food: int = 0
    hazard_damage_per_turn: int = 0
    hazard_map: str = ""
    hazard_map_author: str = ""
    royale: RoyaleSettings = field(default_factory=RoyaleSettings)
    squad: SquadSettings = field(default_factory=SquadSettings)

    def to_dict(self) -> dict[str, Any]:
        return {
            "foodSpawnChance": self.food_spawn_chance,
            "minimumFood": self.minimum_food,
            "hazardDamagePerTurn": self.hazard_damage_per_turn,
            "hazardMap": self.hazard_map,
            "hazardMapAuthor": self.hazard_map_author,
            "royale": self.royale.to_dict(),
            "squad": self.squad.to_dict(),
        }


@dataclass
class Ruleset:
    name: str = ""
    version: str = ""
    settings: RulesetSettings = field(default_factory=RulesetSettings)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "version": self.version, "settings": self.settings.to_dict()}


@dataclass
class Game:
    id: str = ""
    ruleset: Ruleset = field(default_factory=Ruleset)
    map: str = ""
    timeout: int = 0
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "ruleset": self.ruleset.to_dict(),
            "map": self.map,
            "timeout": self.timeout,
            "source": self.source,
        }


@dataclass
class Snake:
    id: str = ""
    name: str = ""
    latency: str = ""
    health: int = 0
    body: list[Coord] = field(default_factory=list)
    head: Coord = field(default_factory=Coord)
    length: int = 0
    shout: str = ""
    squad: str = ""
    customizations: Customizations = field(default_factory=Customizations)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "latency": self.latency,
            "health": self.health,
            "body": [c.to_dict() for c in self.body],
            "head": self.head.to_dict(),
            "length": self.length,
            "shout": self.shout,
            "squad": self.squad,
            "customizations": self.customizations.to_dict(),
        }


@dataclass
class Board:
    height: int = 0
    width: int = 0
    snakes: list[Snake] = field(default_factory=list)
    food: list[Coord] = field(default_factory=list)
    hazards: list[Coord] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "height": self.height,
            "width": self.width,
            "snakes": [s.to_dict() for s in self.snakes],
            "food": [c.to_dict() for c in self.food],
            "hazards": [c.to_dict() for c in self.hazards],
        }


@dataclass
class SnakeRequest:
    """The body sent with the start, move and end requests."""

    game: Game = field(default_factory=Game)
    turn: int = 0
    board: Board = field(default_factory=Board)
    you: Snake = field(default_factory=Snake)

    def to_dict(self) -> dict[str, Any]:
        return {
            "game": self.game.to_dict(),
            "turn": self.turn,
            "board": self.board.to_dict(),
            "you": self.you.to_dict(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    """Find a key exactly, falling back to a case-insensitive match."""
    if key in data:
        return data[key]
    folded = key.casefold()
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.casefold() == folded:
            return value
    return None


def _string_fields_from(cls: type, data: Any, keys: Mapping[str, str]) -> dict[str, str]:
    if not isinstance(data, Mapping):
        raise ValueError(f"cannot decode {type(data).__name__} into {cls.__name__}")
    values: dict[str, str] = {}
    for attr, key in keys.items():
        value = _lookup(data, key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"cannot decode {type(value).__name__} into field {key!r} of type string")
        values[attr] = value
    return values


@dataclass
class MoveResponse:
    """The body a snake returns from a move request."""

    move: str = ""
    shout: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> MoveResponse:
        return cls(**_string_fields_from(cls, data, {"move": "move", "shout": "shout"}))


@dataclass
class SnakeMetadataResponse:
    """The body a snake returns from its index URL."""

    api_version: str = ""
    author: str = ""
    color: str = ""
    head: str = ""
    tail: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> SnakeMetadataResponse:
        keys = {f.name: f.name for f in fields(cls)}
        keys["api_version"] = "apiversion"
        return cls(**_string_fields_from(cls, data, keys))


def _int_param(params: Mapping[str, str], key: str, default: int) -> int:
    raw = params.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def convert_ruleset_settings(params: Mapping[str, str]) -> RulesetSettings:
    """Turn free-form game parameters into the settings exposed by the API."""
    return RulesetSettings(
        food_spawn_chance=_int_param(params, PARAM_FOOD_SPAWN_CHANCE, 0),
        minimum_food=_int_param(params, PARAM_MINIMUM_FOOD, 0),
        hazard_damage_per_turn=_int_param(params, PARAM_HAZARD_DAMAGE_PER_TURN, 0),
        royale=RoyaleSettings(
            shrink_every_n_turns=_int_param(params, PARAM_SHRINK_EVERY_N_TURNS, 0)
        ),
        squad=SquadSettings(),
    )


def coord_from_point(point: Point) -> Coord:
    return Coord(point.x, point.y)


def coord_from_points(points: Iterable[Point]) -> list[Coord]:
    return [coord_from_point(p) for p in points]