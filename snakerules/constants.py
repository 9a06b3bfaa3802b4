"""Game-wide constants and the error types raised by the rules."""

from __future__ import annotations

MOVE_UP = "up"
MOVE_DOWN = "down"
MOVE_RIGHT = "right"
MOVE_LEFT = "left"

BOARD_SIZE_SMALL = 7
BOARD_SIZE_MEDIUM = 11
BOARD_SIZE_LARGE = 19
BOARD_SIZE_XLARGE = 21
BOARD_SIZE_XXLARGE = 25

SNAKE_MAX_HEALTH = 100
SNAKE_START_SIZE = 3

# Snake elimination causes
NOT_ELIMINATED = ""
ELIMINATED_BY_COLLISION = "snake-collision"
ELIMINATED_BY_SELF_COLLISION = "snake-self-collision"
ELIMINATED_BY_OUT_OF_HEALTH = "out-of-health"
ELIMINATED_BY_HEAD_TO_HEAD_COLLISION = "head-collision"
ELIMINATED_BY_OUT_OF_BOUNDS = "wall-collision"
ELIMINATED_BY_HAZARD = "hazard"

# Ruleset / game type names
GAME_TYPE_CONSTRICTOR = "constrictor"
GAME_TYPE_ROYALE = "royale"
GAME_TYPE_SOLO = "solo"
GAME_TYPE_STANDARD = "standard"
GAME_TYPE_WRAPPED = "wrapped"
GAME_TYPE_WRAPPED_CONSTRICTOR = "wrapped_constrictor"

# Game creation parameter names
PARAM_GAME_TYPE = "name"
PARAM_FOOD_SPAWN_CHANCE = "foodSpawnChance"
PARAM_MINIMUM_FOOD = "minimumFood"
PARAM_HAZARD_DAMAGE_PER_TURN = "damagePerTurn"
PARAM_HAZARD_MAP = "hazardMap"
PARAM_HAZARD_MAP_AUTHOR = "hazardMapAuthor"
PARAM_SHRINK_EVERY_N_TURNS = "shrinkEveryNTurns"
PARAM_ALLOW_BODY_COLLISIONS = "allowBodyCollisions"
PARAM_SHARED_ELIMINATION = "sharedElimination"
PARAM_SHARED_HEALTH = "sharedHealth"
PARAM_SHARED_LENGTH = "sharedLength"


class RulesetError(Exception):
    """Base error for anything the rules refuse to do."""

    default_message = "ruleset error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)

    @property
    def message(self) -> str:
        return str(self.args[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RulesetError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class TooManySnakesError(RulesetError):
    default_message = "too many snakes for fixed start positions"


class NoRoomForSnakeError(RulesetError):
    default_message = "not enough space to place snake"


class NoRoomForFoodError(RulesetError):
    default_message = "not enough space to place food"


class NoMoveFoundError(RulesetError):
    default_message = "move not provided for snake"


class ZeroLengthSnakeError(RulesetError):
    default_message = "snake is length zero"


class EmptyRegistryError(RulesetError):
    default_message = "empty registry"


class NoStagesError(RulesetError):
    default_message = "no stages"


class StageNotFoundError(RulesetError):
    default_message = "stage not found"


class MapNotFoundError(RulesetError):
    default_message = "map not found"