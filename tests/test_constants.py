import pytest

from snakerules.constants import (
    EmptyRegistryError,
    MapNotFoundError,
    NoMoveFoundError,
    NoRoomForFoodError,
    NoRoomForSnakeError,
    NoStagesError,
    RulesetError,
    StageNotFoundError,
    TooManySnakesError,
    ZeroLengthSnakeError,
)


@pytest.mark.parametrize(
    "error_cls, message",
    [
        (TooManySnakesError, "too many snakes for fixed start positions"),
        (NoRoomForSnakeError, "not enough space to place snake"),
        (NoRoomForFoodError, "not enough space to place food"),
        (NoMoveFoundError, "move not provided for snake"),
        (ZeroLengthSnakeError, "snake is length zero"),
        (EmptyRegistryError, "empty registry"),
        (NoStagesError, "no stages"),
        (StageNotFoundError, "stage not found"),
        (MapNotFoundError, "map not found"),
    ],
)
def test_specific_errors_carry_source_messages(error_cls, message):
    err = error_cls()
    assert str(err) == message
    assert err.message == message
    assert issubclass(error_cls, RulesetError)


def test_custom_message_is_kept():
    err = RulesetError("This map can only be played on a 19X21 board")
    assert str(err) == "This map can only be played on a 19X21 board"


def test_errors_compare_by_type_and_message():
    assert RulesetError("boom") == RulesetError("boom")
    assert TooManySnakesError() == TooManySnakesError()
    assert not (RulesetError("boom") == RulesetError("bang"))
    same_text = RulesetError(TooManySnakesError().message)
    assert not (TooManySnakesError() == same_text)


def test_errors_are_hashable_consistently():
    errors = {NoStagesError(), NoStagesError(), StageNotFoundError()}
    assert len(errors) == 2