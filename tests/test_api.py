import json

from snakerules.api import (
    Death,
    FrameSnake,
    Game,
    GameEnd,
    GameEvent,
    GameEventType,
    GameFrame,
)
from snakerules.board import Point


def test_event_type_wire_values():
    frame_event = GameEvent(GameEventType.FRAME, GameFrame()).to_dict()
    assert frame_event["Type"] == "frame"
    end_event = GameEvent(GameEventType.GAME_END, Game(id="g")).to_dict()
    assert end_event["Type"] == "game_end"
    assert GameEventType("game_end") is GameEventType.GAME_END


def test_game_to_dict_keys_and_values():
    game = Game(
        id="GAME_ID",
        status="running",
        width=11,
        height=11,
        ruleset={"name": "standard"},
        ruleset_name="standard",
        map="standard",
    )
    data = game.to_dict()
    assert set(data) == {
        "ID", "Status", "Width", "Height", "Ruleset", "SnakeTimeout",
        "Source", "RulesetName", "RulesStages", "Map",
    }
    assert data["ID"] == "GAME_ID"
    assert data["Ruleset"] == {"name": "standard"}
    assert data["RulesStages"] == []


def test_point_omits_zero_ttl_and_value():
    frame = GameFrame(turn=3, food=[Point(1, 2)], hazards=[Point(3, 4, ttl=5, value=50)])
    data = frame.to_dict()
    assert data["Food"] == [{"X": 1, "Y": 2}]
    assert data["Hazards"] == [{"X": 3, "Y": 4, "TTL": 5, "Value": 50}]
    assert data["Turn"] == 3


def test_snake_death_null_when_alive():
    snake = FrameSnake(id="1", body=[Point(0, 0)])
    assert snake.to_dict()["Death"] is None
    dead = FrameSnake(id="1", death=Death(cause="snake-self-collision", turn=45, eliminated_by="1"))
    assert dead.to_dict()["Death"] == {
        "Cause": "snake-self-collision",
        "Turn": 45,
        "EliminatedBy": "1",
    }


def test_frame_event_json_round_trip():
    event = GameEvent(
        GameEventType.FRAME,
        GameFrame(turn=1, snakes=[FrameSnake(id="a", latency="54", status_code=200)]),
    )
    decoded = json.loads(event.to_json())
    assert decoded == event.to_dict()
    assert decoded["Type"] == "frame"
    assert decoded["Data"]["Snakes"][0]["StatusCode"] == 200


def test_game_end_event_wraps_game():
    game = Game(id="g1", status="complete")
    event = GameEvent(GameEventType.GAME_END, GameEnd(game))
    decoded = json.loads(event.to_json())
    assert decoded["Type"] == "game_end"
    assert decoded["Data"]["game"]["ID"] == "g1"
    direct = GameEvent(GameEventType.GAME_END, game).to_dict()
    assert direct["Data"]["Status"] == "complete"