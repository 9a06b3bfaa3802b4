# snakerules

Game logic and supporting tools for multiplayer snake games played on a grid.
Snakes move around a rectangular board, eat food, avoid hazards and try to
outlast each other. This package provides:

- **Board state** (`snakerules.board`): `Point`, `Snake` and `BoardState`,
  with deep copying and builder-style helpers (`with_turn`, `with_food`,
  `with_hazards`, `with_snakes`, `with_game_state`, `with_point_state`).
- **Placement** (`snakerules.placement`): start positions for snakes and food
  on boards of any size. Standard square boards get fixed positions. Many
  snakes on large boards are spread across the quadrants. Other boards get
  random placement.
- **Deterministic randomness**: `MinRand`, `MaxRand` and `SeededRand` make
  placement reproducible in tests and replays.
- **Snake API models** (`snakerules.client`): the JSON request and response
  bodies exchanged with snake servers (`SnakeRequest`, `MoveResponse`,
  `SnakeMetadataResponse`).
- **Board viewer support** (`snakerules.api`, `snakerules.frames`,
  `snakerules.server`): frame and game-end events for a browser board viewer,
  plus a small websocket `BoardServer` that streams them.
- **Terminal rendering and export** (`snakerules.render`,
  `snakerules.exporter`): a text view of the board and a JSON-lines record of
  a game.

## Installation

Install the package with your usual Python package installer. The test
dependencies are available as the `test` extra.

## Setting up a board

```python
from snakerules.placement import MaxRand, create_default_board_state

board = create_default_board_state(MaxRand(), 11, 11, ["one", "two", "three"])

for snake in board.snakes:
    print(snake.id, snake.body[0])
print("food:", board.food)
```

On square boards of at least 7×7, up to eight snakes start in fixed corner and
edge positions. Each snake gets one food item two moves away, and one more is
placed in the centre. Boards that are too small for the requested snakes raise
`NoRoomForSnakeError` or `TooManySnakesError`. Every error derives from
`RulesetError` in `snakerules.constants`, which also holds the move names,
board sizes, elimination causes and parameter names.

The single steps are available separately: `place_snakes_automatically`,
`place_snakes_fixed`, `place_many_snakes_distributed`, `place_snakes_randomly`,
`place_food_automatically`, `place_food_fixed` and `place_food_randomly`.

## Inspecting a board

```python
from snakerules.board import (
    BoardState,
    Point,
    get_distance_between_points,
    get_unoccupied_points,
)

board = BoardState(width=3, height=2).with_food([Point(x=2, y=0)])
free = get_unoccupied_points(board, True, False)
print(free)

print(get_distance_between_points(Point(x=0, y=0), Point(x=4, y=6)))  # 10
```

`BoardState.clone()` returns a deep copy that can be changed freely without
touching the original. `place_snake`, `initialize_snakes` and
`eliminate_snake` edit the snakes on a board.

## Snake API bodies

`snakerules.client` holds the models that make up the JSON body sent to a
snake's `/start`, `/move` and `/end` endpoints. `SnakeRequest.to_json()`
produces the compact wire format. `MoveResponse.from_dict` and
`SnakeMetadataResponse.from_dict` read a snake's replies, and
`convert_ruleset_settings` turns free-form game parameters into the settings
the API exposes.

`snakerules.frames` converts rules-side state into these models.
`SnakeState` records what is known about one snake's server. Its fields are
name, colour, head, tail, last move, status code, latency and error.
`convert_state_to_board` and `convert_rules_snake` build the API's board and
snake from them.

## Watching a game

`build_frame_event` turns a board state into a frame event for the board
viewer. `BoardServer` serves the game metadata at `/games/<id>` and streams
events over a websocket at `/games/<id>/events`. It listens on a free local
port.

```python
from snakerules.api import Game
from snakerules.frames import build_frame_event
from snakerules.server import BoardServer

server = BoardServer(Game(id="demo", status="running", width=11, height=11))
url = server.listen()
server.send_event(build_frame_event(board, {}))
server.shutdown()  # waits until a viewer has received every event
```

Pass `shutdown_timeout=` to stop waiting for a viewer after that many seconds.

For a terminal view, `render_map` returns the board as text, with ANSI colours
when asked for. `render_state` returns a one-line summary of the turn.
`parse_snake_color` turns a `#rrggbb` colour into RGB values.

## Exporting games

`GameExporter` collects one `SnakeRequest` per turn. `flush_to_file` writes
the game as JSON lines to a text stream. The game description comes first,
then one line per recorded turn, then a result line with the winner or a draw.

## What this package does not do

- It provides no command-line program.
- It does not make HTTP requests to snake servers. It neither fetches their
  metadata nor asks them for moves.
- It has no game loop.
- It does not apply movement, collisions, starvation or hazard damage between
  turns. Only the board, placement and data structures are here.
- It does not generate names for snakes.
- It does not store finished games.