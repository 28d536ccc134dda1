# brickbreak

A classic brick-breaking arcade game. Bounce the ball off your paddle, clear
every breakable brick, and work your way through the levels.

## Installing

```
pip install .
```

This installs the game together with pygame.

## Playing

```
brickbreak
```

A window of 800 × 600 opens with the ball resting on the paddle. Closing the
window ends the game. `brickbreak --help` lists the keys.

| Key                | Action                                                   |
|--------------------|----------------------------------------------------------|
| Left / A           | Move the paddle left                                     |
| Right / D          | Move the paddle right                                    |
| Space              | Launch the ball; after a cleared level, go on            |
| P                  | Pause and resume                                         |
| Escape             | Give up the current game                                 |
| R                  | Start again after game over or victory                   |

You start with three lives, shown as dots at the top right. A life is lost
each time the ball reaches the bottom of the window. Where the ball strikes
the paddle sets its outgoing angle: the centre sends it straight up, the edges
send it out at up to 75°. A ball slower than 320 units per second is sped up
to that when it meets the paddle.

### Bricks

- **Normal**: breaks in one hit, worth 10 points.
- **Tough**: takes two hits, worth 25 points when it breaks. It changes colour after the first hit.
- **Indestructible**: never breaks. You do not need to clear it to finish a level.

Points are multiplied by a combo multiplier. Each brick you break adds one to
the combo; touching a wall or the paddle, or losing the ball, resets it to
zero. With a combo of 0 to 4 the multiplier is ×1, from 5 to 9 it is ×2, and
so on.

### Levels

1. Four rows of normal bricks.
2. A row of indestructible bricks on top, two rows of tough bricks, then normal bricks.
3. A checkerboard of tough and normal bricks.

When level 3 is cleared, pressing Space shows the victory screen with your
final score.

## Using the game core

The rules run without a window. You can drive them from code:

```python
from brickbreak.app import make_state
from brickbreak.collision import CollisionService
from brickbreak.scoring import ScoringService
from brickbreak.service import GameService
from brickbreak.state import GameStatus, InputSnapshot

service = GameService(CollisionService(), ScoringService())
state = make_state(1, 3, 0)

service.update(state, InputSnapshot(launch=True), 0.016)
assert state.status is GameStatus.PLAYING
```

The modules:

- `brickbreak.geometry`: `Position`, `Velocity` and `Dimensions`, immutable value objects.
- `brickbreak.entities`: `Ball`, `Brick`, `BrickKind` and `Paddle`; every change returns a new object.
- `brickbreak.collision`: `CollisionService`, the `CollisionDetector` protocol, `WallCollision` and `CollisionSide`.
- `brickbreak.scoring`: `ScoringService` and the `Scorer` protocol.
- `brickbreak.state`: `GameState`, `GameStatus`, `InputSnapshot` and the `InputProvider` protocol.
- `brickbreak.level`: `create_level(level_num, world_width)` and `MAX_LEVEL`. Level numbers above 3 give a growing layout of up to ten rows, though the game itself ends after level 3.
- `brickbreak.service`: `GameService`, which advances a `GameState` by one frame.
- `brickbreak.app`: `make_state`, `step` (one frame of the main loop, including restarts and level changes) and `main`.
- `brickbreak.renderer` and `brickbreak.controls`: `PygameRenderer`, `PygameInput` and `snapshot_from_keys`, the pygame drawing and keyboard code.

`GameService` is given a collision detector and a scorer. You can pass your own
`CollisionDetector` or `Scorer` to change the physics or the scoring.

## What it does not do

The game has no sound, no menus or settings, and keeps no high scores between
runs.

## Running the tests

```
pip install ".[test]"
pytest
```