# b3dgame

A small first-person movement sandbox that runs without a renderer. A player
capsule walks, sprints, jumps, slides and ground-slams across a grid map while
a first-person camera follows it, tilts during slides and shakes on impact.
A single piece of food sits on a random grid cell; when the player comes
within half a grid cell of it, it is replaced by a new piece on another
random cell.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
b3dgame --frames 600 --dt 0.016667 --seed 1
```

runs `b3dgame.app.main`, which builds a `Game`, steps it for the given number
of frames with no keys held and no mouse movement, and prints the number of
frames, the final game state, the player's position and the position of each
piece of food.

| Option     | Default  | Meaning                         |
|------------|----------|---------------------------------|
| `--frames` | 600      | number of frames to run (≥ 0)   |
| `--dt`     | 1/60     | seconds per frame (> 0)         |
| `--seed`   | none     | seed for the random generator   |

## Using it from Python

The whole game is held by `b3dgame.app.Game`. Each call to `Game.step`
advances the simulation by one frame, given the frame time in seconds and the
mouse movements `(dx, dy)` seen during that frame, and returns the game time
that passed (zero while paused). Keys are pressed and released through
`game.keys`, a `ButtonInput`; its "just pressed" and "just released" state is
cleared at the end of every step.

```python
import random

from b3dgame.app import Game
from b3dgame.states import KeyCode

game = Game(rng=random.Random(1))
game.keys.press(KeyCode.KEY_W)
game.step(1 / 60, [(4.0, -2.0)])
print(game.body.transform.translation)
```

Each step toggles fullscreen, cursor lock and pause from the keys, runs the
player and camera systems while the game is running (or shows the pause
overlay while paused), checks for eaten food and then moves the player body
under gravity, stopping it on the ground and pushing it out of the wall.

The pieces the game is built from can be used on their own:

- `b3dgame.components` – `Vec3`, `Quat` and `Transform` maths, plus the
  `Player`, `FpCamera`, `Food`, `Ground` and `Wall` components.
- `b3dgame.states` – `GameState` (running or paused), `KeyCode` and
  `ButtonInput` for keyboard state, `Window`, `WindowMode`,
  `CursorGrabMode`, `StateMachine` and `VirtualClock`.
- `b3dgame.camera.resources` – `ScreenShake` and `CameraTilt`.
- `b3dgame.camera.systems` – `setup_camera`, `follow_player`,
  `screen_shake` and `camera_tilt`.
- `b3dgame.map.systems` – `spawn_grid` builds the line mesh of the floor
  grid (`GridMesh`); `setup_lighting` (a `DirectionalLight`), `setup_grid`
  and `setup_wall` build the rest of the level.
- `b3dgame.food.systems` – `spawn_food` and `food_consumed`.
- `b3dgame.player.systems` – `PlayerBody`, `CollisionEvent`,
  `spawn_player` and the per-frame movement systems: `player_movement`,
  `player_jump`, `player_slide`, `ground_check`, `update_player_height`,
  `player_ground_slam` and `reset_tilt`.
- `b3dgame.systems` – `toggle_fullscreen`, `toggle_cursor_lock`,
  `toggle_pause`, and the `PauseOverlay` handled by `pause_ui` and
  `despawn_pause_ui`.

## Keys

| Key         | Action                                   |
|-------------|------------------------------------------|
| W / Up      | move forward                             |
| S / Down    | move back                                |
| A / Left    | strafe left (steer left while sliding)   |
| D / Right   | strafe right (steer right while sliding) |
| Left Shift  | sprint                                   |
| Space       | jump                                     |
| Left Ctrl   | slide on the ground, slam in the air     |
| Escape      | pause and release the cursor             |
| F11         | toggle fullscreen                        |

## What it does not do

There is no renderer, window or audio: the grid mesh, light, window settings
and pause overlay are plain data. Nothing reads a real keyboard or mouse;
input reaches the game only through `Game.keys` and the mouse deltas passed to
`Game.step`, and the `b3dgame` command runs with no input at all. Physics is a
simple step of the player body against the ground plane and the single wall,
not a general physics engine.