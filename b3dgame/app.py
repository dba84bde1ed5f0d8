"""The game loop: world setup, per-frame scheduling and a headless runner."""

from __future__ import annotations

import argparse
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from .camera.resources import CameraTilt, ScreenShake
from .camera.systems import camera_tilt, follow_player, screen_shake, setup_camera
from .components import Food, Transform, Vec3
from .food.systems import food_consumed, spawn_food
from .map.systems import setup_grid, setup_lighting, setup_wall
from .player.systems import (
    GRAVITY,
    CollisionEvent,
    ground_check,
    player_ground_slam,
    player_jump,
    player_movement,
    player_slide,
    reset_tilt,
    spawn_player,
    update_player_height,
)
from .states import ButtonInput, GameState, StateMachine, VirtualClock, Window
from .systems import (
    PauseOverlay,
    despawn_pause_ui,
    pause_ui,
    toggle_cursor_lock,
    toggle_fullscreen,
    toggle_pause,
)

_CONTACT_TOLERANCE = 1e-6
_FOOD_START = Transform(Vec3(0.0, 0.5, 0.0))


class Game:
    """The whole game world, advanced one frame at a time by :meth:`step`."""

    def __init__(self, rng: Optional[random.Random] = None, window: Optional[Window] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.window = window if window is not None else Window()
        self.keys = ButtonInput()
        self.states = StateMachine(GameState.RUNNING)
        self.clock = VirtualClock()
        self.shake = ScreenShake()
        self.tilt = CameraTilt()
        self.overlays: List[PauseOverlay] = []

        self.body = spawn_player()
        self.camera_transform, self.camera = setup_camera(self.window)
        self.light = setup_lighting()
        self.grid, self.ground = setup_grid()
        self.wall = setup_wall()
        self.foods: List[Food] = [spawn_food(_FOOD_START, self.rng)]

        self._collisions: List[CollisionEvent] = []
        self._touching_ground = False

    def step(self, dt: float, mouse_deltas: Iterable[Tuple[float, float]] = ()) -> float:
        """Run one frame of ``dt`` real seconds; return the game time that passed."""
        delta = self.clock.advance(dt)

        transition = self.states.apply()
        if transition is not None and transition[0] is GameState.PAUSED:
            despawn_pause_ui(self.overlays)
        state = self.states.current

        toggle_fullscreen(self.window, self.keys)
        toggle_cursor_lock(self.window, self.keys)
        toggle_pause(self.states, self.clock, self.keys)

        if state is GameState.PAUSED:
            pause_ui(self.overlays)
        else:
            self._run_gameplay(delta, mouse_deltas)

        self._simulate_physics(delta)
        self.keys.clear()
        return delta

    def _run_gameplay(self, dt: float, mouse_deltas: Iterable[Tuple[float, float]]) -> None:
        body = self.body
        events, self._collisions = self._collisions, []

        player_movement(body, self.camera_transform, self.keys)
        ground_check(body.player, events, body, self.ground)
        player_jump(body, self.keys, dt)
        player_slide(body, self.camera_transform, self.tilt, self.keys, dt)
        update_player_height(body, dt)
        player_ground_slam(body, self.keys, self.shake)
        reset_tilt(body.player, self.tilt)

        follow_player(self.camera_transform, self.camera, body.transform, body.player, mouse_deltas)
        screen_shake(self.shake, self.camera_transform, self.camera, dt, self.rng)
        camera_tilt(self.camera, self.tilt)

        food_consumed(body.transform, self.foods, self.rng)

    def _simulate_physics(self, dt: float) -> None:
        """Integrate the player body under gravity against the ground and the wall."""
        if dt <= 0.0:
            return
        body = self.body
        vel = Vec3(body.linvel.x, body.linvel.y - GRAVITY * dt, body.linvel.z)
        pos = body.transform.translation + vel * dt
        pos, vel = self._resolve_wall(pos, vel)

        bottom = pos.y - body.collider_half_height - body.collider_radius
        touching = bottom <= _CONTACT_TOLERANCE
        if touching:
            if bottom < 0.0:
                pos = Vec3(pos.x, pos.y - bottom, pos.z)
            if vel.y < 0.0:
                vel = Vec3(vel.x, 0.0, vel.z)

        if touching != self._touching_ground:
            self._collisions.append(CollisionEvent(touching, body, self.ground))
            self._touching_ground = touching

        body.transform.translation = pos
        body.linvel = vel

    def _resolve_wall(self, pos: Vec3, vel: Vec3) -> Tuple[Vec3, Vec3]:
        center = self.wall.transform.translation
        half = self.wall.half_extents
        radius = self.body.collider_radius
        half_height = self.body.collider_half_height + radius

        dx, dy, dz = pos.x - center.x, pos.y - center.y, pos.z - center.z
        px = half.x + radius - abs(dx)
        py = half.y + half_height - abs(dy)
        pz = half.z + radius - abs(dz)
        smallest = min(px, py, pz)
        if smallest <= 0.0:
            return pos, vel

        if smallest == px:
            sign = 1.0 if dx >= 0.0 else -1.0
            pos = Vec3(pos.x + sign * px, pos.y, pos.z)
            if vel.x * sign < 0.0:
                vel = Vec3(0.0, vel.y, vel.z)
        elif smallest == pz:
            sign = 1.0 if dz >= 0.0 else -1.0
            pos = Vec3(pos.x, pos.y, pos.z + sign * pz)
            if vel.z * sign < 0.0:
                vel = Vec3(vel.x, vel.y, 0.0)
        else:
            sign = 1.0 if dy >= 0.0 else -1.0
            pos = Vec3(pos.x, pos.y + sign * py, pos.z)
            if vel.y * sign < 0.0:
                vel = Vec3(vel.x, 0.0, vel.z)
        return pos, vel


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="b3d", description="Run the game world headless.")
    parser.add_argument("--frames", type=int, default=600, help="number of frames to run")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="seconds per frame")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation for a number of frames and report where things ended up."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    if args.dt <= 0.0:
        parser.error("--dt must be positive")

    game = Game(rng=random.Random(args.seed))
    for _ in range(args.frames):
        game.step(args.dt)

    player = game.body.transform.translation
    print(f"frames: {args.frames}")
    print(f"state: {game.states.current.value}")
    print(f"player: {player.x:.3f} {player.y:.3f} {player.z:.3f}")
    for food in game.foods:
        pos = food.transform.translation
        print(f"food: {pos.x:.3f} {pos.y:.3f} {pos.z:.3f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())