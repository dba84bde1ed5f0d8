import random

import pytest

from b3dgame.app import Game, main
from b3dgame.camera.systems import MOUSE_SENSITIVITY
from b3dgame.components import Quat, Vec3
from b3dgame.food.systems import FOOD_HEIGHT
from b3dgame.states import CursorGrabMode, GameState, KeyCode, WindowMode

DT = 1.0 / 60.0


def _run(game, frames, dt=DT):
    for _ in range(frames):
        game.step(dt)


def _bottom(game):
    body = game.body
    return body.transform.translation.y - body.collider_half_height - body.collider_radius


def _tap(game, key):
    game.keys.press(key)
    game.step(DT)
    game.keys.release(key)


def test_new_game_locks_cursor_and_spawns_one_food():
    game = Game(rng=random.Random(1))
    assert game.window.cursor_grab_mode is CursorGrabMode.LOCKED
    assert game.window.cursor_visible is False
    assert game.states.current is GameState.RUNNING
    assert len(game.foods) == 1
    assert game.foods[0].transform.translation.y == FOOD_HEIGHT
    assert game.overlays == []


def test_player_comes_to_rest_on_ground_and_is_grounded():
    game = Game(rng=random.Random(2))
    _run(game, 30)
    assert game.body.player.grounded is True
    assert _bottom(game) == pytest.approx(0.0, abs=1e-6)


def test_jump_lifts_player_and_lands_again():
    game = Game(rng=random.Random(3))
    _run(game, 10)
    rest_y = game.body.transform.translation.y
    _tap(game, KeyCode.SPACE)
    assert game.body.transform.translation.y > rest_y
    assert game.body.player.grounded is True
    game.step(DT)
    assert game.body.player.grounded is False
    _run(game, 180)
    assert game.body.player.grounded is True
    assert game.body.transform.translation.y == pytest.approx(rest_y, abs=1e-6)


def test_walking_forward_moves_along_negative_z():
    game = Game(rng=random.Random(4))
    start = game.body.transform.translation
    game.keys.press(KeyCode.KEY_W)
    _run(game, 30)
    end = game.body.transform.translation
    assert end.z < start.z
    assert end.x == pytest.approx(start.x, abs=1e-9)


def test_mouse_motion_turns_camera_and_player():
    game = Game(rng=random.Random(5))
    game.step(DT, [(100.0, 0.0)])
    assert game.camera.yaw == pytest.approx(-100.0 * MOUSE_SENSITIVITY)
    expected = Quat.from_rotation_y(game.camera.yaw)
    assert tuple(game.body.transform.rotation) == pytest.approx(tuple(expected))


def test_escape_pauses_and_freezes_world_then_resumes():
    game = Game(rng=random.Random(6))
    _run(game, 5)
    _tap(game, KeyCode.ESCAPE)
    assert game.clock.is_paused() is True
    assert game.window.cursor_grab_mode is CursorGrabMode.NONE
    assert game.window.cursor_visible is True

    game.step(DT)
    assert game.states.current is GameState.PAUSED
    assert len(game.overlays) == 1
    assert game.overlays[0].text == "Paused"

    frozen = game.body.transform.translation
    game.keys.press(KeyCode.KEY_W)
    assert game.step(DT) == 0.0
    _run(game, 10)
    assert game.body.transform.translation == frozen
    game.keys.release(KeyCode.KEY_W)

    _tap(game, KeyCode.ESCAPE)
    assert game.clock.is_paused() is False
    game.step(DT)
    assert game.states.current is GameState.RUNNING
    assert game.overlays == []
    assert game.window.cursor_grab_mode is CursorGrabMode.LOCKED


def test_f11_toggles_fullscreen():
    game = Game(rng=random.Random(7))
    _tap(game, KeyCode.F11)
    assert game.window.mode is WindowMode.BORDERLESS_FULLSCREEN
    _tap(game, KeyCode.F11)
    assert game.window.mode is WindowMode.WINDOWED


def test_food_under_player_is_eaten_and_replaced():
    game = Game(rng=random.Random(8))
    old = game.foods[0]
    old.transform.translation = game.body.transform.translation
    game.step(DT)
    assert len(game.foods) == 1
    assert old not in game.foods
    assert game.foods[0].transform.translation.y == FOOD_HEIGHT


def test_wall_blocks_player():
    game = Game(rng=random.Random(9))
    game.body.transform.translation = Vec3(10.0, 0.9, 13.0)
    game.keys.press(KeyCode.KEY_W)
    _run(game, 120)
    wall = game.wall
    limit = wall.transform.translation.z + wall.half_extents.z + game.body.collider_radius
    z = game.body.transform.translation.z
    assert z >= limit - 1e-9
    assert z < 13.0


def test_same_seed_gives_same_world():
    first = Game(rng=random.Random(42))
    second = Game(rng=random.Random(42))
    assert first.foods[0].transform.translation == second.foods[0].transform.translation
    for game in (first, second):
        game.keys.press(KeyCode.KEY_D)
        _run(game, 20)
    assert first.body.transform.translation == second.body.transform.translation


def test_main_runs_and_reports(capsys):
    assert main(["--frames", "10", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "frames: 10" in out
    assert "player:" in out
    assert out.count("food:") == 1


def test_main_rejects_negative_frames():
    with pytest.raises(SystemExit):
        main(["--frames", "-1"])