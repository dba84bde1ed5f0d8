"""First-person camera: following the player, screen shake and tilt."""

from __future__ import annotations

import math
import random
from typing import Iterable, Optional, Tuple

from ..components import FpCamera, Player, Quat, Transform, Vec3
from ..states import CursorGrabMode, Window
from .resources import CameraTilt, ScreenShake

CAMERA_DECAY_RATE = 0.9
TRAUMA_DECAY_SPEED = 0.5

MAX_YAW = 0.5
MAX_PITCH = 0.5
MAX_ROLL = 0.5
MAX_OFFSET = 500.0

MOUSE_SENSITIVITY = 0.005
PITCH_LIMIT = 1.5
TILT_SMOOTHING = 0.05


def setup_camera(window: Optional[Window]) -> Tuple[Transform, FpCamera]:
    """Lock and hide the cursor, and create the main camera."""
    if window is not None:
        window.cursor_visible = False
        window.cursor_grab_mode = CursorGrabMode.LOCKED
    return Transform(Vec3(-10.0, 10.0, 10.0)), FpCamera()


def follow_player(
    camera_transform: Transform,
    camera: FpCamera,
    player_transform: Transform,
    player: Player,
    mouse_deltas: Iterable[Tuple[float, float]],
) -> None:
    """Turn the camera by mouse motion and place it at the player's eye height."""
    for dx, dy in mouse_deltas:
        camera.pitch -= dy * MOUSE_SENSITIVITY
        camera.yaw -= dx * MOUSE_SENSITIVITY

    camera.pitch = min(max(camera.pitch, -PITCH_LIMIT), PITCH_LIMIT)

    camera_transform.translation = player_transform.translation + Vec3(
        0.0, player.current_height * 0.5, 0.0
    )
    player_transform.rotation = Quat.from_rotation_y(camera.yaw)

    tilt_rotation = Quat.from_axis_angle(camera.tilt_direction, camera.current_tilt_angle)
    camera.base_rotation = (
        Quat.from_rotation_y(camera.yaw) * Quat.from_rotation_x(camera.pitch) * tilt_rotation
    )


def screen_shake(
    shake: ScreenShake,
    camera_transform: Transform,
    camera: FpCamera,
    dt: float,
    rng: Optional[random.Random] = None,
) -> None:
    """Jitter the camera by the current trauma, then let trauma decay."""
    rng = rng if rng is not None else random.Random()
    amount = shake.trauma * shake.trauma

    yaw = math.radians(shake.max_yaw * amount) * rng.uniform(-1.0, 1.0)
    roll = math.radians(shake.max_roll * amount) * rng.uniform(-1.0, 1.0)
    pitch = math.radians(shake.max_pitch * amount) * rng.uniform(-1.0, 1.0)

    if amount > 0.0 and shake.duration > 0.0:
        rotation = Quat.from_rotation_z(roll) * Quat.from_rotation_x(pitch) * Quat.from_rotation_y(yaw)
        base = camera.base_rotation
        camera_transform.rotation = base.lerp(base * rotation, CAMERA_DECAY_RATE)
        shake.duration -= dt
    else:
        camera_transform.rotation = camera_transform.rotation.lerp(camera.base_rotation, 1.0)

    shake.trauma = min(max(shake.trauma - TRAUMA_DECAY_SPEED * dt, 0.0), 1.0)


def camera_tilt(camera: FpCamera, tilt: CameraTilt) -> None:
    """Ease the camera's roll toward the requested tilt, or back to level."""
    if tilt.is_active:
        camera.tilt_direction = tilt.direction
        camera.target_tilt_angle = tilt.target_angle
    else:
        camera.target_tilt_angle = 0.0

    camera.current_tilt_angle += (camera.target_tilt_angle - camera.current_tilt_angle) * TILT_SMOOTHING