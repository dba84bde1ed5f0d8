"""Player movement: walking, jumping, sliding, ground slams and crouch height."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable

from ..camera.resources import CameraTilt, ScreenShake
from ..camera.systems import MAX_OFFSET, MAX_PITCH, MAX_ROLL, MAX_YAW
from ..components import Player, Quat, Transform, Vec3
from ..states import ButtonInput, KeyCode

PLAYER_MESH_RADIUS = 0.4
PLAYER_MESH_LENGTH = 1.8
PLAYER_MESH_COLOR = (0.3, 0.9, 0.3)

PLAYER_WALK_SPEED = 10.0
PLAYER_SPRINT_SPEED = 15.0
PLAYER_JUMP_FORCE = 5.0
PLAYER_SLIDE_FORCE = 17.0
PLAYER_GROUND_SLAM_FORCE = -50.0

AIR_FRICTION = 0.75
GRAVITY_MULTIPLIER = 1.25
MAX_FALL_SPEED = -20.0
GRAVITY = 9.81

SLIDE_TURN_RATE = 0.1
SLIDE_TILT_ANGLE = 0.05
SLIDE_TURN_SMOOTHING = 10.0
HEIGHT_SMOOTHING = 50.0

_FORWARD_KEYS = (KeyCode.ARROW_UP, KeyCode.KEY_W)
_BACK_KEYS = (KeyCode.ARROW_DOWN, KeyCode.KEY_S)
_LEFT_KEYS = (KeyCode.ARROW_LEFT, KeyCode.KEY_A)
_RIGHT_KEYS = (KeyCode.ARROW_RIGHT, KeyCode.KEY_D)


def _any_pressed(keys: ButtonInput, codes: Iterable[KeyCode]) -> bool:
    return any(keys.pressed(code) for code in codes)


def _flatten(v: Vec3) -> Vec3:
    return Vec3(v.x, 0.0, v.z).normalize_or_zero()


@dataclass
class PlayerBody:
    """The player entity: transform, physics velocity, capsule collider and state."""

    transform: Transform
    player: Player
    linvel: Vec3 = field(default_factory=Vec3)
    collider_half_height: float = PLAYER_MESH_LENGTH / 2.0
    collider_radius: float = PLAYER_MESH_RADIUS


@dataclass(frozen=True)
class CollisionEvent:
    """Two entities started or stopped touching."""

    started: bool
    first: Hashable
    second: Hashable


def spawn_player() -> PlayerBody:
    """Create the player standing on the ground at the origin."""
    return PlayerBody(
        transform=Transform(Vec3(0.0, PLAYER_MESH_LENGTH / 2.0, 0.0)),
        player=Player(current_height=PLAYER_MESH_LENGTH, target_height=PLAYER_MESH_LENGTH),
    )


def player_movement(body: PlayerBody, camera_transform: Transform, keys: ButtonInput) -> None:
    """Set horizontal velocity from the movement keys, relative to the camera."""
    forward = _flatten(camera_transform.forward().normalize())
    right = _flatten(camera_transform.right().normalize())

    direction = Vec3.ZERO
    if not body.player.sliding:
        if _any_pressed(keys, _FORWARD_KEYS):
            direction += forward
        if _any_pressed(keys, _BACK_KEYS):
            direction -= forward
        if _any_pressed(keys, _LEFT_KEYS):
            direction -= right
        if _any_pressed(keys, _RIGHT_KEYS):
            direction += right

    speed = PLAYER_SPRINT_SPEED if keys.pressed(KeyCode.SHIFT_LEFT) else PLAYER_WALK_SPEED
    target = direction.normalize_or_zero() * speed
    body.linvel = Vec3(target.x, body.linvel.y, target.z)


def player_jump(body: PlayerBody, keys: ButtonInput, dt: float) -> None:
    """Jump when grounded, fall faster when airborne, and cap the fall speed."""
    grounded = body.player.grounded
    if keys.pressed(KeyCode.SPACE) and grounded:
        damped = body.linvel * AIR_FRICTION
        body.linvel = Vec3(damped.x, PLAYER_JUMP_FORCE, damped.z)

    vel = body.linvel
    if vel.y < 0.0 and not grounded:
        vel = Vec3(vel.x, vel.y - GRAVITY * GRAVITY_MULTIPLIER * dt, vel.z)
    if vel.y < MAX_FALL_SPEED:
        vel = Vec3(vel.x, MAX_FALL_SPEED, vel.z)
    body.linvel = vel


def player_slide(
    body: PlayerBody,
    camera_transform: Transform,
    tilt: CameraTilt,
    keys: ButtonInput,
    dt: float,
) -> None:
    """Start, steer and end a slide along the ground."""
    player = body.player

    if (
        keys.just_pressed(KeyCode.CONTROL_LEFT)
        and player.grounded
        and not player.sliding
        and not player.slamming
    ):
        player.sliding = True
        player.slide_direction = _flatten(camera_transform.forward())
        player.target_height = PLAYER_MESH_LENGTH / 2.0

    if player.sliding:
        left = _any_pressed(keys, _LEFT_KEYS)
        right = _any_pressed(keys, _RIGHT_KEYS)

        if left:
            rotation_amount = SLIDE_TURN_RATE * dt
            tilt.activate(Vec3.Z, SLIDE_TILT_ANGLE)
        elif right:
            rotation_amount = -SLIDE_TURN_RATE * dt
            tilt.activate(Vec3.Z, -SLIDE_TILT_ANGLE)
        else:
            rotation_amount = 0.0
            if tilt.is_active:
                tilt.deactivate()

        turn = Quat.from_rotation_y(rotation_amount)
        player.slide_direction = turn.rotate(player.slide_direction).normalize_or_zero()
        body.linvel = player.slide_direction * PLAYER_SLIDE_FORCE

        target_rotation = Quat.from_rotation_arc(body.transform.forward(), player.slide_direction)
        body.transform.rotation = body.transform.rotation.slerp(
            target_rotation, dt * SLIDE_TURN_SMOOTHING
        )

    if (keys.just_released(KeyCode.CONTROL_LEFT) or not player.grounded) and player.sliding:
        player.sliding = False
        player.target_height = PLAYER_MESH_LENGTH
        body.linvel = Vec3.ZERO


def ground_check(
    player: Player,
    events: Iterable[CollisionEvent],
    sensor: object,
    ground: object,
) -> None:
    """Mark the player grounded while its sensor touches the ground."""
    for event in events:
        if event.first is sensor:
            other = event.second
        elif event.second is sensor:
            other = event.first
        else:
            continue
        if other is ground:
            player.grounded = event.started


def update_player_height(body: PlayerBody, dt: float) -> None:
    """Ease the player's height toward its target, keeping the feet in place."""
    player = body.player
    if player.current_height == player.target_height:
        return

    translation = body.transform.translation
    feet = translation.y - player.current_height / 2.0
    player.current_height += (player.target_height - player.current_height) * (
        dt * HEIGHT_SMOOTHING
    )
    body.collider_half_height = player.current_height / 2.0
    body.collider_radius = PLAYER_MESH_RADIUS
    body.transform.translation = Vec3(
        translation.x, feet + player.current_height / 2.0, translation.z
    )


def player_ground_slam(body: PlayerBody, keys: ButtonInput, shake: ScreenShake) -> None:
    """Slam down when the crouch key is hit in mid-air, shaking the screen."""
    player = body.player
    was_slamming = player.slamming
    player.slamming = keys.just_pressed(KeyCode.CONTROL_LEFT) and not player.grounded

    if player.slamming and not player.grounded:
        body.linvel = Vec3(body.linvel.x, PLAYER_GROUND_SLAM_FORCE, body.linvel.z)
        if not was_slamming:
            shake.start_shake(
                MAX_YAW, MAX_ROLL, MAX_PITCH, MAX_OFFSET, shake.trauma + 10.0, 1.0
            )


def reset_tilt(player: Player, tilt: CameraTilt) -> None:
    """Level the camera whenever the player is not sliding."""
    if not player.sliding:
        tilt.deactivate()