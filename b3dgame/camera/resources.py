"""Shared camera effects: screen shake and tilt."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..components import Vec3


@dataclass
class ScreenShake:
    """Shake strength and remaining time."""

    max_yaw: float = 0.0
    max_roll: float = 0.0
    max_pitch: float = 0.0
    max_offset: float = 0.0
    trauma: float = 0.0
    duration: float = 0.0

    def start_shake(
        self,
        max_yaw: float,
        max_roll: float,
        max_pitch: float,
        max_offset: float,
        trauma: float,
        duration: float,
    ) -> None:
        self.max_yaw = max_yaw
        self.max_roll = max_roll
        self.max_pitch = max_pitch
        self.max_offset = max_offset
        self.trauma = min(max(trauma, 0.0), 1.0)
        self.duration = duration


@dataclass
class CameraTilt:
    """A requested camera roll around ``direction``."""

    direction: Vec3 = field(default_factory=Vec3)
    target_angle: float = 0.0
    is_active: bool = False

    def activate(self, direction: Vec3, angle: float) -> None:
        self.direction = direction.normalize()
        self.target_angle = angle
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False