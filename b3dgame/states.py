"""Game states, keyboard input, window settings and the virtual clock."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class GameState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"


class KeyCode(enum.Enum):
    F11 = "F11"
    ESCAPE = "Escape"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    KEY_W = "KeyW"
    KEY_A = "KeyA"
    KEY_S = "KeyS"
    KEY_D = "KeyD"
    SHIFT_LEFT = "ShiftLeft"
    CONTROL_LEFT = "ControlLeft"
    SPACE = "Space"


class ButtonInput:
    """Which keys are held, and which changed since the last frame."""

    def __init__(self) -> None:
        self._pressed: set[KeyCode] = set()
        self._just_pressed: set[KeyCode] = set()
        self._just_released: set[KeyCode] = set()

    def press(self, key: KeyCode) -> None:
        if key not in self._pressed:
            self._pressed.add(key)
            self._just_pressed.add(key)

    def release(self, key: KeyCode) -> None:
        if key in self._pressed:
            self._pressed.discard(key)
            self._just_released.add(key)

    def pressed(self, key: KeyCode) -> bool:
        return key in self._pressed

    def just_pressed(self, key: KeyCode) -> bool:
        return key in self._just_pressed

    def just_released(self, key: KeyCode) -> bool:
        return key in self._just_released

    def clear(self) -> None:
        """Forget this frame's transitions, keeping held keys held."""
        self._just_pressed.clear()
        self._just_released.clear()


class WindowMode(enum.Enum):
    WINDOWED = "windowed"
    BORDERLESS_FULLSCREEN = "borderless_fullscreen"


class CursorGrabMode(enum.Enum):
    NONE = "none"
    CONFINED = "confined"
    LOCKED = "locked"


@dataclass
class Window:
    """Settings of the primary window."""

    width: float = 1920.0
    height: float = 1080.0
    title: str = "B3D"
    mode: WindowMode = WindowMode.WINDOWED
    visible: bool = True
    resizable: bool = False
    cursor_visible: bool = True
    cursor_grab_mode: CursorGrabMode = CursorGrabMode.NONE


class StateMachine:
    """Current game state with a queued transition applied between frames."""

    def __init__(self, initial: GameState = GameState.RUNNING) -> None:
        self.current = initial
        self.next: Optional[GameState] = None

    def set_next(self, state: GameState) -> None:
        self.next = state

    def apply(self) -> Optional[Tuple[GameState, GameState]]:
        """Switch to the queued state; return (exited, entered), or None if nothing was queued."""
        if self.next is None:
            return None
        exited, self.current, self.next = self.current, self.next, None
        return exited, self.current


class VirtualClock:
    """Game time that stands still while paused."""

    def __init__(self) -> None:
        self._paused = False
        self.elapsed = 0.0
        self.delta = 0.0

    def pause(self) -> None:
        self._paused = True

    def unpause(self) -> None:
        self._paused = False

    def is_paused(self) -> bool:
        return self._paused

    def advance(self, real_dt: float) -> float:
        """Advance by a real-time step and return the virtual step taken."""
        self.delta = 0.0 if self._paused else real_dt
        self.elapsed += self.delta
        return self.delta