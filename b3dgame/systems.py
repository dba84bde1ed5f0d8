"""Window toggles, pausing and the pause overlay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .states import (
    ButtonInput,
    CursorGrabMode,
    GameState,
    KeyCode,
    StateMachine,
    VirtualClock,
    Window,
    WindowMode,
)

PAUSE_FONT = "fonts/OverusedGrotesk-Bold.ttf"


@dataclass
class PauseOverlay:
    """The full-screen overlay showing the paused label in the bottom-left corner."""

    text: str = "Paused"
    font: str = PAUSE_FONT
    font_size: float = 75.0
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    bottom: float = 50.0
    left: float = 50.0


def toggle_fullscreen(window: Optional[Window], keys: ButtonInput) -> None:
    """Switch between windowed and borderless fullscreen on F11."""
    if keys.just_pressed(KeyCode.F11) and window is not None:
        if window.mode is WindowMode.WINDOWED:
            window.mode = WindowMode.BORDERLESS_FULLSCREEN
        else:
            window.mode = WindowMode.WINDOWED


def toggle_cursor_lock(window: Optional[Window], keys: ButtonInput) -> None:
    """Lock and hide the cursor, or release and show it, on Escape."""
    if keys.just_pressed(KeyCode.ESCAPE) and window is not None:
        if window.cursor_grab_mode is CursorGrabMode.LOCKED:
            window.cursor_grab_mode = CursorGrabMode.NONE
            window.cursor_visible = True
        else:
            window.cursor_grab_mode = CursorGrabMode.LOCKED
            window.cursor_visible = False


def toggle_pause(states: StateMachine, clock: VirtualClock, keys: ButtonInput) -> None:
    """Flip between running and paused on Escape, freezing game time while paused."""
    if not keys.just_pressed(KeyCode.ESCAPE):
        return
    if states.current is GameState.RUNNING:
        states.set_next(GameState.PAUSED)
    else:
        states.set_next(GameState.RUNNING)

    if clock.is_paused():
        clock.unpause()
    else:
        clock.pause()


def pause_ui(overlays: List[PauseOverlay]) -> Optional[PauseOverlay]:
    """Show the pause overlay unless one is already shown; return the new one."""
    if overlays:
        return None
    overlay = PauseOverlay()
    overlays.append(overlay)
    return overlay


def despawn_pause_ui(overlays: List[PauseOverlay]) -> int:
    """Remove every pause overlay and return how many were removed."""
    removed = len(overlays)
    overlays.clear()
    return removed