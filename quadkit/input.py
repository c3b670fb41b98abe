"""Per-frame input state: keyboard, mouse, touches, dropped files and quit requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Optional, Set, Tuple

from quadkit.events import (
    DroppedFile,
    EventRecorder,
    InputEvent,
    MouseButton,
    TouchPhase,
    UpdateTrigger,
)
from quadkit.vecmath import Vec2

_FINISHED_PHASES = (TouchPhase.ENDED, TouchPhase.CANCELLED)
_ACTIVE_PHASES = (TouchPhase.STARTED, TouchPhase.MOVED)


@dataclass
class Touch:
    """One finger on the screen."""

    id: int
    phase: TouchPhase
    position: Vec2


class InputState:
    """Collects window input events and answers per-frame input queries.

    Events are fed through the ``*_event`` methods; ``end_frame`` must be
    called once per frame to reset the per-frame state (pressed, released,
    wheel, finished touches and dropped files).
    """

    def __init__(
        self,
        screen_width: float = 800.0,
        screen_height: float = 600.0,
        dpi_scale: float = 1.0,
        update_on: Optional[UpdateTrigger] = None,
        blocking_event_loop: bool = False,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.dpi_scale = dpi_scale
        self.update_on = update_on if update_on is not None else UpdateTrigger()
        self.blocking_event_loop = blocking_event_loop
        self.simulate_mouse_with_touch = True
        self.cursor_grabbed = False
        self.update_scheduled = False

        self._keys_down: Set[Hashable] = set()
        self._keys_pressed: Set[Hashable] = set()
        self._keys_released: Set[Hashable] = set()
        self._mouse_down: Set[MouseButton] = set()
        self._mouse_pressed: Set[MouseButton] = set()
        self._mouse_released: Set[MouseButton] = set()
        self._touches: Dict[int, Touch] = {}
        self._chars: List[str] = []
        self._mouse_position = Vec2(0.0, 0.0)
        self._last_mouse_position: Optional[Vec2] = None
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._prevent_quit = False
        self._quit_requested = False
        self._dropped_files: List[DroppedFile] = []
        self._recorder = EventRecorder()

    # -- event intake -----------------------------------------------------

    def _schedule_update(self) -> None:
        self.update_scheduled = True

    def resize(self, width: float, height: float) -> None:
        """The window was resized."""
        self.screen_width = width
        self.screen_height = height
        if self.blocking_event_loop:
            self._schedule_update()

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative mouse motion; moves the position only while the cursor is grabbed."""
        if self.cursor_grabbed:
            self._mouse_position = self._mouse_position + Vec2(x, y)
            self._recorder.record(
                InputEvent.mouse_motion(self._mouse_position.x, self._mouse_position.y)
            )

    def mouse_motion_event(self, x: float, y: float) -> None:
        """Absolute mouse motion; ignored for the position while the cursor is grabbed."""
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._recorder.record(InputEvent.mouse_motion(x, y))
        if self.update_on.mouse_motion:
            self._schedule_update()

    def mouse_wheel_event(self, x: float, y: float) -> None:
        self._mouse_wheel = Vec2(x, y)
        self._recorder.record(InputEvent.mouse_wheel(x, y))
        if self.update_on.mouse_wheel:
            self._schedule_update()

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.add(button)
        self._mouse_pressed.add(button)
        self._recorder.record(InputEvent.mouse_button_down(button, x, y))
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
        if self.update_on.mouse_down:
            self._schedule_update()

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.discard(button)
        self._mouse_released.add(button)
        self._recorder.record(InputEvent.mouse_button_up(button, x, y))
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
        if self.update_on.mouse_up:
            self._schedule_update()

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        """A touch changed; optionally also raises the matching left-button mouse events."""
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y))

        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)
        elif self.update_on.touch:
            self._schedule_update()

        self._recorder.record(InputEvent.touch(phase, touch_id, x, y))

    def char_event(self, character: str, modifiers: Any = None, repeat: bool = False) -> None:
        self._chars.append(character)
        self._recorder.record(InputEvent.char(character, modifiers, repeat))

    def key_down_event(self, keycode: Hashable, modifiers: Any = None, repeat: bool = False) -> None:
        self._keys_down.add(keycode)
        if not repeat:
            self._keys_pressed.add(keycode)
        self._recorder.record(InputEvent.key_down(keycode, modifiers, repeat))
        if self.update_on.wants_key(keycode):
            self._schedule_update()

    def key_up_event(self, keycode: Hashable, modifiers: Any = None) -> None:
        self._keys_down.discard(keycode)
        self._keys_released.add(keycode)
        self._recorder.record(InputEvent.key_up(keycode, modifiers))

    def files_dropped_event(self, files: Iterable[DroppedFile]) -> None:
        """Files were dropped onto the window."""
        self._dropped_files.extend(files)

    def quit_requested_event(self) -> bool:
        """The window asked to close; returns True if quitting is cancelled."""
        if self._prevent_quit:
            self._quit_requested = True
            return True
        return False

    def end_frame(self) -> None:
        """Reset per-frame state after a frame has been drawn."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self._last_mouse_position = self.mouse_position_local()
        self._quit_requested = False

        self._touches = {
            touch_id: touch
            for touch_id, touch in self._touches.items()
            if touch.phase not in _FINISHED_PHASES
        }
        for touch in self._touches.values():
            if touch.phase in _ACTIVE_PHASES:
                touch.phase = TouchPhase.STATIONARY

        self._dropped_files.clear()

    # -- queries ----------------------------------------------------------

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window."""
        self.cursor_grabbed = grab

    def _to_local(self, pixels: Vec2) -> Vec2:
        return Vec2(pixels.x / self.screen_width, pixels.y / self.screen_height) * 2.0 - Vec2(
            1.0, 1.0
        )

    def mouse_position(self) -> Tuple[float, float]:
        """Mouse position in pixels."""
        return (
            self._mouse_position.x / self.dpi_scale,
            self._mouse_position.y / self.dpi_scale,
        )

    def mouse_position_local(self) -> Vec2:
        """Mouse position in the range [-1, 1]."""
        x, y = self.mouse_position()
        return self._to_local(Vec2(x, y))

    def mouse_delta_position(self) -> Vec2:
        """Previous frame's local mouse position minus the current one."""
        current = self.mouse_position_local()
        last = self._last_mouse_position if self._last_mouse_position is not None else current
        return last - current

    def touches(self) -> List[Touch]:
        """Current touches with positions in pixels."""
        return [Touch(t.id, t.phase, t.position) for t in self._touches.values()]

    def touches_local(self) -> List[Touch]:
        """Current touches with positions in the range [-1, 1]."""
        return [Touch(t.id, t.phase, self._to_local(t.position)) for t in self._touches.values()]

    def mouse_wheel(self) -> Tuple[float, float]:
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """Whether the key went down this frame."""
        return keycode in self._keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        """Whether the key is held."""
        return keycode in self._keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        """Whether the key went up this frame."""
        return keycode in self._keys_released

    def get_char_pressed(self) -> Optional[str]:
        """Take the most recently typed character from the queue, or None."""
        return self._chars.pop() if self._chars else None

    def get_last_key_pressed(self) -> Optional[Hashable]:
        """Some key pressed this frame, or None."""
        return next(iter(self._keys_pressed), None)

    def get_keys_pressed(self) -> Set[Hashable]:
        return set(self._keys_pressed)

    def get_keys_down(self) -> Set[Hashable]:
        return set(self._keys_down)

    def get_keys_released(self) -> Set[Hashable]:
        return set(self._keys_released)

    def clear_input_queue(self) -> None:
        """Drop every queued character."""
        self._chars.clear()

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return button in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return button in self._mouse_released

    def prevent_quit(self) -> None:
        """Turn window close requests into is_quit_requested() instead of quitting."""
        self._prevent_quit = True

    def is_quit_requested(self) -> bool:
        return self._quit_requested

    def get_dropped_files(self) -> List[DroppedFile]:
        """Take the files dropped since the last call."""
        files, self._dropped_files = self._dropped_files, []
        return files

    def register_input_subscriber(self) -> int:
        """Register a subscriber to receive copies of later raw events."""
        return self._recorder.register_input_subscriber()

    def drain_events(self, subscriber: int) -> List[InputEvent]:
        """Return and clear a subscriber's pending raw events."""
        return self._recorder.drain_events(subscriber)