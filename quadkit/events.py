"""Window configuration, input event records and per-subscriber event queues."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Hashable, List, Optional, Sequence


class TouchPhase(enum.Enum):
    """Stage of a touch in its lifetime."""

    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(enum.Enum):
    """A mouse button."""

    RIGHT = "right"
    LEFT = "left"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class DroppedFile:
    """A file dropped onto the window: its path and contents, where known."""

    path: Optional[Path] = None
    data: Optional[bytes] = None


@dataclass
class UpdateTrigger:
    """Which events wake a blocking event loop to run another frame."""

    key_down: bool = False
    mouse_down: bool = False
    mouse_up: bool = False
    mouse_motion: bool = False
    mouse_wheel: bool = False
    specific_key: Optional[Sequence[Hashable]] = None
    touch: bool = False

    def wants_key(self, keycode: Hashable) -> bool:
        """Whether pressing keycode should trigger an update.

        With specific_key set only those keys count; otherwise key_down decides.
        """
        if self.specific_key is None:
            return self.key_down
        return keycode in self.specific_key


@dataclass
class Conf:
    """Window and renderer configuration.

    update_on of None means no update trigger was configured; the default
    trigger is then used.
    """

    window_title: str = ""
    update_on: Optional[UpdateTrigger] = field(default_factory=UpdateTrigger)
    default_filter_mode: str = "linear"
    draw_call_vertex_capacity: int = 10000
    draw_call_index_capacity: int = 5000

    def effective_update_trigger(self) -> UpdateTrigger:
        """The configured trigger, or a default one when none is set."""
        return self.update_on if self.update_on is not None else UpdateTrigger()


@dataclass(frozen=True)
class InputEvent:
    """One raw input event, kept so it can be replayed to a handler later."""

    class Kind(enum.Enum):
        MOUSE_MOTION = "mouse_motion"
        MOUSE_WHEEL = "mouse_wheel"
        MOUSE_BUTTON_DOWN = "mouse_button_down"
        MOUSE_BUTTON_UP = "mouse_button_up"
        CHAR = "char"
        KEY_DOWN = "key_down"
        KEY_UP = "key_up"
        TOUCH = "touch"

    kind: InputEvent.Kind
    x: float = 0.0
    y: float = 0.0
    button: Optional[MouseButton] = None
    character: Optional[str] = None
    keycode: Optional[Hashable] = None
    modifiers: Any = None
    repeat: bool = False
    phase: Optional[TouchPhase] = None
    touch_id: Optional[int] = None

    @classmethod
    def mouse_motion(cls, x: float, y: float) -> InputEvent:
        return cls(cls.Kind.MOUSE_MOTION, x=x, y=y)

    @classmethod
    def mouse_wheel(cls, x: float, y: float) -> InputEvent:
        return cls(cls.Kind.MOUSE_WHEEL, x=x, y=y)

    @classmethod
    def mouse_button_down(cls, button: MouseButton, x: float, y: float) -> InputEvent:
        return cls(cls.Kind.MOUSE_BUTTON_DOWN, x=x, y=y, button=button)

    @classmethod
    def mouse_button_up(cls, button: MouseButton, x: float, y: float) -> InputEvent:
        return cls(cls.Kind.MOUSE_BUTTON_UP, x=x, y=y, button=button)

    @classmethod
    def char(cls, character: str, modifiers: Any = None, repeat: bool = False) -> InputEvent:
        return cls(cls.Kind.CHAR, character=character, modifiers=modifiers, repeat=repeat)

    @classmethod
    def key_down(cls, keycode: Hashable, modifiers: Any = None, repeat: bool = False) -> InputEvent:
        return cls(cls.Kind.KEY_DOWN, keycode=keycode, modifiers=modifiers, repeat=repeat)

    @classmethod
    def key_up(cls, keycode: Hashable, modifiers: Any = None) -> InputEvent:
        return cls(cls.Kind.KEY_UP, keycode=keycode, modifiers=modifiers)

    @classmethod
    def touch(cls, phase: TouchPhase, touch_id: int, x: float, y: float) -> InputEvent:
        return cls(cls.Kind.TOUCH, x=x, y=y, phase=phase, touch_id=touch_id)

    def replay(self, handler: Any) -> None:
        """Call the handler method matching this event with the event's data."""
        kind = self.kind
        if kind is InputEvent.Kind.MOUSE_MOTION:
            handler.mouse_motion_event(self.x, self.y)
        elif kind is InputEvent.Kind.MOUSE_WHEEL:
            handler.mouse_wheel_event(self.x, self.y)
        elif kind is InputEvent.Kind.MOUSE_BUTTON_DOWN:
            handler.mouse_button_down_event(self.button, self.x, self.y)
        elif kind is InputEvent.Kind.MOUSE_BUTTON_UP:
            handler.mouse_button_up_event(self.button, self.x, self.y)
        elif kind is InputEvent.Kind.CHAR:
            handler.char_event(self.character, self.modifiers, self.repeat)
        elif kind is InputEvent.Kind.KEY_DOWN:
            handler.key_down_event(self.keycode, self.modifiers, self.repeat)
        elif kind is InputEvent.Kind.KEY_UP:
            handler.key_up_event(self.keycode, self.modifiers)
        else:
            handler.touch_event(self.phase, self.touch_id, self.x, self.y)


class EventRecorder:
    """Copies every recorded event into one queue per registered subscriber."""

    def __init__(self) -> None:
        self._queues: List[List[InputEvent]] = []

    def register_input_subscriber(self) -> int:
        """Add a subscriber and return its id; it sees only events recorded later."""
        self._queues.append([])
        return len(self._queues) - 1

    def record(self, event: InputEvent) -> None:
        """Append the event to every subscriber's queue."""
        for queue in self._queues:
            queue.append(event)

    def drain_events(self, subscriber: int) -> List[InputEvent]:
        """Return and clear the events a subscriber has not yet taken."""
        if not 0 <= subscriber < len(self._queues):
            raise IndexError(f"no input subscriber with id {subscriber}")
        events = self._queues[subscriber]
        self._queues[subscriber] = []
        return events