"""A 2D camera panned and zoomed with the mouse."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from quadkit.vecmath import Vec2


@dataclass
class MouseCamera:
    """Camera whose offset and scale follow mouse movement and the wheel."""

    offset: Vec2 = Vec2(0.0, 0.0)
    scale: float = 1.0
    _last_mouse_pos: Vec2 = field(default=Vec2(0.0, 0.0), init=False, repr=False)

    def scale_wheel(self, center: Vec2, wheel_value: float, scale_factor: float) -> None:
        """Zoom in by scale_factor for a positive wheel value, out for a negative one."""
        if wheel_value > 0.0:
            self.scale_mul(center, scale_factor)
        elif wheel_value < 0.0:
            self.scale_mul(center, 1.0 / scale_factor)

    def scale_mul(self, center: Vec2, mul_to_scale: float) -> None:
        """Multiply the scale, keeping center in place."""
        self.scale_new(center, self.scale * mul_to_scale)

    def scale_new(self, center: Vec2, new_scale: float) -> None:
        """Replace the scale, keeping center in place."""
        self.offset = (self.offset - center) * (new_scale / self.scale) + center
        self.scale = new_scale

    def update(self, mouse_pos: Vec2, should_offset: bool) -> None:
        """Feed the mouse position each frame; pans when should_offset is true."""
        if should_offset:
            self.offset = self.offset + (mouse_pos - self._last_mouse_pos)
        self._last_mouse_pos = mouse_pos

    def zoom_and_offset(self, aspect: float) -> Tuple[Vec2, Vec2]:
        """Zoom and offset of the equivalent 2D camera for a screen aspect ratio."""
        zoom = Vec2(self.scale, -self.scale * aspect)
        offset = Vec2(self.offset.x, -self.offset.y)
        return zoom, offset