"""Circles and their intersection tests."""

from __future__ import annotations

from dataclasses import dataclass

from quadkit.rect import Rect
from quadkit.vecmath import Vec2


@dataclass
class Circle:
    """A circle with center (x, y) and radius r."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0

    def point(self) -> Vec2:
        """Center point."""
        return Vec2(self.x, self.y)

    def radius(self) -> float:
        return self.r

    def move_to(self, destination: Vec2) -> None:
        """Move the center to the destination."""
        self.x = destination.x
        self.y = destination.y

    def scale(self, sr: float) -> None:
        """Scale the radius by a factor."""
        self.r *= sr

    def contains(self, pos: Vec2) -> bool:
        """Whether the point lies strictly inside the circle."""
        return pos.distance(self.point()) < self.r

    def overlaps(self, other: Circle) -> bool:
        """Whether this circle overlaps another (touching does not count)."""
        return self.point().distance(other.point()) < self.r + other.r

    def overlaps_rect(self, rect: Rect) -> bool:
        """Whether this circle overlaps a rectangle."""
        center = rect.center()
        dist_x = abs(self.x - center.x)
        dist_y = abs(self.y - center.y)
        half_w = rect.w / 2.0
        half_h = rect.h / 2.0
        if dist_x > half_w + self.r or dist_y > half_h + self.r:
            return False
        if dist_x <= half_w or dist_y <= half_h:
            return True
        dx = dist_x - half_w
        dy = dist_y - half_h
        return dx * dx + dy * dy <= self.r * self.r

    def offset(self, offset: Vec2) -> Circle:
        """A copy translated by the offset vector."""
        return Circle(self.x + offset.x, self.y + offset.y, self.r)