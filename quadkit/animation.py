"""Sprite-sheet animations: one animation per row of equally sized tiles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from quadkit.rect import Rect
from quadkit.vecmath import Vec2


@dataclass
class Animation:
    """An animation stored in one row of the sheet."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass
class AnimationFrame:
    """Where a frame lies in the source image and how big it is drawn."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """All animations of one image, with the current animation and frame."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Sequence[Animation],
        playing: bool = True,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations: List[Animation] = list(animations)
        self._current_animation = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def _animation(self) -> Animation:
        return self._animations[self._current_animation]

    def set_animation(self, animation: int) -> None:
        """Choose the animation to show; the frame number is kept, wrapped to its length."""
        if not 0 <= animation < len(self._animations):
            raise IndexError(f"no animation with index {animation}")
        self._current_animation = animation
        self._frame %= self._animation().frames

    def current_animation(self) -> int:
        """Index of the chosen animation."""
        return self._current_animation

    def set_frame(self, frame: int) -> None:
        """Jump to a specific frame."""
        self._frame = frame

    def is_last_frame(self) -> bool:
        """Whether the last frame of the animation is shown."""
        return self._frame == self._animation().frames - 1

    def update(self, frame_time: float) -> None:
        """Advance time; moves to the next frame once 1/fps seconds have passed."""
        animation = self._animation()
        if self.playing:
            self._time += frame_time
            threshold = 1.0 / animation.fps if animation.fps else math.inf
            if self._time > threshold:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The current frame's source rectangle and size."""
        animation = self._animation()
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )