import pytest

from quadkit.animation import AnimatedSprite, Animation
from quadkit.rect import Rect
from quadkit.vecmath import Vec2


def make_sprite(playing=True):
    return AnimatedSprite(
        15,
        20,
        [
            Animation(name="idle", row=0, frames=20, fps=12),
            Animation(name="run", row=1, frames=15, fps=15),
        ],
        playing,
    )


def test_first_frame():
    frame = make_sprite().frame()
    assert frame.source_rect == Rect(0.0, 0.0, 15.0, 20.0)
    assert frame.dest_size == Vec2(15.0, 20.0)


def test_second_row_animation():
    sprite = make_sprite()
    sprite.set_animation(1)
    assert sprite.current_animation() == 1
    assert sprite.frame().source_rect == Rect(0.0, 20.0, 15.0, 20.0)


def test_update_advances_after_frame_period():
    sprite = make_sprite()
    sprite.update(0.1)
    assert sprite.frame().source_rect.x == 15.0


def test_update_accumulates_time():
    sprite = make_sprite()
    sprite.update(0.05)
    assert sprite.frame().source_rect.x == 0.0
    sprite.update(0.05)
    assert sprite.frame().source_rect.x == 15.0


def test_paused_sprite_does_not_advance():
    sprite = make_sprite(playing=False)
    sprite.update(1.0)
    assert sprite.frame().source_rect.x == 0.0


def test_last_frame_and_wrap():
    sprite = make_sprite()
    sprite.set_frame(19)
    assert sprite.is_last_frame()
    sprite.update(0.1)
    assert not sprite.is_last_frame()
    assert sprite.frame().source_rect.x == 0.0


def test_set_animation_wraps_frame():
    sprite = make_sprite()
    sprite.set_frame(17)
    sprite.set_animation(1)
    assert sprite.frame().source_rect.x == 30.0


def test_set_animation_out_of_range():
    with pytest.raises(IndexError):
        make_sprite().set_animation(2)