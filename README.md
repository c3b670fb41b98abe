# quadkit

Small building blocks for frame-driven games and interactive programs,
with no dependencies beyond the standard library. quadkit keeps track of
state (colors, shapes, animation frames, input); drawing it is up to you.

## Modules

- `quadkit.colors` – `Color`, a frozen dataclass of four float channels
  (`r`, `g`, `b`, `a`, expected in 0.0–1.0). Build one with
  `Color.from_rgba`, `Color.from_hex` (0xRRGGBB, always opaque),
  `Color.from_bytes` or `Color.from_tuple`; convert back with `to_bytes`
  and `to_tuple`; copy with `with_alpha`. Also `color_u8`, `hsl_to_rgb`,
  `rgb_to_hsl` and named constants such as `RED`, `WHITE`, `BLANK`.
- `quadkit.vecmath` – `Vec2` (immutable, with `+`, `-`, `*`, `/`,
  `length`, `distance`), `polar_to_cartesian`, `cartesian_to_polar` and
  `clamp`.
- `quadkit.rect` – `Rect` (top-left corner plus width and height) with
  `contains` (borders included), `overlaps`, `intersect` (returns `None`
  when the rectangles do not meet), `combine_with`, `offset`, `move_to`
  and `scale`; and `RectOffset`.
- `quadkit.circle` – `Circle` with `contains` and `overlaps` (both strict),
  `overlaps_rect`, `offset`, `move_to` and `scale`.
- `quadkit.shaders` – `preprocess_shader` replaces every
  `#include "name"` with the matching content from a
  `PreprocessorConfig`; it raises `ValueError` for a malformed directive
  or an include name that is not listed.
- `quadkit.generational` – `GenerationalStorage`, a slot store whose
  `GenerationalId`s go stale once their slot is freed, so an old id never
  reaches new data.
- `quadkit.storage` – `Storage`, holding at most one value per exact type
  (`store`, `get`, `try_get`).
- `quadkit.animation` – `Animation`, `AnimationFrame` and
  `AnimatedSprite` for sprite sheets with one animation per row of tiles.
  `update(frame_time)` advances the frame once `1/fps` seconds have passed.
- `quadkit.mouse_camera` – `MouseCamera`, a pan and zoom camera driven by
  mouse position and wheel; `zoom_and_offset(aspect)` gives the values for
  a 2D camera.
- `quadkit.events` – `TouchPhase`, `MouseButton`, `DroppedFile`,
  `UpdateTrigger`, `Conf`, `InputEvent` (with `replay(handler)`) and
  `EventRecorder`, which keeps one event queue per subscriber.
- `quadkit.input` – `InputState` and `Touch`. Feed window events through
  the `*_event` methods, query keys, mouse buttons, touches, typed
  characters and dropped files, and call `end_frame()` once per frame to
  reset what only lasts one frame.

## Installation

```
pip install .
```

## Example

```python
from quadkit.animation import AnimatedSprite, Animation
from quadkit.colors import Color, rgb_to_hsl
from quadkit.input import InputState
from quadkit.rect import Rect
from quadkit.shaders import PreprocessorConfig, preprocess_shader
from quadkit.vecmath import Vec2

print(Rect(1.0, 1.0, 2.0, 2.0).contains(Vec2(3.0, 3.0)))  # True
print(Color.from_hex(0xFF0000).to_bytes())                # (255, 0, 0, 255)
print(rgb_to_hsl(Color(1.0, 0.0, 0.0, 1.0)))              # (0.0, 1.0, 0.5)

source = '#include "common.glsl"\nvoid main() {}'
config = PreprocessorConfig(includes=[("common.glsl", "precision lowp float;")])
print(preprocess_shader(source, config))

sprite = AnimatedSprite(15, 20, [Animation("idle", 0, 20, 12), Animation("run", 1, 15, 15)])
sprite.update(0.1)                 # more than 1/12 s: next frame
print(sprite.frame().source_rect)  # Rect(x=15.0, y=0.0, w=15.0, h=20.0)

state = InputState(screen_width=800, screen_height=600)
state.key_down_event("space")
print(state.is_key_pressed("space"))  # True
state.end_frame()
print(state.is_key_pressed("space"), state.is_key_down("space"))  # False True
```

## What quadkit does not do

- It opens no window, draws nothing and plays no sound; `InputState`
  only records the events you hand it.
- It does not load files or images from disk.
- It has no coroutine runner, no node scene graph, no node state machine
  and no value tweens; drive per-frame logic from your own loop.
- It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```