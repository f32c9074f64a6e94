# schnitzel

Building blocks for a small 2D sprite game engine, in pure Python with no
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `schnitzel.containers`: `FixedArray`, a list with a fixed capacity.
  `add` returns the new element's index, `remove_idx_and_swap` moves the
  last element into the removed slot, and `is_full` reports whether the
  capacity is reached. Adding to a full array or indexing out of range
  raises `IndexError`. `BumpAllocator` hands out 8-byte aligned
  `memoryview` slices of one zeroed buffer and raises `MemoryError` when it
  runs out. The size helpers are `bit`, `kb`, `mb` and `gb`.
- `schnitzel.fileio`: `get_timestamp` (modification time in seconds, or 0
  if the file cannot be read), `file_exists`, `get_file_size`, `read_file`
  (optionally staged in a `BumpAllocator`), `write_file` and `copy_file`
  (which returns `False` for an empty source).
- `schnitzel.vmath`: `Vec2`, `IVec2`, `Vec4`, `Mat4`, `Rect` and `IRect`,
  plus `sign`, `approach`, `lerp`, `lerp_vec2`, `lerp_ivec2`,
  `orthographic_projection`, `point_in_rect` (edges included) and
  `rect_collision` (touching edges do not count). A `Vec2` is truthy only
  when both components are non-zero; `IVec2 // n` truncates towards zero.
- `schnitzel.wav`: `WavHeader` (`from_bytes`, `to_bytes`), `WavFile`,
  `parse_wav` and `load_wav`. Only a RIFF chunk followed directly by a
  format chunk and a data chunk is understood, and only 2-channel,
  44100 Hz files are accepted; anything else raises `ValueError`.
- `schnitzel.assets`: `SpriteID`, `Sprite` and `get_sprite`, which give each
  sprite's offset, size and frame count in the texture atlas.
- `schnitzel.shader_types`: `Transform`, `Material` (white by default,
  compared by colour) and the `RenderingOption` flags `FLIP_X`, `FLIP_Y`
  and `FONT`.
- `schnitzel.input`: `KeyCodeID`, `Key` and `Input`. `Input` holds the
  screen size, mouse positions and the state of every key;
  `process_key_event` records a press or release, and
  `key_pressed_this_frame`, `key_released_this_frame` and `key_is_down`
  query it.

## Examples

```python
from schnitzel.assets import SpriteID, get_sprite

sprite = get_sprite(SpriteID.CELESTE_RUN)
print(sprite.atlas_offset, sprite.size, sprite.frame_count)
```

```python
from schnitzel.input import Input, KeyCodeID

state = Input()
state.process_key_event(KeyCodeID.A, True)
assert state.key_pressed_this_frame(KeyCodeID.A)
assert state.key_is_down(KeyCodeID.A)
```

```python
from schnitzel.vmath import IRect, IVec2, rect_collision

a = IRect(IVec2(0, 0), IVec2(10, 10))
b = IRect(IVec2(5, 5), IVec2(10, 10))
assert rect_collision(a, b)
```

## What this package does not do

It opens no window, reads no events from a display, and draws nothing. There
is no renderer: nothing collects sprites, quads or text into per-frame
batches, and there are no animation or layer helpers. `Transform` and
`Material` describe what a renderer would upload, but nothing here builds
or submits them. There are also no console logging helpers; errors are
raised as Python exceptions.