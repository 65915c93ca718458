# xnakit

Building blocks for a game framework, in plain Python with no third-party
dependencies.

## Modules

- `xnakit.errors`: `XnaError` and its subclasses `OutOfRangeError`,
  `InvalidOperationError` and `ArgumentError`. Each error has a `message`, an
  optional `inner` error and an HRESULT-style `h_result` code, and prints as
  `"<h_result>: <message>"`. `require(value, message)` returns `value`, or
  raises `XnaError` when it is `None`.
- `xnakit.timespan`: `TimeSpan`, an immutable duration counted in
  100-nanosecond ticks. The constructors `from_days`, `from_hours`,
  `from_minutes`, `from_seconds`, `from_microseconds`, `from_time`,
  `from_days_f` and `from_minutes_f` raise `OutOfRangeError` on overflow.
  Components such as `hours` and `minutes` and totals such as `total_seconds`
  are properties; the totals count whole units. The type supports `+`, `-`,
  `*`, `/` and unary `-`, and has `duration()`.
- `xnakit.geometry`: `Point`, `Rectangle`, `Vector2`, `Vector3`, `Vector4`,
  `Quaternion`, `Matrix`, `Ray`, `Plane`, `BoundingSphere` and `BoundingBox`.
  `Rectangle` is mutable: `offset` and `inflate` change it in place. It also
  has edge properties (`left`, `right`, `top`, `bottom`), `location`,
  `center`, `is_empty`, `contains`, `contains_rectangle`, `intersects`, and the
  class methods `intersect` and `union`. `union` gives the far right edge as the
  width.
- `xnakit.streams`: the abstract `Stream`, `SeekOrigin` and `MemoryStream`, a
  growable in-memory byte stream that can be used as a context manager. The
  module-level helpers are `copy_stream`, `copy_buffer_size`, `read_into`,
  `read_one_byte`, `read_exactly`, `read_at_least`, `write_all`,
  `write_one_byte` and the `validate_*` argument checks.
- `xnakit.packing`: `clamp_and_round`, `pack_unorm`, `unpack_unorm`,
  `pack_snorm`, `unpack_snorm`, `pack_signed` and `pack_unsigned`, with the
  `Alpha8` and `Bgr565` packed types.
- `xnakit.color`: `Color`, a 32-bit value packed as `0xAABBGGRR`. It can be
  built from byte or float channels and from vectors, including with
  premultiplied alpha. Named colours come from `Color.named("cornflower_blue")`.
  The channels `r`, `g`, `b` and `a` are properties, and `with_r` and its
  siblings return a new colour. The class also has `to_vector4`, `lerp` and
  `multiply`, and the module has `clamp_to_byte`.
- `xnakit.graphics_states`: `BlendState`, `DepthStencilState`,
  `RasterizerState` and `SamplerState`, each with its presets (`opaque`,
  `alpha_blend`, `cull_clockwise`, `point_wrap`, …), and their enums.
- `xnakit.graphics_device`: display modes and `DisplayModeCollection.query`,
  `GraphicsAdapter`, `PresentationParameters`, `SwapChain.from_parameters`, and
  `GraphicsDevice` with `from_profile` and `reset`.
- `xnakit.game`: `Game`, `GameWindow`, `GameTime`, `GameHandler`,
  `GraphicsDeviceManager` and `GraphicsDeviceInformation`. A `GameHandler`
  takes its hooks as callables, or you can subclass it and override its
  `on_*` methods.

## Examples

```python
from xnakit.timespan import TimeSpan

span = TimeSpan.from_minutes(90)
print(span.hours, span.minutes)   # 1 30
```

```python
from xnakit.color import Color

blue = Color.named("cornflower_blue")
grey = Color.lerp(Color.named("black"), Color.named("white"), 0.5)
print(blue.r, blue.g, blue.b, blue.a)   # 100 149 237 255
```

```python
from xnakit.streams import MemoryStream, SeekOrigin

with MemoryStream() as stream:
    stream.write(b"hello", 0, 5)
    stream.seek(0, SeekOrigin.BEGIN)
    data = bytearray(5)
    stream.read(data, 0, 5)   # data == bytearray(b"hello")
```

```python
from xnakit.geometry import Rectangle

a = Rectangle(0, 0, 10, 10)
b = Rectangle(5, 5, 10, 10)
print(a.intersects(b), Rectangle.intersect(a, b))   # True Rectangle(x=5, y=5, width=5, height=5)
```

## What it does not do

The package only describes things. It opens no windows, drives no graphics
hardware and draws nothing. `Game` stores its window description, timing
settings, handler and device, but it has no game loop: nothing calls the
`GameHandler` hooks for you. `GraphicsDeviceManager` records preferred
settings and marks itself dirty when they change, but it does not create or
reset devices. The package also has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```