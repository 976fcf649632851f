# ogb

Core building blocks for small game programs, in plain Python with no
third-party dependencies.

## Modules

- `ogb.vectors`: immutable float vectors `Vector2`, `Vector3`, `Vector4` and
  integer vectors `Vector2i`, `Vector3i`, `Vector4i`. They support `+`, `-`,
  `*` and `/` with another vector of the same type or with a number (integer
  division rounds toward zero), unary `-` and `abs()`, iteration and indexing.
  Each type has `scalar`, `length`, `average` and `normalize` (the zero vector
  normalizes to zero) and class attributes `ZERO` and `ONE`. The float vectors
  have `dot` and `to_int`; `Vector2.cross` returns a float and `Vector3.cross` a
  `Vector3`. The integer vectors have `to_float`. Swizzle properties such as
  `xy`, `yz`, `xyz`, `r`/`g`/`b`/`a` and `left`/`bottom`/`right`/`top` are
  provided where they fit. `rotate_point_around_pivot` rotates a `Vector2`
  counter-clockwise about a pivot.
- `ogb.matrices`: immutable `Matrix4` and `Matrix3`, stored row by row, with
  translations in the last column. Both have `scalar`, `identity`,
  `make_translation`, `make_rotation`, `make_scale`, `translate`, `rotate`,
  `scale`, `transform`, `inverse` (the zero matrix when singular),
  `from_data`, `data`, and `@` for matrix products and for transforming a
  vector. `Matrix4` adds `make_rotation_z`, `rotate_z` and
  `orthographic_projection`; `Matrix3.to_matrix4` embeds a 2D transform in a
  4×4 matrix.
- `ogb.hashing`: 64-bit hashes `xx_hash`, `city_hash`, `djb2_hash`,
  `string_get_hash` (djb2 above 32 bytes, the city hash otherwise),
  `float64_get_hash`, `float32_get_hash`, and `get_hash`, which chooses by the
  argument's type and hashes other objects by identity.
- `ogb.hash_table`: `HashTable`, a linear-scan table keyed by hash only (two
  keys with the same hash are the same entry). It has `add`, `set`, `find`,
  `contains`, `reserve`, `reset`, `get_nth_value`, `values`, `capacity`,
  `len()` and `in`.
- `ogb.growing_array`: `GrowingArray`, a sequence whose `allocated_count`
  grows in powers of two. It has `add`, `add_multiple`, `reserve`, `resize`,
  `pop`, `clear`, `find_index_by_identity`, `find_index_by_value` (both return
  -1 when nothing is found) and ordered or unordered removal by index, by
  identity or by value.
- `ogb.memory`: a simulated heap with integer addresses. `Heap` has `alloc`,
  `dealloc`, `realloc`, `allocation_size`, `buffer` and `free_bytes`, and
  raises `HeapError` for bad addresses or oversized requests. The module also
  has `InitializationArena` (raises `MemoryError` when full),
  `TemporaryStorage` (wraps to the start with a `RuntimeWarning` on overflow)
  and a bump `Arena` with `push` and `allocate`.
- `ogb.input`: `InputEventKind`, `KeyCode`, `InputState`, `AxisFlags`,
  `InputEvent`, `Deadzones` and `InputFrame`, whose key queries are
  `has_key_state`, `is_key_down`, `is_key_up`, `is_key_just_pressed`,
  `is_key_just_released` and the `consume_key_*` variants that clear the flag
  they report.
- `ogb.logger`: `LogLevel`, `format_log_line`, `default_logger` (writes to
  standard output or a given stream), `version_number` and `version_string`.

## Install

```
pip install .
pip install ".[test]"
```

## Examples

```python
import math
from ogb.vectors import Vector2, Vector3, Vector4, rotate_point_around_pivot
from ogb.matrices import Matrix4

p = rotate_point_around_pivot(Vector2(1.0, 0.0), Vector2(0.0, 0.0), math.pi / 2)

m = Matrix4.identity().translate(Vector3(1.0, 2.0, 0.0))
moved = m @ Vector4(0.0, 0.0, 0.0, 1.0)   # Vector4(1.0, 2.0, 0.0, 1.0)
back = m.inverse() @ moved               # Vector4(0.0, 0.0, 0.0, 1.0)
```

```python
from ogb.hash_table import HashTable

table = HashTable()
table.set("score", 10)   # True: newly added
table.set("score", 20)   # False: updated
table.find("score")      # 20
table.contains("lives")  # False
```

```python
from ogb.memory import Heap

heap = Heap()
address = heap.alloc(24)
heap.buffer(address)[:3] = b"abc"
address = heap.realloc(address, 64)
bytes(heap.buffer(address)[:3])  # b"abc"
heap.dealloc(address)
```

```python
from ogb.input import InputFrame, InputState, KeyCode

frame = InputFrame()
frame.key_states[KeyCode.SPACEBAR] = InputState.DOWN | InputState.JUST_PRESSED
frame.consume_key_just_pressed(KeyCode.SPACEBAR)  # True
frame.is_key_just_pressed(KeyCode.SPACEBAR)       # False
frame.is_key_down(KeyCode.SPACEBAR)               # True
```

```python
from ogb.logger import LogLevel, format_log_line, version_string

format_log_line(LogLevel.INFO, "hello")  # "[INFO]:    hello\n"
version_string()                         # "0.01.009"
```

## What it does not do

This is a library of data types and helpers only. It opens no window, draws
nothing, plays no audio and reads no devices: `InputFrame` holds input state
that your own code fills in. `ogb.memory` manages simulated addresses and
its own byte buffers, not the process's real memory. There is no command-line
program.

## Tests

```
pytest
```