# blockengine

A small toolkit for 2D games in Python, with no dependencies outside the
standard library. It holds the math, input, timing and state-management
parts a game loop needs, and the board logic of a falling-block puzzle game.

## Modules

- `blockengine.vectors`: immutable `Vector2`, `Vector3`, `Vector4` and
  `Rectangle` (with `right`, `bottom` and `center()`), plus the helpers
  `to_radians`, `to_degrees`, `near_zero`, `clamp`, `lerp` and `cot`.
  Vectors support `+`, `-`, scalar and component-wise `*`, `length()`,
  `normalized()`, `dot`, `lerp` and `reflect`; `Vector3` also has `cross`.
- `blockengine.matrices`: immutable `Matrix3`, `Matrix4` and `Quaternion`
  using the row-vector convention. `Matrix4` has scale, rotation (X, Y, Z and
  from a quaternion), translation, look-at, orthographic, perspective and
  simple view-projection constructors, plus `inverted()`, `translation()`,
  `x_axis()`, `y_axis()`, `z_axis()` and `scale()`. `Quaternion` has
  `from_axis_angle`, `conjugate`, `normalized`, `lerp`, `slerp` and
  `concatenate`. Vectors are transformed with `transform2`, `transform3`,
  `transform_with_persp_div` and `rotate_vector`.
- `blockengine.color`: an immutable RGBA `Color` with 8-bit integer channels
  (white by default). It has `from_int` (for values laid out as `0xAABBGGRR`),
  `lerp`, `multiply` (also written `color * scale`), `to_vector3`,
  `to_vector4` and named colours such as `Color.RED` and `Color.LIGHT_BLUE`.
- `blockengine.spritebatch`: `SpriteBatch` collects quads (`Glyph`) between
  `begin()` and `end()`. It can rotate them by an angle or to face a
  direction (`draw_towards`), sorts them by a `GlyphSortType` (texture,
  front to back, back to front, or none), and builds a flat list of
  `Vertex2D` in `vertices` and `RenderBatch` runs of vertices that share a
  texture.
- `blockengine.pieces`: the seven piece shapes in four rotations each,
  read with `block_type` (0 empty, 1 block, 2 pivot), their spawn offsets
  from `x_initial_position` and `y_initial_position`, and a `Piece` record.
- `blockengine.board`: a `Board` of 10 columns by 20 rows, row 0 at the
  bottom, with `is_possible_movement`, `store_piece`,
  `delete_possible_lines`, `is_game_over`, `is_free_block`, `reset` and
  pixel-coordinate helpers.
- `blockengine.keyboard`: `KeyboardState` compares the keys down this frame
  with those of the last one and reports a `KeyStatus`, with `is_up`,
  `is_free`, `is_just_pressed`, `is_down`, `is_held` and
  `is_just_released`. `InputManager` feeds it one snapshot per frame.
- `blockengine.log`: a `Logger` that appends lines of the form
  `yy-mm-dd HH:MM:SS LEVEL: \tmessage` to a file (`gl.log` by default) and
  writes them to a stream, dropping messages less severe than its
  `reporting_level` (a `LogLevel`).
- `blockengine.timer`: a `FrameTimer` that gives the milliseconds between
  frames and sleeps out the rest of a frame to cap the rate at 60 frames per
  second. The clock and the sleep function can be passed in.
- `blockengine.game`: a `Game` that runs a stack of `GameState` scenes with
  `change_state`, `push_state` and `pop_state`, and passes input, updates
  and drawing to the scene on top.

Out-of-range indices raise `IndexError` (pieces and board), and `Game`
raises `RuntimeError` when used before `init()` or with no scene.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Placing a piece and clearing lines:

```python
from blockengine.board import Board

board = Board()
if board.is_possible_movement(3, 0, 0, 0):
    board.store_piece(3, 0, 0, 0)
board.delete_possible_lines()
print(board.is_game_over())  # False
```

Tracking keys across frames:

```python
from blockengine.keyboard import InputManager

manager = InputManager()
manager.prepare_for_update()
manager.poll_inputs({"left"})
print(manager.state.is_just_pressed("left"))  # True

manager.prepare_for_update()
manager.poll_inputs({"left"})
print(manager.state.is_held("left"))  # True
```

Batching sprites by texture:

```python
from blockengine.color import Color
from blockengine.spritebatch import SpriteBatch
from blockengine.vectors import Vector4

batch = SpriteBatch()
batch.begin()
batch.draw(Vector4(0, 0, 25, 25), Vector4(0, 0, 1, 1), 2, 0.0, Color.WHITE)
batch.draw(Vector4(25, 0, 25, 25), Vector4(0, 0, 1, 1), 1, 0.0, Color.RED)
for run in batch.end():
    print(run.texture, run.offset, run.num_vertices)  # 1 0 6, then 2 6 6
print(len(batch.vertices))  # 12
```

## What it does not do

blockengine opens no window and draws nothing on screen: `SpriteBatch`
prepares vertex data and draw runs but has no graphics back end, and there
is no texture or shader loading. It does not read the keyboard either; the
caller passes the keys that are down, and whether a quit was asked for, to
`InputManager.poll_inputs` or `Game.handle_inputs`. It ships no playable
game and no command: the board, pieces, input, timer and scene stack are
building blocks to be put together by your own game loop.