# sovview

Building blocks for an overview of Sway workspaces: reading the workspace
list and window tree from `swaymsg`, flattening its JSON into path/value
pairs, laying workspaces out in a grid, and the small geometry, string,
path, logging and bitmap helpers that go with it.

The package has no runtime dependencies beyond the standard library.

## Reading the Sway tree

```python
from sovview import sway, tree

# Ask a running Sway session for its workspaces and window tree
# (runs `swaymsg -t get_workspaces` and `swaymsg -t get_tree`).
workspaces = sway.read_tree()

# Or parse JSON you already have (the workspace list wrapped as {"items": [...]}).
workspaces = tree.extract(workspaces_json, tree_json)

for ws in sway.workspaces_on_output(workspaces, "eDP-1"):
    print(ws.number, ws.width, ws.height, len(ws.windows))

rows = sway.grid_rows(len(workspaces), 5)
```

`sway.run_swaymsg(kind)` runs `swaymsg -t kind` and returns its output;
a failing command raises `subprocess.CalledProcessError`.
`sway.grid_rows` raises `ValueError` when the column count is not positive.

Each `tree.Workspace` carries its position, size, number, focus state,
output name and its list of `tree.Window`; window positions are made
relative to their workspace.

## JSON tokens and flattened paths

`tokenizer.tokenize(text)` splits JSON into `Token` objects of a
`TokenType` (object, array, string, primitive), each with its span, child
count and parent index. Text after a NUL character is ignored. Malformed
input raises `InvalidJsonError`, truncated input raises
`PartialJsonError`; both derive from `JsonTokenError`.

`jsonpaths.flatten(text)` turns a document into `(path, value)` pairs such
as `("/items/0/rect/width", "1920")`, with array elements numbered in the
path and values kept as text. `tree.lookup(pairs, position, path)` returns
the value for a path, searching forward from a position in that list
first and then backward, or `None` if there is none.

## Geometry

- `vector2d.V2`, `vector3d.V3`, `vector4d.V4`: immutable vectors with
  arithmetic, scaling, length, angles and rotations; resizing or
  normalizing a zero-length vector raises `ValueError`.
- `geometry2d`: line and segment intersection (returning `None` when there
  is none), mirroring, proximity tests, `Rect`, `Segment`, `Square` and
  the `Overlap` classification.
- `matrix3.M3`, `matrix4.M4`: identity, scaling, rotation, translation,
  orthographic and perspective projections, multiplication, transposition
  and inversion; inverting a singular matrix raises `SingularMatrixError`.
- `geometry3d`: projecting between world and screen coordinates,
  decomposing a transform into a `Decomposition`, and quad/line
  intersection.

## Other helpers

- `log`: levelled logging to standard error (`Level`, `log`, `set_level`,
  `get_level`, `inc_verbosity`, `use_colors`, `debug`, `info`, `warn`,
  `error`). The default minimum level is `WARN`.
- `timing.Stopwatch`: `lap(label)` logs at info level and returns the
  microseconds since the last lap or `reset()`.
- `paths`: `append`, `remove_last_component`, `extension`, `filename`,
  `normalize` and `normalize_tokens`.
- `strings`: tokenizing, unescaping, deleting code points, hex colour
  parsing, random readable and alphanumeric words, reading a text file.
- `channel.Channel`: a fixed-size ring buffer from one producer to one
  consumer; `send` returns `False` when full, `recv` returns `None` when
  empty.
- `bitmap`: an RGBA `Bitmap`, `flip_y`, and 24-bit BMP output with
  `encode_bmp` and `write_bmp`.

## What it does not do

The package does not draw the overview itself: it has no HTML/CSS styling,
no text rendering, no on-screen layer or window, and no command-line
program. It gathers and arranges workspace data and provides the helpers
above; showing the result is left to the caller.