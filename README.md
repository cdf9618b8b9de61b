# gridglide

The logic behind a graphical front end for a grid-based text editor, written
without any GUI toolkit, so each part can be used and tested on its own. It has
no dependencies beyond the standard library.

## Modules

- `gridglide.animation`: the easing functions `ease_linear`, `ease_in_quad`,
  `ease_out_quad`, `ease_in_out_quad`, `ease_in_cubic`, `ease_out_cubic`,
  `ease_in_out_cubic`, `ease_in_expo` and `ease_out_expo`. It also has `lerp`,
  `ease`, `ease_point` and `Point`, an immutable 2D vector with `length`,
  `normalized`, `dot` and `is_zero`.
- `gridglide.dimensions`: `Dimensions`, an unsigned width/height pair. It has
  element-wise `*` and integer `/`, `from_tuple` (which truncates),
  `as_tuple` and `scale_position`.
- `gridglide.running_tracker`: `RunningTracker`, a thread-safe running flag.
  `quit(reason)` clears the flag and logs the reason. A shared instance is
  `RUNNING_TRACKER`.
- `gridglide.values`: `float_from_value`, `u64_from_value`, `u32_from_value`,
  `i32_from_value`, `str_from_value` and `bool_from_value`. Each takes the
  current value and an incoming one and returns the converted value. If the
  incoming value has the wrong kind, it logs an error and returns the current
  value unchanged.
- `gridglide.settings`: `Settings`, a store that keeps one object per type and
  copies values on `set` and `get`. It also holds update and reader handlers
  for each named property, and `handle_changed_notification([name, value])`
  passes a value to the matching handler. A shared instance is `SETTINGS`.
- `gridglide.window_settings`: the dataclasses `WindowSettings` and
  `KeyboardSettings`, with their defaults.
- `gridglide.window_geometry`: `parse_window_geometry`, which parses
  `"<width>x<height>"` and raises `ValueError` on bad input. When no geometry is
  given, it falls back to the saved size or to `DEFAULT_WINDOW_GEOMETRY`
  (100x50). `maybe_save_window_size` and `try_to_load_last_window_size` write
  and read the size as JSON, by default at `default_settings_path()` in the
  home directory.
- `gridglide.font_options`: `FontOptions.parse`, which turns a `guifont` value
  such as `"Fira Code,Noto:h12:b:i"` into a font list, a pixel size and
  bold/italic flags. The module also has `FontSelection` and
  `points_to_pixels`.
- `gridglide.cursor_vfx`: cursor effects. `VfxMode` selects the effect.
  `PointHighlight` draws the sonicboom, ripple and wireframe highlights.
  `ParticleTrail` draws the railgun, torpedo and pixiedust trails, using the
  deterministic PCG generator `RngState`. `new_cursor_vfx` builds the effect
  for a mode.
- `gridglide.rendered_window`: `RenderedWindow`, which animates a window's grid
  position and smooth scrolling. It takes `handle_position`, `show`, `hide` and
  `handle_viewport`. The module also has `Rect` and `WindowDrawDetails`.
- `gridglide.cursor`: `CursorSettings`, `CursorShape` and `Corner`, which
  animates each of the four cursor corners independently. `corners_for_shape`
  lays the corners out for a block, vertical or horizontal cursor.
  `cursor_destination` computes the pixel target, kept inside its window.
- `gridglide.keyboard`: `KeyboardManager`. It collects `KeyEvent`s over a
  frame and turns them into keybindings such as `<S-C-Tab>` or `<Space>`. Input
  is ignored for a frame after a focus change, and while the logo key is held
  unless `use_logo` is set.
- `gridglide.mouse`: `MouseManager`. It turns pointer motion, button
  transitions and line or pixel scrolling over rendered window regions into
  `DragCommand`, `MouseButtonCommand` and `ScrollCommand` values, and passes
  them to a callback.

## Example

```python
from gridglide.animation import Point, ease_out_expo, ease_point
from gridglide.font_options import FontOptions
from gridglide.keyboard import KeyboardManager, KeyEvent
from gridglide.window_geometry import parse_window_geometry
from gridglide.window_settings import KeyboardSettings

print(ease_point(ease_out_expo, Point(0.0, 0.0), Point(10.0, 4.0), 0.5))

options = FontOptions.parse("Fira Code:h12:b")
print(options.font_list, options.size, options.bold)

print(parse_window_geometry("120x40"))

keyboard = KeyboardManager(is_macos=False)
keyboard.handle_modifiers_changed(shift=False, ctrl=True, alt=False, logo=False)
keyboard.handle_key_event(KeyEvent("a", text="a"))
print(keyboard.handle_events_cleared(KeyboardSettings()))  # ['<C-a>']
```

## What it does not do

gridglide computes state only. It does not:

- open windows or draw anything;
- load or shape fonts;
- connect to an editor process, so `Settings` is never synchronised with one;
- provide a command-line program.

Callers feed it events and read back positions, regions and commands.

## Tests

```
pip install -e ".[test]"
pytest
```