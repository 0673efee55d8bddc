# viper-engine

A small 2D game engine built on pygame, together with a demo: a field of
100 stars that scroll leftwards across a 1280×1024 window, each drawn in a
fresh random colour every frame, while the keyboard acts as a drum pad.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the demo

```
viper-engine
```

While the demo is running, these keys play sounds:

| Key | Sound           |
|-----|-----------------|
| A   | `bass.wav`      |
| S   | `snare.wav`     |
| D   | `clap.wav`      |
| F   | `close-hat.wav` |
| G   | `open-hat.wav`  |

`test.wav` plays once when the demo starts. All of these files are loaded
from the directory the demo is started in. A file that cannot be loaded is
skipped, and if the audio device cannot be opened the demo runs silently.
Close the window to quit.

## Using the engine

- `viper_engine.mathutil`: `rad_to_deg`, `deg_to_rad`, `wrap(value, low, high)`
  (wraps a value into `[low, high)`, using integer arithmetic when all three
  arguments are integers; raises `ValueError` for an empty range) and
  `clamp(value, low, high)`. Also the constants `PI`, `TWO_PI` and `HALF_PI`.
- `viper_engine.vector2`: `Vector2`, a mutable 2D vector with `x` and `y`.
  It supports indexing with 0 and 1, iteration, the operators `+ - * /` and
  their in-place forms (component-wise with another vector, or with a
  scalar), `length_sqr()` and `length()`.
- `viper_engine.rng`: `random_int()` (in `[0, RAND_MAX]`), `random_int(n)`
  (in `[0, n)`), `random_int(low, high)` (in `[low, high]`) and
  `random_float()` (in `[0.0, 1.0]`).
- `viper_engine.clock`: `Time`, a frame clock. Call `tick()` once per frame;
  `time` is the time from the start (or the last `reset()`) to the last tick,
  and `delta_time` is the time between the last two ticks, both in seconds.
  A different clock function can be passed as `Time(clock=...)`.
- `viper_engine.input`: `InputSystem` and `MouseButton` (`LEFT`, `MIDDLE`,
  `RIGHT`). Call `initialize()` once and `update()` every frame. Queries are
  `key_down`, `key_pressed`, `key_released`, `mouse_button_down`,
  `mouse_button_pressed`, `mouse_button_released`, their `previous_*`
  counterparts, and the `mouse_position` and `previous_mouse_position`
  properties. By default the state is read from pygame; other sources can be
  passed as `keyboard_source` and `mouse_source`.
- `viper_engine.renderer`: `Renderer`, which opens one window
  (`create_window(name, width, height)`), fills it with `clear()`, draws with
  `draw_point` and `draw_line` in the colour set by `set_color(r, g, b, a=255)`,
  and shows the frame with `present()`. Setup failures and drawing before a
  window exists raise `RendererError`; colour components outside 0–255 raise
  `ValueError`.
- `viper_engine.game`: the demo (`main`), plus `create_stars` and
  `update_stars`.

The example below moves every star 140 pixels per second to the left for
one 60 Hz frame. Stars that leave the screen wrap around to the other side.

```python
from viper_engine.game import create_stars, update_stars
from viper_engine.vector2 import Vector2

stars = create_stars(100, 1280, 1024)
update_stars(stars, Vector2(-140.0, 0.0), 1 / 60, 1280)
```

## What it does not do

The renderer draws only points, lines and full-window fills: there is no
text, image or sprite drawing. There is no game logic beyond the starfield
demo, and the demo ships without its sound files.