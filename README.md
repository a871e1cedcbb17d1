# rarl

rarl draws 2D animations one frame at a time with Pillow. It streams the raw
RGBA frames to an `ffmpeg` process, which encodes them as an H.264 video
(`libx264`, `yuv420p`).

## Requirements

- Python 3.10 or later
- Pillow 10.1 or later (installed automatically)
- `ffmpeg` on your `PATH`
- `typst` on your `PATH`, needed only for `Renderer.render_typst`

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Command line

```
rarl
```

This renders the built-in demo, a title reveal. The title is centred on a black
background. From second 1 to second 6 a black box slides off it with a cubic
ease-in-out, and the fully revealed title then stays on screen until the end.

The options and their defaults are:

| Option | Default | Meaning |
| --- | --- | --- |
| `--duration` | `8` | length in seconds; must be at least 6 |
| `--fps` | `60` | frames per second |
| `--width` | `1800` | frame width in pixels |
| `--height` | `1000` | frame height in pixels |
| `--output` | `output.mp4` | output video file; an existing file is overwritten |
| `--title` | `A SIMPLE TITLE` | text to reveal |
| `--font-size` | `72.0` | title font size |
| `--show-ffmpeg-output` | off | let ffmpeg print to the terminal |

While it runs, the command shows which frame it is on. At the end it prints the
average frame time and the total time. It exits with status 0 if ffmpeg
succeeded and 1 if it did not.

## Library use

```python
from rarl import graphics
from rarl.animator import Animator, FinishAction
from rarl.easing import cubic_inout
from rarl.renderer import Renderer

with Renderer(4, 30, 640, 360, "circle.mp4", False) as renderer:
    grow = Animator(
        renderer.duration_parameter(0.5),
        renderer.duration_parameter(3.0),
        cubic_inout,
        FinishAction.REPEAT_END,
    )
    while (frame := renderer.get_frame()) is not None:
        canvas = frame.canvas
        graphics.clear(canvas, graphics.BLACK)
        grow.draw(
            renderer.t(),
            lambda t: graphics.draw_circle(
                canvas, (320, 180), 150 * t, 2.0, graphics.WHITE, graphics.BLUE
            ),
        )
        renderer.submit(frame)
```

### Renderer

Arguments to `Renderer(duration_secs, fps, width, height, output_path, show_output=False)`:

- `duration_secs`: length of the video in seconds.
- `fps`: frames per second.
- `width`, `height`: frame size in pixels.
- `output_path`: the file ffmpeg writes to.
- `show_output`: whether ffmpeg may print to the terminal.

Creating a renderer starts ffmpeg straight away.

Every frame is drawn on the same RGBA surface, so each frame starts with what
the previous one left behind.

Methods:

- `get_frame()` returns a `Frame`, or `None` once every frame has been submitted.
- `submit(frame)` releases the frame and queues its pixels for ffmpeg.
- `finish()` waits for ffmpeg to exit and returns whether it succeeded. It
  raises `RuntimeError` if any of these hold:
  - not every frame was submitted;
  - the renderer has already finished;
  - writing to ffmpeg failed.
- Used as a context manager, the renderer calls `finish()` on a normal exit. If
  the block raised, it only shuts ffmpeg down.
- `temporary_canvas()` gives a canvas for measurements made before drawing,
  such as `graphics.measure_text`.

Read-only properties: `frame_size`, `fps`, `duration_secs`, `frame_count`
(frames submitted so far), `total_frame_count` and `finished`.

### Frames

A `Frame` exposes the image to draw on as `frame.canvas`. Once a frame is
submitted it is released, and reading `canvas` or calling `release()` again
raises `RuntimeError`. If a frame is garbage-collected without being released,
a `ResourceWarning` is issued.

### Timing and animation

`Renderer.t()` returns how far playback has got: the number of frames submitted
divided by the total number of frames. `Renderer.duration_parameter(seconds)`
converts a time in seconds to that same scale. It raises `ValueError` for a time
longer than the video.

An `Animator(start, end, easing_fn, finish_action)` covers the interval
`[start, end)` of `t`. Call `draw(t, f)` to run it. Before `start` it does
nothing. Inside the interval it calls `f` with the eased progress from 0 to 1.

What happens after `end` depends on the `FinishAction`:

- `START_OVER` moves the interval to begin at the current `t` and starts again
  from 0.
- `REWIND` plays back from 1 to 0, then starts over.
- `STOP` stops calling `f`.
- `REPEAT_END` keeps calling `f` with progress 1.

`is_finished(t)` is true once `t` has passed `end` for `STOP` and `REPEAT_END`.
It is always false for the other two actions.

The `rarl.easing` module provides `linear`, `cubic_in`, `cubic_out` and
`cubic_inout`.

### Drawing

`rarl.graphics` draws on a frame's canvas. It blends with alpha compositing.
Colours are RGBA tuples of floats from 0 to 1. The module has the constants
`RED`, `GREEN`, `BLUE`, `GRAY`, `ORANGE`, `YELLOW`, `BLACK`, `WHITE` and
`TRANSPARENT`.

- `clear(canvas, color)` paints over the whole canvas.
- `measure_text(canvas, text, size, font_name=None)` returns the text's width
  and height in pixels.
- `draw_text(canvas, text, position, size, text_color, font_name=None)` draws
  text with its top-left corner at `position`.
- `draw_line(canvas, start, end, thickness, color)` draws a straight line.
- `draw_rectangle(canvas, position, width, height, thickness, border_color, fill_color=None)`
  draws a rectangle outline and, if `fill_color` is given, fills it.
- `draw_circle(canvas, center, radius, thickness, color, fill_color=None)` draws
  a circle outline and, if `fill_color` is given, fills it.
- `draw_arc(canvas, position, angle1, angle2, radius, thickness, color)` draws an
  arc, with the angles in radians.

The font is looked up by name, or `JetBrainsMono` if no name is given. If that
font cannot be loaded, Pillow's built-in font is used at the requested size.
Text may contain several lines.

### Typst

`Renderer.render_typst(code)` runs `typst compile` on the snippet. It adds a
preamble that gives a transparent page sized to the content, renders the first
page as a PNG at 72 ppi, and returns a `Typst` object. It raises `RuntimeError`
if typst fails.

To draw the result:

1. Optionally call `scale(sx, sy)`, which returns the object, so calls can be
   chained.
2. Call `build()` to rasterise at that scale.
3. Call `render((x, y), frame)` to composite it onto the frame. Calling it
   before `build()` raises `RuntimeError`.

`size` gives the unscaled size and `surface` gives the built image.

## What it does not do

- There is no audio track. The output holds video only.
- Text markup is not styled. Tags are removed and character entities decoded
  before the text is drawn in a single font and colour.
- Typst snippets are rasterised by the `typst` command at a fixed resolution,
  and scaling then resamples that image. Scaled Typst output is not re-rendered
  as vectors.