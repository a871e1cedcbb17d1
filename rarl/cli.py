"""Command that renders an animated title reveal to a video file."""

from __future__ import annotations

import argparse
import time
from typing import Optional, Sequence

from . import graphics
from .animator import Animator, FinishAction
from .easing import cubic_inout
from .renderer import Renderer

_REVEAL_START_SECS = 1.0
_REVEAL_END_SECS = 6.0


def _format_duration(seconds: float) -> str:
    for unit, scale in (("s", 1.0), ("ms", 1e-3), ("µs", 1e-6)):
        if seconds >= scale:
            return f"{seconds / scale:.2f}{unit}"
    return f"{seconds / 1e-9:.2f}ns"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rarl", description="Render a title reveal animation to a video."
    )
    parser.add_argument("--duration", type=int, default=8, help="duration in seconds")
    parser.add_argument("--fps", type=int, default=60, help="frames per second")
    parser.add_argument("--width", type=int, default=1800)
    parser.add_argument("--height", type=int, default=1000)
    parser.add_argument("--output", default="output.mp4", help="output video file")
    parser.add_argument("--title", default="A SIMPLE TITLE")
    parser.add_argument("--font-size", type=float, default=72.0)
    parser.add_argument(
        "--show-ffmpeg-output", action="store_true", help="let ffmpeg print to the terminal"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the title animation; return 0 when the video was written."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.duration < _REVEAL_END_SECS:
        parser.error(f"--duration must be at least {_REVEAL_END_SECS:g} seconds")
    if args.fps <= 0 or args.width <= 0 or args.height <= 0:
        parser.error("--fps, --width and --height must be positive")

    clock = time.perf_counter()
    with Renderer(
        args.duration, args.fps, args.width, args.height, args.output, args.show_ffmpeg_output
    ) as renderer:
        title = args.title
        size = args.font_size
        title_w, title_h = graphics.measure_text(renderer.temporary_canvas(), title, size)

        width, height = renderer.frame_size
        title_x = width / 2.0 - title_w / 2.0
        title_y = height / 2.0 - title_h / 2.0

        reveal = Animator(
            renderer.duration_parameter(_REVEAL_START_SECS),
            renderer.duration_parameter(_REVEAL_END_SECS),
            cubic_inout,
            FinishAction.REPEAT_END,
        )

        while (frame := renderer.get_frame()) is not None:
            canvas = frame.canvas
            graphics.clear(canvas, graphics.BLACK)

            def paint(t: float) -> None:
                graphics.draw_text(canvas, title, (title_x, title_y), size, graphics.WHITE)
                graphics.draw_rectangle(
                    canvas,
                    (title_x + title_w * t, title_y),
                    title_w,
                    title_h,
                    1.0,
                    graphics.BLACK,
                    graphics.BLACK,
                )

            reveal.draw(renderer.t(), paint)
            renderer.submit(frame)
            print(
                f"\rFrame: {renderer.frame_count}/{renderer.total_frame_count}",
                end="",
                flush=True,
            )

        render_time = time.perf_counter() - clock
        ok = renderer.finish()

    print(
        "\rFinished              \n"
        f"    avg. frame time: {_format_duration(render_time / renderer.total_frame_count)}\n"
        f"    total time: {_format_duration(time.perf_counter() - clock)}"
    )
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())