"""Drawing primitives on RGBA Pillow images, composited with the OVER operator."""

from __future__ import annotations

import html
import math
import re
from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

DEFAULT_FONT = "JetBrainsMono"

Color = Tuple[float, float, float, float]
Point = Tuple[float, float]

RED: Color = (1.0, 0.0, 0.0, 1.0)
GREEN: Color = (0.0, 1.0, 0.0, 1.0)
BLUE: Color = (0.0, 0.0, 1.0, 1.0)
GRAY: Color = (0.5, 0.5, 0.5, 1.0)
ORANGE: Color = (1.0, 0.271, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0, 1.0)
WHITE: Color = (1.0, 1.0, 1.0, 1.0)
TRANSPARENT: Color = (0.0, 0.0, 0.0, 0.0)

_TAG = re.compile(r"<[^>]*>")


def _ink(color: Sequence[float]) -> Tuple[int, int, int, int]:
    if len(color) != 4:
        raise ValueError(f"colour needs 4 components (RGBA), got {len(color)}")
    return tuple(max(0, min(255, round(c * 255))) for c in color)  # type: ignore[return-value]


def _stroke_width(thickness: float) -> int:
    if thickness <= 0:
        return 0
    return max(1, round(thickness))


@contextmanager
def _layer(canvas: Image.Image) -> Iterator[ImageDraw.ImageDraw]:
    overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    yield ImageDraw.Draw(overlay)
    canvas.alpha_composite(overlay)


@lru_cache(maxsize=64)
def _font(font_name: str, size: float) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(font_name, size)
    except OSError:
        return ImageFont.load_default(size)


def _plain(text: str) -> str:
    return html.unescape(_TAG.sub("", text))


def _line_height(font) -> int:
    ascent, descent = font.getmetrics()
    return ascent + descent


def clear(canvas: Image.Image, color: Color) -> None:
    """Paint the whole canvas with ``color``."""
    ink = _ink(color)
    canvas.alpha_composite(Image.new("RGBA", canvas.size, ink))


def measure_text(
    canvas: Image.Image, text: str, size: float, font_name: Optional[str] = None
) -> Tuple[float, float]:
    """Return the width and height in pixels that ``text`` takes up when drawn."""
    font = _font(font_name or DEFAULT_FONT, float(size))
    draw = ImageDraw.Draw(canvas)
    lines = _plain(text).split("\n")
    width = max(draw.textlength(line, font=font) for line in lines)
    return float(math.ceil(width)), float(_line_height(font) * len(lines))


def draw_text(
    canvas: Image.Image,
    text: str,
    position: Point,
    size: float,
    text_color: Color,
    font_name: Optional[str] = None,
) -> None:
    """Draw ``text`` with its top-left corner at ``position``."""
    ink = _ink(text_color)
    font = _font(font_name or DEFAULT_FONT, float(size))
    x, y = position
    step = _line_height(font)
    with _layer(canvas) as draw:
        for row, line in enumerate(_plain(text).split("\n")):
            if line:
                draw.text((x, y + row * step), line, fill=ink, font=font, anchor="la")


def draw_line(
    canvas: Image.Image, start: Point, end: Point, thickness: float, color: Color
) -> None:
    """Stroke a straight line from ``start`` to ``end``."""
    ink = _ink(color)
    width = _stroke_width(thickness)
    if not width:
        return
    with _layer(canvas) as draw:
        draw.line([tuple(start), tuple(end)], fill=ink, width=width)


def _box(x: float, y: float, width: float, height: float) -> Tuple[int, int, int, int]:
    x0, x1 = sorted((x, x + width))
    y0, y1 = sorted((y, y + height))
    return round(x0), round(y0), round(x1), round(y1)


def draw_rectangle(
    canvas: Image.Image,
    position: Point,
    width: float,
    height: float,
    thickness: float,
    border_color: Color,
    fill_color: Optional[Color] = None,
) -> None:
    """Stroke a rectangle centred on its edges and optionally fill its inside."""
    border = _ink(border_color)
    fill = _ink(fill_color) if fill_color is not None else None
    x0, y0, x1, y1 = _box(position[0], position[1], width, height)
    stroke = _stroke_width(thickness)
    if stroke:
        half = stroke // 2
        with _layer(canvas) as draw:
            draw.rectangle(
                [x0 - half, y0 - half, x1 + (stroke - half) - 1, y1 + (stroke - half) - 1],
                outline=border,
                width=stroke,
            )
    if fill is not None and x1 > x0 and y1 > y0:
        with _layer(canvas) as draw:
            draw.rectangle([x0, y0, x1 - 1, y1 - 1], fill=fill)


def _circle_box(center: Point, radius: float, grow: float = 0.0) -> list:
    cx, cy = center
    r = radius + grow
    return [round(cx - r), round(cy - r), round(cx + r), round(cy + r)]


def draw_circle(
    canvas: Image.Image,
    center: Point,
    radius: float,
    thickness: float,
    color: Color,
    fill_color: Optional[Color] = None,
) -> None:
    """Stroke a circle and optionally fill its inside."""
    border = _ink(color)
    fill = _ink(fill_color) if fill_color is not None else None
    stroke = _stroke_width(thickness)
    if stroke:
        with _layer(canvas) as draw:
            draw.ellipse(_circle_box(center, radius, stroke / 2), outline=border, width=stroke)
    if fill is not None and radius > 0:
        with _layer(canvas) as draw:
            draw.ellipse(_circle_box(center, radius), fill=fill)


def draw_arc(
    canvas: Image.Image,
    position: Point,
    angle1: float,
    angle2: float,
    radius: float,
    thickness: float,
    color: Color,
) -> None:
    """Stroke an arc clockwise from ``angle1`` to ``angle2`` (radians) around ``position``."""
    ink = _ink(color)
    stroke = _stroke_width(thickness)
    if not stroke:
        return
    full = 2.0 * math.pi
    while angle2 < angle1:
        angle2 += full
    if angle2 - angle1 >= full:
        start, end = 0.0, 360.0
    else:
        start, end = math.degrees(angle1), math.degrees(angle2)
    with _layer(canvas) as draw:
        draw.arc(_circle_box(position, radius, stroke / 2), start, end, fill=ink, width=stroke)