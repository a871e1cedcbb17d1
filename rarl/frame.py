"""A frame hands out a drawing canvas until it is released for encoding."""

from __future__ import annotations

import warnings
from typing import Optional

from PIL import Image


class Frame:
    """A drawable view of a render surface; it must be released once drawn."""

    def __init__(self, surface: Image.Image) -> None:
        self._canvas: Optional[Image.Image] = surface

    @property
    def canvas(self) -> Image.Image:
        """The image to draw on."""
        if self._canvas is None:
            raise RuntimeError("frame has already been released")
        return self._canvas

    @property
    def released(self) -> bool:
        return self._canvas is None

    def release(self) -> None:
        """Give up the canvas; drawing on this frame is no longer possible."""
        if self._canvas is None:
            raise RuntimeError("frame has already been released")
        self._canvas = None

    def __del__(self) -> None:
        if getattr(self, "_canvas", None) is not None:
            warnings.warn("Frame is created but isn't rendered", ResourceWarning, stacklevel=2)