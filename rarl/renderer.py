"""Frame-by-frame video rendering piped into an external ffmpeg encoder."""

from __future__ import annotations

import io
import queue
import subprocess
import threading
from typing import Optional, Tuple

from PIL import Image

from .frame import Frame

TYPST_PREAMBLE = "#set page(fill: none, height: auto, width: auto, margin: 0pt)"
# At 72 pixels per inch one typographic point maps to one pixel.
_TYPST_PPI = 72


class Renderer:
    """Hands out frames to draw on and streams each submitted frame to ffmpeg."""

    def __init__(
        self,
        duration_secs: int,
        fps: int,
        width: int,
        height: int,
        output_path: str,
        show_output: bool = False,
    ) -> None:
        self._surface = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self._frame_width = width
        self._frame_height = height
        self._duration_secs = float(duration_secs)
        self._fps = float(fps)
        self._frame_counter = 0
        self._total_frame_count = duration_secs * fps

        args = [
            "ffmpeg",
            "-y",
            "-f", "rawvideo",
            "-pixel_format", "rgba",
            "-r", str(fps),
            "-video_size", f"{width}x{height}",
            "-i", "-",
            "-vcodec", "libx264",
            "-pix_fmt", "yuv420p",
            str(output_path),
        ]
        sink = None if show_output else subprocess.DEVNULL
        self._process = subprocess.Popen(
            args, stdin=subprocess.PIPE, stdout=sink, stderr=sink
        )

        self._queue: "queue.Queue[Optional[bytes]]" = queue.Queue()
        self._write_error: Optional[BaseException] = None
        self._finished = False
        self._thread = threading.Thread(target=self._pump, daemon=True)
        self._thread.start()

    def _pump(self) -> None:
        stdin = self._process.stdin
        while (chunk := self._queue.get()) is not None:
            if self._write_error is not None:
                continue
            try:
                stdin.write(chunk)
            except (OSError, ValueError) as exc:
                self._write_error = exc

    @property
    def frame_size(self) -> Tuple[int, int]:
        """Width and height of every frame in pixels."""
        return self._frame_width, self._frame_height

    @property
    def fps(self) -> float:
        return self._fps

    @property
    def duration_secs(self) -> float:
        return self._duration_secs

    @property
    def frame_count(self) -> int:
        """Number of frames submitted so far."""
        return self._frame_counter

    @property
    def total_frame_count(self) -> int:
        return self._total_frame_count

    @property
    def finished(self) -> bool:
        return self._finished

    def temporary_canvas(self) -> Image.Image:
        """A canvas for measuring things before any frame is drawn."""
        return self._surface

    def get_frame(self) -> Optional[Frame]:
        """The next frame to draw on, or ``None`` once every frame was submitted."""
        if self._frame_counter < self._total_frame_count:
            return Frame(self._surface)
        return None

    def submit(self, frame: Frame) -> None:
        """Release ``frame`` and queue its pixels for encoding."""
        if self._finished:
            raise RuntimeError("renderer has already finished")
        frame.release()
        self._queue.put(self._surface.tobytes())
        self._frame_counter += 1

    def _shutdown(self) -> bool:
        self._finished = True
        self._queue.put(None)
        self._thread.join()
        stdin = self._process.stdin
        if stdin is not None:
            try:
                stdin.close()
            except OSError as exc:
                if self._write_error is None:
                    self._write_error = exc
        returncode = self._process.wait()
        if self._write_error is not None:
            raise RuntimeError("failed to write frame to the encoder") from self._write_error
        return returncode == 0

    def finish(self) -> bool:
        """Wait for the encoder to finish; return whether the video was rendered."""
        if self._finished:
            raise RuntimeError("renderer has already finished")
        if self._frame_counter != self._total_frame_count:
            raise RuntimeError(
                f"only {self._frame_counter} of {self._total_frame_count} frames submitted"
            )
        return self._shutdown()

    def t(self) -> float:
        """Progress through the video in [0, 1)."""
        return self._frame_counter / self._total_frame_count

    def duration_parameter(self, duration_secs: float) -> float:
        """Convert a time in seconds to the normalised time used by ``t``."""
        if duration_secs > self._duration_secs:
            raise ValueError(
                f"{duration_secs}s is longer than the video ({self._duration_secs}s)"
            )
        return duration_secs * self._fps / self._total_frame_count

    def render_typst(self, typst_code: str) -> "Typst":
        """Compile ``typst_code`` with the typst command into a drawable image."""
        result = subprocess.run(
            [
                "typst", "compile", "-",
                "--format", "png",
                "--ppi", str(_TYPST_PPI),
                "--pages", "1",
                "-",
            ],
            input=f"{TYPST_PREAMBLE}\n{typst_code}\n".encode("utf-8"),
            stdout=subprocess.PIPE,
        )
        if result.returncode != 0:
            raise RuntimeError(f"typst exited with status {result.returncode}")
        with Image.open(io.BytesIO(result.stdout)) as image:
            image.load()
            return Typst(image)

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._finished:
            return
        if exc_type is None:
            self.finish()
            return
        try:
            self._shutdown()
        except RuntimeError:
            pass


class Typst:
    """A rendered typst document that can be scaled and painted onto frames."""

    def __init__(self, image: Image.Image) -> None:
        self._image = image.convert("RGBA")
        self._scale: Tuple[float, float] = (1.0, 1.0)
        self._surface: Optional[Image.Image] = None

    @property
    def size(self) -> Tuple[float, float]:
        """Unscaled width and height of the document."""
        return float(self._image.width), float(self._image.height)

    @property
    def surface(self) -> Optional[Image.Image]:
        """The image built by ``build``, if it has been built."""
        return self._surface

    def scale(self, sx: float, sy: float) -> "Typst":
        """Set the scale used by the next ``build``."""
        self._scale = (sx, sy)
        return self

    def build(self) -> None:
        """Rasterise the document at the current scale."""
        width = int(self._image.width * self._scale[0])
        height = int(self._image.height * self._scale[1])
        if width <= 0 or height <= 0:
            raise ValueError(f"cannot build a {width}x{height} image")
        if (width, height) == self._image.size:
            self._surface = self._image.copy()
        else:
            self._surface = self._image.resize((width, height), Image.Resampling.LANCZOS)

    def render(self, position: Tuple[float, float], target: Frame) -> None:
        """Paint the built image onto ``target`` with its top-left at ``position``."""
        if self._surface is None:
            raise RuntimeError("typst image must be built before rendering")
        canvas = target.canvas
        x, y = round(position[0]), round(position[1])
        left, top = max(0, -x), max(0, -y)
        if left >= self._surface.width or top >= self._surface.height:
            return
        source = self._surface
        if left or top:
            source = source.crop((left, top, source.width, source.height))
        canvas.alpha_composite(source, dest=(max(0, x), max(0, y)))