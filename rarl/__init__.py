"""Draw 2D animations frame by frame with Pillow and encode them to video with ffmpeg."""

__version__ = "0.1.0"