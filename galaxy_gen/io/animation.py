"""Export rendered galaxy rotations to GIF or MP4."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List
import numpy as np


class AnimationExporter(ABC):
    """Collects RGB frames and writes them as an animation."""

    suffix = ""

    def __init__(self, output_path: str, fps: int = 30):
        """Initialize exporter.

        Args:
            output_path: Output file path (suffix added if missing)
            fps: Frames per second
        """
        path = Path(output_path)
        if path.suffix.lower() != self.suffix:
            path = path.with_name(path.name + self.suffix)
        self.output_path = str(path)
        self.fps = fps
        self.frames: List[np.ndarray] = []

    def add_frame(self, frame: np.ndarray):
        """Add a (H, W, 3) frame; float frames in [0, 1] are scaled to uint8."""
        if frame.dtype != np.uint8:
            frame = (np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)
        self.frames.append(frame.copy())

    def add_frames(self, frames: Iterable[np.ndarray]):
        for frame in frames:
            self.add_frame(frame)

    def export(self) -> str:
        """Write all frames and return the output path."""
        if not self.frames:
            raise ValueError("No frames to export")
        self._write()
        return self.output_path

    @abstractmethod
    def _write(self):
        """Write self.frames to self.output_path."""
        pass


class GIFExporter(AnimationExporter):
    """Looping animated GIF via imageio."""

    suffix = ".gif"

    def _write(self):
        try:
            import imageio
        except ImportError:
            raise ImportError("GIF export requires imageio. Install with: pip install imageio")

        imageio.mimsave(self.output_path, self.frames, duration=1.0 / self.fps, loop=0)


class VideoExporter(AnimationExporter):
    """MP4 video via OpenCV, or imageio/ffmpeg when OpenCV is missing."""

    suffix = ".mp4"

    def __init__(self, output_path: str, fps: int = 30, codec: str = 'mp4v'):
        super().__init__(output_path, fps)
        self.codec = codec

    def _write(self):
        try:
            import cv2
        except ImportError:
            self._write_imageio()
            return

        height, width = self.frames[0].shape[:2]
        writer = cv2.VideoWriter(self.output_path, cv2.VideoWriter_fourcc(*self.codec),
                                 self.fps, (width, height))
        try:
            for frame in self.frames:
                writer.write(cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))
        finally:
            writer.release()

    def _write_imageio(self):
        try:
            import imageio
        except ImportError:
            raise ImportError(
                "Video export requires either opencv-python or imageio. "
                "Install with: pip install opencv-python or pip install imageio[ffmpeg]"
            )

        imageio.mimsave(self.output_path, self.frames, fps=self.fps, codec='libx264', quality=8)
