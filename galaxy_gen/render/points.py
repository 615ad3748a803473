"""Point-cloud drawable attached to a scene."""

from typing import Optional, Tuple
import numpy as np

from galaxy_gen.buffer import ParticleBuffer


class PointCloud:
    """Drawable point cloud built from one ParticleBuffer.

    The cloud owns the buffer until :meth:`dispose` is called; after that
    it holds no references to the arrays and can no longer be drawn.
    """

    def __init__(self, buffer: ParticleBuffer, size: float = 0.01):
        self._buffer: Optional[ParticleBuffer] = buffer
        self.size = size
        self.rotation_y = 0.0

    @property
    def disposed(self) -> bool:
        return self._buffer is None

    @property
    def buffer(self) -> ParticleBuffer:
        if self._buffer is None:
            raise RuntimeError("Point cloud has been disposed")
        return self._buffer

    @property
    def count(self) -> int:
        return self.buffer.count

    @property
    def colors(self) -> np.ndarray:
        return self.buffer.colors

    def world_positions(self) -> np.ndarray:
        """Positions with the yaw rotation (about the vertical Y axis) applied."""
        positions = self.buffer.positions
        c, s = np.cos(self.rotation_y), np.sin(self.rotation_y)
        rotated = np.empty_like(positions)
        rotated[:, 0] = c * positions[:, 0] + s * positions[:, 2]
        rotated[:, 1] = positions[:, 1]
        rotated[:, 2] = -s * positions[:, 0] + c * positions[:, 2]
        return rotated

    def extent(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.buffer.extent()

    def dispose(self):
        """Release the buffer. Safe to call more than once."""
        self._buffer = None
