"""Particle buffers produced by the generator."""

from dataclasses import dataclass
from typing import Iterator, Tuple
import numpy as np


@dataclass(frozen=True, eq=False)
class ParticleBuffer:
    """Per-particle positions and colors of one generated galaxy.

    Both arrays are (count, 3) float32 and read-only. Index order is
    generation order; particle ``i`` belongs to branch ``i % branches``.
    """
    positions: np.ndarray
    colors: np.ndarray

    def __post_init__(self):
        if self.positions.ndim != 2 or self.positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (count, 3), got {self.positions.shape}")
        if self.colors.shape != self.positions.shape:
            raise ValueError(
                f"colors shape {self.colors.shape} does not match positions {self.positions.shape}"
            )
        self.positions.flags.writeable = False
        self.colors.flags.writeable = False

    @property
    def count(self) -> int:
        return self.positions.shape[0]

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Tuple[np.ndarray, np.ndarray]]:
        return zip(self.positions, self.colors)

    def flat_positions(self) -> np.ndarray:
        """Positions as a flat x, y, z, x, y, z, ... array of length 3 * count."""
        return self.positions.reshape(-1)

    def flat_colors(self) -> np.ndarray:
        """Colors as a flat r, g, b, ... array of length 3 * count."""
        return self.colors.reshape(-1)

    def extent(self) -> Tuple[np.ndarray, np.ndarray]:
        """Per-axis (min, max) of the positions."""
        return self.positions.min(axis=0), self.positions.max(axis=0)
