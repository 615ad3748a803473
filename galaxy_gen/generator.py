"""Procedural spiral galaxy generator."""

from typing import Optional, Sequence
import numpy as np

from galaxy_gen.buffer import ParticleBuffer
from galaxy_gen.params import GalaxyParameters


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source used by :func:`generate`.

    Args:
        seed: Optional seed for reproducible galaxies

    Returns:
        NumPy random generator
    """
    return np.random.default_rng(seed)


def branch_angles(count: int, branches: int) -> np.ndarray:
    """Angle of the spiral arm each particle index is assigned to.

    Particle ``i`` sits on arm ``i % branches``, arms evenly spaced over
    [0, 2π).
    """
    index = np.arange(count) % branches
    return index / branches * 2 * np.pi


def spin_angles(radii: np.ndarray, spin: float) -> np.ndarray:
    """Extra rotation proportional to radius, giving the spiral twist."""
    return radii * spin


def scatter_offsets(rng, count: int, power: float) -> np.ndarray:
    """Random (count, 3) offsets, each ``±uniform ** power``.

    Larger powers pull the offsets towards zero (tighter arms).
    """
    magnitudes = np.power(rng.random((count, 3)), power)
    signs = np.where(rng.random((count, 3)) < 0.5, 1.0, -1.0)
    return magnitudes * signs


def blend_colors(inside: Sequence[float], outside: Sequence[float], t: np.ndarray) -> np.ndarray:
    """Linear per-channel blend from ``inside`` (t=0) to ``outside`` (t=1)."""
    inside = np.asarray(inside, dtype=np.float64)
    outside = np.asarray(outside, dtype=np.float64)
    return inside + (outside - inside) * t[:, np.newaxis]


def generate(params: GalaxyParameters, rng=None) -> ParticleBuffer:
    """Generate a spiral galaxy point cloud.

    Radii are uniform over [0, radius], so particles crowd the center.
    Vertical thickness comes only from the random Y offset. Color fades
    from ``inside_color`` at the center to ``outside_color`` at ``radius``.

    Args:
        params: Galaxy parameters
        rng: Random source with a NumPy-compatible ``random(size)`` method.
            A fresh unseeded generator is used if None.

    Returns:
        ParticleBuffer with exactly ``params.count`` particles

    Raises:
        InvalidParameter: If the parameters are outside the generation domain
    """
    params.validate()
    if rng is None:
        rng = make_rng()

    n = params.count
    radii = rng.random(n) * params.radius
    angles = branch_angles(n, params.branches) + spin_angles(radii, params.spin)
    offsets = scatter_offsets(rng, n, params.randomness_power)

    positions = np.empty((n, 3), dtype=np.float32)
    positions[:, 0] = np.cos(angles) * radii + offsets[:, 0]
    positions[:, 1] = offsets[:, 1]
    positions[:, 2] = np.sin(angles) * radii + offsets[:, 2]

    colors = blend_colors(params.inside_rgb, params.outside_rgb, radii / params.radius)

    return ParticleBuffer(positions=positions, colors=colors.astype(np.float32))
