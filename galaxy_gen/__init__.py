"""
Galaxy Generator - procedural spiral galaxy point clouds.

Features:
- Vectorised spiral-arm particle generation with a two-color gradient
- Regeneration lifecycle that replaces the drawn point cloud safely
- Real-time 3D rendering with matplotlib
- Live parameter tuning in a tkinter panel
- Export of rotating galaxies to GIF/MP4
"""

__version__ = "0.1.0"

from galaxy_gen.errors import InvalidParameter
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.buffer import ParticleBuffer
from galaxy_gen.generator import generate, make_rng
from galaxy_gen.galaxy import GalaxyInstance

__all__ = [
    "InvalidParameter",
    "GalaxyParameters",
    "ParticleBuffer",
    "generate",
    "make_rng",
    "GalaxyInstance",
]
