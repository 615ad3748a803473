"""Scene hosts for drawing and animating galaxies."""

from galaxy_gen.render.base import SceneHost
from galaxy_gen.render.points import PointCloud
from galaxy_gen.render.clock import Clock
from galaxy_gen.render.renderer_3d import Renderer3D

__all__ = ["SceneHost", "PointCloud", "Clock", "Renderer3D"]
