"""Base scene host interface."""

from abc import ABC, abstractmethod
from typing import List
import numpy as np

from galaxy_gen.buffer import ParticleBuffer
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.render.points import PointCloud

# Yaw speed of the galaxy in radians per second
DEFAULT_ROTATION_SPEED = 0.3


class SceneHost(ABC):
    """Owns the scene and the draw calls.

    The galaxy lifecycle only talks to a host through :meth:`attach` and
    :meth:`detach`; the frame loop calls :meth:`tick`.
    """

    def __init__(self, rotation_speed: float = DEFAULT_ROTATION_SPEED):
        self.rotation_speed = rotation_speed
        self.drawables: List[PointCloud] = []

    def attach(self, buffer: ParticleBuffer, params: GalaxyParameters) -> PointCloud:
        """Wrap a buffer in a drawable and add it to the scene.

        If the subclass hook fails the drawable is taken out of the scene
        and disposed before the error propagates.
        """
        drawable = PointCloud(buffer, size=params.size)
        self.drawables.append(drawable)
        try:
            self.on_attach(drawable)
        except Exception:
            self.detach(drawable)
            raise
        return drawable

    def detach(self, drawable: PointCloud):
        """Remove a drawable from the scene and release its resources."""
        if drawable in self.drawables:
            self.drawables.remove(drawable)
        self.on_detach(drawable)
        drawable.dispose()

    def on_attach(self, drawable: PointCloud):
        """Hook for subclasses, called after a drawable joins the scene."""

    def on_detach(self, drawable: PointCloud):
        """Hook for subclasses, called before a drawable is disposed."""

    def tick(self, elapsed: float):
        """Advance the animation to ``elapsed`` seconds and draw a frame."""
        for drawable in self.drawables:
            drawable.rotation_y = elapsed * self.rotation_speed
        self.render()

    @abstractmethod
    def render(self):
        """Draw the current scene."""
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture the last drawn frame.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def close(self):
        """Close the host and release its window."""
        pass
