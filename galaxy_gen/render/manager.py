"""Render manager driving the per-frame tick."""

from typing import List, Optional
import matplotlib.pyplot as plt
import numpy as np

from galaxy_gen.galaxy import GalaxyInstance
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.render.base import SceneHost
from galaxy_gen.render.clock import Clock


class RenderManager:
    """Ties a scene host, a galaxy instance and an animation clock together.

    The manager never schedules itself: an external loop (the pyplot loop in
    :meth:`run`, or a tk ``after`` callback) calls :meth:`tick` once per frame.
    """

    def __init__(self, host: SceneHost, rng=None, clock: Optional[Clock] = None):
        """Initialize render manager.

        Args:
            host: Scene host that draws the galaxy
            rng: Random source for generation
            clock: Animation clock (a new one if None)
        """
        self.host = host
        self.galaxy = GalaxyInstance(host, rng=rng)
        self.clock = clock or Clock()
        self.frame_count = 0

    def regenerate(self, params: GalaxyParameters):
        """Replace the shown galaxy with one generated from ``params``."""
        return self.galaxy.regenerate(params)

    def tick(self, elapsed: Optional[float] = None):
        """Advance and draw one frame.

        Args:
            elapsed: Animation time in seconds (clock time if None)
        """
        if elapsed is None:
            elapsed = self.clock.get_elapsed_time()
        self.host.tick(elapsed)
        self.frame_count += 1

    def run(self, frames: Optional[int] = None, fps: int = 30):
        """Run the standalone pyplot loop until the window closes.

        Args:
            frames: Stop after this many frames (run until closed if None)
            fps: Target frames per second
        """
        self.clock.start()
        interval = 1.0 / max(fps, 1)
        while frames is None or self.frame_count < frames:
            self.tick()
            is_open = getattr(self.host, "is_open", None)
            if is_open is not None and not is_open():
                break
            plt.pause(interval)

    def record(self, n_frames: int, fps: int = 30) -> List[np.ndarray]:
        """Render frames at fixed time steps and capture them.

        Args:
            n_frames: Number of frames
            fps: Frames per second of the recording

        Returns:
            List of (H, W, 3) uint8 images
        """
        frames = []
        for i in range(n_frames):
            self.tick(elapsed=i / fps)
            frames.append(self.host.capture_frame())
        return frames

    def close(self):
        """Dispose the galaxy and close the host."""
        self.galaxy.dispose()
        self.host.close()
