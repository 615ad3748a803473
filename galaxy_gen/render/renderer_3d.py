"""3D scene host using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D
from matplotlib.figure import Figure
from typing import Dict, Optional, Tuple
import time

from galaxy_gen.render.base import SceneHost, DEFAULT_ROTATION_SPEED
from galaxy_gen.render.points import PointCloud


class Renderer3D(SceneHost):
    """Real-time 3D renderer using matplotlib 3D axes.

    The galaxy is generated in a y-up frame; it is drawn on matplotlib's
    z-up axes as (x, -z, y). Mouse drag orbits the camera.
    """

    def __init__(
        self,
        figure: Optional[Figure] = None,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        elevation: float = 38.0,
        azimuth: float = -101.0,
        rotation_speed: float = DEFAULT_ROTATION_SPEED,
        space_theme: bool = True,
        point_scale: float = 100.0,
        alpha: float = 0.8,
        interactive: bool = True,
        fps_overlay: bool = False
    ):
        """Initialize 3D renderer.

        Args:
            figure: Existing figure to draw into (e.g. one embedded in tk).
                A pyplot figure is created on first render if None.
            figsize: Figure size for a created figure
            dpi: Dots per inch for a created figure
            elevation: Initial camera elevation angle (degrees)
            azimuth: Initial camera azimuth angle (degrees)
            rotation_speed: Galaxy yaw speed in radians per second
            space_theme: Black background without axes
            point_scale: Marker area per unit of ``params.size``
            alpha: Marker opacity
            interactive: Show the created pyplot window (non-blocking)
            fps_overlay: Draw a frames-per-second counter
        """
        super().__init__(rotation_speed=rotation_speed)
        self.figsize = figsize
        self.dpi = dpi
        self.elevation = elevation
        self.azimuth = azimuth
        self.space_theme = space_theme
        self.point_scale = point_scale
        self.alpha = alpha
        self.interactive = interactive
        self.fps_overlay = fps_overlay
        self.fig: Optional[Figure] = figure
        self.ax: Optional[Axes3D] = None
        self._owns_figure = figure is None
        self._artists: Dict[int, object] = {}
        self._fps_text = None
        self._last_frame_time = time.time()
        self.initialized = False

    @staticmethod
    def to_plot_coords(positions: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Map y-up galaxy coordinates onto z-up plot axes."""
        return positions[:, 0], -positions[:, 2], positions[:, 1]

    def _initialize(self):
        """Create figure and axes if not already done."""
        if self.initialized:
            return
        if self.fig is None:
            self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        self.ax = self.fig.add_subplot(111, projection='3d')
        if self.space_theme:
            self.fig.patch.set_facecolor('black')
            self.ax.set_facecolor('black')
            self.ax.set_axis_off()
        else:
            self.ax.set_xlabel('X')
            self.ax.set_ylabel('Z')
            self.ax.set_zlabel('Y')
            self.ax.set_title('Galaxy')
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)
        self.initialized = True

        if self._owns_figure and self.interactive:
            plt.show(block=False)

    def _fit_limits(self, drawable: PointCloud):
        """Fit a cube around the cloud; the yaw rotation stays inside it."""
        low, high = drawable.extent()
        horizontal = float(np.max(np.abs(np.concatenate([low[[0, 2]], high[[0, 2]]]))))
        half = max(horizontal * np.sqrt(2.0), float(np.max(np.abs([low[1], high[1]]))), 1e-3)
        self.ax.set_xlim(-half, half)
        self.ax.set_ylim(-half, half)
        self.ax.set_zlim(-half, half)

    def on_attach(self, drawable: PointCloud):
        self._initialize()
        xs, ys, zs = self.to_plot_coords(drawable.world_positions())
        self._artists[id(drawable)] = self.ax.scatter(
            xs, ys, zs,
            c=drawable.colors,
            s=max(drawable.size * self.point_scale, 0.05),
            alpha=self.alpha,
            edgecolors='none',
            depthshade=False
        )
        self._fit_limits(drawable)

    def on_detach(self, drawable: PointCloud):
        artist = self._artists.pop(id(drawable), None)
        if artist is not None:
            artist.remove()

    def render(self):
        """Draw the current scene."""
        self._initialize()
        for drawable in self.drawables:
            artist = self._artists.get(id(drawable))
            if artist is None:
                continue
            artist._offsets3d = self.to_plot_coords(drawable.world_positions())

        if self.fps_overlay:
            now = time.time()
            dt = now - self._last_frame_time
            self._last_frame_time = now
            label = f"{1.0 / dt:.1f} FPS" if dt > 0 else ""
            if self._fps_text is None:
                self._fps_text = self.ax.text2D(0.02, 0.95, label,
                                                transform=self.ax.transAxes, color='white')
            else:
                self._fps_text.set_text(label)

        self.fig.canvas.draw_idle()

    def is_open(self) -> bool:
        """Check whether the pyplot window is still open."""
        if self.fig is None:
            return False
        if not self._owns_figure:
            return True
        return plt.fignum_exists(self.fig.number)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return buf[:, :, :3].copy()

    def set_view(self, elevation: float, azimuth: float):
        """Set camera view angles.

        Args:
            elevation: Elevation angle
            azimuth: Azimuth angle
        """
        self.elevation = elevation
        self.azimuth = azimuth
        if self.ax is not None:
            self.ax.view_init(elev=elevation, azim=azimuth)

    def close(self):
        """Close the renderer."""
        for drawable in list(self.drawables):
            self.detach(drawable)
        if self.fig is not None:
            if self._owns_figure:
                plt.close(self.fig)
                self.fig = None
            else:
                self.fig.clear()
        self.ax = None
        self._fps_text = None
        self.initialized = False
