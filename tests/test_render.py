"""Tests for scene hosts and the render manager."""

import numpy as np
import pytest
from galaxy_gen.buffer import ParticleBuffer
from galaxy_gen.generator import generate, make_rng
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.render.clock import Clock
from galaxy_gen.render.manager import RenderManager
from galaxy_gen.render.points import PointCloud
from galaxy_gen.render.renderer_3d import Renderer3D


def _cloud():
    positions = np.array([[1.0, 0.5, 0.0], [0.0, -0.5, 2.0]], dtype=np.float32)
    colors = np.ones((2, 3), dtype=np.float32)
    return PointCloud(ParticleBuffer(positions=positions, colors=colors), size=0.02)


def test_point_cloud_yaw():
    """Yaw rotates about the vertical axis and keeps heights."""
    cloud = _cloud()
    assert np.allclose(cloud.world_positions(), cloud.buffer.positions)

    cloud.rotation_y = np.pi / 2
    rotated = cloud.world_positions()
    assert np.allclose(rotated[0], [0.0, 0.5, -1.0], atol=1e-6)
    assert np.allclose(rotated[1], [2.0, -0.5, 0.0], atol=1e-6)


def test_point_cloud_dispose():
    """A disposed cloud releases its buffer."""
    cloud = _cloud()
    cloud.dispose()
    cloud.dispose()

    assert cloud.disposed
    with pytest.raises(RuntimeError):
        cloud.world_positions()


def test_host_tick_rotates(host):
    """tick() sets the yaw from elapsed time and draws."""
    params = GalaxyParameters(count=100)
    drawable = host.attach(generate(params, rng=make_rng(1)), params)

    host.tick(2.0)
    assert drawable.rotation_y == pytest.approx(0.6)
    assert host.frames == 1


def test_renderer_3d_draws_and_captures():
    """The matplotlib host adds, animates and removes scatter artists."""
    renderer = Renderer3D(figsize=(3, 3), dpi=50, interactive=False)
    manager = RenderManager(renderer, rng=make_rng(2))
    try:
        manager.regenerate(GalaxyParameters(count=300))
        assert len(renderer.ax.collections) == 1

        manager.tick(elapsed=1.0)
        frame = renderer.capture_frame()
        assert frame.dtype == np.uint8
        assert frame.shape == (150, 150, 3)

        manager.regenerate(GalaxyParameters(count=200, radius=2.0))
        assert len(renderer.ax.collections) == 1
        assert len(renderer.drawables) == 1
    finally:
        manager.close()

    assert renderer.fig is None
    assert renderer.drawables == []


def test_renderer_plot_coords():
    """Galaxy y-up coordinates map onto z-up plot axes."""
    xs, ys, zs = Renderer3D.to_plot_coords(np.array([[1.0, 2.0, 3.0]]))
    assert (xs[0], ys[0], zs[0]) == (1.0, -3.0, 2.0)


def test_capture_before_render():
    """Capturing without a figure is an error."""
    with pytest.raises(RuntimeError):
        Renderer3D(interactive=False).capture_frame()


def test_record_frames(host):
    """record() renders at fixed time steps."""
    manager = RenderManager(host, rng=make_rng(3))
    manager.regenerate(GalaxyParameters(count=100))

    frames = manager.record(4, fps=10)
    assert len(frames) == 4
    assert host.frames == 4
    assert manager.frame_count == 4
    assert manager.galaxy.drawable.rotation_y == pytest.approx(0.3 * 0.3)


def test_tick_uses_clock(host):
    """Without an explicit time the clock supplies elapsed seconds."""

    class FrozenClock(Clock):
        def get_elapsed_time(self):
            return 5.0

    manager = RenderManager(host, rng=make_rng(4), clock=FrozenClock())
    manager.regenerate(GalaxyParameters(count=100))
    manager.tick()
    assert manager.galaxy.drawable.rotation_y == pytest.approx(1.5)


def test_clock_elapsed():
    """Elapsed time never goes backwards."""
    clock = Clock()
    first = clock.get_elapsed_time()
    assert first >= 0.0
    assert clock.get_elapsed_time() >= first
