"""Shared test fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from galaxy_gen.render.base import SceneHost


class FixedRandom:
    """Random source returning one constant per call, repeating the last."""

    def __init__(self, *values):
        self.values = list(values) or [0.0]
        self.calls = 0

    def random(self, size):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return np.full(size, value, dtype=np.float64)


class RecordingHost(SceneHost):
    """Scene host that records attach/detach calls instead of drawing."""

    def __init__(self):
        super().__init__()
        self.events = []
        self.frames = 0

    def on_attach(self, drawable):
        self.events.append(("attach", drawable))

    def on_detach(self, drawable):
        self.events.append(("detach", drawable))

    def render(self):
        self.frames += 1

    def capture_frame(self):
        return np.zeros((4, 4, 3), dtype=np.uint8)

    def close(self):
        for drawable in list(self.drawables):
            self.detach(drawable)


@pytest.fixture
def host():
    return RecordingHost()
