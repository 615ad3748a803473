"""Galaxy instance: the regeneration lifecycle."""

import logging
import time
from typing import Callable, Optional

from galaxy_gen.buffer import ParticleBuffer
from galaxy_gen.errors import InvalidParameter
from galaxy_gen.generator import generate
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.render.base import SceneHost
from galaxy_gen.render.points import PointCloud

logger = logging.getLogger(__name__)


class GalaxyInstance:
    """One galaxy shown by a scene host.

    Owns the current ParticleBuffer and the drawable built from it. Each
    regeneration disposes the previous drawable before the new one is
    attached, so the host never holds two clouds for the same galaxy.
    """

    def __init__(
        self,
        host: SceneHost,
        rng=None,
        generator: Callable[..., ParticleBuffer] = generate
    ):
        """Initialize galaxy instance.

        Args:
            host: Scene host that draws the galaxy
            rng: Random source passed to the generator (fresh draws if None)
            generator: Generation function, ``generator(params, rng=...)``
        """
        self.host = host
        self.rng = rng
        self.generator = generator
        self._params: Optional[GalaxyParameters] = None
        self._buffer: Optional[ParticleBuffer] = None
        self._drawable: Optional[PointCloud] = None
        self.generation = 0

    @property
    def params(self) -> Optional[GalaxyParameters]:
        """Parameters of the installed galaxy (a copy the caller can't mutate)."""
        return self._params.replace() if self._params is not None else None

    @property
    def buffer(self) -> Optional[ParticleBuffer]:
        return self._buffer

    @property
    def drawable(self) -> Optional[PointCloud]:
        return self._drawable

    def regenerate(self, params: GalaxyParameters) -> ParticleBuffer:
        """Generate a new galaxy and replace the installed one.

        The new buffer is computed first; if that fails nothing changes and
        the old drawable stays in the scene.

        Raises:
            InvalidParameter: If ``params`` is outside the generation domain
        """
        start = time.perf_counter()
        try:
            buffer = self.generator(params, rng=self.rng)
        except InvalidParameter as exc:
            logger.warning("Rejected galaxy parameters: %s", exc)
            raise

        self.dispose()
        self._drawable = self.host.attach(buffer, params)
        self._buffer = buffer
        self._params = params.replace()
        self.generation += 1

        logger.debug(
            "Generated galaxy #%d: %d particles in %.1f ms",
            self.generation, buffer.count, (time.perf_counter() - start) * 1000.0
        )
        return buffer

    def dispose(self):
        """Remove the installed drawable from the host, if any."""
        if self._drawable is not None:
            self.host.detach(self._drawable)
            self._drawable = None
            self._buffer = None
