"""Animation export."""

from galaxy_gen.io.animation import AnimationExporter, GIFExporter, VideoExporter

__all__ = ["AnimationExporter", "GIFExporter", "VideoExporter"]
