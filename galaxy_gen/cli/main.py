"""CLI main entry point."""

import argparse
import logging
import sys
import time
from dataclasses import fields

import matplotlib.pyplot as plt

from galaxy_gen.errors import InvalidParameter
from galaxy_gen.generator import generate, make_rng
from galaxy_gen.io.animation import GIFExporter, VideoExporter
from galaxy_gen.params import GalaxyParameters, PARAMETER_BOUNDS
from galaxy_gen.render.manager import RenderManager
from galaxy_gen.render.renderer_3d import Renderer3D
from galaxy_gen.utils.config import Config, load_config

# argparse destinations match the GalaxyParameters field names
PARAMETER_NAMES = [f.name for f in fields(GalaxyParameters)]


def build_config(args) -> Config:
    """Merge the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    config.galaxy = dict(config.galaxy)
    for name in PARAMETER_NAMES:
        value = getattr(args, name)
        if value is not None:
            config.galaxy[name] = value
    for name in ('seed', 'elevation', 'azimuth', 'rotation_speed', 'fps', 'frames'):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, value)
    return config


def print_summary(params: GalaxyParameters, buffer, elapsed_ms: float):
    """Print a short description of a generated galaxy."""
    low, high = buffer.extent()
    print(f"Generated {buffer.count} particles in {elapsed_ms:.1f} ms")
    print(f"Branches: {params.branches}, radius: {params.radius}, spin: {params.spin}, "
          f"randomness power: {params.randomness_power}")
    print(f"{'Axis':<6} {'Min':<10} {'Max':<10}")
    print("-" * 26)
    for axis, lo, hi in zip("xyz", low, high):
        print(f"{axis:<6} {lo:<10.3f} {hi:<10.3f}")


def run(args):
    """Generate a galaxy and show, export or summarise it."""
    config = build_config(args)
    params = config.parameters()
    rng = make_rng(config.seed)

    if not (args.render or args.export_gif or args.export_video):
        start = time.perf_counter()
        buffer = generate(params, rng=rng)
        print_summary(params, buffer, (time.perf_counter() - start) * 1000.0)
        return

    exporting = args.export_gif or args.export_video
    if exporting and not args.render:
        # No window needed for export
        plt.switch_backend("Agg")

    host = Renderer3D(
        elevation=config.elevation,
        azimuth=config.azimuth,
        rotation_speed=config.rotation_speed,
        interactive=args.render and not exporting,
        fps_overlay=args.render and not exporting
    )
    manager = RenderManager(host, rng=rng)
    try:
        manager.regenerate(params)

        if exporting:
            print(f"Rendering {config.frames} frames...")
            frames = manager.record(config.frames, fps=config.fps)
            exporters = []
            if args.export_gif:
                exporters.append(GIFExporter(args.output, fps=config.fps))
            if args.export_video:
                exporters.append(VideoExporter(args.output, fps=config.fps))
            for exporter in exporters:
                exporter.add_frames(frames)
                print(f"Exporting to {exporter.output_path}...")
                exporter.export()
        else:
            print("Close the window to stop.")
            manager.run(fps=config.fps)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        manager.close()


def list_params():
    """Print every parameter with its default and bounds."""
    defaults = GalaxyParameters()
    print(f"{'Parameter':<18} {'Default':<10} {'Min':<10} {'Max':<10}")
    print("-" * 50)
    for name, value in defaults.to_dict().items():
        low, high, _step = PARAMETER_BOUNDS.get(name, ("-", "-", None))
        print(f"{name:<18} {str(value):<10} {str(low):<10} {str(high):<10}")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Galaxy Generator - procedural spiral galaxy point clouds")

    # Galaxy parameters
    parser.add_argument('--count', type=int, default=None,
                       help='Number of particles (100 - 1000000, default: 100000)')
    parser.add_argument('--size', type=float, default=None,
                       help='Point size (0 - 2, default: 0.01)')
    parser.add_argument('--radius', type=float, default=None,
                       help='Galaxy radius (0.01 - 20, default: 5)')
    parser.add_argument('--branches', type=int, default=None,
                       help='Number of spiral arms (2 - 20, default: 6)')
    parser.add_argument('--spin', type=float, default=None,
                       help='Spiral twist per unit radius (-5 - 5, default: 0.909)')
    parser.add_argument('--randomness', type=float, default=None,
                       help='Randomness (0 - 2, default: 0.2; does not affect positions)')
    parser.add_argument('--randomness-power', type=float, default=None,
                       help='Exponent concentrating offsets near the arms (1 - 10, default: 3)')
    parser.add_argument('--inside-color', type=str, default=None,
                       help='Color at the center (default: #ff6030)')
    parser.add_argument('--outside-color', type=str, default=None,
                       help='Color at the rim (default: #1b3984)')
    parser.add_argument('--config', type=str, default=None,
                       help='JSON or YAML file with initial parameters and view settings')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Open an animated 3D view')
    parser.add_argument('--elevation', type=float, default=None,
                       help='Camera elevation in degrees (default: 38)')
    parser.add_argument('--azimuth', type=float, default=None,
                       help='Camera azimuth in degrees (default: -101)')
    parser.add_argument('--rotation-speed', type=float, default=None,
                       help='Galaxy yaw speed in radians per second (default: 0.3)')

    # Export
    parser.add_argument('--export-gif', action='store_true',
                       help='Export a rotating galaxy to animated GIF')
    parser.add_argument('--export-video', action='store_true',
                       help='Export a rotating galaxy to MP4 video')
    parser.add_argument('--output', type=str, default='galaxy',
                       help='Output file base name')
    parser.add_argument('--frames', type=int, default=None,
                       help='Number of frames to export (default: 120)')
    parser.add_argument('--fps', type=int, default=None,
                       help='Frames per second (default: 30)')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')

    # Info
    parser.add_argument('--list-params', action='store_true',
                       help='List parameters with defaults and bounds and exit')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Enable debug logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.list_params:
        list_params()
        return

    try:
        run(args)
    except InvalidParameter as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == '__main__':
    main()
