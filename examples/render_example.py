"""Example with real-time rendering and a parameter change."""

from galaxy_gen import GalaxyParameters, make_rng
from galaxy_gen.render.manager import RenderManager
from galaxy_gen.render.renderer_3d import Renderer3D


def main():
    """Show a rotating galaxy, then regenerate it with more arms."""
    params = GalaxyParameters(count=20000, branches=3)
    manager = RenderManager(Renderer3D(fps_overlay=True), rng=make_rng(123))
    manager.regenerate(params)

    print("Close the matplotlib window to stop.")
    try:
        manager.run(frames=150)
        # Replaces the point cloud in place; the old one is disposed first
        manager.regenerate(params.replace(branches=8, spin=-1.5))
        manager.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        manager.close()


if __name__ == "__main__":
    main()
