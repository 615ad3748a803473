"""Basic example of generating a galaxy."""

import numpy as np
from galaxy_gen import GalaxyParameters, generate, make_rng


def main():
    """Generate a spiral galaxy and describe it."""
    params = GalaxyParameters(
        count=50000,
        radius=5.0,
        branches=3,
        spin=1.0,
        randomness_power=3.0,
        inside_color="#ff6030",
        outside_color="#1b3984"
    )

    buffer = generate(params, rng=make_rng(42))

    radii = np.linalg.norm(buffer.positions[:, [0, 2]], axis=1)
    print(f"Particles: {buffer.count}")
    print(f"Median distance from center: {np.median(radii):.3f}")
    print(f"Disk thickness (std of y): {buffer.positions[:, 1].std():.3f}")
    print(f"Mean color: {buffer.colors.mean(axis=0)}")


if __name__ == "__main__":
    main()
