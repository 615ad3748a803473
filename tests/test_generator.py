"""Tests for the galaxy generator."""

import numpy as np
import pytest
from conftest import FixedRandom
from galaxy_gen.errors import InvalidParameter
from galaxy_gen.generator import (
    generate, make_rng, branch_angles, spin_angles, scatter_offsets, blend_colors
)
from galaxy_gen.params import GalaxyParameters


def test_particle_count():
    """Buffers hold exactly count particles per attribute."""
    params = GalaxyParameters(count=1234)
    buffer = generate(params, rng=make_rng(1))

    assert buffer.count == 1234
    assert buffer.positions.shape == (1234, 3)
    assert buffer.colors.shape == (1234, 3)
    assert buffer.flat_positions().shape == (3 * 1234,)
    assert buffer.flat_colors().shape == (3 * 1234,)
    assert buffer.positions.dtype == np.float32


def test_minimum_count():
    """The smallest panel count produces a valid buffer."""
    buffer = generate(GalaxyParameters(count=100), rng=make_rng(2))
    assert len(buffer) == 100
    assert np.all(np.isfinite(buffer.positions))


def test_zero_draws_collapse_to_center():
    """With every draw at zero all particles sit at the center in the inside color."""
    params = GalaxyParameters(count=4, branches=4, radius=1.0, spin=0.0,
                              randomness_power=1.0,
                              inside_color="#ffffff", outside_color="#000000")
    buffer = generate(params, rng=FixedRandom(0.0))

    assert np.array_equal(buffer.positions, np.zeros((4, 3), dtype=np.float32))
    assert np.array_equal(buffer.colors, np.ones((4, 3), dtype=np.float32))


def test_four_arms_quarter_turns():
    """Four branches place particles at 0, π/2, π and 3π/2."""
    params = GalaxyParameters(count=4, branches=4, radius=1.0, spin=0.0,
                              randomness_power=1.0,
                              inside_color="#ffffff", outside_color="#000000")
    # radii draw 0.5, offset magnitudes 0, signs positive
    buffer = generate(params, rng=FixedRandom(0.5, 0.0, 0.0))

    expected = np.array([
        [0.5, 0.0, 0.0],
        [0.0, 0.0, 0.5],
        [-0.5, 0.0, 0.0],
        [0.0, 0.0, -0.5],
    ])
    assert np.allclose(buffer.positions, expected, atol=1e-6)
    assert np.allclose(buffer.colors, 0.5)


def test_color_endpoints_exact():
    """r=0 gives exactly the inside color and r=radius exactly the outside color."""
    params = GalaxyParameters(count=10, radius=3.0,
                              inside_color="#ffffff", outside_color="#000000")

    inner = generate(params, rng=FixedRandom(0.0))
    assert np.all(inner.colors == 1.0)

    outer = generate(params, rng=FixedRandom(1.0, 0.0))
    assert np.all(outer.colors == 0.0)


def test_color_gradient_monotonic():
    """Colors move from inside to outside as radius grows."""
    params = GalaxyParameters(count=2000, radius=5.0,
                              inside_color="#ff6030", outside_color="#1b3984")
    rng = make_rng(3)
    buffer = generate(params, rng=rng)

    assert buffer.colors.min() >= 0.0
    assert buffer.colors.max() <= 1.0

    # Recover the radius draw from an identically seeded generator
    radii = make_rng(3).random(params.count) * params.radius
    order = np.argsort(radii)
    red = buffer.colors[order, 0]
    blue = buffer.colors[order, 2]
    assert np.all(np.diff(red) <= 1e-6)
    assert np.all(np.diff(blue) >= -1e-6)


def test_noiseless_radius_bounded():
    """The arm component r*cos, r*sin never exceeds the radius."""
    params = GalaxyParameters(count=5000, radius=4.0, spin=2.0, branches=5)
    buffer = generate(params, rng=make_rng(4))

    radii = make_rng(4).random(params.count) * params.radius
    angles = branch_angles(params.count, params.branches) + spin_angles(radii, params.spin)
    assert np.all(np.abs(np.cos(angles) * radii) <= params.radius)
    assert np.all(np.abs(np.sin(angles) * radii) <= params.radius)

    # Offsets are at most 1 in magnitude on each axis
    assert np.all(np.abs(buffer.positions[:, [0, 2]]) <= params.radius + 1.0 + 1e-5)
    assert np.all(np.abs(buffer.positions[:, 1]) <= 1.0)


def test_branch_angles_periodic():
    """Particles i and i+branches share a branch angle."""
    angles = branch_angles(60, 6)
    assert np.allclose(angles[:-6], angles[6:])
    assert angles[0] == 0.0
    assert np.isclose(angles[1], 2 * np.pi / 6)


@pytest.mark.parametrize("branches", [2, 20])
def test_branch_angles_span(branches):
    """Arms are evenly spaced over [0, 2π)."""
    unique = np.unique(branch_angles(branches * 3, branches))
    assert len(unique) == branches
    assert unique[0] == 0.0
    assert unique[-1] < 2 * np.pi
    assert np.allclose(np.diff(unique), 2 * np.pi / branches)


def test_scatter_offsets_signs_and_power():
    """Offsets take both signs and tighten with higher power."""
    loose = scatter_offsets(make_rng(5), 20000, 1.0)
    tight = scatter_offsets(make_rng(5), 20000, 6.0)

    assert loose.shape == (20000, 3)
    assert np.all(np.abs(loose) <= 1.0)
    assert (loose > 0).any() and (loose < 0).any()
    assert abs(loose.mean()) < 0.05
    assert np.abs(tight).mean() < np.abs(loose).mean()


def test_blend_colors():
    """Per-channel linear blend."""
    t = np.array([0.0, 0.25, 1.0])
    colors = blend_colors((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), t)
    assert np.allclose(colors, [[1.0, 0.0, 0.0], [0.75, 0.0, 0.25], [0.0, 0.0, 1.0]])


def test_randomness_does_not_move_particles():
    """The randomness parameter leaves positions unchanged."""
    a = generate(GalaxyParameters(count=500, randomness=0.0), rng=make_rng(6))
    b = generate(GalaxyParameters(count=500, randomness=2.0), rng=make_rng(6))
    assert np.array_equal(a.positions, b.positions)


def test_seed_reproducibility():
    """Same seed, same galaxy; fresh draws otherwise."""
    params = GalaxyParameters(count=300)
    a = generate(params, rng=make_rng(42))
    b = generate(params, rng=make_rng(42))
    c = generate(params)

    assert np.array_equal(a.positions, b.positions)
    assert np.array_equal(a.colors, b.colors)
    assert not np.array_equal(a.positions, c.positions)


@pytest.mark.parametrize("changes", [
    {"count": 0},
    {"branches": 0},
    {"radius": 0.0},
])
def test_invalid_parameters(changes):
    """Degenerate parameters are rejected before generation."""
    rng = FixedRandom(0.5)
    with pytest.raises(InvalidParameter):
        generate(GalaxyParameters(count=10).replace(**changes), rng=rng)
    assert rng.calls == 0
