"""Tests for the pairwise gravity force phase."""

import math

import pytest

from tribody.data_models import Body
from tribody.physics import PairwiseGravity
from tribody.vector_utils import vec_len


@pytest.fixture
def gravity():
    return PairwiseGravity()


def test_distance_floor_applies_below_ten(gravity):
    # 1 unit apart is treated as 10: min(0.4 * 1600 / 100, 10000) * 0.25 == 1.6
    assert gravity.force_magnitude(40.0, 40.0, 1.0) == pytest.approx(1.6)
    assert gravity.force_magnitude(40.0, 40.0, 0.0) == pytest.approx(1.6)


def test_force_vector_uses_floored_distance(gravity):
    f = gravity.pairwise_force((0.0, 0.0), 40.0, (1.0, 0.0), 40.0)
    # direction = diff / 10, so b (at x=1) is pulled towards a with magnitude 1.6 * 0.1
    assert f == pytest.approx((-0.16, 0.0))


def test_force_beyond_floor(gravity):
    f = gravity.pairwise_force((0.0, 0.0), 20.0, (0.0, 20.0), 50.0)
    expected = 0.4 * 20.0 * 50.0 / 400.0 * 0.25
    assert f == pytest.approx((0.0, -expected))


def test_force_is_capped(gravity):
    assert gravity.force_magnitude(1e6, 1e6, 10.0) == pytest.approx(2500.0)
    tiny = PairwiseGravity(min_distance=1e-3)
    f = tiny.pairwise_force((0.0, 0.0), 60.0, (1e-3, 0.0), 60.0)
    assert vec_len(f) <= 2500.0 + 1e-9


def test_coincident_bodies_produce_no_nan(gravity):
    f = gravity.pairwise_force((5.0, 5.0), 30.0, (5.0, 5.0), 30.0)
    assert f == (0.0, 0.0)
    assert not any(math.isnan(c) for c in f)


def test_pair_forces_are_antisymmetric(gravity):
    bodies = [
        Body(mass=25.0, position=(-40.0, 10.0), velocity=(0.0, 0.0)),
        Body(mass=55.0, position=(30.0, -20.0), velocity=(0.0, 0.0)),
    ]
    fa, fb = gravity.compute_forces(bodies)
    assert fa == (-fb[0], -fb[1])


def test_three_body_forces_sum_to_zero(gravity):
    bodies = [
        Body(mass=25.0, position=(-40.0, 10.0), velocity=(0.0, 0.0)),
        Body(mass=55.0, position=(30.0, -20.0), velocity=(0.0, 0.0)),
        Body(mass=33.0, position=(5.0, 60.0), velocity=(0.0, 0.0)),
    ]
    forces = gravity.compute_forces(bodies)
    assert sum(f[0] for f in forces) == pytest.approx(0.0, abs=1e-12)
    assert sum(f[1] for f in forces) == pytest.approx(0.0, abs=1e-12)


def test_apply_forces_uses_start_of_step_positions(gravity):
    bodies = [
        Body(mass=40.0, position=(0.0, 0.0), velocity=(0.0, 0.0)),
        Body(mass=40.0, position=(20.0, 0.0), velocity=(0.0, 0.0)),
        Body(mass=40.0, position=(0.0, 20.0), velocity=(0.0, 0.0)),
    ]
    expected = gravity.compute_forces(bodies)
    gravity.apply_forces(bodies)
    for body, f in zip(bodies, expected):
        assert body.velocity == f
        # positions are untouched by the force phase
    assert [b.position for b in bodies] == [(0.0, 0.0), (20.0, 0.0), (0.0, 20.0)]


def test_dead_bodies_neither_pull_nor_get_pulled(gravity):
    bodies = [
        Body(mass=40.0, position=(0.0, 0.0), velocity=(0.0, 0.0)),
        Body(mass=40.0, position=(20.0, 0.0), velocity=(0.0, 0.0), dead=True),
    ]
    gravity.apply_forces(bodies)
    assert bodies[0].velocity == (0.0, 0.0)
    assert bodies[1].velocity == (0.0, 0.0)
