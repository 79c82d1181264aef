import math

import numpy as np
import pytest

from nbodies import G
from nbodies.physics import Body


def test_distance_to():
    a = Body(1.0, [0.0, 0.0], [0.0, 0.0])
    b = Body(1.0, [3.0, 4.0], [0.0, 0.0])
    assert a.distance_to(b) == 5.0
    assert b.distance_to(a) == 5.0


def test_distance_to_coincident_is_zero():
    a = Body(1.0, [2.0, -1.0], [0.0, 0.0])
    b = Body(3.0, [2.0, -1.0], [0.0, 0.0])
    assert a.distance_to(b) == 0.0


def test_pairwise_force_symmetric():
    a = Body(3.0e10, [0.0, 1.0], [0.0, 0.0])
    b = Body(7.0e5, [-2.5, 4.0], [0.0, 0.0])
    assert a.pairwise_force(b) == b.pairwise_force(a)
    expected = G * 3.0e10 * 7.0e5 / (2.5 ** 2 + 3.0 ** 2)
    assert math.isclose(a.pairwise_force(b), expected, rel_tol=1e-12)


def test_pairwise_force_coincident_is_infinite():
    a = Body(1.0, [0.0, 0.0], [0.0, 0.0])
    b = Body(1.0, [0.0, 0.0], [0.0, 0.0])
    assert math.isinf(a.pairwise_force(b))


def test_net_force_directed_towards_other_body():
    a = Body(5.0, [-1.0, 0.0], [0.0, 0.0])
    b = Body(5.0, [1.0, 0.0], [0.0, 0.0])
    bodies = [a, b]
    fa = a.compute_net_force(bodies)
    fb = b.compute_net_force(bodies)
    assert math.isclose(fa[0], 4.17125e-10, rel_tol=1e-12)
    assert math.isclose(fb[0], -4.17125e-10, rel_tol=1e-12)
    assert fa[1] == 0.0 and fb[1] == 0.0


def test_acceleration_is_net_force_over_mass():
    bodies = [
        Body(2.0e6, [0.0, 0.0], [0.0, 0.0]),
        Body(5.0e3, [10.0, 3.0], [0.0, 0.0]),
        Body(9.0e8, [-4.0, 7.0], [0.0, 0.0]),
    ]
    for b in bodies:
        b.compute_net_force(bodies)
    for b in bodies:
        assert np.array_equal(b.acc, b.net_force / b.mass)


def test_single_body_has_no_self_force():
    b = Body(1.0e20, [1.0, 2.0], [3.0, 4.0])
    assert np.array_equal(b.compute_net_force([b]), [0.0, 0.0])
    assert np.array_equal(b.acc, [0.0, 0.0])


def test_coincident_bodies_remain_distinct():
    # Each body excludes only itself, so the twin contributes a degenerate term.
    a = Body(1.0, [0.0, 0.0], [0.0, 0.0])
    b = Body(1.0, [0.0, 0.0], [0.0, 0.0])
    force = a.compute_net_force([a, b])
    assert np.all(np.isnan(force))
    assert np.all(np.isnan(a.acc))


def test_zero_mass_gives_non_finite_acceleration():
    a = Body(0.0, [0.0, 0.0], [0.0, 0.0])
    b = Body(1.0, [1.0, 0.0], [0.0, 0.0])
    a.compute_net_force([a, b])
    assert not np.all(np.isfinite(a.acc))


def test_velocity_then_position_update():
    b = Body(2.0, [1.0, 1.0], [0.5, -0.5])
    b.apply_net_force([4.0, -2.0])
    assert np.array_equal(b.acc, [2.0, -1.0])
    b.update_velocity(2.0)
    assert np.array_equal(b.vel, [4.5, -2.5])
    b.update_position(2.0)
    # uses the velocity updated in the same step
    assert np.array_equal(b.pos, [10.0, -4.0])


def test_mass_label_and_acceleration_are_read_only():
    b = Body(1.0, [0.0, 0.0], [0.0, 0.0], label="earth.gif")
    with pytest.raises(AttributeError):
        b.mass = 2.0
    with pytest.raises(AttributeError):
        b.label = "sun.gif"
    with pytest.raises(AttributeError):
        b.acc = [1.0, 1.0]
    b.acc[0] = 99.0
    assert b.acc[0] == 0.0


def test_rejects_non_planar_vectors():
    with pytest.raises(ValueError):
        Body(1.0, [0.0, 0.0, 0.0], [0.0, 0.0])
