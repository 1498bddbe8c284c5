"""Tests for hopfviz.geometry.sampler and the shared Hopf parameters."""

import math

import numpy as np
import pytest

from hopfviz.core import constants
from hopfviz.core.errors import InvalidPointError
from hopfviz.geometry.hopf import as_unit_point, azimuth, hopf_params
from hopfviz.geometry.sampler import fiber_polyline, sample_fiber

R2 = 1.0 / math.sqrt(2.0)


def test_hopf_params_on_equator():
    alpha, beta, angle_sum = hopf_params((0.0, 0.0, 1.0))
    assert alpha == pytest.approx(R2)
    assert beta == pytest.approx(R2)
    assert angle_sum == pytest.approx(0.0)


def test_hopf_params_unit_identity(unit_points):
    for p in unit_points:
        alpha, beta, _ = hopf_params(p)
        assert alpha >= 0.0 and beta >= 0.0
        assert alpha ** 2 + beta ** 2 == pytest.approx(1.0)


def test_azimuth_is_zero_at_both_poles_regardless_of_signed_zeros():
    for x in (0.0, -0.0):
        for z in (0.0, -0.0):
            assert azimuth(x, z) == 0.0
    assert azimuth(1.0, 0.0) == pytest.approx(math.pi / 2)


def test_as_unit_point_renormalizes():
    np.testing.assert_allclose(as_unit_point([0.0, 3.0, 4.0]), [0.0, 0.6, 0.8])


@pytest.mark.parametrize("bad", [(0.0, 0.0, 0.0), (np.nan, 0.0, 1.0), (1.0, 0.0), (1.0, np.inf, 0.0)])
def test_as_unit_point_rejects_bad_input(bad):
    with pytest.raises(InvalidPointError):
        as_unit_point(bad)


def test_invalid_point_error_is_a_value_error():
    with pytest.raises(ValueError):
        sample_fiber((0.0, 0.0, 0.0), 4)


def test_buffer_length_and_polyline_shape():
    flat = sample_fiber((0.0, 0.0, 1.0), 4)
    assert flat.shape == (15,)
    poly = fiber_polyline((0.0, 0.0, 1.0), 4)
    assert poly.shape == (5, 3)
    np.testing.assert_array_equal(flat, poly.reshape(-1))


def test_defaults_are_unit_x_and_256_divisions():
    flat = sample_fiber()
    assert flat.shape == (3 * 257,)
    np.testing.assert_array_equal(flat, sample_fiber((1.0, 0.0, 0.0), 256))


def test_first_vertex_for_base_point_on_z_axis():
    """p = (0, 0, 1): angle_sum = 0 and theta = 0 give proj = 0.5."""
    poly = fiber_polyline((0.0, 0.0, 1.0), 4)
    np.testing.assert_allclose(poly[0], [-0.5 * R2, 0.5 * R2, 0.0], atol=1e-9)


def test_first_vertex_for_base_point_on_x_axis():
    """p = (1, 0, 0): angle_sum = atan2(-1, 0) = -pi/2."""
    poly = fiber_polyline((1.0, 0.0, 0.0), 4)
    np.testing.assert_allclose(poly[0], [0.0, 0.5 * R2, 0.5 * R2], atol=1e-9)


def test_quarter_turn_hits_the_far_diameter_end():
    """theta = 90 deg lands on (0, 0, 0.5 beta / (1 - alpha)) for p = (0, 0, 1)."""
    poly = fiber_polyline((0.0, 0.0, 1.0), 4)
    expected_z = 0.5 * R2 / (1.0 - R2)
    np.testing.assert_allclose(poly[1], [0.0, 0.0, expected_z], atol=1e-9)


@pytest.mark.parametrize("divisions", [1, 2, 3, 7, 64, 256])
def test_polyline_is_closed(unit_points, divisions):
    for p in unit_points[:40]:
        poly = fiber_polyline(p, divisions)
        assert np.max(np.abs(poly[0] - poly[-1])) < constants.CLOSURE_TOLERANCE


def test_non_unit_input_is_renormalized():
    np.testing.assert_allclose(sample_fiber((5.0, 0.0, 0.0), 16), sample_fiber((1.0, 0.0, 0.0), 16))


def test_south_pole_is_a_circle_of_radius_half_in_xz_plane():
    poly = fiber_polyline((0.0, -1.0, 0.0), 32)
    assert np.all(np.isfinite(poly))
    np.testing.assert_allclose(poly[:, 1], 0.0, atol=1e-12)
    np.testing.assert_allclose(np.linalg.norm(poly, axis=1), 0.5, atol=1e-12)


def test_north_pole_samples_without_error():
    """At the pole the fiber is the y-axis line; off the singular angle it is finite."""
    poly = fiber_polyline((0.0, 1.0, 0.0), 3)
    assert poly.shape == (4, 3)
    assert np.all(np.isfinite(poly))
    np.testing.assert_allclose(poly[:, [0, 2]], 0.0, atol=1e-12)


def test_near_pole_produces_large_but_finite_vertices():
    p = (0.0, 1.0 - 1e-10, np.sqrt(2e-10))
    poly = fiber_polyline(p, 256)
    assert np.all(np.isfinite(poly))
    assert np.max(np.linalg.norm(poly, axis=1)) > 1e3


@pytest.mark.parametrize("divisions", [0, -3, 2.5])
def test_rejects_bad_divisions(divisions):
    with pytest.raises(ValueError):
        sample_fiber((1.0, 0.0, 0.0), divisions)
