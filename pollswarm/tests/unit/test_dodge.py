"""
Unit tests for the dodge layout

Tests offset computation: no overlaps, zero displacement when the
centerline is free, greedy tie-breaking and precondition checks.
"""
import math

import numpy as np
import pandas as pd
import pytest

from pollswarm.layout import dodge, DEFAULT_EPSILON


def assert_no_overlap(x, y, separation, epsilon=DEFAULT_EPSILON):
    """Every pair of circles must be at least separation apart (within epsilon)"""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    for i in range(len(x)):
        for j in range(i + 1, len(x)):
            d2 = (x[i] - x[j]) ** 2 + (y[i] - y[j]) ** 2
            assert d2 >= separation ** 2 - epsilon, \
                f"circles {i} and {j} overlap: distance {math.sqrt(d2):.4f} < {separation}"


# ============================================================================
# CONCRETE SCENARIOS
# ============================================================================

@pytest.mark.unit
@pytest.mark.layout
class TestScenarios:
    """Small inputs with known layouts"""

    def test_single_point_stays_on_centerline(self):
        np.testing.assert_array_equal(dodge([0], 8), [0.0])

    def test_coincident_pair_stacks_vertically(self):
        """Second circle takes the upper tangent first"""
        y = dodge([0, 0], 8)
        assert abs(y[0] - y[1]) >= 8 - DEFAULT_EPSILON
        np.testing.assert_allclose(y, [0.0, 8.0])

    def test_distant_points_do_not_interact(self):
        np.testing.assert_array_equal(dodge([0, 100], 8), [0.0, 0.0])

    def test_empty_input(self):
        y = dodge([], 8)
        assert isinstance(y, np.ndarray)
        assert y.shape == (0,)

    def test_nearly_coincident_points(self):
        x = [0, 1, 2, 3, 4]
        y = dodge(x, 8)
        assert_no_overlap(x, y, 8)
        assert np.max(np.abs(y)) <= len(x) * 8

    def test_identical_points_alternate_around_centerline(self):
        np.testing.assert_allclose(dodge([5, 5, 5, 5], 2), [0.0, 2.0, -2.0, 4.0])

    def test_tangent_circles_are_accepted(self):
        """Circles exactly one separation apart do not intersect"""
        np.testing.assert_array_equal(dodge([0, 8], 8), [0.0, 0.0])

    def test_third_point_takes_lower_tangent(self):
        y = dodge([100, 100, 102, 300], 7.5)
        np.testing.assert_allclose(y, [0.0, 7.5, -math.sqrt(7.5 ** 2 - 4), 0.0])


# ============================================================================
# PROPERTIES
# ============================================================================

@pytest.mark.unit
@pytest.mark.layout
class TestProperties:
    """Invariants that hold for arbitrary inputs"""

    @pytest.mark.parametrize("x", [
        np.random.default_rng(0).uniform(0, 100, size=80),
        np.random.default_rng(1).normal(300, 5, size=60),
        np.repeat([20.0, 320.0, 620.0], 15),
        np.linspace(20, 620, 5).repeat(8),
        np.full(30, 42.0),
    ], ids=["uniform", "clustered", "three-stacks", "ticks", "identical"])
    def test_no_overlap(self, x):
        y = dodge(x, 7.5)
        assert_no_overlap(x, y, 7.5)

    def test_zero_displacement_when_free(self):
        np.testing.assert_array_equal(dodge([0, 10, 20, 30], 8), np.zeros(4))

    def test_deterministic(self):
        x = np.random.default_rng(2).uniform(0, 50, size=40)
        np.testing.assert_array_equal(dodge(x, 7.5), dodge(x, 7.5))

    def test_permutation_invariant(self):
        """Processing order comes from sorted x, not input order"""
        x = np.random.default_rng(3).uniform(0, 60, size=40)
        perm = np.random.default_rng(4).permutation(len(x))
        np.testing.assert_array_equal(dodge(x[perm], 7.5), dodge(x, 7.5)[perm])

    def test_ties_follow_input_order(self):
        """Among equal positions the earlier input is placed first"""
        y = dodge([10, 0, 10], 2)
        np.testing.assert_array_equal(y, [0.0, 0.0, 2.0])

    def test_offsets_bounded_by_cluster_size(self):
        x = np.full(12, 7.0)
        y = dodge(x, 3)
        assert np.max(np.abs(y)) <= len(x) * 3

    def test_output_aligned_with_input(self):
        x = [300, 100, 100]
        y = dodge(x, 7.5)
        assert y[0] == 0.0
        assert y[1] == 0.0
        assert y[2] == pytest.approx(7.5)

    def test_input_not_mutated(self):
        x = np.array([3.0, 1.0, 2.0, 1.0])
        original = x.copy()
        dodge(x, 4)
        np.testing.assert_array_equal(x, original)

    @pytest.mark.parametrize("container", [list, tuple, np.array, pd.Series])
    def test_accepts_sequences(self, container):
        y = dodge(container([0.0, 0.0, 50.0]), 8)
        np.testing.assert_allclose(y, [0.0, 8.0, 0.0])


# ============================================================================
# EVICTION WINDOW
# ============================================================================

@pytest.mark.unit
@pytest.mark.layout
class TestEviction:
    """Squared (historical) versus linear eviction window"""

    def test_squared_window_can_overlap_below_unit_separation(self):
        """separation**2 < separation, so a colliding circle is evicted too early"""
        y = dodge([0, 0.4], 0.5, eviction='squared')
        np.testing.assert_array_equal(y, [0.0, 0.0])

    def test_linear_window_keeps_colliding_circle(self):
        y = dodge([0, 0.4], 0.5, eviction='linear')
        assert y[0] == 0.0
        assert y[1] == pytest.approx(0.3)
        assert_no_overlap([0, 0.4], y, 0.5)

    def test_modes_agree_from_unit_separation(self):
        x = np.random.default_rng(5).uniform(0, 80, size=60)
        np.testing.assert_array_equal(
            dodge(x, 7.5, eviction='squared'),
            dodge(x, 7.5, eviction='linear'),
        )

    def test_linear_window_never_overlaps(self):
        x = np.random.default_rng(6).uniform(0, 5, size=50)
        y = dodge(x, 0.4, eviction='linear')
        assert_no_overlap(x, y, 0.4)


# ============================================================================
# PRECONDITIONS
# ============================================================================

@pytest.mark.unit
class TestPreconditions:
    """Invalid inputs fail fast"""

    @pytest.mark.parametrize("bad", [float('nan'), float('inf'), -float('inf')])
    def test_non_finite_position(self, bad):
        with pytest.raises(ValueError, match="non-finite"):
            dodge([0.0, bad, 1.0], 8)

    @pytest.mark.parametrize("separation", [0, -1, float('nan'), float('inf')])
    def test_invalid_separation(self, separation):
        with pytest.raises(ValueError, match="Separation"):
            dodge([0.0, 1.0], separation)

    def test_negative_epsilon(self):
        with pytest.raises(ValueError, match="Epsilon"):
            dodge([0.0], 8, epsilon=-1)

    def test_unknown_eviction_mode(self):
        with pytest.raises(ValueError, match="eviction"):
            dodge([0.0], 8, eviction='cubic')

    def test_two_dimensional_input(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            dodge([[0.0, 1.0], [2.0, 3.0]], 8)
