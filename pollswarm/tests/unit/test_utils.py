"""
Unit tests for scale and extent helpers
"""
import numpy as np
import pytest

from pollswarm.utils import defined_mask, extent, linear_scale, tick_values


@pytest.mark.unit
class TestLinearScale:
    """Tests for linear_scale"""

    def test_maps_domain_onto_range(self):
        result = linear_scale([0, 5, 10], (0, 10), (20, 620))
        np.testing.assert_allclose(result, [20, 320, 620])

    def test_negative_domain(self):
        result = linear_scale([-2, 0, 2], (-2, 2), (20, 620))
        np.testing.assert_allclose(result, [20, 320, 620])

    def test_extrapolates_outside_domain(self):
        result = linear_scale([20], (0, 10), (0, 100))
        np.testing.assert_allclose(result, [200])

    def test_degenerate_domain_maps_to_midpoint(self):
        result = linear_scale([3, 3], (3, 3), (20, 620))
        np.testing.assert_allclose(result, [320, 320])


@pytest.mark.unit
class TestExtent:
    """Tests for extent"""

    def test_min_max(self):
        assert extent([3, -1, 2]) == (-1.0, 3.0)

    def test_ignores_non_finite(self):
        assert extent([1, float('nan'), 4]) == (1.0, 4.0)

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            extent([])


@pytest.mark.unit
class TestTickValues:
    """Tests for tick_values"""

    def test_integer_domain_inclusive(self):
        assert tick_values((-2, 2)) == [-2.0, -1.0, 0.0, 1.0, 2.0]

    def test_fractional_end_excluded(self):
        assert tick_values((0, 2.5)) == [0.0, 1.0, 2.0]

    def test_reversed_domain_has_no_ticks(self):
        assert tick_values((2, -2)) == []

    def test_invalid_step(self):
        with pytest.raises(ValueError):
            tick_values((0, 1), step=0)


@pytest.mark.unit
class TestDefinedMask:
    """Tests for defined_mask"""

    def test_mixed_values(self):
        mask = defined_mask(['1', 'abc', None, 2.5, float('inf'), 0])
        assert mask.tolist() == [True, False, False, True, False, True]

    def test_all_numeric(self):
        assert defined_mask([1, 2, 3]).all()
