# -*- coding: utf-8 -*-
"""
Tests for the sinc and Lanczos kernel functions.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Third-party
import numpy as np
import pytest

# lanczosnd internal
from lanczosnd import lanczos, sinc
from lanczosnd.kernels import LANCZOS4_COEFS, S45, lanczos4_opencv_raw


# ── sinc ────────────────────────────────────────────────────────────────


class TestSinc:
    """Test the normalized sinc."""

    def test_zero_is_exactly_one(self):
        assert sinc(0.0) == 1.0

    def test_integers_are_zero(self):
        vals = sinc(np.array([-3.0, -1.0, 1.0, 2.0]))
        np.testing.assert_allclose(vals, 0.0, atol=1e-15)

    def test_half(self):
        assert sinc(0.5) == pytest.approx(2.0 / np.pi)

    def test_matches_numpy_away_from_zero(self):
        x = np.linspace(-4.3, 4.7, 57)
        np.testing.assert_allclose(sinc(x), np.sinc(x), rtol=1e-12, atol=1e-15)

    def test_array_with_zero(self):
        x = np.array([-0.5, 0.0, 0.5])
        out = sinc(x)
        assert out[1] == 1.0
        assert out[0] == pytest.approx(out[2])

    def test_preserves_float32(self):
        out = sinc(np.array([0.0, 0.25], dtype=np.float32))
        assert out.dtype == np.float32

    def test_integer_input_promotes(self):
        assert sinc(np.array([0, 1])).dtype == np.float64


# ── Lanczos kernel ──────────────────────────────────────────────────────


class TestLanczosKernel:
    """Test the windowed-sinc kernel."""

    @pytest.mark.parametrize("a, n", [(1, 1), (2, 2), (3, 3), (4, 4), (4, 2), (2, 6)])
    def test_origin_is_one(self, a, n):
        assert lanczos(0.0, a, n) == 1.0

    @pytest.mark.parametrize("a, n", [(3, 3), (4, 2), (2, 5)])
    def test_zero_outside_support(self, a, n):
        x = np.array([-n - 0.5, -float(n), float(n), n + 0.1, n + 10.0])
        np.testing.assert_array_equal(lanczos(x, a, n), 0.0)

    def test_n_defaults_to_a(self):
        x = np.linspace(-3.5, 3.5, 29)
        np.testing.assert_array_equal(lanczos(x, 3), lanczos(x, 3, 3))

    def test_formula_inside_support(self):
        x = np.array([-2.7, -1.2, 0.4, 1.9, 2.99])
        a = 3
        expected = np.sinc(x) * np.sinc(x / a)
        np.testing.assert_allclose(lanczos(x, a), expected, rtol=1e-12)

    def test_symmetric(self):
        x = np.linspace(0.01, 3.9, 40)
        np.testing.assert_allclose(lanczos(x, 4), lanczos(-x, 4), rtol=1e-14)

    def test_truncation_independent_of_scale(self):
        """Cutoff follows n while a only changes the taper."""
        assert lanczos(3.5, 2, 4) != 0.0
        assert lanczos(2.5, 4, 2) == 0.0

    def test_scalar_returns_scalar(self):
        assert np.ndim(lanczos(0.3, 4)) == 0


# ── OpenCV closed form ──────────────────────────────────────────────────


class TestLanczos4Raw:
    """Test the raw closed-form degree-4 weights."""

    def test_coefficient_table(self):
        assert LANCZOS4_COEFS.shape == (8, 2)
        assert S45 == pytest.approx(np.sqrt(2.0) / 2.0, abs=1e-16)

    def test_shape(self):
        assert lanczos4_opencv_raw(0.3).shape == (8,)
        assert lanczos4_opencv_raw(np.full((2, 5), 0.3)).shape == (2, 5, 8)

    def test_proportional_to_generic_kernel(self):
        dx = 0.37
        raw = lanczos4_opencv_raw(dx)
        generic = lanczos(4 - np.arange(1, 9) + dx, 4, 4)
        ratio = raw / generic
        np.testing.assert_allclose(ratio, ratio[0], rtol=1e-9)
