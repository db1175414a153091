import numpy as np
import pytest
from numpy.testing import assert_array_equal

from qfft_tiny.transform.nb_qformat import (
    Q_ONE, Q_MIN, Q_MAX, q_sat, q_mul, q_add, q_sub, q_div, to_q12, from_q12
)


class TestQFormat:

    @pytest.mark.parametrize("x", [0, 1, -1, 2047, -2048, 123456, -987654, Q_MAX, Q_MIN])
    def test_mul_by_one(self, x):
        assert q_mul(x, Q_ONE) == x
        assert q_mul(Q_ONE, x) == x

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (1, 2048, 1),       # 0.5 rounds up
            (-1, 2048, 0),      # -0.5 rounds up too
            (3, 2048, 2),       # 1.5
            (-3, 2048, -1),     # -1.5
            (2896, 2896, 2048), # cos(pi/4)^2 ~ 0.5
            (4096, -4096, -4096),
            (10000, 0, 0),
        ]
    )
    def test_mul_rounding(self, a, b, expected):
        assert q_mul(a, b) == expected

    def test_mul_saturates(self):
        assert q_mul(Q_MAX, 2 * Q_ONE) == Q_MAX
        assert q_mul(Q_MIN, 2 * Q_ONE) == Q_MIN
        assert q_mul(Q_MIN, -Q_ONE) == Q_MAX

    def test_add_sub_saturate(self):
        assert q_add(5, -7) == -2
        assert q_sub(5, -7) == 12
        assert q_add(Q_MAX, 1) == Q_MAX
        assert q_add(Q_MIN, -1) == Q_MIN
        assert q_sub(Q_MIN, 1) == Q_MIN
        assert q_sub(Q_MAX, -1) == Q_MAX

    @pytest.mark.parametrize(
        "a, d, expected",
        [(7, 2, 3), (-7, 2, -3), (-8, 4, -2), (3, 4, 0), (-3, 4, 0), (Q_MIN, 1, Q_MIN), (Q_MAX, 16384, 131071)]
    )
    def test_div_truncates(self, a, d, expected):
        assert q_div(a, d) == expected

    def test_sat(self):
        assert q_sat(2 ** 40) == Q_MAX
        assert q_sat(-2 ** 40) == Q_MIN
        assert q_sat(-5) == -5

    def test_conversions(self):
        assert_array_equal(to_q12([0.5, -1.0, 1.0, 0.0]), np.array([2048, -4096, 4096, 0], dtype=np.int32))
        assert to_q12(1e9) == Q_MAX
        assert to_q12(-1e9) == Q_MIN
        assert to_q12([0.25]).dtype == np.int32
        assert from_q12(to_q12(0.25)) == 0.25
        assert from_q12(-6144) == -1.5

    def test_negate_saturates(self):
        # inverse transforms negate the table sine this way
        assert q_sub(0, -2896) == 2896
        assert q_sub(0, Q_MIN) == Q_MAX
