import numpy as np
import numba as nb
from numba import int32, int64

# Q12: int32 storage, 12 fractional bits
Q_FRAC_BITS = 12
Q_ONE = 1 << Q_FRAC_BITS
Q_ROUND = 1 << (Q_FRAC_BITS - 1)
Q_MIN = np.iinfo(np.int32).min
Q_MAX = np.iinfo(np.int32).max


@nb.njit(int32(int64))
def q_sat(x):
    """Clamp a wide intermediate to the int32 range."""
    if x > Q_MAX:
        return int32(Q_MAX)
    if x < Q_MIN:
        return int32(Q_MIN)
    return int32(x)


@nb.njit(int32(int32, int32))
def q_mul(a, b):
    """Q12 product, rounded to nearest (ties toward +inf) and saturated."""
    result = int64(a) * int64(b)
    result += Q_ROUND
    result = result >> Q_FRAC_BITS
    return q_sat(result)


@nb.njit(int32(int32, int32))
def q_add(a, b):
    return q_sat(int64(a) + int64(b))


@nb.njit(int32(int32, int32))
def q_sub(a, b):
    return q_sat(int64(a) - int64(b))


@nb.njit(int32(int32, int32))
def q_div(a, d):
    """Divide by a positive integer, truncating toward zero like C does."""
    result = abs(int64(a)) // d
    if a < 0:
        result = -result
    return q_sat(result)


def to_q12(x):
    """Quantize float values to Q12 using round-to-nearest and saturation."""
    x = np.asarray(x, dtype=np.float64)
    val = np.round(x * Q_ONE)
    val = np.clip(val, Q_MIN, Q_MAX)
    return val.astype(np.int32)


def from_q12(q):
    q = np.asarray(q, dtype=np.int64)
    return q.astype(np.float64) / Q_ONE
