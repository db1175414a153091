import numpy as np
import numba as nb
from numba import int32, boolean


@nb.njit(boolean(int32))
def is_power_of_two(x):
    return (x > 1) and ((x & (x - 1)) == 0)


@nb.njit(int32(int32))
def ilog2(x):
    """Base-2 logarithm of a power of two."""
    order = 0
    while x > 1:
        x >>= 1
        order += 1
    return order


@nb.njit(boolean(int32[:], int32[:], int32))
def bit_rev_ansi(re, im, n):
    """Reorder two parallel arrays into bit-reversed index order, in place"""
    if not is_power_of_two(n):
        return False

    j = 0
    for i in range(1, n - 1):
        k = n >> 1
        while k <= j:
            j -= k
            k >>= 1
        j += k
        if i < j:
            tmp = re[j]
            re[j] = re[i]
            re[i] = tmp
            tmp = im[j]
            im[j] = im[i]
            im[i] = tmp

    return True


def bit_reverse_order(n):
    """Trace the permutation bit_rev_ansi applies to indices 0..n-1."""
    order = np.arange(n, dtype=np.int32)
    shadow = np.zeros(n, dtype=np.int32)
    if not bit_rev_ansi(order, shadow, n):
        raise ValueError(f"Length {n} is not a power of 2")
    return order
