import logging
from enum import IntEnum
from numbers import Integral
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from qfft_tiny.transform.nb_bitrev import ilog2
from qfft_tiny.transform.nb_qformat import Q_MIN, Q_MAX
from qfft_tiny.transform.nb_fft import (
    fft2r_q12_ansi, FT_DIRECT, FT_INVERSE, MIN_FFT_LEN, MAX_FFT_LEN, MIN_LOG_N, MAX_LOG_N
)

logger = logging.getLogger("qfft_tiny")


class Direction(IntEnum):
    FORWARD = FT_DIRECT
    INVERSE = FT_INVERSE


def _check_buffer(name, buf, n) -> Optional[str]:
    if buf is None:
        return f"{name} buffer is missing"
    if not isinstance(buf, np.ndarray):
        return f"{name} buffer must be a numpy array, got {type(buf).__name__}"
    if buf.dtype != np.int32:
        return f"{name} buffer must be int32, got {buf.dtype}"
    if buf.ndim != 1:
        return f"{name} buffer must be one-dimensional, got {buf.ndim} dimensions"
    if not buf.flags.writeable:
        return f"{name} buffer is read-only"
    if len(buf) != n:
        return f"{name} buffer has length {len(buf)}, expected {n}"
    return None


def check_fft_params(real, imag, n, log_n, direction) -> Optional[str]:
    """Return why a transform call would be rejected, or None if it is valid."""
    for name, value in (("n", n), ("log_n", log_n)):
        if isinstance(value, bool) or not isinstance(value, Integral):
            return f"{name} must be an integer, got {value!r}"
    if n < MIN_FFT_LEN or n > MAX_FFT_LEN:
        return f"n={n} is outside [{MIN_FFT_LEN}, {MAX_FFT_LEN}]"
    if n & (n - 1):
        return f"n={n} is not a power of 2"
    if log_n < MIN_LOG_N or log_n > MAX_LOG_N:
        return f"log_n={log_n} is outside [{MIN_LOG_N}, {MAX_LOG_N}]"
    if (1 << log_n) != n:
        return f"log_n={log_n} does not match n={n}"
    if isinstance(direction, bool) or not isinstance(direction, Integral) \
            or direction not in (FT_DIRECT, FT_INVERSE):
        return f"direction must be {FT_DIRECT} (forward) or {FT_INVERSE} (inverse), got {direction!r}"

    reason = _check_buffer("real", real, n) or _check_buffer("imag", imag, n)
    if reason is not None:
        return reason
    if np.shares_memory(real, imag):
        return "real and imag buffers overlap"
    return None


def fft_q12(real: NDArray[np.int32], imag: NDArray[np.int32], n, log_n, direction) -> bool:
    """
    Fixed-point (Q12) FFT of n complex points, computed in place

    Parameters:
    -----------
    real :
        Real parts, overwritten with the result
    imag :
        Imaginary parts, overwritten with the result
    n :
        Number of complex points, a power of 2 in [4, 16384]
    log_n :
        Base-2 logarithm of n
    direction :
        Direction.FORWARD divides the spectrum by n,
        Direction.INVERSE leaves the signal unscaled

    Returns:
    --------
    success : bool
        False on invalid parameters; the buffers are then left untouched
    """
    reason = check_fft_params(real, imag, n, log_n, direction)
    if reason is not None:
        logger.debug("Rejected FFT call: %s", reason)
        return False
    return fft2r_q12_ansi(real, imag, n, log_n, int(direction))


def _to_samples(name, values):
    """Copy integer samples into a new int32 array, refusing values it cannot hold."""
    arr = np.asarray(values)
    if arr.dtype.kind not in "iu":
        raise ValueError(f"{name} samples must be integers, got {arr.dtype}")
    if arr.size and (arr.min() < Q_MIN or arr.max() > Q_MAX):
        raise ValueError(f"{name} samples must lie in [{Q_MIN}, {Q_MAX}]")
    return arr.astype(np.int32)


def do_fft(real, imag=None, direction=Direction.FORWARD):
    """Transform copies of the input and return (real, imag) as new int32 arrays.
    A missing imag is taken as all zeros, i.e. a real-valued signal.
    Non-integer samples or samples outside the int32 range raise ValueError."""
    re = _to_samples("real", real)
    im = np.zeros_like(re) if imag is None else _to_samples("imag", imag)
    n = len(re)
    log_n = int(ilog2(n)) if MIN_FFT_LEN <= n <= MAX_FFT_LEN else 0
    if not fft_q12(re, im, n, log_n, direction):
        raise ValueError(check_fft_params(re, im, n, log_n, direction))
    return re, im
