import numba as nb
from numba import int32, boolean

from qfft_tiny.transform.nb_bitrev import is_power_of_two, bit_rev_ansi
from qfft_tiny.transform.nb_qformat import Q_ONE, q_mul, q_add, q_sub, q_div
from qfft_tiny.transform.nb_twiddle import TWIDDLE_RE, TWIDDLE_IM

# Direction flags
FT_DIRECT = -1
FT_INVERSE = 1

# Supported lengths: N = 4 .. 16384, LogN = 2 .. 14
MIN_FFT_LEN = 4
MAX_FFT_LEN = 16384
MIN_LOG_N = 2
MAX_LOG_N = 14


@nb.njit(boolean(int32, int32, int32))
def fft_params_valid(n, log_n, direction):
    if n < MIN_FFT_LEN or n > MAX_FFT_LEN:
        return False
    if not is_power_of_two(n):
        return False
    if log_n < MIN_LOG_N or log_n > MAX_LOG_N:
        return False
    if (1 << log_n) != n:
        return False
    if direction != FT_DIRECT and direction != FT_INVERSE:
        return False
    return True


@nb.njit(boolean(int32[:], int32[:], int32, int32, int32))
def fft2r_q12_ansi(re, im, n, log_n, direction):
    """
    Radix-2 decimation-in-frequency FFT on Q12 data, in place

    Parameters:
    -----------
    re :
        Real parts, int32, length n
    im :
        Imaginary parts, int32, length n
    n :
        Number of complex points
    log_n :
        Base-2 logarithm of n
    direction :
        FT_DIRECT (signal to spectrum, output scaled by 1/n)
        or FT_INVERSE (spectrum to signal, unscaled)

    Returns:
    --------
    success : bool
        False if a parameter is invalid, in which case nothing was written
    """
    if not fft_params_valid(n, log_n, direction):
        return False
    if len(re) != n or len(im) != n:
        return False

    ie = n
    for stage in range(1, log_n + 1):
        rw = TWIDDLE_RE[log_n - stage]
        iw = TWIDDLE_IM[log_n - stage]
        if direction == FT_INVERSE:
            iw = q_sub(0, iw)
        half = ie >> 1

        ru = int32(Q_ONE)
        iu = int32(0)
        for j in range(half):
            for i in range(j, n, ie):
                io = i + half
                rtp = q_add(re[i], re[io])
                itp = q_add(im[i], im[io])
                rtq = q_sub(re[i], re[io])
                itq = q_sub(im[i], im[io])
                # only the difference branch is rotated
                re[io] = q_sub(q_mul(rtq, ru), q_mul(itq, iu))
                im[io] = q_add(q_mul(itq, ru), q_mul(rtq, iu))
                re[i] = rtp
                im[i] = itp

            sr = ru
            ru = q_sub(q_mul(ru, rw), q_mul(iu, iw))
            iu = q_add(q_mul(iu, rw), q_mul(sr, iw))

        ie >>= 1

    bit_rev_ansi(re, im, n)

    if direction == FT_INVERSE:
        return True

    for i in range(n):
        re[i] = q_div(re[i], n)
        im[i] = q_div(im[i], n)

    return True
