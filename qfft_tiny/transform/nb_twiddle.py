import numpy as np

from qfft_tiny.transform.nb_qformat import Q_FRAC_BITS

# Entry m holds cos(pi / 2^m) and -sin(pi / 2^m) in Q12, m = 0..13.
# The sine is stored negated so an entry is the forward rotation as-is.
TWIDDLE_TABLE_SIZE = 14

TWIDDLE_RE = np.array([
    -4096,     0,  2896,  3784,  4017,  4076,  4091,
     4095,  4096,  4096,  4096,  4096,  4096,  4096
], dtype=np.int32)

TWIDDLE_IM = np.array([
        0, -4096, -2896, -1567,  -799,  -401,  -201,
     -101,   -50,   -25,   -13,    -6,    -3,    -2
], dtype=np.int32)


def gen_twiddle_table(n_coefs=TWIDDLE_TABLE_SIZE, frac_bits=Q_FRAC_BITS):
    """Recompute the base angle table for a given fixed-point scale.

    Parameters:
    -----------
    n_coefs :
        Number of entries, entry m is the rotation by pi / 2^m
    frac_bits :
        Fractional bits of the fixed-point format

    Returns:
    --------
    (re, im) : tuple of int32 arrays
        Rounded cosine and negated sine of each base angle
    """
    scale = 1 << frac_bits
    angles = np.pi / np.power(2.0, np.arange(n_coefs))
    re = np.round(np.cos(angles) * scale).astype(np.int32)
    im = np.round(-np.sin(angles) * scale).astype(np.int32)
    return re, im
