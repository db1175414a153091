import logging
import sys
import time
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from tqdm import tqdm

from config import load_config, Config
from qfft_tiny.transform.fft import fft_q12, Direction

logger = logging.getLogger("qfft_tiny")

PROBE_DIRECTIONS = {
    "forward": Direction.FORWARD,
    "inverse": Direction.INVERSE,
}


@dataclass
class ProbeResult:
    n_calls: int
    total_s: float
    per_call_us: float


def make_probe_buffers(fft_len, sample_max, seed) -> tuple[NDArray[np.int32], NDArray[np.int32]]:
    """Two buffers of random samples in [0, sample_max), reproducible from the seed."""
    rng = np.random.default_rng(seed)
    real = rng.integers(0, sample_max, size=fft_len, dtype=np.int32)
    imag = rng.integers(0, sample_max, size=fft_len, dtype=np.int32)
    return real, imag


def setup_logging(config: Config):
    """Apply the configured level to the root logger and to the package logger."""
    logging.basicConfig(level=config.logging.level)
    logger.setLevel(config.logging.level)


def run_probe(config: Config) -> ProbeResult:
    """Repeatedly transform the same pair of buffers in place and time it.
    Results are not checked, the buffers only keep the transform busy.
    """
    pc = config.probe
    direction = PROBE_DIRECTIONS[pc.direction]
    real, imag = make_probe_buffers(pc.fft_len, pc.sample_max, pc.seed)
    logger.info(
        "Probing %s FFT: n=%d, log_n=%d, %d iterations",
        pc.direction, pc.fft_len, pc.log_n, pc.iterations
    )

    start = time.perf_counter()
    for _ in tqdm(range(pc.iterations), desc="FFT probe", leave=False, file=sys.stdout):
        if not fft_q12(real, imag, pc.fft_len, pc.log_n, direction):
            raise RuntimeError(f"FFT rejected n={pc.fft_len}, log_n={pc.log_n}")
    total_s = time.perf_counter() - start

    result = ProbeResult(
        n_calls=pc.iterations,
        total_s=total_s,
        per_call_us=total_s / pc.iterations * 1e6,
    )
    logger.info("%d calls in %.3f s (%.1f us per call)", result.n_calls, result.total_s, result.per_call_us)
    return result


if __name__ == '__main__':
    config = load_config()
    setup_logging(config)
    run_probe(config)
