from __future__ import annotations

"""
Additive sine synthesis.

Every sample is the mean of the requested harmonics, computed as the sum of
each harmonic pre-divided by the harmonic count. Arithmetic follows the
reference C generator step for step:

- phase argument in double precision, narrowed to float32 before the sine
- sine of that float32 argument evaluated in double precision and narrowed
  to float32, then scaled by float32(PEAK_AMPLITUDE // n_harmonics)
- the int16 accumulator is widened to float32 for every addition, then
  truncated toward zero and wrapped (not clamped) back to 16 bits

The only remaining difference is libm sinf, which is not correctly rounded:
where it lands one ULP away, a sample can differ by one step (1 LSB).

The phase restarts at each whole second: sample t uses t % sample_rate.
"""

import logging
from typing import Sequence

import numpy as np

from .config import PEAK_AMPLITUDE, SAMPLE_RATE

_log = logging.getLogger("wavdump.synth")


def harmonic_scale(n_harmonics: int) -> int:
    """Per-harmonic amplitude; integer division, so 0 past PEAK_AMPLITUDE harmonics."""
    if n_harmonics <= 0:
        raise ValueError(f"harmonic count must be positive, got {n_harmonics}")
    return PEAK_AMPLITUDE // n_harmonics


def _wrap_int16(acc: np.ndarray) -> np.ndarray:
    # float32 -> int32 truncates toward zero; int32 -> int16 keeps the low 16 bits
    return acc.astype(np.int32).astype(np.int16)


def synthesize_second(frequencies: Sequence[int], sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """One second of samples, positions j = 0 .. sample_rate - 1."""
    scale = np.float32(harmonic_scale(len(frequencies)))
    j = np.arange(sample_rate, dtype=np.float64)
    out = np.zeros(sample_rate, dtype=np.int16)
    for freq in frequencies:
        phase = ((2.0 * np.pi * float(freq) * j) / sample_rate).astype(np.float32)
        contrib = np.sin(phase.astype(np.float64)).astype(np.float32) * scale
        out = _wrap_int16(out.astype(np.float32) + contrib)
    return out


def synthesize(frequencies: Sequence[int], duration_s: int, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Build the full mono sample buffer: duration_s * sample_rate int16 values.

    Inputs are assumed validated by the caller.
    """
    second = synthesize_second(frequencies, sample_rate)
    samples = np.tile(second, duration_s)
    _log.debug(
        "synthesized %d samples (%d harmonic(s), scale=%d, %d Hz)",
        samples.size, len(frequencies), harmonic_scale(len(frequencies)), sample_rate,
    )
    return samples
