from __future__ import annotations
import numpy as np
import pytest

from wavdump.config import PEAK_AMPLITUDE, SAMPLE_RATE
from wavdump.synth import _wrap_int16, harmonic_scale, synthesize, synthesize_second


def test_sample_count_matches_duration():
    for duration in (1, 3):
        out = synthesize([440], duration)
        assert out.dtype == np.int16
        assert out.shape == (duration * SAMPLE_RATE,)


def test_single_harmonic_tracks_full_scale_sine():
    f = 440
    out = synthesize([f], 1)
    j = np.arange(SAMPLE_RATE, dtype=np.float64)
    phase = ((2.0 * np.pi * f * j) / SAMPLE_RATE).astype(np.float32).astype(np.float64)
    expected = np.round(np.sin(phase) * PEAK_AMPLITUDE)
    # truncation toward zero vs nearest rounding: never more than one step apart
    assert np.max(np.abs(out.astype(np.float64) - expected)) <= 1
    assert out.max() <= PEAK_AMPLITUDE
    assert out.min() >= -PEAK_AMPLITUDE


def test_phase_restarts_every_second():
    out = synthesize([33, 1000], 3, sample_rate=100)
    sec = synthesize_second([33, 1000], sample_rate=100)
    assert out.shape == (300,)
    np.testing.assert_array_equal(out[:100], sec)
    np.testing.assert_array_equal(out[100:200], sec)
    np.testing.assert_array_equal(out[200:], sec)
    assert out[0] == 0 and out[100] == 0 and out[200] == 0


def test_harmonic_scale_uses_integer_division():
    assert harmonic_scale(1) == 32765
    assert harmonic_scale(2) == 16382
    assert harmonic_scale(3) == 10921
    assert harmonic_scale(32765) == 1
    assert harmonic_scale(32766) == 0
    with pytest.raises(ValueError):
        harmonic_scale(0)


def test_divide_then_sum_at_peak():
    # sample_rate=4, f=1: sample 1 sits at sin(pi/2) == 1, sample 3 at -1
    single = synthesize([1], 1, sample_rate=4)
    assert single[1] == 32765
    assert single[3] == -32765

    triple = synthesize([1, 1, 1], 1, sample_rate=4)
    # 3 * (32765 // 3), not (3 * 32765) // 3
    assert triple[1] == 32763
    assert triple[3] == -32763


def test_too_many_harmonics_silence_the_signal():
    out = synthesize([20] * 32766, 1, sample_rate=4)
    assert not out.any()


def test_accumulator_wraps_instead_of_clamping():
    acc = np.array([40000.0, -40000.0, 32767.9, -1.7], dtype=np.float32)
    np.testing.assert_array_equal(_wrap_int16(acc), np.array([-25536, 25536, 32767, -1], dtype=np.int16))


def test_harmonics_are_averaged():
    out = synthesize([440, 880], 2)
    assert out.shape == (2 * SAMPLE_RATE,)
    assert np.abs(out.astype(np.int32)).max() <= 2 * harmonic_scale(2)


# Samples produced by the C wavdump tool (glibc sinf) at 44100 Hz.
REFERENCE_SAMPLES = {
    (440,): {0: 0, 1: 2052, 100: -466, 1000: -4652, 11922: -10191, 12345: 28719, 30000: 29671, 44099: -2053},
    (20, 22050): {0: 0, 1: 45, 100: 4605, 1000: 4718, 11922: 9033, 12345: -9508, 30000: -10049, 44099: -34},
    (1000, 2000, 3000): {0: 0, 1: 9147, 100: -1866, 1000: 881, 11922: 722, 12345: -23234, 30000: -2170, 44099: -9138},
}


@pytest.mark.parametrize("freqs", sorted(REFERENCE_SAMPLES))
def test_matches_reference_generator(freqs):
    out = synthesize(list(freqs), 2)
    for idx, expected in REFERENCE_SAMPLES[freqs].items():
        # libm sinf is not correctly rounded; at most one step apart
        assert abs(int(out[idx]) - expected) <= 1, (freqs, idx, int(out[idx]), expected)
        assert out[idx + SAMPLE_RATE] == out[idx]
