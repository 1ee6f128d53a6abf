from __future__ import annotations
from .config import (
    MIN_FREQ,
    MAX_FREQ,
    CHANNELS,
    BITS_PER_SAMPLE,
    SAMPLE_RATE,
    PEAK_AMPLITUDE,
    WaveFormat,
    DEFAULT_FORMAT,
    SynthesisConfig,
)
from .errors import WavdumpError, ArgumentError, WavWriteError, HeaderError
from .synth import synthesize, harmonic_scale
from .riff import build_header, write_wav, read_header, WavHeader

__version__ = "0.1.0"

__all__ = [
    "MIN_FREQ",
    "MAX_FREQ",
    "CHANNELS",
    "BITS_PER_SAMPLE",
    "SAMPLE_RATE",
    "PEAK_AMPLITUDE",
    "WaveFormat",
    "DEFAULT_FORMAT",
    "SynthesisConfig",
    "WavdumpError",
    "ArgumentError",
    "WavWriteError",
    "HeaderError",
    "synthesize",
    "harmonic_scale",
    "build_header",
    "write_wav",
    "read_header",
    "WavHeader",
]
