from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

MIN_FREQ = 20
MAX_FREQ = 22050

CHANNELS = 1
BITS_PER_SAMPLE = 16
SAMPLE_RATE = MAX_FREQ * 2

# 2^15 - 3, not 2^15 - 1
PEAK_AMPLITUDE = 32765

PCM_FORMAT = 1


@dataclass(frozen=True)
class WaveFormat:
    channels: int = CHANNELS
    bits_per_sample: int = BITS_PER_SAMPLE
    sample_rate: int = SAMPLE_RATE

    @property
    def sample_width(self) -> int:
        return self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        return self.channels * self.sample_width

    @property
    def byte_rate(self) -> int:
        return self.block_align * self.sample_rate


DEFAULT_FORMAT = WaveFormat()


@dataclass(frozen=True)
class SynthesisConfig:
    path: str
    duration_s: int
    frequencies: Tuple[int, ...]
    fmt: WaveFormat = field(default_factory=WaveFormat)

    @property
    def n_samples(self) -> int:
        return self.fmt.channels * self.fmt.sample_rate * self.duration_s

    @property
    def data_size(self) -> int:
        return self.n_samples * self.fmt.sample_width


# the RIFF size field (u32) covers 36 header bytes plus the sample data
MAX_DURATION = (0xFFFFFFFF - 36) // DEFAULT_FORMAT.byte_rate
