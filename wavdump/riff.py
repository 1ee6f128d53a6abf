"""
Canonical PCM RIFF/WAVE container.

Layout written by write_wav (all fields little-endian, packed, 44 bytes of header):

    RIFF  <size: u32 = file size - 8>  WAVE
    fmt   <16: u32> <format: u16> <channels: u16> <rate: u32>
          <byte rate: u32> <block align: u16> <bits: u16>
    data  <size: u32 = sample bytes>   <int16 samples...>
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import ClassVar, Sequence, Union

import numpy as np

from .config import DEFAULT_FORMAT, PCM_FORMAT, WaveFormat
from .errors import HeaderError, WavWriteError

_log = logging.getLogger("wavdump.riff")

Samples = Union[np.ndarray, Sequence[int]]


@dataclass(frozen=True)
class RiffHeader:
    FORMAT: ClassVar[str] = "<4sI4s"
    SIZE: ClassVar[int] = struct.calcsize("<4sI4s")

    chunk_size: int
    chunk_id: bytes = b"RIFF"
    wave_id: bytes = b"WAVE"

    def pack(self) -> bytes:
        return struct.pack(self.FORMAT, self.chunk_id, self.chunk_size, self.wave_id)


@dataclass(frozen=True)
class FormatChunk:
    FORMAT: ClassVar[str] = "<4sIHHIIHH"
    SIZE: ClassVar[int] = struct.calcsize("<4sIHHIIHH")

    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    audio_format: int = PCM_FORMAT
    chunk_id: bytes = b"fmt "

    @classmethod
    def from_format(cls, fmt: WaveFormat) -> "FormatChunk":
        return cls(
            channels=fmt.channels,
            sample_rate=fmt.sample_rate,
            byte_rate=fmt.byte_rate,
            block_align=fmt.block_align,
            bits_per_sample=fmt.bits_per_sample,
        )

    @property
    def chunk_size(self) -> int:
        # payload only: everything after the tag and the size field
        return self.SIZE - 8

    def pack(self) -> bytes:
        return struct.pack(
            self.FORMAT,
            self.chunk_id,
            self.chunk_size,
            self.audio_format,
            self.channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
        )


@dataclass(frozen=True)
class DataHeader:
    FORMAT: ClassVar[str] = "<4sI"
    SIZE: ClassVar[int] = struct.calcsize("<4sI")

    chunk_size: int
    chunk_id: bytes = b"data"

    def pack(self) -> bytes:
        return struct.pack(self.FORMAT, self.chunk_id, self.chunk_size)


HEADER_SIZE = RiffHeader.SIZE + FormatChunk.SIZE + DataHeader.SIZE


def build_header(fmt: WaveFormat, data_size: int) -> bytes:
    """Master, format and data-header chunks for data_size bytes of samples."""
    if HEADER_SIZE + data_size - 8 > 0xFFFFFFFF:
        raise ValueError(f"data size {data_size} does not fit the 32-bit RIFF size field")
    riff = RiffHeader(chunk_size=HEADER_SIZE + data_size - 8)
    return riff.pack() + FormatChunk.from_format(fmt).pack() + DataHeader(chunk_size=data_size).pack()


def sample_bytes(samples: Samples) -> bytes:
    return np.asarray(samples, dtype="<i2").tobytes()


def write_wav(path: str, samples: Samples, fmt: WaveFormat = DEFAULT_FORMAT) -> int:
    """
    Write samples as a PCM WAVE file, creating or truncating path.

    Returns the number of bytes written. Raises WavWriteError when the file
    cannot be opened or written.
    """
    if fmt.bits_per_sample != 16:
        raise ValueError(f"only 16-bit samples are supported, got {fmt.bits_per_sample}")
    payload = sample_bytes(samples)
    header = build_header(fmt, len(payload))
    try:
        with open(path, "wb") as f:
            f.write(header)
            f.write(payload)
    except OSError as e:
        raise WavWriteError(path, e.strerror or str(e)) from e
    total = len(header) + len(payload)
    _log.debug("wrote %s: %d header + %d data bytes", path, len(header), len(payload))
    return total


@dataclass
class WavHeader:
    riff_size: int
    audio_format: int
    channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    data_size: int

    @property
    def n_samples(self) -> int:
        return self.data_size // (self.bits_per_sample // 8)


def parse_header(raw: bytes) -> WavHeader:
    if len(raw) < HEADER_SIZE:
        raise HeaderError(f"header truncated: {len(raw)} < {HEADER_SIZE} bytes")
    off = 0
    riff_id, riff_size, wave_id = struct.unpack_from(RiffHeader.FORMAT, raw, off)
    if riff_id != b"RIFF" or wave_id != b"WAVE":
        raise HeaderError(f"not a RIFF/WAVE file (tags {riff_id!r}, {wave_id!r})")
    off += RiffHeader.SIZE
    (fmt_id, fmt_size, audio_format, channels, rate,
     byte_rate, block_align, bits) = struct.unpack_from(FormatChunk.FORMAT, raw, off)
    if fmt_id != b"fmt " or fmt_size != FormatChunk.SIZE - 8:
        raise HeaderError(f"unexpected format chunk {fmt_id!r} of size {fmt_size}")
    off += FormatChunk.SIZE
    data_id, data_size = struct.unpack_from(DataHeader.FORMAT, raw, off)
    if data_id != b"data":
        raise HeaderError(f"expected data chunk, found {data_id!r}")
    return WavHeader(riff_size, audio_format, channels, rate, byte_rate, block_align, bits, data_size)


def read_header(path: str) -> WavHeader:
    with open(path, "rb") as f:
        return parse_header(f.read(HEADER_SIZE))
