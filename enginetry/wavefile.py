"""Loading of 16-bit, 48 kHz stereo PCM wave files."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Optional, Union

WAVE_FORMAT_PCM = 1
REQUIRED_CHANNELS = 2
REQUIRED_SAMPLE_RATE = 48000
REQUIRED_BITS_PER_SAMPLE = 16

_RIFF_HEADER = struct.Struct("<4sI4s")
_CHUNK_HEADER = struct.Struct("<4sI")
_FMT_BODY = struct.Struct("<HHIIHH")


class WaveFormatError(ValueError):
    """The data is not a wave file of the supported kind."""


@dataclass(frozen=True)
class WaveFormat:
    """PCM format description of loaded audio."""

    channels: int
    sample_rate: int
    bits_per_sample: int
    format_tag: int = WAVE_FORMAT_PCM

    @property
    def block_align(self) -> int:
        """Bytes in one frame holding a sample for every channel."""
        return (self.bits_per_sample // 8) * self.channels

    @property
    def avg_bytes_per_second(self) -> int:
        """Bytes of audio played per second."""
        return self.sample_rate * self.block_align


class _Reader:
    """Sequential reader over a byte string with relative seeking."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, size: int, what: str) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise WaveFormatError(f"truncated {what}")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def skip(self, offset: int) -> None:
        target = self._pos + offset
        if target >= 0:
            self._pos = target

    def find_chunk(self, chunk_id: bytes) -> int:
        """Skip sub-chunks until *chunk_id*; return that chunk's size."""
        while True:
            found, size = _CHUNK_HEADER.unpack(
                self.read(_CHUNK_HEADER.size, f"chunk header while looking for {chunk_id!r}")
            )
            if found == chunk_id:
                return size
            self.skip(size)


def parse_stereo_wave(data: bytes) -> tuple[WaveFormat, bytes]:
    """Parse a whole wave file; return its format and the raw sample bytes.

    Only 16-bit PCM stereo at 48 kHz is accepted.
    """
    reader = _Reader(data)
    riff_id, _riff_size, form = _RIFF_HEADER.unpack(
        reader.read(_RIFF_HEADER.size, "RIFF header")
    )
    if riff_id != b"RIFF":
        raise WaveFormatError("not a RIFF file")
    if form != b"WAVE":
        raise WaveFormatError("RIFF file is not in WAVE format")

    fmt_size = reader.find_chunk(b"fmt ")
    audio_format, channels, sample_rate, _bytes_per_second, _block_align, bits = (
        _FMT_BODY.unpack(reader.read(_FMT_BODY.size, "format chunk"))
    )
    if audio_format != WAVE_FORMAT_PCM:
        raise WaveFormatError(f"unsupported audio format {audio_format}")
    if channels != REQUIRED_CHANNELS:
        raise WaveFormatError(f"expected {REQUIRED_CHANNELS} channels, got {channels}")
    if sample_rate != REQUIRED_SAMPLE_RATE:
        raise WaveFormatError(
            f"expected a sample rate of {REQUIRED_SAMPLE_RATE}, got {sample_rate}"
        )
    if bits != REQUIRED_BITS_PER_SAMPLE:
        raise WaveFormatError(
            f"expected {REQUIRED_BITS_PER_SAMPLE} bits per sample, got {bits}"
        )
    reader.skip(fmt_size - _FMT_BODY.size)

    data_size = reader.find_chunk(b"data")
    samples = reader.read(data_size, "data chunk")
    return WaveFormat(channels, sample_rate, bits), samples


def load_stereo_wave_file(path: Union[str, os.PathLike]) -> tuple[WaveFormat, bytes]:
    """Read and parse the wave file at *path*."""
    with open(path, "rb") as stream:
        return parse_stereo_wave(stream.read())


@dataclass
class WaveTrack:
    """A loaded track ready to be played on a loop at a given volume."""

    format: WaveFormat
    data: Optional[bytes]
    volume: float = 1.0
    looping: bool = True

    @classmethod
    def load(cls, path: Union[str, os.PathLike], volume: float = 1.0) -> WaveTrack:
        """Load the track from the wave file at *path*."""
        wave_format, samples = load_stereo_wave_file(path)
        return cls(wave_format, samples, volume)

    @property
    def audio_bytes(self) -> int:
        """Size of the held audio data in bytes."""
        return 0 if self.data is None else len(self.data)

    @property
    def released(self) -> bool:
        """Whether the audio data has been let go."""
        return self.data is None

    def release(self) -> None:
        """Drop the audio data; safe to call more than once."""
        self.data = None

    def __enter__(self) -> WaveTrack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()