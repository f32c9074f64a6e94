"""Minimal reading of RIFF/WAVE files with a fixed header layout."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Union

NUM_CHANNELS = 2
SAMPLE_RATE = 44100

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


@dataclass
class WavHeader:
    """A RIFF chunk followed directly by a format chunk and a data chunk."""

    riff_chunk_id: bytes = b"RIFF"
    riff_chunk_size: int = 36
    format: bytes = b"WAVE"
    format_chunk_id: bytes = b"fmt "
    format_chunk_size: int = 16
    audio_format: int = 1
    num_channels: int = NUM_CHANNELS
    sample_rate: int = SAMPLE_RATE
    byte_rate: int = SAMPLE_RATE * NUM_CHANNELS * 2
    block_align: int = NUM_CHANNELS * 2
    bits_per_sample: int = 16
    data_chunk_id: bytes = b"data"
    data_chunk_size: int = 0

    SIZE = _HEADER.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "WavHeader":
        if len(data) < _HEADER.size:
            raise ValueError("WAV data shorter than its header")
        return cls(*_HEADER.unpack_from(data))

    def to_bytes(self) -> bytes:
        return _HEADER.pack(
            self.riff_chunk_id,
            self.riff_chunk_size,
            self.format,
            self.format_chunk_id,
            self.format_chunk_size,
            self.audio_format,
            self.num_channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
            self.data_chunk_id,
            self.data_chunk_size,
        )


@dataclass
class WavFile:
    header: WavHeader
    data: bytes


def parse_wav(data: bytes) -> WavFile:
    """Parse WAV bytes; only stereo 44100 Hz files are accepted."""
    header = WavHeader.from_bytes(data)
    if header.num_channels != NUM_CHANNELS:
        raise ValueError("We only support 2 channels for now!")
    if header.sample_rate != SAMPLE_RATE:
        raise ValueError("We only support 44100 sample rate for now!")
    if header.data_chunk_id != b"data":
        raise ValueError("WAV File not in propper format")
    start = _HEADER.size
    return WavFile(header, bytes(data[start:start + header.data_chunk_size]))


def load_wav(path: Union[str, os.PathLike]) -> WavFile:
    data = Path(path).read_bytes()
    if not data:
        raise ValueError(f"Failed to load Wave File: {path}")
    return parse_wav(data)