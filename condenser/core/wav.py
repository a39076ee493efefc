"""Canonical 16-bit PCM RIFF/WAVE encoder."""
from __future__ import annotations

import struct

import numpy as np

from .extraction import Signal

WAV_HEADER_SIZE = 44
BITS_PER_SAMPLE = 16
PCM_FORMAT = 1

# RIFF, fmt and data chunks, little-endian
_HEADER = struct.Struct('<4sI4s4sIHHIIHH4sI')


def float_to_pcm16(samples: np.ndarray) -> np.ndarray:
    """Clamp to [-1, 1] and scale asymmetrically to int16.

    Negative values are scaled by 32768, non-negative ones by 32767, then
    truncated toward zero.
    """
    clipped = np.clip(np.asarray(samples, dtype=np.float64), -1.0, 1.0)
    scaled = np.where(clipped < 0, clipped * 32768.0, clipped * 32767.0)
    return scaled.astype(np.int16)


def encode_wav(signal: Signal) -> bytes:
    """Serialize ``signal`` as a RIFF/WAVE byte string.

    Samples are written frame by frame, channel-interleaved. Only the RIFF,
    ``fmt `` and ``data`` chunks are emitted.
    """
    channels = signal.num_channels
    block_align = channels * (BITS_PER_SAMPLE // 8)
    data = float_to_pcm16(signal.channels).T.astype('<i2').tobytes()
    total = WAV_HEADER_SIZE + len(data)

    header = _HEADER.pack(
        b'RIFF', total - 8, b'WAVE',
        b'fmt ', 16, PCM_FORMAT, channels, signal.sample_rate,
        signal.sample_rate * block_align, block_align, BITS_PER_SAMPLE,
        b'data', total - WAV_HEADER_SIZE,
    )
    return header + data
