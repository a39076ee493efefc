"""Segment extraction: copy dialogue windows out of a decoded signal.

The output is a time-ordered condensation of the source: every window is
copied, in order, into one buffer allocated up front. Sample positions are
tracked as integers so many short windows do not accumulate rounding drift.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

import numpy as np

from .intervals import Interval


@dataclass
class Signal:
    """Decoded multi-channel PCM audio.

    ``channels`` is a float32 array shaped ``(num_channels, num_samples)``;
    samples are nominally in ``[-1.0, 1.0]``.
    """

    sample_rate: int
    channels: np.ndarray

    def __post_init__(self):
        if int(self.sample_rate) <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        self.sample_rate = int(self.sample_rate)
        data = np.asarray(self.channels, dtype=np.float32)
        if data.ndim != 2:
            raise ValueError("channels must be a 2-D array (channels, samples)")
        self.channels = data

    @classmethod
    def from_channels(cls, sample_rate: int, channels: Iterable[Sequence[float]]) -> "Signal":
        """Build a signal from per-channel sample sequences of equal length."""
        arrays = [np.asarray(channel, dtype=np.float32) for channel in channels]
        lengths = {len(a) for a in arrays}
        if len(lengths) > 1:
            raise ValueError(f"channels have unequal lengths: {sorted(lengths)}")
        if not arrays:
            return cls(sample_rate, np.zeros((0, 0), dtype=np.float32))
        return cls(sample_rate, np.stack(arrays))

    @property
    def num_channels(self) -> int:
        return self.channels.shape[0]

    @property
    def num_samples(self) -> int:
        return self.channels.shape[1]

    @property
    def duration(self) -> float:
        return self.num_samples / self.sample_rate


def window_sample_bounds(window: Interval, sample_rate: int) -> Tuple[int, int]:
    """Return the ``[first, last)`` source sample range covered by ``window``."""
    first = int(round(window.start * sample_rate))
    last = int(round(window.end * sample_rate))
    return first, max(first, last)


def extract(signal: Signal, windows: Sequence[Interval]) -> Signal:
    """Concatenate the audio inside ``windows`` into a new signal.

    Windows are emitted in the order given. Any part of a window outside the
    source reads as silence.
    """
    rate = signal.sample_rate
    bounds = [window_sample_bounds(window, rate) for window in windows]
    total = sum(last - first for first, last in bounds)

    out = np.zeros((signal.num_channels, total), dtype=np.float32)
    available = signal.num_samples
    offset = 0

    for first, last in bounds:
        count = last - first
        src_lo = min(max(first, 0), available)
        src_hi = min(max(last, 0), available)
        if src_hi > src_lo:
            dst_lo = offset + (src_lo - first)
            out[:, dst_lo:dst_lo + (src_hi - src_lo)] = signal.channels[:, src_lo:src_hi]
        offset += count

    return Signal(rate, out)
