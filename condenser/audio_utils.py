"""
Utilities to decode media into signals and to write encoded audio
"""
import logging
import os

import numpy as np
from librosa.util import buf_to_float
from pydub import AudioSegment

from .core import Signal
from .services.errors import DecodeError

logger = logging.getLogger(__name__)


def segment_to_signal(segment):
    """
    Convert a pydub AudioSegment to a float Signal

    Args:
        segment: Decoded AudioSegment (any channel count)

    Returns:
        Signal shaped (channels, samples) with values in [-1, 1]
    """
    if segment.sample_width not in (2, 4):
        segment = segment.set_sample_width(2)

    interleaved = buf_to_float(segment.raw_data, n_bytes=segment.sample_width, dtype=np.float32)
    channels = interleaved.reshape(-1, segment.channels).T
    return Signal(segment.frame_rate, channels)


def load_signal(media_path):
    """
    Decode the whole audio track of a media file

    Video containers are accepted; pydub hands them to ffmpeg.

    Args:
        media_path: Path of the audio or video file

    Raises:
        DecodeError: if the file cannot be decoded
    """
    logger.info("Decoding audio: %s", media_path)
    try:
        segment = AudioSegment.from_file(str(media_path))
    except Exception as e:
        logger.error("Failed to decode %s: %s", media_path, e)
        raise DecodeError(str(e)) from e

    signal = segment_to_signal(segment)
    logger.debug("Decoded %d channel(s) at %d Hz, %.3fs",
                 signal.num_channels, signal.sample_rate, signal.duration)
    return signal


def write_blob(blob, output_path):
    """Write encoded audio bytes, creating the parent directory if needed"""
    parent = os.path.dirname(str(output_path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(output_path, 'wb') as f:
        f.write(blob)
    return output_path
