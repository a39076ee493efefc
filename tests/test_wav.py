"""
Tests for the 16-bit PCM WAV encoder
"""
import io
import struct
import unittest
import wave

import numpy as np

from condenser.core import Signal, encode_wav, WAV_HEADER_SIZE
from condenser.core.wav import float_to_pcm16


class TestEncodeWav(unittest.TestCase):
    def test_header_fields(self):
        signal = Signal(44100, np.zeros((2, 10), dtype=np.float32))
        blob = encode_wav(signal)
        self.assertEqual(len(blob), WAV_HEADER_SIZE + 10 * 2 * 2)

        fields = struct.unpack('<4sI4s4sIHHIIHH4sI', blob[:44])
        self.assertEqual(fields, (
            b'RIFF', len(blob) - 8, b'WAVE',
            b'fmt ', 16, 1, 2, 44100,
            44100 * 2 * 2, 4, 16,
            b'data', len(blob) - 44,
        ))

    def test_empty_signal_is_header_only(self):
        blob = encode_wav(Signal(44100, np.zeros((1, 0), dtype=np.float32)))
        self.assertEqual(len(blob), 44)
        self.assertEqual(struct.unpack('<I', blob[40:44])[0], 0)
        self.assertEqual(struct.unpack('<I', blob[4:8])[0], 36)

    def test_clamp_and_asymmetric_scale(self):
        signal = Signal.from_channels(44100, [[1.5, -1.5, 1.0, -1.0, 0.0, 0.5, -0.5]])
        samples = struct.unpack('<7h', encode_wav(signal)[44:])
        self.assertEqual(samples, (32767, -32768, 32767, -32768, 0, 16383, -16384))

    def test_interleaving(self):
        signal = Signal.from_channels(8000, [[0.0, 1.0], [-1.0, 0.0]])
        samples = struct.unpack('<4h', encode_wav(signal)[44:])
        self.assertEqual(samples, (0, -32768, 32767, 0))

    def test_float_to_pcm16_dtype(self):
        self.assertEqual(float_to_pcm16(np.array([0.25])).dtype, np.int16)

    def test_readable_by_standard_reader(self):
        rng = np.random.default_rng(7)
        channels = rng.uniform(-1, 1, size=(2, 500)).astype(np.float32)
        signal = Signal(22050, channels)

        with wave.open(io.BytesIO(encode_wav(signal)), 'rb') as reader:
            self.assertEqual(reader.getnchannels(), 2)
            self.assertEqual(reader.getframerate(), 22050)
            self.assertEqual(reader.getsampwidth(), 2)
            self.assertEqual(reader.getnframes(), 500)
            frames = reader.readframes(reader.getnframes())

        ints = np.frombuffer(frames, dtype='<i2').reshape(-1, 2).T.astype(np.float64)
        # Positive samples are scaled by 32767 and truncated toward zero, so the
        # worst-case error is just under 1/32767 rather than 1/32768.
        decoded = np.where(ints < 0, ints / 32768.0, ints / 32767.0)
        self.assertLessEqual(np.max(np.abs(decoded - channels)), 1 / 32767 + 1e-9)


if __name__ == "__main__":
    unittest.main()
