"""
Condensed audio maker.

Keeps only the spoken dialogue of an episode: subtitle cues select the audio
to retain, which is concatenated and written as a single 16-bit WAV file.
"""

__version__ = "0.1.0"
