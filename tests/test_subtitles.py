"""
Tests for the pysubs2-backed subtitle adapter
"""
import os
import tempfile
import unittest

import pysubs2

from condenser.core import Cue
from condenser.services import subtitles
from condenser.services.errors import SubtitleLoadError


FAKE_SRT = """1
00:00:01,000 --> 00:00:02,000
Hello

2
00:00:02,300 --> 00:00:03,000
World
"""

FAKE_VTT = """WEBVTT

00:00:01.000 --> 00:00:02.500
Hello

00:01:00.250 --> 00:01:01.000
Again
"""

FAKE_ASS = """[Script Info]
ScriptType: v4.00+

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:02.50,Default,,0,0,0,,Hello
Comment: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,translator note
Dialogue: 0,0:00:05.00,0:00:05.00,Default,,0,0,0,,empty
"""


class TestSubtitles(unittest.TestCase):
    def test_srt(self):
        self.assertEqual(subtitles.cues_from_text(FAKE_SRT, "srt"),
                         [Cue(1.0, 2.0), Cue(2.3, 3.0)])

    def test_vtt(self):
        self.assertEqual(subtitles.cues_from_text(FAKE_VTT, "vtt"),
                         [Cue(1.0, 2.5), Cue(60.25, 61.0)])

    def test_ass_skips_comments_and_empty_events(self):
        with self.assertLogs("condenser.services.subtitles", level="WARNING"):
            cues = subtitles.cues_from_text(FAKE_ASS, "ass")
        self.assertEqual(cues, [Cue(1.0, 2.5)])

    def test_cues_from_events(self):
        events = [
            pysubs2.SSAEvent(start=1000, end=2000),
            pysubs2.SSAEvent(start=3000, end=4000, type="Comment"),
            pysubs2.SSAEvent(start=5000, end=5000),
            pysubs2.SSAEvent(start=7000, end=6000),
        ]
        self.assertEqual(subtitles.cues_from_events(events), [Cue(1.0, 2.0), Cue(7.0, 6.0)])

    def test_reversed_srt_cue_is_kept_for_validation(self):
        text = FAKE_SRT + "\n3\n00:00:05,000 --> 00:00:04,000\nBroken\n"
        self.assertEqual(subtitles.cues_from_text(text, "srt")[-1], Cue(5.0, 4.0))

    def test_load_cues_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "episode.srt")
            with open(path, "w", encoding="utf-8") as f:
                f.write(FAKE_SRT)
            self.assertEqual(subtitles.load_cues(path), [Cue(1.0, 2.0), Cue(2.3, 3.0)])

    def test_missing_file_raises_typed_error(self):
        with self.assertRaises(SubtitleLoadError):
            subtitles.load_cues("/nonexistent/episode.srt")

    def test_unrecognized_text_raises_typed_error(self):
        with self.assertRaises(SubtitleLoadError):
            subtitles.cues_from_text("this is not a subtitle file")


if __name__ == "__main__":
    unittest.main()
