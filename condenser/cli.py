"""
Command-line interface for the condensed audio maker
"""
import argparse
import logging
import os
import sys
from typing import List

from .config import Config
from .core import format_seconds, plan_windows, total_duration
from .core.timeutils import format_span
from .services import subtitles
from .services.episodes import Episode, condense_episodes, default_output_name
from .services.errors import ConfigError

logger = logging.getLogger(__name__)


def build_episodes(entries, output_dir) -> List[Episode]:
    """Turn configured episode entries into ``Episode`` jobs.

    Entries are ``[media, subtitles]`` pairs or mappings with ``media``,
    ``subtitles`` and an optional ``output`` file name.
    """
    episodes = []
    for index, entry in enumerate(entries or [], 1):
        if isinstance(entry, dict):
            media = entry.get('media')
            subs = entry.get('subtitles')
            name = entry.get('output') or default_output_name(index)
        else:
            media, subs = entry
            name = default_output_name(index)
        if not media or not subs:
            raise ValueError(f"Episode {index} needs both a media file and a subtitle file")
        episodes.append(Episode(str(media), str(subs), os.path.join(output_dir, name)))
    return episodes


def print_plan(episode, index, padding, merge_gap):
    """Dry run: list the dialogue windows of an episode without decoding audio"""
    print(f"\nEpisode {index}: {episode.media_path}")
    try:
        cues = subtitles.load_cues(episode.subtitle_path)
        windows = plan_windows(cues, padding, merge_gap)
    except Exception as e:
        print(f"Error: {e}")
        return False

    print(f"- Cues: {len(cues)}")
    print(f"- Windows: {len(windows)}")
    for n, window in enumerate(windows, 1):
        print(f"  {n}. {format_span(window.start, window.end)}")
    print(f"- Condensed duration: {format_seconds(total_duration(windows))}")
    print(f"- Output: {episode.output_path}")
    return True


def run(episodes, padding, merge_gap, dry_run=False):
    """Process all episodes; returns the number of failed ones"""
    if dry_run:
        failed = 0
        for index, episode in enumerate(episodes, 1):
            if not print_plan(episode, index, padding, merge_gap):
                failed += 1
        return failed

    print(f"\nCondensing {len(episodes)} episode(s)...")
    summary = condense_episodes(episodes, padding=padding, merge_gap=merge_gap)

    for result in summary['results']:
        print(f"✓ {result['output']} ({format_seconds(result['duration'])} "
              f"of {format_seconds(result['source_duration'])}, {result['windows']} windows)")
    for error in summary['errors']:
        print(f"✗ {error['media']}: {error['error']}")

    print(f"\n{'='*60}")
    print(f"Condensed: {summary['condensed']}, failed: {summary['failed']}")
    print(f"{'='*60}")
    return summary['failed']


def main(argv=None):
    """CLI entry point"""
    # Minimal logging setup; services use logging for diagnostics.
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description='Keep only the spoken dialogue of episodes, guided by their subtitles')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--episode', nargs=2, action='append', metavar=('MEDIA', 'SUBTITLES'),
                        help='Video/audio file and its subtitle file (.srt, .vtt, .ass); repeatable')
    parser.add_argument('--padding', type=float, help='Seconds kept before and after each subtitle (default 0.5)')
    parser.add_argument('--merge-gap', type=float, help='Bridge silences up to this many seconds (default 0)')
    parser.add_argument('--output-dir', type=str, help='Output directory for condensed WAV files')
    parser.add_argument('--dry-run', action='store_true', default=None,
                        help='Print the dialogue windows without decoding or writing audio')

    args = parser.parse_args(argv)

    # Without --config, look for config.yml / config.yaml in the working directory
    default_config_path = None
    if not args.config:
        cwd = os.getcwd()
        for candidate in (os.path.join(cwd, 'config.yml'), os.path.join(cwd, 'config.yaml')):
            if os.path.exists(candidate):
                default_config_path = candidate
                break

    try:
        config = Config(config_file=args.config or default_config_path)
        config.update_from_args({
            'episodes': args.episode,
            'padding': args.padding,
            'merge_gap': args.merge_gap,
            'output_dir': args.output_dir,
            'dry_run': args.dry_run,
        })
        timing = config.get_timing()
        episodes = build_episodes(config.get('episodes'), config.get('output_dir', './output'))
    except (ConfigError, ValueError, TypeError) as e:
        print(f"Configuration error: {e}")
        return 2

    if not episodes:
        print("No episodes given. Use --episode MEDIA SUBTITLES or list them in the config file.")
        return 2

    failed = run(episodes, timing['padding'], timing['merge_gap'], dry_run=config.get('dry_run', False))
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
