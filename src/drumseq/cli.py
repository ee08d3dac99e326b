"""
Render the demo groove to a WAV file.

Usage:
    drumseq -o groove.wav -r 8 --seed 1
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .errors import AudioSinkError, PatternError
from .sinks import DEFAULT_BUFFER_FRAMES
from .songs import demo_song
from .system import render_song
from .utils import SAMPLE_RATE


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return n


def _positive_float(value: str) -> float:
    x = float(value)
    if not x > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return x


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drumseq",
        description="Synthesize and sequence a drum pattern into a 16-bit stereo WAV file",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=os.environ.get("DRUMSEQ_OUTPUT", "drumseq.wav"),
        help="Output WAV path (default: $DRUMSEQ_OUTPUT or drumseq.wav)",
    )
    parser.add_argument(
        "-r", "--repeats", type=_non_negative_int, default=8, help="Times to play the pattern"
    )
    parser.add_argument("--bpm", type=_positive_float, default=134.0, help="Tempo")
    parser.add_argument(
        "--seed", type=int, default=None, help="Noise seed for reproducible output"
    )
    parser.add_argument(
        "--buffer",
        type=int,
        default=DEFAULT_BUFFER_FRAMES,
        help="Sink buffer size in frames",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on a short write instead of logging it",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    song = demo_song(seed=args.seed, bpm=args.bpm)
    print(f"Rendering {args.repeats} bars to {args.output}...", flush=True)
    print(f"  BPM: {args.bpm}", flush=True)
    print(f"  Voices: {', '.join(song.voices)}", flush=True)

    try:
        frames = render_song(
            song,
            args.output,
            repeats=args.repeats,
            buffer_frames=args.buffer,
            strict=args.strict,
        )
    except (AudioSinkError, PatternError, ValueError) as e:
        print(f"[drumseq] {e}", file=sys.stderr)
        return 1

    print(f"Done. {frames} frames ({frames / SAMPLE_RATE:.2f}s).", flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
