"""
Songs: named voices laid out on a step grid, plus the demo groove.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .events import TimelineEvent
from .modulation import Modulator, sine_lfo
from .pattern import pattern_from_steps
from .utils import SAMPLE_RATE, WhiteNoise, step_ticks
from .voices import DrumVoice, Voice, get_preset


@dataclass
class Song:
    """A one-bar (or longer) drum pattern on a step grid."""

    voices: Dict[str, Voice]
    steps: List[Tuple[int, str]]
    length_steps: int = 32
    bpm: float = 134.0
    steps_per_beat: int = 4
    modulators: List[Modulator] = field(default_factory=list)

    def step_ticks(self, sample_rate: int = SAMPLE_RATE) -> int:
        return step_ticks(self.bpm, self.steps_per_beat, sample_rate)

    def timeline(self, sample_rate: int = SAMPLE_RATE) -> List[TimelineEvent]:
        """Resolve voice names and convert steps to a sentinel-terminated timeline."""
        missing = sorted({name for _, name in self.steps if name not in self.voices})
        if missing:
            raise KeyError(f"song uses undefined voices: {missing}")
        return pattern_from_steps(
            [(step, self.voices[name]) for step, name in self.steps],
            self.step_ticks(sample_rate),
            self.length_steps,
        )


DEMO_STEPS: List[Tuple[int, str]] = [
    (0, "kick"),
    (2, "tom_a"),
    (3, "kick"),
    (4, "snare"),
    (6, "tom_a"),
    (8, "kick"),
    (11, "snare"),
    (16, "tom_g"),
    (18, "kick"),
    (20, "snare"),
    (22, "tom_g"),
    (24, "kick"),
    (27, "snare"),
    (28, "tom_g"),
    (30, "tom_b"),
]


def demo_song(seed: Optional[int] = None, bpm: float = 134.0) -> Song:
    """
    Two-bar kick/snare/tom groove in sixteenths.

    Over the render the snare's noise tail breathes, the kick's pitch drop
    speeds up and slows down, and the toms' clip level swells, so repeats
    of the bar never sound quite the same.
    """
    noise = WhiteNoise(seed)
    voices = {
        name: DrumVoice.from_params(get_preset(name), noise=noise)
        for name in ("kick", "snare", "tom_a", "tom_g", "tom_b")
    }
    modulators = [
        Modulator(voices["snare"], "noise_decay", sine_lfo(10.2, 8.0, 0.125)),
        Modulator(voices["kick"], "freq_decay", sine_lfo(28.5, -18.0, 0.125)),
    ]
    for tom in ("tom_a", "tom_g", "tom_b"):
        modulators.append(Modulator(voices[tom], "limit", sine_lfo(0.3, 0.1, 0.0625)))

    return Song(
        voices=voices,
        steps=list(DEMO_STEPS),
        length_steps=32,
        bpm=bpm,
        steps_per_beat=4,
        modulators=modulators,
    )
