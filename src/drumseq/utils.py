"""
Utility functions for drumseq.
"""

import math
import random
from typing import Optional, Protocol


SAMPLE_RATE = 44100
CHANNELS = 2
TWO_PI = 2.0 * math.pi


# =========================
# Noise sources
# =========================


class NoiseSource(Protocol):
    """Protocol for noise sources feeding the voices."""

    def sample(self) -> float: ...


class WhiteNoise:
    """Uniform white noise in [-1, 1] drawn from a private random.Random."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(seed)

    def sample(self) -> float:
        return 2.0 * self.rng.random() - 1.0


# =========================
# Timing helpers
# =========================


def step_ticks(
    bpm: float, steps_per_beat: int = 4, sample_rate: int = SAMPLE_RATE
) -> int:
    """
    Number of samples in one sequencer step.

    Args:
        bpm: Tempo in beats per minute
        steps_per_beat: Grid resolution (4 = sixteenth notes)
        sample_rate: Samples per second

    Returns:
        Step length in samples, truncated to an integer

    Raises:
        ValueError: if bpm or steps_per_beat is not positive
    """
    if bpm <= 0:
        raise ValueError(f"bpm must be positive, got {bpm}")
    if steps_per_beat <= 0:
        raise ValueError(f"steps_per_beat must be positive, got {steps_per_beat}")
    return int(float(sample_rate) * 60.0 / bpm / steps_per_beat)
