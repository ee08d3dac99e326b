"""
Drum voice: a decaying sine with a frequency glide and a stereo noise burst.
"""

import math
from dataclasses import asdict, dataclass
from typing import Optional

from ..events import Frame
from ..utils import TWO_PI, NoiseSource, WhiteNoise
from .base import Voice

# exp() overflows past ~709; growing envelopes saturate here instead
MAX_EXPONENT = 700.0


def _decay(rate: float, t: float) -> float:
    return math.exp(min(-rate * t, MAX_EXPONENT))


def _seconds(sample_rate: float, elapsed_frames: int) -> float:
    if sample_rate <= 0:
        return 0.0
    return elapsed_frames / sample_rate


@dataclass(frozen=True)
class DrumParams:
    """Shareable parameter set for a DrumVoice."""

    amplitude: float = 1.0
    env_decay: float = 15.0
    frequency: float = 110.0
    freq_decay: float = 28.0
    noise_amount: float = 0.1
    noise_decay: float = 28.0
    limit: float = 0.5


class DrumVoice(Voice):
    """
    Parametric drum model.

    The tone is a sine whose frequency decays exponentially from `frequency`,
    mixed with white noise weighted by `noise_amount`. Separate exponential
    envelopes shape the whole voice (`env_decay`) and the noise (`noise_decay`).
    Each channel gets an extra share of its own noise draw, which decorrelates
    left and right. Output is hard clipped to [-limit, limit].

    Parameters are plain attributes and may be changed between frames.
    """

    def __init__(
        self,
        *,
        amplitude: float = 1.0,
        env_decay: float = 15.0,
        frequency: float = 110.0,
        freq_decay: float = 28.0,
        noise_amount: float = 0.1,
        noise_decay: float = 28.0,
        limit: float = 0.5,
        noise: Optional[NoiseSource] = None,
    ):
        self.amplitude = amplitude
        self.env_decay = env_decay
        self.frequency = frequency
        self.freq_decay = freq_decay
        self.noise_amount = noise_amount
        self.noise_decay = noise_decay
        self.limit = limit
        self.noise = noise or WhiteNoise()
        self.phase = 0.0

    @classmethod
    def from_params(
        cls, params: DrumParams, noise: Optional[NoiseSource] = None
    ) -> "DrumVoice":
        return cls(noise=noise, **asdict(params))

    def params(self) -> DrumParams:
        """Snapshot of the current parameter values."""
        return DrumParams(
            amplitude=self.amplitude,
            env_decay=self.env_decay,
            frequency=self.frequency,
            freq_decay=self.freq_decay,
            noise_amount=self.noise_amount,
            noise_decay=self.noise_decay,
            limit=self.limit,
        )

    def envelope(self, sample_rate: float, elapsed_frames: int) -> float:
        return _decay(self.env_decay, _seconds(sample_rate, elapsed_frames))

    def noise_envelope(self, sample_rate: float, elapsed_frames: int) -> float:
        return _decay(self.noise_decay, _seconds(sample_rate, elapsed_frames))

    def instantaneous_frequency(self, sample_rate: float, elapsed_frames: int) -> float:
        return self.frequency * _decay(
            self.freq_decay, _seconds(sample_rate, elapsed_frames)
        )

    def trigger(self) -> None:
        self.phase = 0.0

    def render(self, sample_rate: float, elapsed_frames: int) -> Frame:
        tone = math.sin(self.phase) * (1.0 - self.noise_amount)
        v_env = self.envelope(sample_rate, elapsed_frames)
        n_env = self.noise_envelope(sample_rate, elapsed_frames)
        na = self.noise_amount * self.noise.sample() * n_env
        nb = self.noise_amount * self.noise.sample() * n_env
        n = 0.7 * (na + nb)

        if sample_rate > 0:
            freq = self.instantaneous_frequency(sample_rate, elapsed_frames)
            self.phase += TWO_PI * freq / sample_rate
            if not math.isfinite(self.phase):
                self.phase = 0.0
            elif self.phase >= TWO_PI:
                self.phase = math.fmod(self.phase, TWO_PI)

        gain = self.amplitude * v_env
        return Frame(
            self._clip(gain * (tone + n + na * 0.3)),
            self._clip(gain * (tone + n + nb * 0.3)),
        )

    def _clip(self, x: float) -> float:
        # NaN clips to +limit
        return max(-self.limit, min(self.limit, x))

    def __repr__(self) -> str:
        return (
            f"DrumVoice(frequency={self.frequency}, amplitude={self.amplitude}, "
            f"noise_amount={self.noise_amount}, limit={self.limit})"
        )
