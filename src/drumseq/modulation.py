"""
Parameter modulation: ContinuousSignal-style sweeps written into voice attributes.
"""

import math
from typing import Any, Callable


class Modulator:
    """Writes fn(t) into `voice.<param>` each time apply(t) is called."""

    def __init__(self, voice: Any, param: str, fn: Callable[[float], float]):
        if not hasattr(voice, param):
            raise AttributeError(f"{type(voice).__name__} has no parameter {param!r}")
        self.voice = voice
        self.param = param
        self.fn = fn

    def apply(self, t: float) -> None:
        setattr(self.voice, self.param, float(self.fn(t)))

    def __repr__(self) -> str:
        return f"Modulator({self.voice!r}, {self.param!r})"


def sine_lfo(center: float, depth: float, rate_hz: float) -> Callable[[float], float]:
    """Sine sweep around `center`: center + depth * sin(2*pi*rate_hz*t)."""

    def fn(t: float) -> float:
        return center + depth * math.sin(2.0 * math.pi * rate_hz * t)

    return fn
