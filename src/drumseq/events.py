"""
Event types for drumseq.

Provides:
- Frame: one stereo sample pair
- Trigger: starts a voice at a tick offset
- End: sentinel closing a timeline
- validate_timeline: checks ordering and termination of an event sequence
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple, Sequence, Union

from .errors import PatternError

if TYPE_CHECKING:
    from .voices.base import Voice


class Frame(NamedTuple):
    """One playback instant of stereo audio."""

    left: float
    right: float


SILENCE = Frame(0.0, 0.0)


@dataclass(frozen=True)
class Trigger:
    """Start `voice` at tick `offset`."""

    offset: int
    voice: "Voice"


@dataclass(frozen=True)
class End:
    """End-of-pattern marker. Its offset is the pattern length."""

    offset: int


TimelineEvent = Union[Trigger, End]


def validate_timeline(events: Sequence[TimelineEvent]) -> None:
    """Raise PatternError unless `events` is a well-formed timeline."""
    if not events:
        raise PatternError("timeline is empty")
    if not isinstance(events[-1], End):
        raise PatternError("timeline must end with an End event")

    previous = 0
    for index, ev in enumerate(events):
        if isinstance(ev, End) and index != len(events) - 1:
            raise PatternError(f"End event at position {index} is not last")
        if not isinstance(ev, (Trigger, End)):
            raise PatternError(f"unexpected event at position {index}: {ev!r}")
        if ev.offset < 0:
            raise PatternError(f"negative offset {ev.offset} at position {index}")
        if ev.offset < previous:
            raise PatternError(
                f"offset {ev.offset} at position {index} is before {previous}"
            )
        previous = ev.offset
