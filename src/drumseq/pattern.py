"""
Pattern sequencer: walks an event timeline one tick at a time.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from .events import SILENCE, End, Frame, TimelineEvent, Trigger, validate_timeline
from .utils import SAMPLE_RATE
from .voices.base import Voice


def pattern_from_steps(
    steps: Iterable[Tuple[int, Voice]], step_ticks: int, length_steps: int
) -> List[TimelineEvent]:
    """
    Build a timeline from grid steps.

    Args:
        steps: (step_index, voice) pairs, in any order
        step_ticks: Samples per step
        length_steps: Pattern length in steps; places the End marker

    Returns:
        Sorted timeline terminated by End
    """
    events: List[TimelineEvent] = [
        Trigger(offset=step * step_ticks, voice=voice)
        for step, voice in sorted(steps, key=lambda s: s[0])
    ]
    events.append(End(offset=length_steps * step_ticks))
    return events


class PatternSequencer:
    """
    Routes global ticks to the currently active voice.

    The cursor starts before the first event. Reaching an event's offset
    triggers its voice and restarts the local frame counter; reaching the
    End marker silences the sequencer for good.
    """

    def __init__(self, events: Sequence[TimelineEvent], sample_rate: int = SAMPLE_RATE):
        validate_timeline(events)
        self.events = events
        self.sample_rate = sample_rate
        self._cursor = -1
        self._local = 0
        self._exhausted = False

    @property
    def length(self) -> int:
        """Pattern length in ticks (the End offset)."""
        return self.events[-1].offset

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    @property
    def active_voice(self) -> Optional[Voice]:
        if self._cursor < 0 or self._exhausted:
            return None
        return self.events[self._cursor].voice

    @property
    def local_frame(self) -> int:
        return self._local

    def reset(self) -> None:
        """Rewind to before the first event."""
        self._cursor = -1
        self._local = 0
        self._exhausted = False

    def next_frame(self, tick: int) -> Frame:
        """Return the frame at global `tick`. Ticks must be strictly increasing."""
        if self._exhausted:
            return SILENCE

        moved = False
        last = len(self.events) - 1
        while self._cursor < last and self.events[self._cursor + 1].offset <= tick:
            self._cursor += 1
            moved = True

        if self._cursor < 0:
            return SILENCE

        ev = self.events[self._cursor]
        if isinstance(ev, End):
            self._exhausted = True
            return SILENCE
        if moved:
            ev.voice.trigger()
            self._local = 0

        frame = ev.voice.render(self.sample_rate, self._local)
        self._local += 1
        return frame
