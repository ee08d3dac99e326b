"""
Renderer: drives a sequencer into a sink, one tick at a time.
"""

import logging
from typing import Iterable, List

from .modulation import Modulator
from .pattern import PatternSequencer
from .sinks import BufferedAudioSink, DEFAULT_BUFFER_FRAMES
from .songs import Song
from .utils import CHANNELS, SAMPLE_RATE

logger = logging.getLogger(__name__)


class Renderer:
    """Pulls frames from a PatternSequencer and pushes them into a sink."""

    def __init__(
        self,
        sequencer: PatternSequencer,
        sink: BufferedAudioSink,
        modulators: Iterable[Modulator] = (),
        sample_rate: int = SAMPLE_RATE,
    ):
        self.sequencer = sequencer
        self.sink = sink
        self.modulators: List[Modulator] = list(modulators)
        self.sample_rate = sample_rate
        self.time = 0.0

    def render(self, repeats: int = 1) -> int:
        """Render the pattern `repeats` times. Returns the number of frames pushed."""
        if repeats < 0:
            raise ValueError(f"repeats must not be negative, got {repeats}")
        dt = 1.0 / self.sample_rate
        length = self.sequencer.length
        frames = 0
        logger.info("Rendering %d x %d frames", repeats, length)
        for _ in range(repeats):
            self.sequencer.reset()
            for tick in range(length):
                self.sink.push(self.sequencer.next_frame(tick))
                frames += 1
                self.time += dt
                for mod in self.modulators:
                    mod.apply(self.time)
        logger.info("Rendered %d frames (%.2fs)", frames, frames * dt)
        return frames


def render_song(
    song: Song,
    path: str,
    *,
    repeats: int = 1,
    buffer_frames: int = DEFAULT_BUFFER_FRAMES,
    sample_rate: int = SAMPLE_RATE,
    strict: bool = False,
) -> int:
    """Render `song` to a WAV file at `path`. Returns the number of frames written."""
    sequencer = PatternSequencer(song.timeline(sample_rate), sample_rate=sample_rate)
    with BufferedAudioSink.open(
        path,
        channels=CHANNELS,
        capacity=CHANNELS * buffer_frames,
        sample_rate=sample_rate,
        strict=strict,
    ) as sink:
        renderer = Renderer(sequencer, sink, song.modulators, sample_rate)
        frames = renderer.render(repeats)
    if sink.write_errors:
        logger.warning("%s: %d short writes", path, sink.write_errors)
    return frames
