"""
Buffered audio sink: batches frames before handing them to a stream.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..errors import SinkWriteError
from ..utils import CHANNELS, SAMPLE_RATE
from .wav import AudioStream, SoundFileStream

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_FRAMES = 30000


class BufferedAudioSink:
    """
    Accumulates interleaved samples in a fixed float32 buffer and flushes
    them to `stream` whenever the buffer is full.

    A short write is logged and counted in `write_errors`; the unwritten
    samples are dropped. With strict=True a short write raises
    SinkWriteError instead. Use as a context manager so the tail of the
    buffer is flushed and the stream closed on every exit path.
    """

    def __init__(
        self,
        stream: AudioStream,
        *,
        channels: int = CHANNELS,
        capacity: int = CHANNELS * DEFAULT_BUFFER_FRAMES,
        strict: bool = False,
    ):
        if channels <= 0:
            raise ValueError(f"channels must be positive, got {channels}")
        if capacity <= 0 or capacity % channels:
            raise ValueError(
                f"capacity must be a positive multiple of {channels}, got {capacity}"
            )
        self.stream = stream
        self.channels = channels
        self.capacity = capacity
        self.strict = strict
        self._buffer: Optional[np.ndarray] = np.zeros(capacity, dtype=np.float32)
        self._fill = 0
        self.flush_count = 0
        self.samples_written = 0
        self.write_errors = 0

    @classmethod
    def open(
        cls,
        path: str,
        *,
        channels: int = CHANNELS,
        capacity: int = CHANNELS * DEFAULT_BUFFER_FRAMES,
        sample_rate: int = SAMPLE_RATE,
        strict: bool = False,
    ) -> "BufferedAudioSink":
        """Open a WAV file at `path`. Raises AudioSinkError if that fails."""
        stream = SoundFileStream(path, channels=channels, sample_rate=sample_rate)
        try:
            return cls(stream, channels=channels, capacity=capacity, strict=strict)
        except ValueError:
            stream.close()
            raise

    @property
    def fill(self) -> int:
        """Samples currently buffered."""
        return self._fill

    @property
    def closed(self) -> bool:
        return self._buffer is None

    def push(self, frame: Sequence[float]) -> None:
        if self._buffer is None:
            raise ValueError("push to a closed sink")
        if len(frame) != self.channels:
            raise ValueError(
                f"frame has {len(frame)} samples, sink expects {self.channels}"
            )
        if self._fill + self.channels > self.capacity:
            self.flush()
        self._buffer[self._fill : self._fill + self.channels] = frame
        self._fill += self.channels
        if self._fill >= self.capacity:
            self.flush()

    def flush(self) -> None:
        if self._fill <= 0 or self._buffer is None:
            return
        expected = self._fill
        try:
            written = self.stream.write(self._buffer[:expected].copy())
        finally:
            self._fill = 0
        self.flush_count += 1
        self.samples_written += written
        logger.debug("Flushed %d samples", written)
        if written != expected:
            self.write_errors += 1
            if self.strict:
                raise SinkWriteError(expected, written)
            logger.error("Short write: %d of %d samples accepted", written, expected)

    def close(self) -> None:
        if self._buffer is None:
            return
        try:
            self.flush()
        finally:
            self._buffer = None
            self.stream.close()

    def __enter__(self) -> "BufferedAudioSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
