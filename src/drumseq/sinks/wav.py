"""
WAV output through libsndfile.
"""

import logging
from typing import Protocol

import numpy as np
import soundfile as sf

from ..errors import AudioSinkError
from ..utils import CHANNELS, SAMPLE_RATE

logger = logging.getLogger(__name__)


class AudioStream(Protocol):
    """Destination for interleaved float samples."""

    def write(self, samples: np.ndarray) -> int: ...
    def close(self) -> None: ...


class SoundFileStream:
    """
    Encodes interleaved float samples into a 16-bit PCM WAV file.
    Requires: pip install soundfile

    The float to integer conversion and the RIFF header are handled by
    libsndfile; the header is finalized on close().
    """

    def __init__(
        self,
        path: str,
        *,
        channels: int = CHANNELS,
        sample_rate: int = SAMPLE_RATE,
        subtype: str = "PCM_16",
    ):
        self.path = str(path)
        self.channels = channels
        self.sample_rate = sample_rate
        try:
            self._file = sf.SoundFile(
                self.path,
                mode="w",
                samplerate=sample_rate,
                channels=channels,
                format="WAV",
                subtype=subtype,
            )
        except (RuntimeError, OSError) as e:
            raise AudioSinkError(f"cannot open {self.path} for writing: {e}") from e
        logger.debug(
            "Opened %s (%d Hz, %d channels, %s)", self.path, sample_rate, channels, subtype
        )

    @property
    def frames(self) -> int:
        """Frames written so far."""
        return self._file.frames

    def write(self, samples: np.ndarray) -> int:
        """Write interleaved samples; returns how many were accepted."""
        block = np.asarray(samples, dtype=np.float32).reshape(-1, self.channels)
        before = self._file.tell()
        try:
            self._file.write(block)
        except AssertionError:
            # soundfile asserts on a partial write; the position says how far it got
            logger.error("Partial write to %s", self.path)
        except RuntimeError as e:
            logger.error("libsndfile write to %s failed: %s", self.path, e)
        return (self._file.tell() - before) * self.channels

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()
            logger.debug("Closed %s", self.path)
