"""
Base voice class for drumseq.
"""

from abc import ABC, abstractmethod

from ..events import Frame


class Voice(ABC):
    """
    Base class for every sound generator the sequencer can play.

    Voices are synchronous components that:
    - Reset their oscillator state on trigger()
    - Render one Frame per call from the elapsed local frame count
    """

    @abstractmethod
    def trigger(self) -> None:
        """Restart the sound. Called once when its event becomes active."""
        pass

    @abstractmethod
    def render(self, sample_rate: float, elapsed_frames: int) -> Frame:
        """Render the frame `elapsed_frames` samples after the trigger."""
        pass
