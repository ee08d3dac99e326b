"""
Exceptions raised by drumseq.
"""


class DrumseqError(Exception):
    """Base class for all drumseq errors."""


class PatternError(DrumseqError, ValueError):
    """Raised when an event timeline is malformed."""


class AudioSinkError(DrumseqError):
    """Raised when the output stream cannot be opened."""


class SinkWriteError(AudioSinkError):
    """Raised by a strict sink when the stream accepts fewer samples than given."""

    def __init__(self, expected: int, written: int):
        super().__init__(f"wrote {written} of {expected} samples")
        self.expected = expected
        self.written = written
