"""
Sinks module for drumseq.

Provides audio output:
- BufferedAudioSink: batches frames and flushes to a stream
- SoundFileStream: 16-bit PCM WAV writer
"""

from .wav import AudioStream, SoundFileStream
from .buffered import BufferedAudioSink, DEFAULT_BUFFER_FRAMES

__all__ = [
    "AudioStream",
    "SoundFileStream",
    "BufferedAudioSink",
    "DEFAULT_BUFFER_FRAMES",
]
