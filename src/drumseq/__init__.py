"""
drumseq - Parametric drum synthesis and pattern sequencing

Renders decaying-sine-plus-noise drum voices along a tick timeline and
streams the stereo result into a buffered 16-bit WAV writer.

Quick Start:
    from drumseq import DrumVoice, PatternSequencer, Trigger, End
    from drumseq import BufferedAudioSink, Renderer, WhiteNoise

Architecture:
    - events: Frame, Trigger/End timeline events
    - voices: Voice interface, DrumVoice and presets
    - pattern: PatternSequencer
    - sinks: BufferedAudioSink and the WAV stream
    - modulation: parameter sweeps
    - songs: step-grid songs and the demo groove
    - system: Renderer
"""

# Events
from .events import Frame, SILENCE, Trigger, End, validate_timeline

# Errors
from .errors import DrumseqError, PatternError, AudioSinkError, SinkWriteError

# Voices
from .voices import Voice, DrumVoice, DrumParams, DRUM_PRESETS, get_preset

# Sequencing
from .pattern import PatternSequencer, pattern_from_steps

# Sinks
from .sinks import (
    AudioStream,
    SoundFileStream,
    BufferedAudioSink,
    DEFAULT_BUFFER_FRAMES,
)

# Modulation
from .modulation import Modulator, sine_lfo

# Songs
from .songs import Song, demo_song

# Utils
from .utils import NoiseSource, WhiteNoise, SAMPLE_RATE, CHANNELS, step_ticks

# System
from .system import Renderer, render_song


__version__ = "0.1.0"

__all__ = [
    # Events
    "Frame",
    "SILENCE",
    "Trigger",
    "End",
    "validate_timeline",
    # Errors
    "DrumseqError",
    "PatternError",
    "AudioSinkError",
    "SinkWriteError",
    # Voices
    "Voice",
    "DrumVoice",
    "DrumParams",
    "DRUM_PRESETS",
    "get_preset",
    # Sequencing
    "PatternSequencer",
    "pattern_from_steps",
    # Sinks
    "AudioStream",
    "SoundFileStream",
    "BufferedAudioSink",
    "DEFAULT_BUFFER_FRAMES",
    # Modulation
    "Modulator",
    "sine_lfo",
    # Songs
    "Song",
    "demo_song",
    # Utils
    "NoiseSource",
    "WhiteNoise",
    "SAMPLE_RATE",
    "CHANNELS",
    "step_ticks",
    # System
    "Renderer",
    "render_song",
]
