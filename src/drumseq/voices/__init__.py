"""
Voices module for drumseq.

Provides sound generators for the sequencer:
- Voice: abstract trigger/render interface
- DrumVoice, DrumParams: parametric drum model
- DRUM_PRESETS, get_preset: kick, snare and tom settings
"""

from .base import Voice
from .drum import DrumVoice, DrumParams
from .presets import DRUM_PRESETS, get_preset

__all__ = [
    "Voice",
    "DrumVoice",
    "DrumParams",
    "DRUM_PRESETS",
    "get_preset",
]
