"""
Drum voice presets.
"""

from typing import Dict

from .drum import DrumParams

# Toms are pitched to A2, G2 and B2 with no glide
DRUM_PRESETS: Dict[str, DrumParams] = {
    "kick": DrumParams(
        amplitude=1.0,
        env_decay=15.0,
        frequency=110.0,
        freq_decay=28.0,
        noise_amount=0.1,
        noise_decay=28.0,
        limit=0.5,
    ),
    "snare": DrumParams(
        amplitude=0.6,
        env_decay=15.0,
        frequency=279.0,
        freq_decay=45.0,
        noise_amount=0.5,
        noise_decay=10.1,
        limit=0.4,
    ),
    "tom_a": DrumParams(
        amplitude=0.6,
        env_decay=15.0,
        frequency=110.0,
        freq_decay=0.0,
        noise_amount=0.01,
        noise_decay=10.1,
        limit=0.4,
    ),
    "tom_g": DrumParams(
        amplitude=0.6,
        env_decay=15.0,
        frequency=97.999,
        freq_decay=0.0,
        noise_amount=0.01,
        noise_decay=10.1,
        limit=0.4,
    ),
    "tom_b": DrumParams(
        amplitude=0.6,
        env_decay=15.0,
        frequency=123.471,
        freq_decay=0.0,
        noise_amount=0.01,
        noise_decay=10.1,
        limit=0.4,
    ),
}


def get_preset(name: str) -> DrumParams:
    """Get a drum preset by name."""
    try:
        return DRUM_PRESETS[name]
    except KeyError:
        raise KeyError(
            f"unknown drum preset {name!r}, expected one of {sorted(DRUM_PRESETS)}"
        ) from None
