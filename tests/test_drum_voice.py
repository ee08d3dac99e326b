import math
import unittest

from drumseq import DrumParams, DrumVoice, WhiteNoise, get_preset
from drumseq.utils import TWO_PI


class FixedNoise:
    """Cycles through a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.draws = 0

    def sample(self) -> float:
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value


class TestDrumVoice(unittest.TestCase):
    def test_trigger_resets_phase(self) -> None:
        voice = DrumVoice(frequency=440.0, noise=WhiteNoise(seed=1))
        for f in range(50):
            voice.render(44100, f)
        self.assertNotEqual(voice.phase, 0.0)

        voice.trigger()
        self.assertEqual(voice.phase, 0.0)

    def test_phase_stays_wrapped(self) -> None:
        for freq in (110.0, 15000.0, 100000.0):
            voice = DrumVoice(frequency=freq, freq_decay=0.0, noise=WhiteNoise(seed=2))
            for f in range(2000):
                voice.render(44100, f)
                self.assertGreaterEqual(voice.phase, 0.0)
                self.assertLess(voice.phase, TWO_PI)

    def test_constant_frequency_advances_phase_linearly(self) -> None:
        voice = DrumVoice(frequency=441.0, freq_decay=0.0, noise=WhiteNoise(seed=3))
        voice.render(44100, 0)
        self.assertAlmostEqual(voice.phase, TWO_PI * 441.0 / 44100)
        voice.render(44100, 1000)
        self.assertAlmostEqual(voice.phase, 2 * TWO_PI * 441.0 / 44100)

    def test_frequency_glides_down(self) -> None:
        voice = DrumVoice(frequency=200.0, freq_decay=30.0)
        self.assertEqual(voice.instantaneous_frequency(44100, 0), 200.0)
        self.assertLess(voice.instantaneous_frequency(44100, 4410), 200.0)
        self.assertAlmostEqual(
            voice.instantaneous_frequency(44100, 44100), 200.0 * math.exp(-30.0)
        )

    def test_envelopes_decay_within_unit_range(self) -> None:
        voice = DrumVoice(env_decay=15.0, noise_decay=28.0)
        previous_env = previous_noise = 1.0
        for f in range(0, 44100, 441):
            env = voice.envelope(44100, f)
            noise_env = voice.noise_envelope(44100, f)
            self.assertGreater(env, 0.0)
            self.assertLessEqual(env, 1.0)
            self.assertGreater(noise_env, 0.0)
            self.assertLessEqual(noise_env, 1.0)
            self.assertLessEqual(env, previous_env)
            self.assertLessEqual(noise_env, previous_noise)
            previous_env, previous_noise = env, noise_env

    def test_output_is_clamped(self) -> None:
        voice = DrumVoice(
            amplitude=50.0,
            env_decay=0.5,
            frequency=60.0,
            noise_amount=0.5,
            noise_decay=0.1,
            limit=0.25,
            noise=WhiteNoise(seed=4),
        )
        for f in range(3000):
            left, right = voice.render(44100, f)
            self.assertLessEqual(abs(left), 0.25)
            self.assertLessEqual(abs(right), 0.25)

    def test_growing_envelopes_stay_clamped(self) -> None:
        voice = DrumVoice(
            env_decay=-15.0,
            noise_decay=-10.0,
            freq_decay=-5.0,
            limit=0.4,
            noise=WhiteNoise(seed=6),
        )
        for f in (44100 * 60, 44100 * 600, 10**12):
            left, right = voice.render(44100, f)
            self.assertLessEqual(abs(left), 0.4)
            self.assertLessEqual(abs(right), 0.4)
            self.assertGreaterEqual(voice.phase, 0.0)
            self.assertLess(voice.phase, TWO_PI)

    def test_zero_sample_rate_renders_without_advancing(self) -> None:
        voice = DrumVoice(limit=0.5, noise=WhiteNoise(seed=7))
        for f in (0, 100):
            left, right = voice.render(0, f)
            self.assertLessEqual(abs(left), 0.5)
            self.assertLessEqual(abs(right), 0.5)
        self.assertEqual(voice.phase, 0.0)

    def test_channels_use_separate_noise_draws(self) -> None:
        noise = FixedNoise([0.5, -0.5])
        voice = DrumVoice(amplitude=1.0, noise_amount=1.0, limit=1.0, noise=noise)
        frame = voice.render(44100, 0)

        # Pure noise: the shared part cancels, leaving 0.3 of each draw.
        self.assertAlmostEqual(frame.left, 0.15)
        self.assertAlmostEqual(frame.right, -0.15)
        self.assertEqual(noise.draws, 2)

    def test_pure_tone_is_identical_in_both_channels(self) -> None:
        voice = DrumVoice(noise_amount=0.0, limit=1.0, noise=WhiteNoise(seed=5))
        for f in range(100):
            left, right = voice.render(44100, f)
            self.assertEqual(left, right)

    def test_same_seed_same_output(self) -> None:
        a = DrumVoice.from_params(get_preset("snare"), noise=WhiteNoise(seed=9))
        b = DrumVoice.from_params(get_preset("snare"), noise=WhiteNoise(seed=9))
        self.assertEqual(
            [a.render(44100, f) for f in range(500)],
            [b.render(44100, f) for f in range(500)],
        )

    def test_params_snapshot(self) -> None:
        params = DrumParams(amplitude=0.7, frequency=220.0, limit=0.3)
        voice = DrumVoice.from_params(params)
        self.assertEqual(voice.params(), params)

        voice.limit = 0.1
        self.assertEqual(voice.params().limit, 0.1)

    def test_unknown_preset(self) -> None:
        with self.assertRaises(KeyError):
            get_preset("cowbell")


if __name__ == "__main__":
    unittest.main()
