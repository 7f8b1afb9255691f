"""
Unit tests for synthesized sound effects
"""

import numpy as np

from pongish.core.entities import Sound
from pongish.gui.sound import SAMPLE_RATE, TONES, make_tone


class TestMakeTone:
    """Test tone synthesis"""

    def test_stereo_shape(self):
        """A stereo tone has one column per channel"""
        samples = make_tone(440.0, 0.05, 0.5)

        assert samples.shape == (int(SAMPLE_RATE * 0.05), 2)
        assert samples.dtype == np.int16
        assert samples.flags["C_CONTIGUOUS"]
        assert np.array_equal(samples[:, 0], samples[:, 1])

    def test_mono_shape(self):
        """A mono tone is a flat array"""
        samples = make_tone(440.0, 0.05, 0.5, sample_rate=22050, channels=1)

        assert samples.shape == (int(22050 * 0.05),)

    def test_amplitude_bounded_by_volume(self):
        """Volume scales the peak and the tone decays to silence"""
        samples = make_tone(660.0, 0.1, 0.25, channels=1)

        assert np.abs(samples).max() <= 0.25 * 32767
        assert np.abs(samples[-10:]).max() < np.abs(samples).max()

    def test_every_sound_has_a_tone(self):
        """Each game sound is synthesized"""
        assert set(TONES) == set(Sound)
