"""Tests for the 8-bit sound synthesis."""

import numpy as np
import pytest

from som import SoundManager, synthesize


class TestSynthesize:
    def test_length_matches_duration(self):
        samples = synthesize("square", 200, 0.1, 0.05, 0.01, 0.01, sample_rate=8000)
        assert samples.shape == (800,)

    def test_quantized_to_eighths(self):
        samples = synthesize("triangle", 440, 0.05, 0.01, 0.01, 0.01, sample_rate=8000)
        np.testing.assert_array_equal(samples * 8, np.round(samples * 8))

    @pytest.mark.parametrize("wave", ["square", "sawtooth", "triangle", "sine"])
    def test_amplitude_range(self, wave):
        samples = synthesize(wave, 300, 0.1, 0.02, 0.02, 0.02, sample_rate=8000)
        assert np.abs(samples).max() <= 1.0
        assert np.abs(samples).max() > 0

    def test_starts_silent(self):
        samples = synthesize("square", 200, 0.1, 0.05, 0.01, 0.01, sample_rate=8000)
        assert samples[0] == 0

    def test_chord_is_normalized(self):
        samples = synthesize("sine", [220, 330, 440], 0.1, 0.01, 0.01, 0.01, sample_rate=8000)
        assert np.abs(samples).max() <= 1.0


class TestSoundManager:
    def test_disabled_manager_is_silent_noop(self):
        sound = SoundManager(enabled=False)
        sound.notify_paddle_hit()
        assert sound.sounds == {}

    def test_mute_toggle(self):
        sound = SoundManager(enabled=False)
        assert sound.toggle_mute() is True
        assert sound.toggle_mute() is False
