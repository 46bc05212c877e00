"""
Unit tests for Asteroid Dodge sound effects.

Actual playback is hard to test, so these check sound generation, event
priority and that audio can be disabled gracefully.
"""

from unittest.mock import patch

import numpy as np
import pygame
import pytest

from models import GameEvent
from games.AsteroidDodge.audio import SAMPLE_RATE, DodgeAudio, arpeggio_wave, sweep_wave


@pytest.fixture
def pygame_init():
    """Initialize pygame for testing."""
    pygame.init()
    yield
    pygame.quit()


class TestWaveforms:
    """Test procedural waveform generation."""

    def test_sweep_length_and_type(self):
        """Test a sweep has duration * sample rate int16 samples."""
        wave = sweep_wave(440, 220, 0.5)

        assert wave.dtype == np.int16
        assert len(wave) == int(SAMPLE_RATE * 0.5)

    def test_sweep_amplitude(self):
        """Test samples never exceed the requested amplitude."""
        wave = sweep_wave(440, 880, 0.2, amplitude=0.25)
        assert np.abs(wave).max() <= int(32767 * 0.25)

    def test_sweep_fades_out(self):
        """Test the envelope ends in silence."""
        wave = sweep_wave(300, 300, 0.3)
        assert wave[-1] == 0

    def test_noise_is_seeded(self):
        """Test noisy sweeps are identical for the same seed."""
        a = sweep_wave(200, 60, 0.2, noise=0.5, seed=3)
        b = sweep_wave(200, 60, 0.2, noise=0.5, seed=3)
        assert np.array_equal(a, b)

    def test_arpeggio_length(self):
        """Test an arpeggio is one note length per frequency."""
        wave = arpeggio_wave([523, 659, 784], 0.1)

        assert wave.dtype == np.int16
        assert len(wave) == 3 * int(SAMPLE_RATE * 0.1)


class TestDodgeAudio:
    """Test the event-driven sound player."""

    def test_disabled(self):
        """Test a disabled player generates nothing."""
        audio = DodgeAudio(audio_enabled=False)

        assert audio.audio_enabled is False
        assert audio.sounds == {}

    def test_play_disabled_is_safe(self):
        """Test playing with audio disabled does not raise."""
        audio = DodgeAudio(audio_enabled=False)
        audio.play('damage')
        audio.play('no-such-sound')

    @pytest.mark.parametrize("events,expected", [
        ({GameEvent.RUN_ENDED, GameEvent.PLAYER_DAMAGED}, 'game_over'),
        ({GameEvent.PLAYER_DAMAGED, GameEvent.LEVEL_UP}, 'damage'),
        ({GameEvent.SHIELD_CONSUMED, GameEvent.HAZARD_DESTROYED}, 'shield'),
        ({GameEvent.LEVEL_UP, GameEvent.PICKUP_COLLECTED}, 'level_up'),
        ({GameEvent.PICKUP_COLLECTED}, 'pickup'),
        ({GameEvent.HAZARD_AVOIDED}, None),
        (set(), None),
    ])
    def test_event_priority(self, events, expected):
        """Test the most important event of a tick picks the sound."""
        audio = DodgeAudio(audio_enabled=False)
        assert audio.play_events(events) == expected

    def test_mixer_failure_disables_audio(self, pygame_init):
        """Test a mixer that cannot open leaves the game silent."""
        with patch('pygame.mixer.get_init', return_value=None), \
             patch('pygame.mixer.init', side_effect=pygame.error("no device")):
            audio = DodgeAudio(audio_enabled=True)

        assert audio.audio_enabled is False
        assert audio.sounds == {}
        assert audio.play_events({GameEvent.RUN_ENDED}) == 'game_over'

    def test_enabled_with_dummy_driver(self, pygame_init):
        """Test enabling audio under the dummy driver does not raise."""
        audio = DodgeAudio(audio_enabled=True)

        assert isinstance(audio.sounds, dict)
        audio.play_events({GameEvent.LEVEL_UP})
