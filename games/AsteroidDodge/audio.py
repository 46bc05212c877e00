"""
Sound effects for Asteroid Dodge.

All sounds are generated procedurally with numpy when the mixer starts, so
the game ships no audio assets. If the mixer cannot be opened (no device,
dummy driver) the game simply stays silent.
"""

from typing import Dict, Iterable, List, Optional

import numpy as np
import pygame

from models import GameEvent
from arcade.logging import get_logger

log = get_logger('audio')

SAMPLE_RATE = 22050

# Event -> sound name, in playback priority order
EVENT_SOUNDS = [
    (GameEvent.RUN_ENDED, 'game_over'),
    (GameEvent.PLAYER_DAMAGED, 'damage'),
    (GameEvent.SHIELD_CONSUMED, 'shield'),
    (GameEvent.LEVEL_UP, 'level_up'),
    (GameEvent.PICKUP_COLLECTED, 'pickup'),
]


def _envelope(num_samples: int, fade_in: float = 0.05, fade_out: float = 0.3) -> np.ndarray:
    """Linear attack and release envelope."""
    env = np.ones(num_samples)
    attack = max(1, int(num_samples * fade_in))
    release = max(1, int(num_samples * fade_out))
    env[:attack] = np.linspace(0, 1, attack)
    env[-release:] = np.linspace(1, 0, release)
    return env


def sweep_wave(freq_start: float, freq_end: float, duration: float,
               amplitude: float = 0.3, noise: float = 0.0,
               seed: int = 0) -> np.ndarray:
    """
    Generate a frequency sweep as int16 samples.

    Args:
        freq_start: Starting frequency in Hz
        freq_end: Ending frequency in Hz
        duration: Length in seconds
        amplitude: Peak level in [0, 1]
        noise: Share of white noise mixed in, for crunchy impacts
        seed: Noise seed so generated sounds are identical across runs

    Returns:
        1-D int16 array
    """
    num_samples = int(SAMPLE_RATE * duration)
    frequencies = np.linspace(freq_start, freq_end, num_samples)
    phase = np.cumsum(2.0 * np.pi * frequencies / SAMPLE_RATE)
    wave = np.sin(phase)
    if noise > 0:
        rng = np.random.default_rng(seed)
        wave = (1 - noise) * wave + noise * rng.uniform(-1, 1, num_samples)
    wave = wave * _envelope(num_samples)
    return (wave * 32767 * amplitude).astype(np.int16)


def arpeggio_wave(frequencies: List[float], note_duration: float,
                  amplitude: float = 0.3) -> np.ndarray:
    """Generate consecutive notes as int16 samples."""
    notes = []
    samples_per_note = int(SAMPLE_RATE * note_duration)
    t = np.linspace(0, note_duration, samples_per_note, False)
    for freq in frequencies:
        note = np.sin(2.0 * np.pi * freq * t) * _envelope(samples_per_note, 0.1, 0.4)
        notes.append(note)
    wave = np.concatenate(notes)
    return (wave * 32767 * amplitude).astype(np.int16)


class DodgeAudio:
    """Plays a sound for the notable events of each tick.

    Attributes:
        audio_enabled: Whether sounds will be played
        sounds: Generated sounds by name

    Examples:
        >>> audio = DodgeAudio(audio_enabled=False)
        >>> audio.play_events({GameEvent.LEVEL_UP})  # silent no-op
    """

    def __init__(self, audio_enabled: bool = True, volume: float = 0.4):
        self.audio_enabled = audio_enabled
        self.volume = volume
        self.sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}

        if self.audio_enabled:
            self._init_audio()

    def _init_audio(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)

            self.sounds['damage'] = self._make_sound(sweep_wave(220, 60, 0.35, 0.4, noise=0.4, seed=1))
            self.sounds['shield'] = self._make_sound(sweep_wave(600, 1200, 0.2, 0.3))
            self.sounds['pickup'] = self._make_sound(arpeggio_wave([660, 880], 0.07))
            self.sounds['level_up'] = self._make_sound(arpeggio_wave([523, 659, 784, 1047], 0.09, 0.35))
            self.sounds['game_over'] = self._make_sound(sweep_wave(400, 80, 0.9, 0.35, noise=0.2, seed=2))

            for sound in self.sounds.values():
                if sound is not None:
                    sound.set_volume(self.volume)

        except pygame.error as e:
            log.warning("Audio initialization failed: %s", e)
            self.audio_enabled = False
            self.sounds = {}

    def _make_sound(self, wave: np.ndarray) -> Optional[pygame.mixer.Sound]:
        """Wrap samples in a Sound matching the mixer's channel count."""
        try:
            _, _, channels = pygame.mixer.get_init()
            if channels > 1:
                wave = np.column_stack([wave] * channels)
            return pygame.sndarray.make_sound(np.ascontiguousarray(wave))
        except (pygame.error, ValueError) as e:
            log.warning("Could not generate sound: %s", e)
            return None

    def play(self, name: str) -> None:
        """Play a sound by name.

        Safe to call even if audio is disabled or sound generation failed.
        """
        sound = self.sounds.get(name)
        if not self.audio_enabled or sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            log.warning("Could not play %s sound: %s", name, e)

    def play_events(self, events: Iterable[GameEvent]) -> Optional[str]:
        """Play the most important sound for a tick's events.

        Returns:
            Name of the chosen sound, or None if no event has one
        """
        present = set(events)
        for event, name in EVENT_SOUNDS:
            if event in present:
                self.play(name)
                return name
        return None
