"""Procedural sound effects generator for the game."""

import math
import random
from typing import Optional

import numpy as np

from starfall.config import SAMPLE_RATE


class SoundGenerator:
    """
    Generates procedural game sound effects in memory.

    Every generator returns float samples in the range -1.0 to 1.0; use
    ``to_pcm16`` to turn them into a buffer the mixer can play.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE, seed: Optional[int] = None):
        """
        Initialize the sound generator.

        Args:
            sample_rate: Sample rate for generated sounds (default: 44100 Hz)
            seed: Optional seed for the noise used by explosions
        """
        self.sample_rate = sample_rate
        self.amplitude = 32767  # Maximum amplitude for 16-bit audio
        self.rng = random.Random(seed)

    def _clamp_sample(self, sample: np.ndarray) -> np.ndarray:
        """Clamp samples between -1.0 and 1.0."""
        return np.clip(sample, -1.0, 1.0)

    def _timeline(self, duration: float) -> np.ndarray:
        """Sample times in seconds for a sound of the given duration."""
        num_samples = int(self.sample_rate * duration)
        return np.arange(num_samples) / self.sample_rate

    def _apply_envelope(
        self,
        samples: np.ndarray,
        attack: float = 0.01,
        decay: float = 0.1,
        sustain: float = 0.8,
        release: float = 0.1,
    ) -> np.ndarray:
        """
        Apply an ADSR envelope to the samples.

        Args:
            samples: The audio samples
            attack: Attack time in seconds
            decay: Decay time in seconds
            sustain: Sustain level (0.0 to 1.0)
            release: Release time in seconds

        Returns:
            Modified samples with envelope applied
        """
        total_samples = len(samples)

        # Phases never take more than a quarter of the sound each
        attack_samples = min(int(attack * self.sample_rate), total_samples // 4)
        decay_samples = min(int(decay * self.sample_rate), total_samples // 4)
        release_samples = min(int(release * self.sample_rate), total_samples // 4)
        sustain_samples = total_samples - attack_samples - decay_samples - release_samples

        envelope = np.ones(total_samples)

        if attack_samples > 0:
            envelope[:attack_samples] = np.linspace(0, 1, attack_samples)

        if decay_samples > 0:
            decay_curve = np.linspace(0, 1, decay_samples) ** 0.5
            envelope[attack_samples : attack_samples + decay_samples] = (
                1.0 - (1.0 - sustain) * decay_curve
            )

        sustain_end = attack_samples + decay_samples + sustain_samples
        if sustain_samples > 0:
            envelope[attack_samples + decay_samples : sustain_end] = sustain

        if release_samples > 0:
            release_curve = np.linspace(0, 1, total_samples - sustain_end) ** 2
            envelope[sustain_end:] = sustain * (1.0 - release_curve)

        return samples * envelope

    def _apply_lowpass_filter(self, samples: np.ndarray, cutoff_freq: float) -> np.ndarray:
        """
        Apply a simple one-pole lowpass filter to the samples.

        Args:
            samples: The audio samples
            cutoff_freq: Cutoff frequency in Hz

        Returns:
            Filtered samples
        """
        dt = 1.0 / self.sample_rate
        rc = 1.0 / (2.0 * math.pi * cutoff_freq)
        alpha = dt / (rc + dt)

        filtered_samples = np.zeros_like(samples)
        if len(samples) == 0:
            return filtered_samples
        filtered_samples[0] = samples[0]

        for i in range(1, len(samples)):
            filtered_samples[i] = filtered_samples[i - 1] + alpha * (
                samples[i] - filtered_samples[i - 1]
            )

        return filtered_samples

    def generate_shoot(
        self,
        duration: float = 0.15,
        freq_start: float = 880,
        freq_end: float = 110,
        volume: float = 0.6,
    ) -> np.ndarray:
        """
        Generate a descending blaster shot.

        Args:
            duration: Sound length in seconds
            freq_start: Starting frequency in Hz
            freq_end: Ending frequency in Hz
            volume: Volume level (0.0 to 1.0)
        """
        t = self._timeline(duration)
        # Exponential sweep; the phase is the integral of the instantaneous frequency
        k = math.log(freq_end / freq_start) / duration
        phase = 2 * math.pi * freq_start * (np.exp(k * t) - 1) / k
        # Square wave for an arcade feel
        samples = np.sign(np.sin(phase)) * 0.5

        samples = self._clamp_sample(samples) * volume
        return self._apply_envelope(samples, attack=0.005, decay=0.05, sustain=0.6, release=0.05)

    def generate_explosion(self, duration: float = 0.5, intensity: float = 0.8) -> np.ndarray:
        """
        Generate an explosion sound effect.

        Args:
            duration: Sound length in seconds
            intensity: Explosion intensity (affects noise level and filtering)
        """
        t = self._timeline(duration)
        num_samples = len(t)

        # Noise fading out over time with a low frequency rumble underneath
        progress = np.arange(num_samples) / max(num_samples, 1)
        amp = 1.0 - progress**0.5
        noise = np.array([self.rng.uniform(-1.0, 1.0) for _ in range(num_samples)])
        rumble = np.sin(2 * math.pi * 40 * t) * 0.3
        samples = (noise * 0.7 + rumble * 0.3) * amp

        cutoff = 1000 + 3000 * intensity
        samples = self._apply_lowpass_filter(samples, cutoff)

        samples = self._apply_envelope(samples, attack=0.01, decay=0.1, sustain=0.5, release=0.3)
        return self._clamp_sample(samples * 2.0) * 0.9

    def generate_powerup(self, duration: float = 0.4, base_freq: float = 440) -> np.ndarray:
        """
        Generate a rising arpeggio for a level-up.

        Args:
            duration: Sound length in seconds
            base_freq: Base frequency in Hz
        """
        t = self._timeline(duration)
        num_samples = len(t)

        # Root, major third, fifth, octave
        ratios = np.array([1.0, 1.25, 1.5, 2.0])
        note_idx = np.minimum((np.arange(num_samples) * 4) // max(num_samples, 1), 3)
        freq = base_freq * ratios[note_idx]

        vibrato = np.sin(2 * math.pi * 8 * t) * 0.1
        samples = (
            0.7 * np.sin(2 * math.pi * freq * t)
            + 0.2 * np.sin(2 * math.pi * freq * 2 * t)
            + 0.1 * np.sin(2 * math.pi * freq * 3 * t)
        ) * (1.0 + vibrato)

        samples = self._apply_envelope(samples, attack=0.01, decay=0.1, sustain=0.8, release=0.1)
        return self._clamp_sample(samples) * 0.8

    def generate_ambience(self, duration: float = 4.0, volume: float = 0.5) -> np.ndarray:
        """
        Generate a low drone that loops without a click.

        Each oscillator completes a whole number of cycles in ``duration`` so
        the last sample runs straight into the first one.

        Args:
            duration: Loop length in seconds
            volume: Volume level (0.0 to 1.0)
        """
        t = self._timeline(duration)
        samples = np.zeros_like(t)
        # (cycles per loop, weight)
        oscillators = [(220, 0.5), (330, 0.3), (441, 0.2)]
        for cycles, weight in oscillators:
            samples += weight * np.sin(2 * math.pi * (cycles / duration) * t)

        # Slow swell, two breaths per loop
        swell = 0.75 + 0.25 * np.sin(2 * math.pi * (2 / duration) * t)
        return self._clamp_sample(samples * swell) * volume

    def to_pcm16(self, samples: np.ndarray, channels: int = 1) -> np.ndarray:
        """
        Convert float samples to signed 16-bit PCM.

        Args:
            samples: Audio samples (-1.0 to 1.0)
            channels: Number of output channels; mono is duplicated as needed

        Returns:
            int16 array shaped (n,) for mono or (n, channels) otherwise
        """
        samples_int = (self._clamp_sample(samples) * self.amplitude).astype(np.int16)
        if channels == 1:
            return samples_int
        return np.ascontiguousarray(np.repeat(samples_int[:, np.newaxis], channels, axis=1))
