"""Sound manager for the game."""

from typing import Dict, Iterable, Optional

import pygame

from starfall.config import AMBIENCE_VOLUME, DEFAULT_SOUND_VOLUME, SAMPLE_RATE
from starfall.events import GameEvent
from starfall.logger import get_logger
from starfall.utils.sound_generator import SoundGenerator

# Get a logger for this module
logger = get_logger(__name__)


class SoundManager:
    """Plays the synthesized sound effects and the ambient loop.

    Audio is optional: if the mixer cannot be initialized the manager stays
    silent and every call becomes a no-op.
    """

    def __init__(self, enabled: bool = True) -> None:
        """Initialize the sound manager.

        Args:
            enabled: False to run without touching the audio device at all.
        """
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.ambience: Optional[pygame.mixer.Sound] = None
        self.ambience_channel: Optional[pygame.mixer.Channel] = None
        self.volume = DEFAULT_SOUND_VOLUME
        self.muted = not enabled
        self.enabled = False

        if not self.muted:
            self.resume()

    def resume(self) -> bool:
        """Acquire the audio device if it is not already available.

        Returns:
            bool: True if sound is available afterwards, False otherwise
        """
        if self.muted or self.enabled:
            return self.enabled

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self._load_sounds()
            self.enabled = True
        except (pygame.error, ValueError) as e:
            logger.warning(f"Audio unavailable, continuing without sound: {e}")
            self.enabled = False
        return self.enabled

    def _load_sounds(self) -> None:
        """Synthesize all sound effects into memory."""
        frequency, _, channels = pygame.mixer.get_init()
        generator = SoundGenerator(sample_rate=frequency)

        effects = {
            GameEvent.SHOOT.value: generator.generate_shoot(),
            GameEvent.EXPLOSION.value: generator.generate_explosion(),
            GameEvent.LEVEL_UP.value: generator.generate_powerup(),
        }
        for name, samples in effects.items():
            sound = pygame.sndarray.make_sound(generator.to_pcm16(samples, channels))
            sound.set_volume(self.volume)
            self.sounds[name] = sound
            logger.debug(f"Synthesized sound: {name}")

        self.ambience = pygame.sndarray.make_sound(
            generator.to_pcm16(generator.generate_ambience(), channels)
        )
        self.ambience.set_volume(AMBIENCE_VOLUME)

    def play(self, name: str) -> None:
        """Play a sound effect without waiting for it.

        Args:
            name: Name of the sound to play
        """
        if not self.enabled:
            return

        sound = self.sounds.get(name)
        if sound is None:
            logger.warning(f"Sound {name} not found")
            return

        try:
            sound.play()
        except pygame.error as e:
            logger.error(f"Failed to play sound {name}: {e}")

    def start_ambience(self) -> None:
        """Start the ambient loop unless it is already running."""
        if not self.enabled or self.ambience is None:
            return
        if self.ambience_channel is not None and self.ambience_channel.get_busy():
            return

        try:
            self.ambience_channel = self.ambience.play(loops=-1)
            logger.info("Ambient loop started")
        except pygame.error as e:
            logger.error(f"Failed to start ambient loop: {e}")

    def stop_ambience(self) -> None:
        """Stop the ambient loop if it is playing."""
        if self.ambience_channel is not None:
            self.ambience_channel.stop()
            self.ambience_channel = None


def dispatch_events(events: Iterable[GameEvent], sound_manager: SoundManager) -> None:
    """Turn simulation events into sounds.

    Playback is fire-and-forget: any failure is logged and never reaches the
    caller.
    """
    for event in events:
        try:
            if event is GameEvent.AMBIENT_LOOP_START:
                sound_manager.start_ambience()
            else:
                sound_manager.play(event.value)
        except Exception as e:
            logger.warning(f"Failed to play sound for {event.value}: {e}")
