from __future__ import annotations

import logging
import os

import pygame

logger = logging.getLogger(__name__)

SOUNDS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sounds")

# name -> (file, fallback beep freq, fallback beep duration)
SOUNDS = {
    "eat": ("eat.wav", 600, 0.08),
    "gameover": ("gameover.wav", 120, 0.25),
}


class SoundService:
    """Best-effort sound effects.

    Constructed once by the host and handed to whoever triggers playback.
    Missing files, a missing mixer or playback errors never propagate:
    the affected sound is simply silent.
    """

    def __init__(self, sounds_dir: str | None = SOUNDS_DIR, enabled: bool = True):
        self.sounds_dir = sounds_dir
        self.enabled = enabled
        self._sounds: dict[str, object] = {}

    def load(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as e:
            logger.warning("Sound disabled, mixer unavailable: %s", e)
            return

        for name, (fname, freq, duration) in SOUNDS.items():
            snd = self._load_file(fname)
            if snd is None:
                snd = self._make_beep(freq, duration)
            if snd is not None:
                self._sounds[name] = snd
        logger.info("Loaded sounds: %s", ", ".join(sorted(self._sounds)) or "none")

    def _load_file(self, fname: str):
        if not self.sounds_dir:
            return None
        path = os.path.join(self.sounds_dir, fname)
        if not os.path.isfile(path):
            return None
        try:
            return pygame.mixer.Sound(path)
        except (pygame.error, OSError) as e:
            logger.debug("Could not load %s: %s", path, e)
            return None

    def _make_beep(self, freq: int, duration: float):
        # Generate a simple square beep in a Sound object
        try:
            import numpy as np
            freq_hz, _, channels = pygame.mixer.get_init()
            n = int(duration * freq_hz)
            t = np.arange(n) / freq_hz
            wave = ((np.sin(2 * np.pi * freq * t) > 0) * 2 - 1).astype("float32") * 0.2
            samples = (wave * (2**15 - 1)).astype("int16")
            if channels > 1:
                samples = np.repeat(samples[:, None], channels, axis=1)
            return pygame.sndarray.make_sound(samples)
        except (ImportError, pygame.error, ValueError, TypeError) as e:
            logger.debug("Could not synthesize %d Hz beep: %s", freq, e)
            return None

    def play(self, name: str) -> None:
        if not self.enabled:
            return
        snd = self._sounds.get(name)
        if snd is None:
            return
        try:
            snd.play()
        except (pygame.error, OSError, RuntimeError) as e:
            logger.debug("Playback of %r failed: %s", name, e)

    def play_eat(self) -> None:
        self.play("eat")

    def play_game_over(self) -> None:
        self.play("gameover")

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled
