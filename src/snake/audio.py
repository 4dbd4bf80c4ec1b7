import logging
from typing import Iterable, Optional

import pygame  # type: ignore

from .enums import SessionEvent

logger = logging.getLogger(__name__)


class Audio:
    """Plays the game-over sound; without a sound file it stays muted."""

    def __init__(self, sound_path: Optional[str] = None):
        self.sound = None
        self.muted = sound_path is None
        if sound_path is None:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            self.sound = pygame.mixer.Sound(sound_path)
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("audio disabled, could not load %s: %s", sound_path, exc)
            self.muted = True

    def toggle_mute(self) -> None:
        self.muted = not self.muted

    def handle(self, events: Iterable[SessionEvent]) -> None:
        for event in events:
            if event is SessionEvent.GAME_OVER_SOUND:
                logger.debug("game over sound requested (muted=%s)", self.muted)
                if not self.muted and self.sound is not None:
                    self.sound.stop()
                    self.sound.play()
