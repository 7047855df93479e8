"""
Gesture3D Cue Player (The Speaker).
===================================

Turns `Cue` events into sounds. Decoupled from the engine through
`ICuePlayer`, so the controller never knows whether audio is real.

Features:
- **pygame mixer backend:** one preloaded `Sound` per cue, read from
  `assets/sounds/<cue>.wav`.
- **Graceful gaps:** a missing or unreadable file silences that cue only.
- **Mock backend:** prints cues instead of playing them (tests, headless).
"""

import logging
from typing import Dict

from gesture3d.config import CONFIG, PATHS
from gesture3d.core.interfaces import ICuePlayer
from gesture3d.core.types import Cue

# =============================================================================
# PYGAME BACKEND (Production)
# =============================================================================
class PygameCuePlayer(ICuePlayer):
    """
    Plays cues through `pygame.mixer`. Sounds are loaded once at startup.
    """
    def __init__(self, sounds_dir=None, volume=None):
        import pygame
        self._pg = pygame
        self._pg.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)

        sounds_dir = sounds_dir or PATHS["SOUNDS_DIR"]
        volume = CONFIG["AUDIO_VOLUME"] if volume is None else volume
        self.sounds: Dict[Cue, object] = {}

        for cue in Cue:
            path = sounds_dir / f"{cue.value}.wav"
            if not path.exists():
                logging.warning(f"🔇 No sound for cue '{cue.value}': {path}")
                continue
            try:
                sound = self._pg.mixer.Sound(str(path))
            except self._pg.error as e:
                logging.error(f"❌ Failed to load {path}: {e}")
                continue
            sound.set_volume(volume)
            self.sounds[cue] = sound

    def play(self, cue: Cue) -> None:
        sound = self.sounds.get(cue)
        if sound is not None:
            # Restart from the top if it is still ringing
            sound.stop()
            sound.play()

    def close(self) -> None:
        for sound in self.sounds.values():
            sound.stop()
        self._pg.mixer.quit()

# =============================================================================
# MOCK BACKEND (Testing / Headless)
# =============================================================================
class MockCuePlayer(ICuePlayer):
    """
    Silent implementation for Unit Tests or machines without audio.
    Prints cues to stdout instead of playing them.
    """
    def play(self, cue): print(f"[MOCK] Cue {cue.value}")
    def close(self): pass

def CuePlayer() -> ICuePlayer:
    """Factory method to return the configured player, MOCK when audio can't start."""
    if CONFIG.get("AUDIO_ENABLED", False):
        import pygame
        try:
            return PygameCuePlayer()
        except pygame.error as e:
            logging.warning(f"⚠️ Audio device unavailable ({e}). Using MOCK Cue Player.")
            return MockCuePlayer()
    print("⚠️ Audio disabled. Using MOCK Cue Player.")
    return MockCuePlayer()
