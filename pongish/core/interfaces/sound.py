"""
Sound protocol - defines interface for sound effect backends
"""

from typing import Protocol

from pongish.core.entities import Sound


class SoundPlayerProtocol(Protocol):
    """
    Protocol for sound effect players.

    Playing is fire-and-forget: it must not block the update tick.
    """

    def play(self, sound: Sound) -> None:
        """
        Start playing a sound effect.

        Args:
            sound: Which effect to play
        """
        ...


class SilentSoundPlayer:
    """Sound player that plays nothing (headless runs, muted games)"""

    def play(self, sound: Sound) -> None:
        pass
