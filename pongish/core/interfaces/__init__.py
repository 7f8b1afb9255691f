"""
Protocols for the collaborators the core calls into
"""

from pongish.core.interfaces.randomness import RandomSource
from pongish.core.interfaces.renderer import RendererProtocol
from pongish.core.interfaces.sound import SilentSoundPlayer
from pongish.core.interfaces.sound import SoundPlayerProtocol

__all__ = ["RandomSource", "RendererProtocol", "SilentSoundPlayer", "SoundPlayerProtocol"]
