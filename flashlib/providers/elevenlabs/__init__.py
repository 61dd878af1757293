"""ElevenLabs speech provider."""

from .actions import get_elevenlabs_actions
from .config import ElevenLabsConfig

__all__ = ["ElevenLabsConfig", "get_elevenlabs_actions"]
