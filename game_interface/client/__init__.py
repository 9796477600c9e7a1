"""
Game Client Package

Contains the participant-facing interaction ports:
- InteractionPort: the abstract contract the core depends on
- TextInteractionPort: terminal prompts and output
- ScriptedInteractionPort: plays from pre-recorded answers
"""

from .interaction_port import InteractionPort
from .text_console import TextInteractionPort
from .scripted_port import ScriptedInteractionPort

__all__ = ["InteractionPort", "TextInteractionPort", "ScriptedInteractionPort"]
