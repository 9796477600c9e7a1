"""
Hangman Game Interface Layer

This module provides the two edges of the client:
- core: the line channel to the hangman server and the wire protocol codec
- client: the interaction ports that talk to the participant
"""

from .core.line_channel import LineChannel, SocketLineChannel
from .core.hangman_protocol import HangmanProtocol
from .client.interaction_port import InteractionPort

__all__ = ["LineChannel", "SocketLineChannel", "HangmanProtocol", "InteractionPort"]
