"""
Core Game Interface Package

Contains the server-facing classes:
- LineChannel / SocketLineChannel: line transport to the hangman server
- HangmanProtocol: NEW / GUESS / QUIT exchanges
- Error types shared by the whole client
"""

from .errors import (
    HangmanError,
    ChannelConnectionError,
    ChannelClosedError,
    ProtocolError,
    PresentationError,
)
from .line_channel import LineChannel, SocketLineChannel
from .hangman_protocol import HangmanProtocol, parse_match_token, parse_word_length

__all__ = [
    "HangmanError",
    "ChannelConnectionError",
    "ChannelClosedError",
    "ProtocolError",
    "PresentationError",
    "LineChannel",
    "SocketLineChannel",
    "HangmanProtocol",
    "parse_match_token",
    "parse_word_length",
]
