# ABOUTME: Test fixtures module for deterministic hangman testing
# ABOUTME: Provides in-memory server emulation for the line channel

from .fake_server import (
    DEFAULT_PREAMBLE,
    FakeHangmanServer,
    ScriptedLineChannel,
)

__all__ = [
    "DEFAULT_PREAMBLE",
    "FakeHangmanServer",
    "ScriptedLineChannel",
]
