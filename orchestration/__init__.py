"""Orchestration package: drives hangman rounds over one connection."""

from .round_controller import RoundController

__all__ = ["RoundController"]
