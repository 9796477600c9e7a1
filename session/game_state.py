"""
Round and session state for the hangman client.

RoundState holds everything known about the word currently being guessed.
SessionHistory is the only state that survives from one round to the next
on the same connection.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class RoundOutcome(Enum):
    """Outcome of a single round."""

    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class RoundState:
    """
    State of one word-guessing round.

    Slots hold None until the server confirms a letter at that position.
    Once revealed, a slot never goes back to unguessed.
    """

    word_length: int
    guesses_remaining: int
    unguessed_marker: str = "_"
    revealed: List[Optional[str]] = field(default_factory=list)
    letters_guessed: List[str] = field(default_factory=list)
    solution_word: Optional[str] = None
    outcome: RoundOutcome = RoundOutcome.IN_PROGRESS

    @classmethod
    def new(
        cls, word_length: int, guess_budget: int, unguessed_marker: str = "_"
    ) -> "RoundState":
        """Create a fresh round with every slot unguessed."""
        if word_length <= 0:
            raise ValueError(f"word_length must be positive, got {word_length}")
        if guess_budget <= 0:
            raise ValueError(f"guess_budget must be positive, got {guess_budget}")
        return cls(
            word_length=word_length,
            guesses_remaining=guess_budget,
            unguessed_marker=unguessed_marker,
            revealed=[None] * word_length,
        )

    @property
    def is_solved(self) -> bool:
        return self.unguessed_count == 0

    @property
    def is_over(self) -> bool:
        return self.outcome is not RoundOutcome.IN_PROGRESS

    @property
    def unguessed_count(self) -> int:
        return sum(1 for slot in self.revealed if slot is None)

    def reveal(self, index: int, letter: str) -> bool:
        """Reveal a slot. Returns True if the slot was previously unguessed.

        Raises:
            ValueError: If the slot already holds a different letter
        """
        current = self.revealed[index]
        if current is None:
            self.revealed[index] = letter
            return True
        if current != letter:
            raise ValueError(
                f"Slot {index} already revealed as {current!r}, cannot become {letter!r}"
            )
        return False

    def record_miss(self) -> None:
        """Charge one guess for a letter that matched nothing."""
        if self.guesses_remaining > 0:
            self.guesses_remaining -= 1

    def display(self) -> str:
        """The word as known so far, e.g. '_A_A_'."""
        return "".join(
            slot if slot is not None else self.unguessed_marker
            for slot in self.revealed
        )


@dataclass
class SessionHistory:
    """
    What persists across rounds on one connection.

    already_played drives the one-time preamble skip in the NEW handshake.
    It is read and updated only by the RoundController.
    """

    already_played: bool = False
    rounds_played: int = 0
    rounds_won: int = 0
    rounds_lost: int = 0
    end_reason: Optional[str] = None
    error: Optional[str] = None

    def record_round(self, round_state: RoundState) -> None:
        """Account for a finished round and mark the connection as played."""
        self.already_played = True
        self.rounds_played += 1
        if round_state.outcome is RoundOutcome.WON:
            self.rounds_won += 1
        elif round_state.outcome is RoundOutcome.LOST:
            self.rounds_lost += 1

    @property
    def failed(self) -> bool:
        """True if the session ended on a transport or protocol failure."""
        return self.end_reason in ("protocol_error", "connection_error")
