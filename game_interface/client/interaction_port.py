# ABOUTME: Abstract interaction contract between the hangman core and a presentation layer
# ABOUTME: Core code depends only on this interface, never on a concrete console or GUI

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from session.game_state import SessionHistory


class InteractionPort(ABC):
    """
    How the game talks to the participant.

    Concrete ports implement the five contract operations. The announce_*
    hooks below them are optional and do nothing by default.
    """

    @abstractmethod
    def elicit_guess(self) -> str:
        """Block until the participant supplies one letter; return it uppercased (A-Z)."""
        ...

    @abstractmethod
    def render(
        self,
        revealed: str,
        guesses_remaining: int,
        letters_guessed: Sequence[str] = (),
    ) -> None:
        """Display the current state of the round."""
        ...

    @abstractmethod
    def announce_win(self) -> None:
        """Tell the participant they guessed the word."""
        ...

    @abstractmethod
    def announce_loss(self, solution_word: Optional[str]) -> None:
        """Tell the participant they ran out of guesses.

        Args:
            solution_word: The word, or None if the server did not supply it
        """
        ...

    @abstractmethod
    def elicit_replay(self) -> bool:
        """Block until the participant decides whether to play another round."""
        ...

    def announce_new_round(self, word_length: int) -> None:
        pass

    def announce_error(self, message: str) -> None:
        pass

    def announce_session_summary(self, history: "SessionHistory") -> None:
        pass
