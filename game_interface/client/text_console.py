# ABOUTME: Text console implementation of the hangman InteractionPort
# ABOUTME: Prompts on stdin, prints on stdout, reprompts on unusable input

import string
import sys
from typing import Callable, Optional, Sequence, TextIO

from game_interface.core.errors import PresentationError
from .interaction_port import InteractionPort


ALPHABET = frozenset(string.ascii_uppercase)


class TextInteractionPort(InteractionPort):
    """A plain-text interface for playing hangman in a terminal."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        """Initialize the console port.

        Args:
            input_func: Prompting line reader (input() by default)
            output: Stream to print to (sys.stdout by default)
        """
        self.input_func = input_func
        self.output = output
        self._letters_guessed: set = set()

    def _print(self, text: str = "") -> None:
        print(text, file=self.output or sys.stdout, flush=True)

    def _ask(self, prompt: str) -> str:
        try:
            return self.input_func(prompt)
        except EOFError as e:
            raise PresentationError("Input closed while waiting for an answer") from e

    def elicit_guess(self) -> str:
        """Obtain a letter the participant has not tried yet this round."""
        while True:
            answer = self._ask("Guess letter? ").strip()
            if not answer:
                continue

            letter = answer[0].upper()
            if letter not in ALPHABET:
                self._print("Please enter a letter from A to Z.")
                continue
            if letter in self._letters_guessed:
                self._print(f"You already guessed {letter}.")
                continue

            return letter

    def render(
        self,
        revealed: str,
        guesses_remaining: int,
        letters_guessed: Sequence[str] = (),
    ) -> None:
        self._letters_guessed = set(letters_guessed)
        self._print(f"Guesses remaining: {guesses_remaining}")
        self._print(revealed)
        if letters_guessed:
            self._print(f"Letters guessed: {' '.join(letters_guessed)}")

    def announce_new_round(self, word_length: int) -> None:
        self._print(f"Word length is: {word_length}")

    def announce_win(self) -> None:
        self._print("Good job.")

    def announce_loss(self, solution_word: Optional[str]) -> None:
        self._print("You are bad at hangman.")
        if solution_word:
            self._print(f"The word was: {solution_word}")
        else:
            self._print("The server did not reveal the word.")

    def announce_error(self, message: str) -> None:
        self._print(f"Error: {message}")

    def announce_session_summary(self, history) -> None:
        self._print(
            f"Rounds played: {history.rounds_played} "
            f"(won {history.rounds_won}, lost {history.rounds_lost})"
        )

    def elicit_replay(self) -> bool:
        """Ask whether to play again. An empty answer or EOF means no."""
        while True:
            try:
                answer = self.input_func("Play again? (Y/N) ").strip()
            except EOFError:
                return False

            if not answer:
                return False
            choice = answer[0].upper()
            if choice == "Y":
                return True
            if choice == "N":
                return False
            self._print("Please answer Y or N.")
