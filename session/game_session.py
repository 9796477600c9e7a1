"""
GameSession: the per-round hangman state machine.

A round goes through three phases:

1. Handshake: NEW, (preamble on the first round only), word length
2. Guessing: GUESS <letter>, one match line per slot, until the word is
   solved or the guess budget is spent
3. Resolution: announce the win, or QUIT to fetch the solution and
   announce the loss

Protocol failures during phases 1 and 2 propagate as ProtocolError and the
round is abandoned. Only the solution fetch in phase 3 is allowed to fail.
"""

import logging
import string
from typing import Optional

from game_interface.client.interaction_port import InteractionPort
from game_interface.core.errors import (
    ChannelConnectionError,
    PresentationError,
    ProtocolError,
)
from game_interface.core.hangman_protocol import HangmanProtocol
from session.game_configuration import HangmanConfiguration
from session.game_state import RoundOutcome, RoundState


class GameSession:
    """Owns the current round and drives its protocol exchanges."""

    def __init__(
        self,
        protocol: HangmanProtocol,
        port: InteractionPort,
        config: HangmanConfiguration,
        logger: Optional[logging.Logger] = None,
    ):
        self.protocol = protocol
        self.port = port
        self.config = config
        self.logger = logger or logging.getLogger("hangman")
        self.round: Optional[RoundState] = None

    def _render(self) -> None:
        self.port.render(
            self.round.display(),
            self.round.guesses_remaining,
            letters_guessed=list(self.round.letters_guessed),
        )

    def start_round(self, already_played: bool) -> RoundState:
        """Negotiate a new word with the server and reset round state.

        Args:
            already_played: Whether a round was already played on this connection

        Raises:
            ProtocolError: If the word length cannot be read
        """
        self.round = None
        word_length = self.protocol.request_new_word(already_played)

        self.round = RoundState.new(
            word_length=word_length,
            guess_budget=self.config.guess_budget,
            unguessed_marker=self.config.unguessed_marker,
        )

        self.logger.info(
            f"New word of length {word_length}",
            extra={
                "event_type": "round_started",
                "word_length": word_length,
                "guess_budget": self.config.guess_budget,
                "preamble_skipped": already_played,
            },
        )

        self.port.announce_new_round(word_length)
        self._render()
        return self.round

    def process_guess(self, letter: str) -> int:
        """Submit one letter and apply the server's per-slot answers.

        Slots are revealed as each answer line arrives, so a failure part way
        through leaves exactly the confirmed slots revealed and does not
        charge a guess.

        Args:
            letter: A single uppercase letter A-Z

        Returns:
            Number of slots that matched

        Raises:
            RuntimeError: If no round is in progress
            PresentationError: If letter is not a single uppercase letter
            ProtocolError: If the server's answer is short or malformed
        """
        if self.round is None or self.round.is_over:
            raise RuntimeError("No round in progress")
        if len(letter) != 1 or letter not in string.ascii_uppercase:
            raise PresentationError(f"Guess must be one letter A-Z, got {letter!r}")

        self.round.letters_guessed.append(letter)

        matches = 0
        results = self.protocol.submit_guess(letter, self.round.word_length)
        for index, matched in enumerate(results):
            if not matched:
                continue
            matches += 1
            try:
                self.round.reveal(index, letter)
            except ValueError as e:
                raise ProtocolError(f"Server contradicted a revealed slot: {e}") from e

        if matches == 0:
            self.round.record_miss()

        self.logger.info(
            f"Guess {letter}: {matches} match(es)",
            extra={
                "event_type": "guess_processed",
                "letter": letter,
                "matches": matches,
                "guesses_remaining": self.round.guesses_remaining,
                "revealed": self.round.display(),
            },
        )

        self._render()
        return matches

    def resolve_round(self) -> RoundOutcome:
        """Report the end of the round to the participant.

        The win check runs first. The exhausted-budget check runs
        independently afterwards; a winning guess never costs a turn, so
        both cannot hold for the same round.
        """
        if self.round is None:
            raise RuntimeError("No round to resolve")
        if self.round.is_over:
            return self.round.outcome

        if self.round.is_solved:
            self.round.outcome = RoundOutcome.WON
            self.logger.info(
                f"Word solved: {self.round.display()}",
                extra={
                    "event_type": "round_won",
                    "word": self.round.display(),
                    "guesses_remaining": self.round.guesses_remaining,
                },
            )
            self.port.announce_win()

        if self.round.guesses_remaining == 0 and not self.round.is_solved:
            self.round.outcome = RoundOutcome.LOST
            self.round.solution_word = self._fetch_solution()
            self.logger.info(
                "Out of guesses",
                extra={
                    "event_type": "round_lost",
                    "solution_word": self.round.solution_word,
                    "revealed": self.round.display(),
                },
            )
            self.port.announce_loss(self.round.solution_word)

        return self.round.outcome

    def _fetch_solution(self) -> Optional[str]:
        try:
            return self.protocol.request_solution() or None
        except (ProtocolError, ChannelConnectionError) as e:
            self.logger.warning(
                f"Could not read the solution word: {e}",
                extra={"event_type": "solution_unavailable", "error": str(e)},
            )
            return None

    def play_round(self, already_played: bool) -> RoundState:
        """Play one round from handshake to resolution."""
        self.start_round(already_played)

        while self.round.guesses_remaining > 0:
            self.process_guess(self.port.elicit_guess())
            if self.round.is_solved:
                break

        self.resolve_round()
        return self.round
