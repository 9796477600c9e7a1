"""
RoundController: top-level driver for a hangman session.

Runs rounds on one connection until the participant declines to play
again, and guarantees the connection is closed exactly once on every
exit path.
"""

import logging
from typing import Optional

from game_interface.client.interaction_port import InteractionPort
from game_interface.core.errors import (
    ChannelConnectionError,
    PresentationError,
    ProtocolError,
)
from game_interface.core.hangman_protocol import HangmanProtocol
from game_interface.core.line_channel import LineChannel
from session.game_configuration import HangmanConfiguration
from session.game_session import GameSession
from session.game_state import SessionHistory


class RoundController:
    """
    Coordinates rounds over a single connection.

    This class is responsible for:
    - Owning the channel's lifetime (open on entry, close on exit)
    - Carrying the already-played flag from one round to the next
    - Turning unrecoverable errors into a recorded end of session
    """

    def __init__(
        self,
        channel: LineChannel,
        port: InteractionPort,
        config: HangmanConfiguration,
        logger: Optional[logging.Logger] = None,
    ):
        self.channel = channel
        self.port = port
        self.config = config
        self.logger = logger or logging.getLogger("hangman")
        self.history = SessionHistory()

        protocol = HangmanProtocol(
            channel, preamble_lines=config.preamble_lines, logger=self.logger
        )
        self.session = GameSession(protocol, port, config, logger=self.logger)

    def run(self) -> SessionHistory:
        """
        Play rounds until the participant stops or the session fails.

        Returns:
            The session history, with end_reason set
        """
        try:
            with self.channel:
                self._run_rounds()
        except ChannelConnectionError as e:
            self._abort("connection_error", e)
        except ProtocolError as e:
            self._abort("protocol_error", e)
        except PresentationError as e:
            # The participant went away; nothing to report to them
            self.history.end_reason = "presentation_error"
            self.history.error = str(e)
            self.logger.warning(
                f"Interaction ended: {e}",
                extra={"event_type": "session_aborted", "reason": "presentation_error"},
            )

        self.logger.info(
            "Session ended",
            extra={
                "event_type": "session_ended",
                "end_reason": self.history.end_reason,
                "rounds_played": self.history.rounds_played,
                "rounds_won": self.history.rounds_won,
                "rounds_lost": self.history.rounds_lost,
            },
        )
        return self.history

    def _run_rounds(self) -> None:
        while True:
            round_state = self.session.play_round(
                already_played=self.history.already_played
            )
            self.history.record_round(round_state)

            if not self.port.elicit_replay():
                break

        self.history.end_reason = "declined"
        self.port.announce_session_summary(self.history)

    def _abort(self, reason: str, error: Exception) -> None:
        self.history.end_reason = reason
        self.history.error = str(error)
        self.logger.error(
            f"Session aborted: {error}",
            extra={
                "event_type": "session_aborted",
                "reason": reason,
                "error": str(error),
                "rounds_played": self.history.rounds_played,
            },
        )
        self.port.announce_error(str(error))
