# ABOUTME: Codec for the line-based hangman wire protocol (NEW / GUESS / QUIT)
# ABOUTME: Turns channel lines into word lengths, per-slot match results and solution words

"""
Hangman wire protocol.

One command or response per line, ASCII text:

    -> NEW               <- [preamble lines, first round only] <- <length>
    -> GUESS <letter>    <- one match token per slot, in index order
    -> QUIT              <- <solution word>

The codec does not hold any round state. It only knows how many lines each
exchange must produce and how to read them.
"""

import logging
import re
from typing import Iterator, Optional

from .errors import ChannelConnectionError, ProtocolError
from .line_channel import LineChannel

NEW_COMMAND = "NEW"
GUESS_COMMAND = "GUESS"
QUIT_COMMAND = "QUIT"

_TRUE_WORDS = {"true", "yes", "y", "t", "1"}
_FALSE_WORDS = {"false", "no", "n", "f", "0"}
_TOKEN_PATTERN = re.compile(r"[a-z0-9]+")
_LENGTH_PATTERN = re.compile(r"[0-9]+")


def parse_word_length(line: str) -> int:
    """Parse the server's word-length line.

    Raises:
        ProtocolError: If the line is not a positive decimal integer
    """
    text = line.strip()
    if not _LENGTH_PATTERN.fullmatch(text):
        raise ProtocolError(f"Expected a word length, got {line!r}")
    length = int(text)
    if length <= 0:
        raise ProtocolError(f"Word length must be positive, got {length}")
    return length


def parse_match_token(line: str) -> bool:
    """Interpret one per-slot response line as match / no match.

    The server answers with "true" or "false", possibly surrounded by other
    text. A bare yes/no, t/f or 1/0 is accepted as well.

    Raises:
        ProtocolError: If the line carries no recognizable boolean
    """
    words = _TOKEN_PATTERN.findall(line.lower())
    if "true" in words:
        return True
    if "false" in words:
        return False
    if len(words) == 1:
        if words[0] in _TRUE_WORDS:
            return True
        if words[0] in _FALSE_WORDS:
            return False
    raise ProtocolError(f"Unrecognized match token: {line!r}")


class HangmanProtocol:
    """Drives the hangman command/response exchanges over a LineChannel."""

    def __init__(
        self,
        channel: LineChannel,
        preamble_lines: int = 2,
        logger: Optional[logging.Logger] = None,
    ):
        self.channel = channel
        self.preamble_lines = preamble_lines
        self.logger = logger or logging.getLogger("hangman")

    def _read(self, expecting: str) -> str:
        try:
            return self.channel.read_line()
        except ChannelConnectionError as e:
            raise ProtocolError(f"Connection lost while waiting for {expecting}: {e}") from e

    def request_new_word(self, already_played: bool) -> int:
        """Send NEW and return the length of the word the server picked.

        Args:
            already_played: True if a round has already been played on this
                connection, in which case the server sends no preamble

        Raises:
            ProtocolError: If the length line is missing or malformed
        """
        self.channel.send_line(NEW_COMMAND)

        if not already_played:
            for index in range(self.preamble_lines):
                banner = self._read("the server preamble")
                self.logger.debug(
                    f"Discarded preamble line: {banner}",
                    extra={
                        "event_type": "preamble_discarded",
                        "index": index,
                        "line": banner,
                    },
                )

        return parse_word_length(self._read("the word length"))

    def submit_guess(self, letter: str, word_length: int) -> Iterator[bool]:
        """Send GUESS and yield one match flag per slot, in index order.

        Results are yielded as each line arrives so the caller can apply the
        slots already confirmed before a failure. The generator must be fully
        consumed before the next command is sent.

        Raises:
            ProtocolError: If fewer than word_length lines arrive or a line
                does not parse
        """
        self.channel.send_line(f"{GUESS_COMMAND} {letter}")
        for position in range(word_length):
            line = self._read(f"match result {position + 1} of {word_length}")
            yield parse_match_token(line)

    def request_solution(self) -> str:
        """Send QUIT and return the solution word.

        Raises:
            ProtocolError: If the server closes the connection instead of answering
        """
        self.channel.send_line(QUIT_COMMAND)
        return self._read("the solution word").strip()
