# ABOUTME: Exception hierarchy for the hangman client
# ABOUTME: Separates transport failures, protocol violations and presentation misbehavior


class HangmanError(Exception):
    """Base class for all hangman client errors."""

    pass


class ChannelConnectionError(HangmanError, ConnectionError):
    """The line channel could not be opened, or failed while in use."""

    pass


class ChannelClosedError(ChannelConnectionError):
    """The remote end closed the stream."""

    pass


class ProtocolError(HangmanError):
    """The server sent fewer lines than expected, or a line that does not parse."""

    pass


class PresentationError(HangmanError):
    """An interaction port could not produce a usable answer."""

    pass
