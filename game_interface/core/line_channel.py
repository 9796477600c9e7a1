# ABOUTME: Line-oriented transport to the hangman server
# ABOUTME: Defines the LineChannel contract and a TCP socket implementation of it

import logging
import socket
from typing import Optional, Protocol, runtime_checkable

from .errors import ChannelClosedError, ChannelConnectionError


@runtime_checkable
class LineChannel(Protocol):
    """
    Protocol for a reliable, ordered, bidirectional text-line stream.

    Implementations block on read_line until a full line is available and
    raise ChannelClosedError when the peer has closed the stream.
    """

    def send_line(self, line: str) -> None:
        """Send one line (without its terminator)."""
        ...

    def read_line(self) -> str:
        """Receive one line with its terminator stripped."""
        ...

    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        ...

    def __enter__(self) -> "LineChannel":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...


class SocketLineChannel:
    """A LineChannel over a TCP connection to the hangman server."""

    def __init__(
        self,
        host: str,
        port: int,
        connect_timeout: float = 10.0,
        read_timeout: Optional[float] = None,
        encoding: str = "ascii",
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the channel. No connection is made until open().

        Args:
            host: Server host name or address
            port: Server TCP port
            connect_timeout: Seconds to wait for the connection to be established
            read_timeout: Seconds to wait for a line, or None to block indefinitely
            encoding: Text encoding of the wire protocol
            logger: Optional logger for protocol tracing
        """
        self.host = host
        self.port = port
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self.encoding = encoding
        self.logger = logger or logging.getLogger("hangman")
        self._sock: Optional[socket.socket] = None
        self._reader = None
        self._writer = None
        self.closed = False

    @classmethod
    def from_socket(
        cls,
        sock: socket.socket,
        encoding: str = "ascii",
        logger: Optional[logging.Logger] = None,
    ) -> "SocketLineChannel":
        """Wrap an already-connected socket."""
        peer = sock.getpeername() if sock.family in (socket.AF_INET, socket.AF_INET6) else ("local", 0)
        channel = cls(peer[0], peer[1], encoding=encoding, logger=logger)
        channel._attach(sock)
        return channel

    def __enter__(self):
        """Open the connection on entry if it is not open yet."""
        if not self.is_open():
            self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close the connection on every exit path."""
        self.close()

    def is_open(self) -> bool:
        return self._sock is not None and not self.closed

    def open(self) -> None:
        """Connect to the server.

        Raises:
            ChannelConnectionError: If the connection cannot be established
        """
        if self.is_open():
            raise RuntimeError("Channel is already open")
        if self.closed:
            raise RuntimeError("Channel has been closed and cannot be reopened")

        try:
            sock = socket.create_connection(
                (self.host, self.port), timeout=self.connect_timeout
            )
        except OSError as e:
            raise ChannelConnectionError(
                f"Could not connect to {self.host}:{self.port}: {e}"
            ) from e

        self._attach(sock)
        self.logger.info(
            f"Connected to {self.host}:{self.port}",
            extra={
                "event_type": "channel_opened",
                "host": self.host,
                "port": self.port,
            },
        )

    def _attach(self, sock: socket.socket) -> None:
        sock.settimeout(self.read_timeout)
        self._sock = sock
        self._reader = sock.makefile("r", encoding=self.encoding, errors="replace", newline="")
        self._writer = sock.makefile("w", encoding=self.encoding, errors="replace", newline="")

    def send_line(self, line: str) -> None:
        """Send one line to the server.

        Raises:
            ChannelConnectionError: If the channel is not open or the write fails
        """
        if not self.is_open():
            raise ChannelConnectionError("Channel is not open")

        try:
            self._writer.write(line + "\n")
            self._writer.flush()
        except OSError as e:
            raise ChannelConnectionError(f"Failed to send {line!r}: {e}") from e

        self.logger.debug(
            f">> {line}",
            extra={"event_type": "protocol_send", "line": line},
        )

    def read_line(self) -> str:
        """Read one line from the server.

        Raises:
            ChannelClosedError: If the server closed the connection
            ChannelConnectionError: If the channel is not open or the read fails
        """
        if not self.is_open():
            raise ChannelConnectionError("Channel is not open")

        try:
            raw = self._reader.readline()
        except socket.timeout as e:
            raise ChannelConnectionError(
                f"Timed out after {self.read_timeout}s waiting for the server"
            ) from e
        except OSError as e:
            raise ChannelConnectionError(f"Failed to read from server: {e}") from e

        if not raw:
            raise ChannelClosedError("Server closed the connection")

        line = raw.rstrip("\r\n")
        self.logger.debug(
            f"<< {line}",
            extra={"event_type": "protocol_recv", "line": line},
        )
        return line

    def close(self) -> None:
        """Close the connection. Subsequent calls do nothing."""
        if self.closed:
            return
        self.closed = True

        if self._sock is None:
            return

        for stream in (self._writer, self._reader):
            try:
                stream.close()
            except OSError:
                pass
        try:
            self._sock.close()
        finally:
            self._sock = None
            self.logger.info(
                "Connection closed",
                extra={
                    "event_type": "channel_closed",
                    "host": self.host,
                    "port": self.port,
                },
            )
