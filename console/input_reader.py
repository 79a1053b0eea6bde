"""
Input module for TicTacToe.
Reads the moves players type, one line at a time.
"""

import logging
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class InputClosedError(OSError):
    """The input stream ended while a move was expected."""


class InputReader:
    """
    Simple line reader wrapper class.
    Reading is the only blocking call in the game.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the reader.

        Args:
            stream: Where to read from. Uses sys.stdin if not provided.
        """
        self.stream = stream if stream is not None else sys.stdin
        self.lines_read = 0

    def read_line(self) -> str:
        """
        Read one line.

        Returns:
            The line without its trailing newline.

        Raises:
            InputClosedError: The stream has no more lines.
            OSError: Reading failed or the bytes could not be decoded.
        """
        try:
            line = self.stream.readline()
        except UnicodeDecodeError as e:
            raise OSError(f"Could not decode input: {e}") from e
        if line == "":
            raise InputClosedError("Input closed while waiting for a move")

        self.lines_read += 1
        logger.debug("Read line %d: %r", self.lines_read, line)
        return line.rstrip("\r\n")

    def close(self):
        """Close the stream, unless it is the process stdin."""
        if self.stream is not sys.stdin:
            self.stream.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
