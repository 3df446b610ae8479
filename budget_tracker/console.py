"""Line-oriented console streams for the interactive shell."""

from __future__ import annotations

import logging
from typing import TextIO

from budget_core.validators import first_token

logger = logging.getLogger(__name__)


class ConsoleIO:
    """Pairs an input and output stream and releases the input on close.

    Use as a context manager so the input is released on every exit path.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO, *, owns_input: bool = True) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._owns_input = owns_input
        self._closed = False

    def __enter__(self) -> "ConsoleIO":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def writeline(self, text: str = "") -> None:
        self.write(text + "\n")

    def readline(self) -> str:
        """Return the next line without its newline; raise EOFError at end of input."""
        if self._closed:
            raise EOFError("console input has been released")
        line = self._stdin.readline()
        if not line:
            raise EOFError("end of console input")
        return line.rstrip("\r\n")

    def read_token(self) -> str:
        """Return the first token of the next non-blank line, discarding the rest."""
        while True:
            token = first_token(self.readline())
            if token is not None:
                return token

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_input:
            self._stdin.close()
        logger.debug("Console input released")

