"""The read-scan-print loop: one Lexer per input line."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from lang.lexer.lexer import Lexer
from lang.shell.history import History

PROMPT = "λ "


class Shell:
    """Reads lines, prints the token stream of each, keeps the history.

    ``read_line`` defaults to the builtin ``input`` and ``out`` to stdout;
    both are injectable so the loop can be driven from tests.
    """

    def __init__(
        self,
        history: History,
        read_line: Callable[[str], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.history = history
        self.read_line = read_line if read_line is not None else input
        self.out = out if out is not None else sys.stdout

    def run(self) -> int:
        """Loop until end of input or interrupt. Returns an exit status."""
        self.history.load()
        try:
            while True:
                try:
                    line = self.read_line(PROMPT)
                except (EOFError, KeyboardInterrupt):
                    break
                self.history.append(line)
                self.scan_line(line)
        finally:
            self.history.flush()
        return 0

    def scan_line(self, line: str) -> None:
        """Print every token of ``line``, one per output line."""
        for token in Lexer(line):
            print(token, file=self.out)
