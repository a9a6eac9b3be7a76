"""lang lexer — hand-written scanner producing tokens on demand.

Design decisions:
- Tokens are produced one at a time by ``next_token()``; ``None`` marks
  the end of input and is returned for every call after that.
- Newlines and horizontal whitespace separate tokens and produce none.
- Unrecognized characters become ILLEGAL tokens; the scanner never raises.
- String literals are taken verbatim: no escapes, no terminator required.
"""

from __future__ import annotations

import string
from typing import Iterator

from lang.lexer.position import Position
from lang.lexer.tokens import (
    COMPOUND_OPERATORS,
    KEYWORDS,
    OPERATORS,
    PUNCTUATION,
    Token,
    TokenType,
)

WHITESPACE = frozenset(" \t\r")
DIGITS = frozenset(string.digits)
IDENTIFIER_START = frozenset(string.ascii_letters + "_")
IDENTIFIER_CHARS = IDENTIFIER_START | DIGITS


class Lexer:
    """Tokenizes lang source code into a stream of `Token` objects.

    Usage::

        lexer = Lexer(source_text)
        while (token := lexer.next_token()) is not None:
            print(token)
    """

    def __init__(self, source: str, filename: str = "<stdin>") -> None:
        self.source = source
        self.filename = filename
        self.position = Position()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token | None:
        """Scan and return the next token, or None once input is exhausted."""
        self._skip_whitespace()
        if self._at_end():
            return None

        start = self.position
        ch = self._peek()

        if ch in OPERATORS:
            return self._scan_operator(start)

        if ch in PUNCTUATION:
            self._advance()
            return self._make_token(PUNCTUATION[ch], ch, start)

        if ch in IDENTIFIER_START:
            return self._scan_identifier(start)

        if ch in DIGITS:
            return self._scan_number(start)

        if ch == '"':
            return self._scan_string(start)

        self._advance()
        return self._make_token(TokenType.ILLEGAL, ch, start)

    def tokenize(self) -> list[Token]:
        """Drain the remaining source and return the token list."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()) is not None:
            yield token

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_operator(self, start: Position) -> Token:
        """Scan a one-character operator or its ``=``-suffixed compound."""
        ch = self._advance()

        if self._peek() == "=" and ch in COMPOUND_OPERATORS:
            self._advance()
            return self._make_token(COMPOUND_OPERATORS[ch], ch + "=", start)

        return self._make_token(OPERATORS[ch], ch, start)

    def _scan_identifier(self, start: Position) -> Token:
        """Scan an identifier or keyword."""
        chars: list[str] = []

        while not self._at_end() and self._peek() in IDENTIFIER_CHARS:
            chars.append(self._advance())

        word = "".join(chars)
        token_type = KEYWORDS.get(word, TokenType.IDENTIFIER)
        return self._make_token(token_type, word, start)

    def _scan_number(self, start: Position) -> Token:
        """Scan an unsigned decimal integer, kept as its digit spelling."""
        digits: list[str] = []

        while not self._at_end() and self._peek() in DIGITS:
            digits.append(self._advance())

        return self._make_token(TokenType.INTEGER, "".join(digits), start)

    def _scan_string(self, start: Position) -> Token:
        """Scan a double-quoted string literal.

        Everything up to the next double quote is the body, newlines
        included. A missing closing quote ends the body at end of input.
        """
        self._advance()  # consume opening quote
        chars: list[str] = []

        while not self._at_end() and self._peek() != '"':
            chars.append(self._advance())

        if not self._at_end():
            self._advance()  # consume closing quote

        return self._make_token(TokenType.STRING, "".join(chars), start)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str | None:
        """Return the current character without consuming it, or None at end."""
        if self._at_end():
            return None
        return self.source[self.position.offset]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.position.offset]
        self.position = self.position.advance(ch)
        return ch

    def _at_end(self) -> bool:
        return self.position.offset >= len(self.source)

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs, carriage returns and newlines."""
        while not self._at_end() and (self._peek() == "\n" or self._peek() in WHITESPACE):
            self._advance()

    def _make_token(self, token_type: TokenType, value: str, start: Position) -> Token:
        return Token(token_type, value, start, self.filename)
