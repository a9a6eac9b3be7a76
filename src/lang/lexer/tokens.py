"""Token types and Token dataclass for the lang lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from lang.lexer.position import Position


class TokenType(Enum):
    """Every distinct token the lang lexer can produce."""

    # Literals
    IDENTIFIER = auto()
    INTEGER = auto()
    STRING = auto()

    # Keywords
    FN = auto()
    IMPORT = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELIF = auto()
    ELSE = auto()
    RETURN = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    GREATER_THAN = auto()
    LESS_THAN = auto()
    ASSIGN = auto()         # =
    BANG = auto()           # !

    # Compound operators
    EQUALS = auto()         # ==
    NOT_EQUALS = auto()     # !=
    PLUS_ASSIGN = auto()    # +=
    MINUS_ASSIGN = auto()   # -=
    STAR_ASSIGN = auto()    # *=
    SLASH_ASSIGN = auto()   # /=
    PERCENT_ASSIGN = auto() # %=
    GREATER_EQUAL = auto()
    LESS_EQUAL = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    COMMA = auto()
    SEMICOLON = auto()
    COLON = auto()
    DOT = auto()

    # Special
    ILLEGAL = auto()        # a single unrecognized character


# Map keyword spellings to token types
KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FN,
    "import": TokenType.IMPORT,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "elif": TokenType.ELIF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

# Characters that may start an operator, with their single-character meaning
OPERATORS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    ">": TokenType.GREATER_THAN,
    "<": TokenType.LESS_THAN,
    "=": TokenType.ASSIGN,
    "!": TokenType.BANG,
}

# The same characters followed by "="
COMPOUND_OPERATORS: dict[str, TokenType] = {
    "+": TokenType.PLUS_ASSIGN,
    "-": TokenType.MINUS_ASSIGN,
    "*": TokenType.STAR_ASSIGN,
    "/": TokenType.SLASH_ASSIGN,
    "%": TokenType.PERCENT_ASSIGN,
    ">": TokenType.GREATER_EQUAL,
    "<": TokenType.LESS_EQUAL,
    "=": TokenType.EQUALS,
    "!": TokenType.NOT_EQUALS,
}

PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
}

# Token types whose value is meaningful beyond their spelling
PAYLOAD_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.STRING})


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the lexer.

    ``value`` holds the spelled text of the token: the name of an
    identifier, the digits of an integer, the body of a string (quotes
    stripped), the symbol of an operator, or the offending character of
    an ILLEGAL token. ``position`` is where the token starts.
    """

    type: TokenType
    value: str
    position: Position = Position()
    file: str = "<stdin>"

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __str__(self) -> str:
        if self.type is TokenType.ILLEGAL:
            return f"ILLEGAL({self.offset}, {self.column}, {self.line})"
        if self.type in PAYLOAD_TYPES:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.position})"
