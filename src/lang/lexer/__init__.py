"""lang lexer — hand-written scanner producing a lazy token stream."""

from lang.lexer.position import Position
from lang.lexer.tokens import Token, TokenType
from lang.lexer.lexer import Lexer

__all__ = ["Position", "Token", "TokenType", "Lexer"]
