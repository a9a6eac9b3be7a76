"""Interactive shell around the lang lexer."""

from lang.shell.history import History
from lang.shell.repl import PROMPT, Shell

__all__ = ["History", "PROMPT", "Shell"]
