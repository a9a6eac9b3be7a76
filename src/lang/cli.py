"""lang CLI entry point.

Usage:
    lang [options]                      Start the interactive shell
    lang repl [options]                 Start the interactive shell
    lang tokenize <file.lang>           Display the token stream of a file

Options:
    --history <path>    History file (default: $LANG_HISTORY or ~/.lang_history)
    --no-history        Do not load or save history
    -v, --verbose       Log debug messages
    -h, --help          Show this message
    --version           Show the version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from lang.lexer.lexer import Lexer
from lang.shell.history import History, default_history_path, default_line_editor
from lang.shell.repl import Shell


def main(argv: list[str] | None = None) -> int:
    args = list(argv if argv is not None else sys.argv[1:])

    if "--help" in args or "-h" in args:
        print(__doc__.strip())
        return 0

    if "--version" in args:
        from lang import __version__
        print(f"lang {__version__}")
        return 0

    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in args:
            args.remove(flag)
            verbose = True
    _configure_logging(verbose)

    command = args.pop(0) if args and not args[0].startswith("-") else "repl"

    if command == "tokenize":
        if not args:
            print(f"Error: command '{command}' requires a file argument")
            return 1
        return _cmd_tokenize(Path(args[0]))
    elif command == "repl":
        return _cmd_repl(args)
    else:
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )


def _cmd_tokenize(filepath: Path) -> int:
    """Display the token stream of a whole file."""
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return 1

    source = filepath.read_text(encoding="utf-8")
    for tok in Lexer(source, str(filepath)):
        print(tok)
    return 0


def _cmd_repl(args: list[str]) -> int:
    """Run the interactive shell with the history the options ask for."""
    history_path: Path | None = default_history_path()

    while args:
        option = args.pop(0)
        if option == "--no-history":
            history_path = None
        elif option == "--history":
            if not args:
                print("Error: option '--history' requires a path argument")
                return 1
            history_path = Path(args.pop(0)).expanduser()
        else:
            print(f"Error: unknown option '{option}'")
            return 1

    return Shell(History(history_path, editor=default_line_editor())).run()


if __name__ == "__main__":
    sys.exit(main())
