"""Tests for the interactive shell loop and the CLI."""

import io

import pytest

from lang.cli import main
from lang.shell.history import History
from lang.shell.repl import PROMPT, Shell


def scripted(lines, end=EOFError):
    """Return a read_line callable that replays ``lines`` then raises ``end``."""
    pending = list(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        if not pending:
            raise end()
        return pending.pop(0)

    read_line.prompts = prompts
    return read_line


# ---------------------------------------------------------------------------
# Shell
# ---------------------------------------------------------------------------

class TestShell:
    def test_prints_one_token_per_line(self):
        out = io.StringIO()
        shell = Shell(History(), scripted(["x += 1"]), out)
        assert shell.run() == 0
        assert out.getvalue().splitlines() == [
            "IDENTIFIER('x')",
            "PLUS_ASSIGN",
            "INTEGER('1')",
        ]

    def test_each_line_scanned_fresh(self):
        out = io.StringIO()
        Shell(History(), scripted(["@", "@"]), out).run()
        # Coordinates restart for every line.
        assert out.getvalue().splitlines() == ["ILLEGAL(0, 0, 0)", "ILLEGAL(0, 0, 0)"]

    def test_uses_lambda_prompt(self):
        read_line = scripted(["a"])
        Shell(History(), read_line, io.StringIO()).run()
        assert read_line.prompts == [PROMPT, PROMPT]
        assert PROMPT == "λ "

    def test_interrupt_ends_loop(self):
        history = History()
        shell = Shell(history, scripted(["a", "b"], end=KeyboardInterrupt), io.StringIO())
        assert shell.run() == 0
        assert history.entries == ["a", "b"]

    def test_history_persisted(self, tmp_path):
        path = tmp_path / "hist"
        path.write_text("earlier\n", encoding="utf-8")
        Shell(History(path), scripted(["fn f() {}", ""]), io.StringIO()).run()
        assert path.read_text(encoding="utf-8") == "earlier\nfn f() {}\n"

    def test_history_flushed_when_loop_fails(self, tmp_path):
        path = tmp_path / "hist"

        def read_line(prompt):
            raise RuntimeError("terminal went away")

        shell = Shell(History(path), read_line, io.StringIO())
        with pytest.raises(RuntimeError, match="terminal went away"):
            shell.run()
        assert path.exists()

    def test_previous_session_recallable_at_prompt(self, tmp_path):
        path = tmp_path / "hist"
        path.write_text("if x { }\n", encoding="utf-8")
        recalled = []

        class Editor:
            def set_auto_history(self, enabled):
                pass

            def set_history_length(self, length):
                pass

            def clear_history(self):
                recalled.clear()

            def add_history(self, line):
                recalled.append(line)

        history = History(path, editor=Editor())
        Shell(history, scripted(["y"]), io.StringIO()).run()
        assert recalled == ["if x { }", "y"]


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

class TestCli:
    def test_help(self, capsys):
        assert main(["--help"]) == 0
        assert "tokenize" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("lang ")

    def test_tokenize_file(self, tmp_path, capsys):
        source = tmp_path / "main.lang"
        source.write_text('import std;\nstd.print("hi");\n', encoding="utf-8")
        assert main(["tokenize", str(source)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[:3] == ["IMPORT", "IDENTIFIER('std')", "SEMICOLON"]
        assert "STRING('hi')" in lines

    def test_tokenize_missing_file(self, tmp_path, capsys):
        assert main(["tokenize", str(tmp_path / "nope.lang")]) == 1
        assert "file not found" in capsys.readouterr().out

    def test_tokenize_requires_file(self, capsys):
        assert main(["tokenize"]) == 1
        assert "requires a file argument" in capsys.readouterr().out

    def test_unknown_command(self, capsys):
        assert main(["compile"]) == 1
        assert "unknown command" in capsys.readouterr().out

    def test_repl_with_history_option(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "hist"
        monkeypatch.setattr("builtins.input", scripted(["1 != 2"]))
        assert main(["repl", "--history", str(path)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "INTEGER('1')",
            "NOT_EQUALS",
            "INTEGER('2')",
        ]
        assert path.read_text(encoding="utf-8") == "1 != 2\n"

    def test_repl_without_history(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LANG_HISTORY", str(tmp_path / "hist"))
        monkeypatch.setattr("builtins.input", scripted(["x"]))
        assert main(["--no-history"]) == 0
        assert not (tmp_path / "hist").exists()

    def test_history_option_requires_path(self, capsys):
        assert main(["repl", "--history"]) == 1
        assert "requires a path" in capsys.readouterr().out
