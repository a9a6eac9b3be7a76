"""Command history persisted to a plain text file, one entry per line."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)

HISTORY_ENV_VAR = "LANG_HISTORY"
DEFAULT_HISTORY_FILE = ".lang_history"
DEFAULT_MAX_ENTRIES = 100


def default_history_path() -> Path:
    """Resolve the history file from the environment, else the home directory."""
    override = os.environ.get(HISTORY_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_HISTORY_FILE


def default_line_editor() -> ModuleType | None:
    """Return the ``readline`` module, or None where the platform lacks it."""
    try:
        import readline
    except ImportError:
        return None
    return readline


class History:
    """Shell history with explicit load / append / flush.

    With ``path=None`` the history lives in memory only and ``load`` and
    ``flush`` do not touch the disk. Only the newest ``max_entries`` lines
    are kept. When a line ``editor`` (the ``readline`` module or anything
    with the same history calls) is given, loaded and appended entries are
    mirrored into it so they can be recalled at the prompt. I/O failures
    are logged and otherwise ignored so that a broken history file never
    takes the shell down.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        editor: Any = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.max_entries = max_entries
        self.editor = editor
        self.entries: list[str] = []

    def load(self) -> None:
        """Replace the in-memory entries with the file contents, if any."""
        if self.path is not None and self.path.exists():
            try:
                with self.path.open(encoding="utf-8", newline="") as f:
                    text = f.read()
            except OSError as e:
                logger.warning("could not read history file %s: %s", self.path, e)
            else:
                self.entries = [entry for entry in text.split("\n") if entry]
                self._trim()
                logger.debug("loaded %d history entries from %s", len(self.entries), self.path)
        self._sync_editor()

    def append(self, line: str) -> None:
        """Record one input line. Blank lines are not kept."""
        if not line.strip():
            return
        self.entries.append(line)
        self._trim()
        if self.editor is not None:
            self.editor.add_history(line)

    def flush(self) -> None:
        """Write all entries back to the history file."""
        if self.path is None:
            return
        body = "".join(f"{entry}\n" for entry in self.entries)
        try:
            with self.path.open("w", encoding="utf-8", newline="") as f:
                f.write(body)
        except OSError as e:
            logger.warning("could not write history file %s: %s", self.path, e)
            return
        logger.debug("saved %d history entries to %s", len(self.entries), self.path)

    def _trim(self) -> None:
        if len(self.entries) > self.max_entries:
            del self.entries[: len(self.entries) - self.max_entries]

    def _sync_editor(self) -> None:
        """Make the editor's recall list match the entries."""
        if self.editor is None:
            return
        # Entries are added explicitly by append(), not by the editor itself.
        self.editor.set_auto_history(False)
        self.editor.set_history_length(self.max_entries)
        self.editor.clear_history()
        for entry in self.entries:
            self.editor.add_history(entry)

    def __len__(self) -> int:
        return len(self.entries)
