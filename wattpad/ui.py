from __future__ import annotations

import os
import sys
from typing import Optional, TextIO


class ConsoleUI:
    _COLORS = {
        "info": "36",      # cyan
        "success": "32",   # green
        "warning": "33",   # yellow
        "error": "31",     # red
        "muted": "90",     # bright black / grey
    }
    _LABELS = {
        "info": "INFO",
        "success": "DONE",
        "warning": "WARN",
        "error": "ERR",
        "muted": "...",
    }

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream or sys.stderr
        self._supports_ansi = self._stream.isatty() and os.getenv("TERM") != "dumb"
        self._status_length = 0

        if os.name == "nt" and self._supports_ansi:
            try:
                import colorama
            except ImportError:
                self._supports_ansi = False
            else:
                colorama.just_fix_windows_console()

    def _format_plain(self, message: str, level: str) -> str:
        if level == "muted":
            return message
        label = self._LABELS.get(level, level.upper())
        return f"[{label}] {message}"

    def _colorize(self, text: str, level: str) -> str:
        if not self._supports_ansi:
            return text
        code = self._COLORS.get(level)
        if not code:
            return text
        return f"\x1b[{code}m{text}\x1b[0m"

    def _clear_status(self) -> None:
        if not self._status_length:
            return
        self._stream.write("\r" + " " * self._status_length + "\r")
        self._stream.flush()
        self._status_length = 0

    def update_status(self, message: Optional[str], *, level: str = "info") -> None:
        """Show a transient status line; only drawn on terminals."""
        if not self._supports_ansi:
            return
        self._clear_status()
        if message is None:
            return
        line = self._format_plain(message, level)
        self._stream.write(self._colorize(line, level))
        self._stream.flush()
        self._status_length = len(line)

    def log_event(self, message: str, *, level: str = "info") -> None:
        self._clear_status()
        line = self._format_plain(message, level)
        print(self._colorize(line, level), file=self._stream, flush=True)

    def finalize(self) -> None:
        self._clear_status()
