"""
Shared utilities for the designguard CLI.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import Optional


# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Console output for CLI commands, colored unless disabled.

    Library modules log through ``logging``; this is only for what a
    command prints to the user.
    """

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "cyan": "\033[96m",
        "bold": "\033[1m",
        "dim": "\033[2m",
    }

    def __init__(self, use_color: Optional[bool] = None):
        self._use_color = sys.stdout.isatty() if use_color is None else use_color

    def set_color(self, use_color: bool) -> None:
        self._use_color = use_color

    def _paint(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS[color]}{text}{self.COLORS['reset']}"

    def header(self, message: str) -> None:
        rule = self._paint("===", "cyan")
        print(f"\n{rule} {self._paint(message, 'bold')} {rule}")

    def info(self, message: str) -> None:
        print(f"  {message}")

    def success(self, message: str) -> None:
        print(f"  {self._paint('[OK]', 'green')} {message}")

    def warning(self, message: str) -> None:
        print(f"  {self._paint('[WARN]', 'yellow')} {message}")

    def error(self, message: str) -> None:
        print(f"  {self._paint('[ERROR]', 'red')} {message}")

    def dim(self, message: str) -> None:
        print(f"  {self._paint(message, 'dim')}")

    def progress(self, value: float, label: str) -> None:
        """One progress line: percentage and phase label."""
        print(f"  {self._paint(f'{value:5.0f}%', 'cyan')}  {label}")

    def table_row(self, label: str, value: str, width: int = 24) -> None:
        print(f"  {label:<{width}} {value}")


log = Logger()


# =============================================================================
# Time Utilities
# =============================================================================


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def truncate(text: str, limit: int = 60) -> str:
    """Shorten text for single-line display."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
