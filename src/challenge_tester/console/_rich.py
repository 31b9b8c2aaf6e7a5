"""challenge_tester.console._rich -- Rich-based backend.

Colours report headers with the Rich library. Markup, emoji and
highlighting are disabled so titles and values print verbatim.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.theme import Theme

_THEME = Theme(
    {
        "heading": "bold",
        "success": "bold green",
        "failure": "bold red",
        "rule": "dim",
    }
)


class RichBackend:
    """ConsoleProtocol implementation backed by Rich."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._con = Console(
            file=stream,
            theme=_THEME,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )

    def write(self, text: str) -> None:
        # Block lines carry tabs; Console.print would expand them
        self._con.file.write(f"{text}\n")

    def heading(self, text: str) -> None:
        self._con.print(text, style="heading")

    def success(self, text: str) -> None:
        self._con.print(text, style="success")

    def failure(self, text: str) -> None:
        self._con.print(text, style="failure")

    def separator(self, text: str) -> None:
        self._con.print()
        self._con.print(text, style="rule")
        self._con.print()
