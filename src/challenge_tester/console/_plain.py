"""challenge_tester.console._plain -- Plain-text backend.

Writes with built-in print() and no external dependencies.
Used by default and whenever stdout is not a TTY.
"""

from __future__ import annotations

from typing import TextIO


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print().

    Args:
        stream: Where to write. ``None`` resolves ``sys.stdout`` at each
            call, so output captured by pytest or redirected later still
            lands in the right place.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        print(text, file=self._stream)

    def heading(self, text: str) -> None:
        print(text, file=self._stream)

    def success(self, text: str) -> None:
        print(text, file=self._stream)

    def failure(self, text: str) -> None:
        print(text, file=self._stream)

    def separator(self, text: str) -> None:
        print(f"\n{text}\n", file=self._stream)
