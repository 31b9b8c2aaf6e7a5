"""challenge_tester.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the report text sink.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """Text sink the report renderer writes to.

    Every method writes its text verbatim followed by a newline; backends
    may only add styling, never change the characters::

        console.success("All tests passed for 'int -> int'!\\n")
        console.failure("Tests failed for 'int -> int':")
        console.write("Input:        \\t2")
        console.separator("----------------")
    """

    def write(self, text: str) -> None:
        """Plain output line (result blocks)."""
        ...

    def heading(self, text: str) -> None:
        """Neutral header line."""
        ...

    def success(self, text: str) -> None:
        """Positive-outcome line."""
        ...

    def failure(self, text: str) -> None:
        """Negative-outcome line."""
        ...

    def separator(self, text: str) -> None:
        """Closing rule, surrounded by blank lines."""
        ...
