"""challenge_tester.console -- report text sink.

Usage (any file)::

    from challenge_tester.console import console

    console.failure("Tests failed for 'int -> int':")
    console.write("Input:        \\t2")

Configuration (call once, before printing reports)::

    from challenge_tester.console import configure

    configure(backend="auto")  # "rich" | "plain" | "auto"
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from challenge_tester.config import CONSOLE_BACKEND
from challenge_tester.console._plain import PlainBackend

if TYPE_CHECKING:
    from challenge_tester.console._protocol import ConsoleProtocol

_BACKENDS = ("plain", "rich", "auto")

# ---------------------------------------------------------------------------
# Global singleton -- defaults to PlainBackend (exact text on stdout)
# ---------------------------------------------------------------------------

_backend: ConsoleProtocol = PlainBackend()


def configure(*, backend: str = CONSOLE_BACKEND, stream: TextIO | None = None) -> None:
    """Select the console backend.

    Args:
        backend: ``"rich"`` -- always use Rich.
                 ``"plain"`` -- always use plain text.
                 ``"auto"`` -- Rich when stdout is a TTY, plain otherwise.
        stream: Optional text stream to write to instead of stdout.

    Raises:
        ValueError: If *backend* is not one of the names above.
    """
    global _backend  # noqa: PLW0603

    if backend not in _BACKENDS:
        raise ValueError(
            f"Unknown console backend '{backend}'. Must be one of: {', '.join(_BACKENDS)}"
        )

    if backend == "auto":
        target = stream if stream is not None else sys.stdout
        backend = "rich" if target.isatty() else "plain"

    if backend == "rich":
        from challenge_tester.console._rich import RichBackend

        _backend = RichBackend(stream)
    else:
        _backend = PlainBackend(stream)


def get_console() -> ConsoleProtocol:
    """Return the current backend instance."""
    return _backend


# ---------------------------------------------------------------------------
# Proxy object -- ``from challenge_tester.console import console``
# ---------------------------------------------------------------------------


class _ConsoleProxy:
    """Transparent proxy that delegates to the current ``_backend``.

    This lets callers import ``console`` once at module level and
    automatically pick up any later ``configure()`` call.
    """

    def __getattr__(self, name: str) -> object:
        return getattr(_backend, name)


console: ConsoleProtocol = _ConsoleProxy()  # type: ignore[assignment]
