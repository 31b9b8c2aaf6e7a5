"""Rendering: writes evaluation outcomes to the console sink.

Every function here is presentation only: it reads outcomes and writes
text, never evaluates anything. Output goes through
``challenge_tester.console`` so the backend (plain or Rich) can be
swapped without touching the text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from challenge_tester import config
from challenge_tester.console import console
from challenge_tester.domain.models import Failure, Success, default_title

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from challenge_tester.domain.models import Outcome


def _line(label: str, value: object) -> str:
    return f"{label.ljust(config.LABEL_WIDTH)}\t{value}"


def format_success(success: Success[object, object]) -> list[str]:
    """Return the Input / Output / Time lines for one success."""
    return [
        _line(config.LABEL_INPUT, success.input),
        _line(config.LABEL_OUTPUT, success.output),
        _line(config.LABEL_TIME, success.time),
    ]


def format_failure(failure: Failure[object, object]) -> list[str]:
    """Return the Input / Expected / Actual / Time lines for one failure."""
    return [
        _line(config.LABEL_INPUT, failure.input),
        _line(config.LABEL_EXPECTED, list(failure.expected)),
        _line(config.LABEL_ACTUAL, failure.actual),
        _line(config.LABEL_TIME, failure.time),
    ]


def format_outcome(outcome: Outcome[object, object]) -> list[str]:
    if isinstance(outcome, Success):
        return format_success(outcome)
    return format_failure(outcome)


def _write_blocks(outcomes: Iterable[Outcome[object, object]]) -> None:
    for outcome in outcomes:
        for line in format_outcome(outcome):
            console.write(line)
    console.separator(config.SEPARATOR)


# ---------------------------------------------------------------------------
# Report views
# ---------------------------------------------------------------------------


def print_successes(title: str, successes: Sequence[Success[object, object]]) -> None:
    """Print every success, or a single all-failed line if there are none."""
    if not successes:
        console.failure(config.ALL_FAILED.format(title=title))
        return

    console.success(config.SUCCEEDED_HEADER.format(title=title))
    _write_blocks(successes)


def print_failures(title: str, failures: Sequence[Failure[object, object]]) -> None:
    """Print every failure, or a single all-passed line if there are none."""
    if not failures:
        console.success(config.ALL_PASSED.format(title=title))
        return

    console.failure(config.FAILED_HEADER.format(title=title))
    _write_blocks(failures)


def print_results(title: str, results: Sequence[Outcome[object, object]]) -> None:
    """Print every outcome in evaluation order."""
    console.heading(config.RESULTS_HEADER.format(title=title))
    _write_blocks(results)


def print_failure_list(
    failures: Sequence[Failure[object, object]],
    input_type: object = None,
    output_type: object = None,
    *,
    title: str | None = None,
) -> None:
    """Print a bare collection of failures without its table or report.

    Args:
        failures: Failure records, typically ``report.failures``.
        input_type: Input type used to build the default title.
        output_type: Output type used to build the default title.
        title: Explicit title; overrides the one built from the types.
    """
    if title is None:
        title = default_title(input_type, output_type)
    print_failures(title, failures)
