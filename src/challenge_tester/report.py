"""Evaluation report: the immutable result of one evaluation run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from challenge_tester import rendering
from challenge_tester.domain.models import Failure, InputT, Outcome, OutputT, Success


@dataclass(frozen=True)
class EvaluationReport(Generic[InputT, OutputT]):
    """Outcomes of evaluating a table, one per distinct input.

    ``results`` keeps the table's insertion order.
    """

    title: str
    results: tuple[Outcome[InputT, OutputT], ...] = ()

    @property
    def all_success(self) -> bool:
        """True if no outcome is a failure (vacuously true when empty)."""
        return all(r.is_success for r in self.results)

    @property
    def failures(self) -> list[Failure[InputT, OutputT]]:
        return [r for r in self.results if isinstance(r, Failure)]

    @property
    def successes(self) -> list[Success[InputT, OutputT]]:
        return [r for r in self.results if isinstance(r, Success)]

    @property
    def total_time(self) -> float:
        """Sum of every outcome's elapsed time, in seconds."""
        return sum((r.time for r in self.results), 0.0)

    # -- Rendering ----------------------------------------------------------

    def print_successes(self) -> None:
        rendering.print_successes(self.title, self.successes)

    def print_failures(self) -> None:
        rendering.print_failures(self.title, self.failures)

    def print_results(self) -> None:
        rendering.print_results(self.title, self.results)
