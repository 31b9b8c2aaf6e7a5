"""Challenge test cases: a solution plus the outputs it may produce.

Holds the expectation table (input -> acceptable outputs) and evaluates
the solution against it. Evaluation is sequential and synchronous: one
call per distinct input, timed with ``time.perf_counter``.
"""

from __future__ import annotations

import logging
import operator
import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic

from challenge_tester.config import DEFAULT_EVALUATION_COUNT
from challenge_tester.domain.models import (
    Failure,
    InputT,
    Outcome,
    OutputT,
    Success,
    default_title,
    solution_types,
)
from challenge_tester.report import EvaluationReport

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    Predicate = Callable[[OutputT, OutputT], bool]

logger = logging.getLogger("challenge_tester.cases")


class ChallengeTestCases(Generic[InputT, OutputT]):
    """Expectation table for a single-argument solution.

    Each input maps to one or more acceptable outputs. Outputs for an
    input only ever accumulate; registering the same input twice keeps
    both outputs, in order.

    Args:
        solution: The function under test.
        expected: Initial ``(input, output)`` pairs, or a mapping of input
            to a single output. Each entry goes through :meth:`append`.
        title: Display name. Defaults to ``"<Input> -> <Output>"``.
        input_type: Input type for the default title. Read from the
            solution's first parameter annotation when omitted.
        output_type: Output type for the default title. Read from the
            solution's return annotation when omitted.
    """

    def __init__(
        self,
        solution: Callable[[InputT], OutputT],
        expected: Iterable[tuple[InputT, OutputT]] | Mapping[InputT, OutputT] = (),
        *,
        title: str | None = None,
        input_type: object = None,
        output_type: object = None,
    ) -> None:
        if title is None:
            hinted_input, hinted_output = solution_types(solution)
            title = default_title(
                input_type if input_type is not None else hinted_input,
                output_type if output_type is not None else hinted_output,
            )
        self.title = title
        self.solution = solution
        self._expected: dict[InputT, list[OutputT]] = {}

        if isinstance(expected, Mapping):
            expected = expected.items()
        self.extend(expected)

    def __repr__(self) -> str:
        return f"ChallengeTestCases(title={self.title!r}, inputs={len(self._expected)})"

    def __len__(self) -> int:
        return len(self._expected)

    @property
    def expected(self) -> Mapping[InputT, list[OutputT]]:
        """Read-only view of input -> acceptable outputs."""
        return MappingProxyType(self._expected)

    @property
    def is_empty(self) -> bool:
        return not self._expected

    # -- Population ---------------------------------------------------------

    def append(self, input_value: InputT, output: OutputT) -> None:
        """Register one more acceptable output for *input_value*."""
        self._expected.setdefault(input_value, []).append(output)

    def extend(self, pairs: Iterable[tuple[InputT, OutputT]]) -> None:
        """Register each ``(input, output)`` pair in order."""
        for input_value, output in pairs:
            self.append(input_value, output)

    # -- Evaluation ---------------------------------------------------------

    def evaluate(
        self,
        output_equals_expected: Predicate[OutputT] | None = None,
        evaluation_count: int = DEFAULT_EVALUATION_COUNT,
    ) -> EvaluationReport[InputT, OutputT]:
        """Run the solution on every input and classify the results.

        Args:
            output_equals_expected: ``(actual, expected) -> bool``. An input
                succeeds if this holds for at least one acceptable output.
                Defaults to ``==``.
            evaluation_count: Accepted for compatibility; every input is
                evaluated exactly once regardless of its value.

        Returns:
            An EvaluationReport with one outcome per input, in table order.

        Raises:
            Exception: Whatever the solution raises. A raising solution
                aborts the whole run; it is not recorded as a failure.
        """
        matches = output_equals_expected or operator.eq
        if evaluation_count != DEFAULT_EVALUATION_COUNT:
            logger.debug(
                "evaluation_count=%d ignored; each input runs once", evaluation_count
            )

        results: list[Outcome[InputT, OutputT]] = []
        for input_value, acceptable in self._expected.items():
            results.append(self._evaluate_one(input_value, acceptable, matches))

        report = EvaluationReport(title=self.title, results=tuple(results))
        if report.all_success:
            logger.info("Evaluation passed for '%s' (%d inputs)", self.title, len(results))
        else:
            logger.warning(
                "Evaluation for '%s' finished with %d failure(s)",
                self.title,
                len(report.failures),
            )
        return report

    def _evaluate_one(
        self,
        input_value: InputT,
        acceptable: list[OutputT],
        matches: Predicate[OutputT],
    ) -> Outcome[InputT, OutputT]:
        start = time.perf_counter()
        try:
            actual = self.solution(input_value)
        except Exception:
            logger.exception("Solution raised for input %r in '%s'", input_value, self.title)
            raise
        elapsed = time.perf_counter() - start

        passed = any(matches(actual, e) for e in acceptable)
        logger.debug(
            "input=%r elapsed=%.6fs %s", input_value, elapsed, "passed" if passed else "failed"
        )

        if passed:
            return Success(input=input_value, output=actual, time=elapsed)
        return Failure(
            input=input_value,
            expected=tuple(acceptable),
            actual=actual,
            time=elapsed,
        )

    def print_failures(
        self,
        output_equals_expected: Predicate[OutputT] | None = None,
    ) -> None:
        """Evaluate and print only the failures."""
        self.evaluate(output_equals_expected).print_failures()
