"""Shared pytest fixtures for challenge_tester tests.

Provides factory fixtures for outcomes and reports, and resets the
console backend so tests that reconfigure it cannot leak into others.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from challenge_tester.console import configure
from challenge_tester.domain.models import Failure, Success
from challenge_tester.report import EvaluationReport


@pytest.fixture(autouse=True)
def _plain_console() -> Iterator[None]:
    """Every test starts and ends on the plain stdout backend."""
    configure(backend="plain")
    yield
    configure(backend="plain")


# ---------------------------------------------------------------------------
# Outcome factories
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_success() -> _SuccessFactory:
    """Factory for Success with sensible defaults."""

    def _factory(
        input: Any = 3,  # noqa: A002
        output: Any = 9,
        *,
        time: float = 0.5,
    ) -> Success[Any, Any]:
        return Success(input=input, output=output, time=time)

    return _factory


_SuccessFactory = Any


@pytest.fixture()
def make_failure() -> _FailureFactory:
    """Factory for Failure with sensible defaults."""

    def _factory(
        input: Any = 2,  # noqa: A002
        expected: tuple[Any, ...] = (3,),
        actual: Any = 2,
        *,
        time: float = 0.25,
    ) -> Failure[Any, Any]:
        return Failure(input=input, expected=expected, actual=actual, time=time)

    return _factory


_FailureFactory = Any


@pytest.fixture()
def make_report(make_success: _SuccessFactory, make_failure: _FailureFactory) -> _ReportFactory:
    """Factory for EvaluationReport: one success and one failure by default."""

    def _factory(
        *results: Success[Any, Any] | Failure[Any, Any],
        title: str = "int -> int",
    ) -> EvaluationReport[Any, Any]:
        if not results:
            results = (make_success(), make_failure())
        return EvaluationReport(title=title, results=tuple(results))

    return _factory


_ReportFactory = Any
