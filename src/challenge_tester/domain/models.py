"""Core data types for challenge_tester.

Outcomes are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")

_UNKNOWN_TYPE_NAME = "Any"


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Success(Generic[InputT, OutputT]):
    """One invocation whose output matched an acceptable output."""

    input: InputT
    output: OutputT
    time: float

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[InputT, OutputT]):
    """One invocation whose output matched none of the acceptable outputs.

    ``expected`` carries every acceptable output registered for the input,
    in registration order.
    """

    input: InputT
    expected: tuple[OutputT, ...]
    actual: OutputT
    time: float

    @property
    def is_success(self) -> bool:
        return False


Outcome = Union[Success[InputT, OutputT], Failure[InputT, OutputT]]


# ---------------------------------------------------------------------------
# Titles
# ---------------------------------------------------------------------------


def type_name(tp: object) -> str:
    """Return a short display name for a type or typing construct."""
    if tp is None or tp is inspect.Parameter.empty or tp is Any:
        return _UNKNOWN_TYPE_NAME
    if tp is type(None):
        return "None"
    if isinstance(tp, type) and not typing.get_args(tp):
        return tp.__name__
    return str(tp).replace("typing.", "")


def default_title(input_type: object = None, output_type: object = None) -> str:
    """Build the ``"<Input> -> <Output>"`` title used when none is given."""
    return f"{type_name(input_type)} -> {type_name(output_type)}"


def solution_types(solution: Callable[..., Any]) -> tuple[object, object]:
    """Read the input and output types from a solution's annotations.

    Returns ``(None, None)`` parts for anything that is not annotated or
    cannot be resolved.
    """
    try:
        hints = typing.get_type_hints(solution)
    except (NameError, TypeError):
        hints = {}
    try:
        params = list(inspect.signature(solution).parameters.values())
    except (TypeError, ValueError):
        params = []

    input_type = hints.get(params[0].name) if params else None
    output_type = hints.get("return")
    return input_type, output_type
