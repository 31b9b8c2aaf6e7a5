"""Domain types: outcomes of a single solution invocation."""

from challenge_tester.domain.models import (
    Failure,
    Outcome,
    Success,
    default_title,
    solution_types,
    type_name,
)

__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "default_title",
    "solution_types",
    "type_name",
]
