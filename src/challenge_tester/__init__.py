"""challenge_tester -- verify a single-argument solution against expected outputs.

Usage::

    from challenge_tester import ChallengeTestCases

    cases = ChallengeTestCases(lambda n: n * n, [(3, 9), (4, 16)])
    cases.append(-3, 9)
    report = cases.evaluate()
    report.print_failures()
"""

from challenge_tester.cases import ChallengeTestCases
from challenge_tester.console import configure
from challenge_tester.domain.models import Failure, Outcome, Success
from challenge_tester.rendering import print_failure_list
from challenge_tester.report import EvaluationReport

__all__ = [
    "ChallengeTestCases",
    "EvaluationReport",
    "Failure",
    "Outcome",
    "Success",
    "configure",
    "print_failure_list",
]
