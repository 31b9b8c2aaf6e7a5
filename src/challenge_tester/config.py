"""
challenge_tester/config.py: Text templates and runtime settings.

All output strings and tunables live here. The rendering and console
modules import from this file.
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------

# Backend used until configure() is called: "plain" | "rich" | "auto"
CONSOLE_BACKEND = os.environ.get("CHALLENGE_TESTER_CONSOLE", "plain")

# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

DEFAULT_EVALUATION_COUNT = 1

# ---------------------------------------------------------------------------
# Report text
# ---------------------------------------------------------------------------

ALL_PASSED = "All tests passed for '{title}'!\n"
ALL_FAILED = "All tests failed for '{title}'.\n"
FAILED_HEADER = "Tests failed for '{title}':"
SUCCEEDED_HEADER = "Tests succeeded for '{title}':"
RESULTS_HEADER = "Test results for '{title}':"

SEPARATOR = "----------------"

# Block labels are padded to the widest one, then followed by a tab
LABEL_INPUT = "Input:"
LABEL_OUTPUT = "Output:"
LABEL_EXPECTED = "Expected:"
LABEL_ACTUAL = "Actual output:"
LABEL_TIME = "Time to solve:"
LABEL_WIDTH = len(LABEL_ACTUAL)
