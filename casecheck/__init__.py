"""
casecheck - Minimal test binaries with a fail-fast assertion.

Each test binary holds a hand-written registry of cases and runs all of
them, or the one named by its first argument. A failing check writes a
diagnostic to stderr and exits the process.
"""

__version__ = "0.1.0"

from casecheck.assertion import check
from casecheck.registry import CaseRegistry, TestCase
from casecheck.suite_runner import SuiteRunner

__all__ = ["check", "CaseRegistry", "TestCase", "SuiteRunner"]
