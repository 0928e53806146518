"""
Module for parsing case output and displaying results.
"""

import re
from typing import ClassVar

from casecheck.exit_status import ExitStatus
from casecheck.test_result import AssertionFailure, Colors, MessageTag, TestResult


class ResultFormatter:
    """
    Formats and displays case results.

    Recovers the assertion diagnostic from the output of a test binary and
    prints per-case lines and summaries.
    """
    # <file>(<line>): assertion failed: <expression>
    DIAGNOSTIC_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<file>.+)\((?P<line>\d+)\): assertion failed: (?P<expression>.*)$"
    )

    def __init__(self, verbose: bool = False) -> None:
        """
        Initialize the result formatter.

        Parameters
        ----------
        verbose : bool, optional
            Enable verbose output, by default False
        """
        self._verbose: bool = verbose


    def parse_diagnostic(self, output: str) -> AssertionFailure | None:
        """
        Parse the assertion diagnostic from the output of a case.

        Parameters
        ----------
        output : str
            Combined stdout and stderr of the test binary

        Returns
        -------
        AssertionFailure | None
            The first diagnostic found, None if there is none
        """
        for line in output.splitlines():
            # Remove ANSI color codes first
            clean: str = re.sub(r"\x1b\[[0-9;]*m", "", line).rstrip()
            match = self.DIAGNOSTIC_PATTERN.match(clean)
            if match:
                return AssertionFailure(
                    file=match.group("file"),
                    line=int(match.group("line")),
                    expression=match.group("expression"),
                )

        if self._verbose:
            print("No assertion diagnostic found in output")
        return None


    def print_results(self, results: list[TestResult]) -> None:
        """
        Print one line per result.

        Parameters
        ----------
        results : list[TestResult]
            Case results in execution order
        """
        for result in results:
            if result.passed:
                print(
                    f"{Colors.GREEN.value}{MessageTag.PASS.value}{Colors.RESET.value} "
                    f"{result.name}"
                )
            else:
                print(
                    f"{Colors.RED.value}{MessageTag.FAIL.value}{Colors.RESET.value} "
                    f"{result.name}"
                )
                if result.message:
                    for line in result.message.splitlines():
                        print(f"       {line}")


    def print_final_summary(
        self,
        total_tests: int,
        passed_tests: int,
        failed_tests: int
    ) -> int:
        """
        Print final summary.

        Parameters
        ----------
        total_tests : int
            Total number of cases executed
        passed_tests : int
            Number of cases that passed
        failed_tests : int
            Number of cases that failed

        Returns
        -------
        int
            Exit code (0 if all cases passed, 1 otherwise)
        """
        separator: str = "-" * 60
        separator_table: str = "=" * 50

        print(separator)
        print("All cases completed.")
        print(separator_table)
        print(f"Total cases: {total_tests}")
        print(f"{Colors.GREEN.value}{MessageTag.PASS.value}{passed_tests:>4}{Colors.RESET.value}")
        print(f"{Colors.RED.value}{MessageTag.FAIL.value}{failed_tests:>4}{Colors.RESET.value}")
        print(separator_table)

        if total_tests == 0:
            print(f"\n{Colors.YELLOW.value}No cases were run{Colors.RESET.value}")
            return ExitStatus.ERROR.value
        if failed_tests == 0:
            print(f"\n{Colors.GREEN.value}{Colors.BOLD.value}All cases passed!{Colors.RESET.value}")
            return ExitStatus.SUCCESS.value
        else:
            print(f"\n{Colors.RED.value}{Colors.BOLD.value}Some cases failed{Colors.RESET.value}")
            return ExitStatus.ERROR.value
