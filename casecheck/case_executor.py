"""
Execution of single cases of the test binaries.
"""

import subprocess
import sys

from casecheck.result_formatter import ResultFormatter
from casecheck.test_result import TestResult


class CaseExecutor:
    """
    Runs one case of a test binary per child process.

    Each case gets a fresh interpreter, so a failing assertion only
    terminates its own process.
    """

    def __init__(
        self,
        formatter: ResultFormatter,
        python: str | None = None,
        verbose: bool = False,
    ) -> None:
        """
        Initialize CaseExecutor.

        Parameters
        ----------
        formatter : ResultFormatter
            Result formatter used to parse diagnostics
        python : str | None, optional
            Interpreter running the test binaries, by default sys.executable
        verbose : bool, optional
            Enable verbose output, by default False
        """
        self._formatter = formatter
        self._python = python or sys.executable
        self._verbose = verbose


    def build_command(self, module: str, case: str) -> list[str]:
        """
        Build the command line running *case* of the binary in *module*.

        Parameters
        ----------
        module : str
            Dotted name of the test binary module
        case : str
            Case name

        Returns
        -------
        list[str]
            Command line
        """
        return [self._python, "-m", module, case]


    def run_case_process(self, command: list[str]) -> tuple[bool, str, int]:
        """
        Run a test binary and capture output.

        Parameters
        ----------
        command : list[str]
            Command line of the test binary

        Returns
        -------
        tuple[bool, str, int]
            (success, output, exit_code)
        """
        if self._verbose:
            print(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            return False, f"Failed to run case: {e}", -1

        output = result.stdout + result.stderr
        success = result.returncode == 0

        if self._verbose:
            print(f"Exit code: {result.returncode}")
            if output:
                print(f"Output:\n{output}")

        return success, output, result.returncode


    def run_case(self, suite: str, module: str, case: str) -> TestResult:
        """
        Run a single case.

        Parameters
        ----------
        suite : str
            Name of the test binary
        module : str
            Dotted name of the test binary module
        case : str
            Case name

        Returns
        -------
        TestResult
            Result named <suite>:<case>
        """
        name = f"{suite}:{case}"
        success, output, exit_code = self.run_case_process(
            self.build_command(module, case),
        )

        if success:
            return TestResult(name=name, passed=True)

        failure = self._formatter.parse_diagnostic(output)
        if failure is not None:
            return TestResult(
                name=name,
                passed=False,
                message=f"{failure.file}({failure.line}): {failure.expression}",
                failure=failure,
            )

        return TestResult(
            name=name,
            passed=False,
            message=f"Case failed with exit code {exit_code}\n{output}".rstrip(),
        )
