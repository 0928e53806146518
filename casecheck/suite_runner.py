#!/usr/bin/env python3
"""
Module providing the driver that runs the test binaries case by case.
"""

import importlib
from pathlib import Path

from casecheck.case_executor import CaseExecutor
from casecheck.registry import CaseRegistry
from casecheck.result_formatter import ResultFormatter
from casecheck.suites import SUITES
from casecheck.test_result import TestResult


class SuiteRunner:
    """
    Runs every selected case of the test binaries in its own process.

    Cases are enumerated from the hand-written registry of each binary,
    which is imported in the driver process; only execution happens in
    child processes.

    Attributes
    ----------
    verbose : bool
        Enable verbose output
    total_tests : int
        Total number of cases executed
    passed_tests : int
        Number of cases that passed
    failed_tests : int
        Number of cases that failed
    results : list[TestResult]
        Results in execution order
    """

    def __init__(self,
        python: str | None = None,
        verbose: bool = False,
        suites: dict[str, str] | None = None,
    ) -> None:
        self.verbose: bool = verbose
        self.suites: dict[str, str] = dict(SUITES if suites is None else suites)
        self.total_tests: int = 0
        self.passed_tests: int = 0
        self.failed_tests: int = 0
        self.results: list[TestResult] = []

        self.formatter: ResultFormatter = ResultFormatter(verbose)
        self.executor: CaseExecutor = CaseExecutor(self.formatter, python, verbose)


    def resolve_suites(self, names: list[str]) -> list[str]:
        """
        Resolve test binary names.

        Parameters
        ----------
        names : list[str]
            Requested binary names, empty for all

        Returns
        -------
        list[str]
            Binary names (deduplicated, order-preserved)

        Raises
        ------
        KeyError
            If a name is not a known test binary
        """
        if not names:
            return list(self.suites)

        unknown: list[str] = [name for name in names if name not in self.suites]
        if unknown:
            raise KeyError(
                f"Unknown test binary: {', '.join(unknown)} "
                f"(known: {', '.join(self.suites)})"
            )

        return list(dict.fromkeys(names))


    def load_registry(self, suite: str) -> CaseRegistry:
        """
        Import a test binary and return its case registry.
        """
        module = importlib.import_module(self.suites[suite])
        return module.registry


    def select_cases(self, suite: str, case: str | None = None) -> list[str]:
        """
        Select the cases of a test binary.

        Parameters
        ----------
        suite : str
            Name of the test binary
        case : str | None, optional
            Only this case, by default every case

        Returns
        -------
        list[str]
            Case names in declaration order; empty when *case* is not
            registered, as the binary itself would run nothing
        """
        registry = self.load_registry(suite)
        if case is None:
            return registry.names()
        if case in registry:
            return [case]
        if self.verbose:
            print(f"No case '{case}' in {suite}")
        return []


    def list_cases(self, names: list[str], case: str | None = None) -> list[str]:
        """
        Returns "<suite>:<case> <file>:<line>" for every selected case.

        The location is where the case body is defined in its binary.
        """
        listing: list[str] = []
        for suite in self.resolve_suites(names):
            registry = self.load_registry(suite)
            for name in self.select_cases(suite, case):
                filename, lineno = registry.get(name).location
                listing.append(f"{suite}:{name} {Path(filename).name}:{lineno}")
        return listing


    def run_suites(self, names: list[str], case: str | None = None) -> None:
        """
        Run the selected cases of the given test binaries.

        Parameters
        ----------
        names : list[str]
            Binary names, empty for all
        case : str | None, optional
            Only this case of each binary
        """
        for suite in self.resolve_suites(names):
            if self.verbose:
                print(f"\nRunning {suite}")

            results: list[TestResult] = [
                self.executor.run_case(suite, self.suites[suite], name)
                for name in self.select_cases(suite, case)
            ]
            self.formatter.print_results(results)

            self.results.extend(results)
            self.total_tests += len(results)
            self.passed_tests += sum(1 for r in results if r.passed)
            self.failed_tests += sum(1 for r in results if not r.passed)


    def print_summary(self) -> int:
        """
        Print final summary.

        Returns
        -------
        int
            Exit code (0 if all cases passed, 1 otherwise)
        """
        return self.formatter.print_final_summary(
            self.total_tests,
            self.passed_tests,
            self.failed_tests,
        )
