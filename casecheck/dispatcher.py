"""
Module selecting which cases of a test binary run.

    <binary>              # run every case in declaration order
    <binary> <case-name>  # run only that case, or none if it is unknown

Arguments beyond the first are ignored.
"""

import sys
from typing import NoReturn

from casecheck.exit_status import ExitStatus
from casecheck.registry import CaseRegistry


def select(registry: CaseRegistry, argv: list[str]) -> list[str]:
    """
    Returns names of the cases to run for the given arguments.

    Parameters
    ----------
    registry : CaseRegistry
        Cases of the test binary
    argv : list[str]
        Command line arguments without the program name

    Returns
    -------
    list[str]
        All names when no argument is given, the requested name when it is
        registered, otherwise an empty list
    """
    if not argv:
        return registry.names()

    name: str = argv[0]
    if name in registry:
        return [name]
    return []


def dispatch(registry: CaseRegistry, argv: list[str]) -> int:
    """
    Run the selected cases.

    A failing assertion terminates the process inside the case, so this
    only returns when every invoked case passed.

    Returns
    -------
    int
        ExitStatus.SUCCESS value
    """
    for name in select(registry, argv):
        test_case = registry.get(name)
        if test_case is not None:
            test_case.run()

    return ExitStatus.SUCCESS.value


def main(registry: CaseRegistry, argv: list[str] | None = None) -> NoReturn:
    """
    Entry point of a test binary.
    """
    if argv is None:
        argv = sys.argv[1:]
    sys.exit(dispatch(registry, argv))
