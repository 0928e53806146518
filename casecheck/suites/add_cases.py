"""
Test binary for casecheck.simple_lib.add.

    python -m casecheck.suites.add_cases [test_success | test_failure]
"""

from casecheck.assertion import check
from casecheck.dispatcher import main as dispatch_main
from casecheck.registry import CaseRegistry
from casecheck.simple_lib import add

registry = CaseRegistry()


@registry.case
def test_success() -> None:
    check(add(1, 2) == 3)


@registry.case
def test_failure() -> None:
    check(add(1, 2) == 4)


def main() -> None:
    dispatch_main(registry)


if __name__ == "__main__":
    main()
