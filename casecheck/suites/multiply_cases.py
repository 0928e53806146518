"""
Test binary for casecheck.simple_lib.multiply.

    python -m casecheck.suites.multiply_cases [test_success | test_failure]
"""

from casecheck.assertion import check
from casecheck.dispatcher import main as dispatch_main
from casecheck.registry import CaseRegistry
from casecheck.simple_lib import multiply

registry = CaseRegistry()


@registry.case
def test_success() -> None:
    check(multiply(2, 3) == 6)


@registry.case
def test_failure() -> None:
    check(multiply(2, 3) == 7)


def main() -> None:
    dispatch_main(registry)


if __name__ == "__main__":
    main()
