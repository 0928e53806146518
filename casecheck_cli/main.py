#!/usr/bin/env python3
"""
CLI entry for casecheck (thin wrapper).
"""

import argparse
import sys

from casecheck import __version__ as CASECHECK_VERSION
from casecheck.exit_status import ExitStatus
from casecheck.test_result import Colors
from casecheck.suite_runner import SuiteRunner


def get_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Gets and returns command line arguments.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="casecheck - Runs the test binaries case by case",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "suites",
        nargs="*",
        help="Test binaries to run, e.g. test_add (default: all)",
    )
    parser.add_argument(
        "--case",
        help="Run only this case of each test binary",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the selected cases without running them",
    )
    parser.add_argument(
        "--python",
        help="Python interpreter running the test binaries (default: current)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"casecheck {CASECHECK_VERSION}",
        help="Show program's version number and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main function for CLI.
    """
    args = None
    try:
        args = get_arguments(argv)
        runner = SuiteRunner(
            python=args.python,
            verbose=args.verbose,
        )

        if args.list:
            for name in runner.list_cases(args.suites, args.case):
                print(name)
            return ExitStatus.SUCCESS.value

        runner.run_suites(args.suites, args.case)

        return runner.print_summary()

    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW.value}Case execution interrupted by user{Colors.RESET.value}")
        return ExitStatus.ERROR.value

    except Exception as e:
        print(f"{Colors.RED.value}Error: {e}{Colors.RESET.value}")
        if args is not None and args.verbose:
            import traceback
            traceback.print_exc()
        return ExitStatus.ERROR.value


if __name__ == "__main__":
    sys.exit(main())
