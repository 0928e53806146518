"""
Tests of casecheck_cli/main.py
"""
from pathlib import Path

import pytest

from casecheck.suites import add_cases
from casecheck_cli.main import get_arguments, main

ROOT_DIR: Path = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def in_root_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Run the CLI from the project root so child processes import casecheck.
    """
    monkeypatch.chdir(ROOT_DIR)


def test_get_arguments_defaults() -> None:
    """
    Test get_arguments with no arguments.
    Verify the defaults.
    """
    args = get_arguments([])

    assert args.suites == []
    assert args.case is None
    assert args.list is False
    assert args.python is None
    assert args.verbose is False


def test_main_list(capsys: pytest.CaptureFixture[str]) -> None:
    """
    Test main with --list.
    Verify that cases are printed and nothing runs.
    """
    success_line = add_cases.test_success.__code__.co_firstlineno
    failure_line = add_cases.test_failure.__code__.co_firstlineno

    assert main(["test_add", "--list"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        f"test_add:test_success add_cases.py:{success_line}",
        f"test_add:test_failure add_cases.py:{failure_line}",
    ]


def test_main_passing_case(capsys: pytest.CaptureFixture[str]) -> None:
    """
    Test main with a passing case.
    Verify exit status 0.
    """
    assert main(["test_add", "--case", "test_success"]) == 0
    assert "test_add:test_success" in capsys.readouterr().out


def test_main_failing_suite(capsys: pytest.CaptureFixture[str]) -> None:
    """
    Test main with a suite containing a failing case.
    Verify exit status 1 and the predicate in the report.
    """
    assert main(["test_multiply"]) == 1
    assert "multiply(2, 3) == 7" in capsys.readouterr().out


def test_main_unknown_suite(capsys: pytest.CaptureFixture[str]) -> None:
    """
    Test main with an unknown suite.
    Verify that the error is reported and exit status is 1.
    """
    assert main(["test_divide"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    """
    Test main with --version.
    Verify that argparse exits after printing the version.
    """
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert "casecheck" in capsys.readouterr().out
