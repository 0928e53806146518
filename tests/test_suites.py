"""
End-to-end tests of the test binaries in casecheck/suites.
"""
import subprocess
import sys
from pathlib import Path

import pytest

from casecheck.assertion import check
from casecheck.dispatcher import dispatch
from casecheck.registry import CaseRegistry
from casecheck.simple_lib import add, multiply
from casecheck.suites import SUITES
from casecheck.suites import add_cases, multiply_cases

ROOT_DIR: Path = Path(__file__).resolve().parents[1]


def run_binary(module: str, *args: str) -> subprocess.CompletedProcess[str]:
    """
    Run a test binary in a child interpreter.
    """
    return subprocess.run(
        [sys.executable, "-m", module, *args],
        capture_output=True,
        text=True,
        cwd=ROOT_DIR,
    )


def test_suites_table() -> None:
    """
    Test SUITES.
    Verify that both binaries are known under their installed names.
    """
    assert SUITES == {
        "test_add": "casecheck.suites.add_cases",
        "test_multiply": "casecheck.suites.multiply_cases",
    }


@pytest.mark.parametrize("module", [add_cases, multiply_cases])
def test_registry_order(module) -> None:
    """
    Test the registry of each binary.
    Verify the expected-pass case is declared before the expected-fail one.
    """
    assert module.registry.names() == ["test_success", "test_failure"]


@pytest.mark.parametrize("x,y", [(0, 0), (1, 2), (-5, 10), (2**40, -(2**41))])
def test_add_matches_sum(x: int, y: int) -> None:
    """
    Test a case asserting add(x, y) == x + y.
    Verify that it completes without exiting.
    """
    registry = CaseRegistry()
    registry.register("test_sum", lambda: check(add(x, y) == x + y))

    assert dispatch(registry, []) == 0


def test_multiply_matches_product() -> None:
    """
    Test multiply.
    Verify that it returns the product.
    """
    assert multiply(2, 3) == 6
    assert multiply(-4, 5) == -20


def test_add_all_cases() -> None:
    """
    Run test_add with no argument.
    Verify that it fails on test_failure.
    """
    result = run_binary("casecheck.suites.add_cases")

    assert result.returncode != 0
    assert "add(1, 2) == 4" in result.stderr
    assert "add_cases.py(" in result.stderr


def test_add_success() -> None:
    """
    Run test_add test_success.
    Verify exit 0 and no diagnostic.
    """
    result = run_binary("casecheck.suites.add_cases", "test_success")

    assert result.returncode == 0
    assert result.stderr == ""
    assert result.stdout == ""


def test_add_failure() -> None:
    """
    Run test_add test_failure.
    Verify that the diagnostic names the predicate.
    """
    result = run_binary("casecheck.suites.add_cases", "test_failure")

    assert result.returncode != 0
    assert result.stderr.rstrip().endswith("assertion failed: add(1, 2) == 4")


def test_multiply_success() -> None:
    """
    Run test_multiply test_success.
    Verify exit 0.
    """
    result = run_binary("casecheck.suites.multiply_cases", "test_success")

    assert result.returncode == 0
    assert result.stderr == ""


def test_multiply_failure() -> None:
    """
    Run test_multiply test_failure.
    Verify that the diagnostic names the predicate.
    """
    result = run_binary("casecheck.suites.multiply_cases", "test_failure")

    assert result.returncode != 0
    assert "multiply(2, 3) == 7" in result.stderr


def test_multiply_unknown_case() -> None:
    """
    Run test_multiply does_not_exist.
    Verify exit 0 and no case executed.
    """
    result = run_binary("casecheck.suites.multiply_cases", "does_not_exist")

    assert result.returncode == 0
    assert result.stderr == ""
    assert result.stdout == ""


def test_add_entry_point(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Call the test_add console script entry point with test_success.
    Verify that it exits with status 0.
    """
    monkeypatch.setattr("sys.argv", ["test_add", "test_success"])

    with pytest.raises(SystemExit) as excinfo:
        add_cases.main()

    assert excinfo.value.code == 0


def test_multiply_entry_point_failure(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """
    Call the test_multiply console script entry point with test_failure.
    Verify that it exits with status 1 and names the predicate.
    """
    monkeypatch.setattr("sys.argv", ["test_multiply", "test_failure"])

    with pytest.raises(SystemExit) as excinfo:
        multiply_cases.main()

    assert excinfo.value.code == 1
    assert "multiply(2, 3) == 7" in capsys.readouterr().err
