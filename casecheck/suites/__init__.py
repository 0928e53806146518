"""
Test binaries, keyed by the name they are installed under.
"""

SUITES: dict[str, str] = {
    "test_add": "casecheck.suites.add_cases",
    "test_multiply": "casecheck.suites.multiply_cases",
}
