"""
Module providing exit status enum.
"""
from enum import Enum


class ExitStatus(Enum):
    """
    Enum of exit status

    ASSERTION_FAILED is what a test binary exits with when a check does
    not hold; ERROR is what the driver reports for a failed run.
    """
    SUCCESS = 0
    ASSERTION_FAILED = 1
    ERROR = 1
