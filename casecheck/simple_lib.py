"""
Arithmetic functions exercised by the test binaries.
"""


def add(x: int, y: int) -> int:
    """Return the sum of *x* and *y*."""
    return x + y


def multiply(x: int, y: int) -> int:
    """Return the product of *x* and *y*."""
    return x * y
