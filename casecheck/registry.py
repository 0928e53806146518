"""
Module defining test cases and the registry a test binary exposes.
"""

import inspect
from collections.abc import Callable, Iterator


class TestCase:
    """
    A named, argument-free unit of execution.

    Attributes
    ----------
    name : str
        Name the case is selected by on the command line
    action : Callable[[], None]
        Body of the case
    """
    # Prevent pytest from collecting this as a test class (it has an __init__)
    __test__ = False
    def __init__(self, name: str, action: Callable[[], None]) -> None:
        self.name: str = name
        self.action: Callable[[], None] = action


    @property
    def location(self) -> tuple[str, int]:
        """
        Source file and first line of the case body.
        """
        try:
            filename: str = inspect.getsourcefile(self.action) or "<unknown>"
            _, lineno = inspect.getsourcelines(self.action)
        except (OSError, TypeError):
            return "<unknown>", 0
        return filename, lineno


    def run(self) -> None:
        """
        Invoke the case body.
        """
        self.action()


class CaseRegistry:
    """
    Hand-written, ordered mapping of case name to action.

    Cases are registered once, at import time of the test binary, and
    iterate in declaration order.
    """
    def __init__(self) -> None:
        self._cases: dict[str, TestCase] = {}


    def register(self, name: str, action: Callable[[], None]) -> TestCase:
        """
        Register *action* under *name*.

        Parameters
        ----------
        name : str
            Case name
        action : Callable[[], None]
            Case body

        Returns
        -------
        TestCase
            The registered case

        Raises
        ------
        ValueError
            If a case with the same name is already registered
        """
        if name in self._cases:
            raise ValueError(f"Case '{name}' is already registered")
        test_case = TestCase(name, action)
        self._cases[name] = test_case
        return test_case


    def case(self, action: Callable[[], None]) -> Callable[[], None]:
        """
        Decorator registering a function under its own name.
        """
        self.register(action.__name__, action)
        return action


    def get(self, name: str) -> TestCase | None:
        return self._cases.get(name)


    def names(self) -> list[str]:
        return list(self._cases)


    def __contains__(self, name: object) -> bool:
        return name in self._cases


    def __iter__(self) -> Iterator[TestCase]:
        return iter(self._cases.values())


    def __len__(self) -> int:
        return len(self._cases)
