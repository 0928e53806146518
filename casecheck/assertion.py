"""
Module providing the assertion primitive used by test cases.

A failing check writes a single diagnostic line to stderr,

    <file>(<line>): assertion failed: <predicate text>

and terminates the process. The predicate text is recovered from the
source of the call site, so ``check(add(1, 2) == 4)`` reports
``add(1, 2) == 4``.
"""

import ast
import inspect
import linecache
import sys
from types import FrameType
from typing import NoReturn

from casecheck.exit_status import ExitStatus

# Name the call site is located by
CHECK_NAME: str = "check"

# Used when the call site source cannot be read and no text was given
UNKNOWN_TEXT: str = "<unknown>"


def check(predicate: object, text: str | None = None) -> None:
    """
    Terminate the process unless *predicate* is true.

    Parameters
    ----------
    predicate : object
        Value of the asserted expression, tested for truthiness
    text : str | None, optional
        Textual form of the predicate. Overrides the text read from the
        call site, required when ``check`` is called under another name.
    """
    if predicate:
        return

    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        fail("<unknown>", 0, text or UNKNOWN_TEXT)

    filename: str = caller.f_code.co_filename
    lineno: int = caller.f_lineno
    if text is None:
        text = predicate_text(
            filename,
            lineno,
            caller.f_globals,
            call_position(caller),
        ) or UNKNOWN_TEXT
    del frame, caller

    fail(filename, lineno, text)


def fail(filename: str, lineno: int, text: str) -> NoReturn:
    """
    Write the diagnostic for a failed predicate and exit.

    Parameters
    ----------
    filename : str
        Source file of the failed check
    lineno : int
        Line number of the failed check
    text : str
        Textual form of the predicate
    """
    sys.stderr.write(format_diagnostic(filename, lineno, text) + "\n")
    sys.stderr.flush()
    sys.exit(ExitStatus.ASSERTION_FAILED.value)


def format_diagnostic(filename: str, lineno: int, text: str) -> str:
    """
    Returns the one-line diagnostic for a failed predicate.
    """
    return f"{filename}({lineno}): assertion failed: {text}"


def call_position(frame: FrameType) -> tuple[int, int, int, int] | None:
    """
    Source span of the call the frame is currently executing.

    Parameters
    ----------
    frame : FrameType
        Frame of the caller of ``check``

    Returns
    -------
    tuple[int, int, int, int] | None
        (lineno, end_lineno, col_offset, end_col_offset) of the call, or
        None before Python 3.11 or when the span is not recorded
    """
    positions = getattr(frame.f_code, "co_positions", None)
    if positions is None or frame.f_lasti < 0:
        return None

    # One entry per 2-byte code unit
    try:
        position = list(positions())[frame.f_lasti // 2]
    except IndexError:
        return None

    if any(value is None for value in position):
        return None
    return position


def predicate_text(
    filename: str,
    lineno: int,
    module_globals: dict | None = None,
    position: tuple[int, int, int, int] | None = None,
) -> str | None:
    """
    Read the source text of the first argument of a ``check`` call.

    Parameters
    ----------
    filename : str
        Source file containing the call
    lineno : int
        Line number reported by the calling frame
    module_globals : dict | None, optional
        Globals of the calling module, lets linecache use its loader
    position : tuple[int, int, int, int] | None, optional
        Exact span of the call, as returned by call_position

    Returns
    -------
    str | None
        Predicate source collapsed to a single line, or None when the
        source is unavailable or no matching call is found
    """
    lines: list[str] = linecache.getlines(filename, module_globals)
    if not lines:
        return None

    source: str = "".join(lines)
    try:
        tree: ast.Module = ast.parse(source, filename)
    except SyntaxError:
        return None

    call = _find_check_call(tree, lineno, position)
    if call is None or not call.args:
        return None

    segment = ast.get_source_segment(source, call.args[0])
    if segment is None:
        return None

    # Diagnostics are a single line
    return " ".join(line.strip() for line in segment.splitlines())


def _find_check_call(
    tree: ast.Module,
    lineno: int,
    position: tuple[int, int, int, int] | None = None,
) -> ast.Call | None:
    """
    Find the ``check`` call being executed at *lineno*.

    With a *position*, the call whose span starts or ends there wins.
    Otherwise the innermost call covering the line wins, and calls on the
    same line are ordered by column.
    """
    candidates: list[ast.Call] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        if not _is_check(node.func):
            continue
        end_lineno: int = node.end_lineno or node.lineno
        if node.lineno <= lineno <= end_lineno:
            candidates.append(node)

    if not candidates:
        return None

    if position is not None:
        start_line, end_line, start_col, end_col = position
        for node in candidates:
            # Attribute calls split over lines may start at the attribute
            if (node.lineno, node.col_offset) == (start_line, start_col) \
            or (node.end_lineno, node.end_col_offset) == (end_line, end_col):
                return node

    candidates.sort(key=lambda node: (-node.lineno, node.col_offset))
    return candidates[0]


def _is_check(func: ast.expr) -> bool:
    if isinstance(func, ast.Name):
        return func.id == CHECK_NAME
    if isinstance(func, ast.Attribute):
        return func.attr == CHECK_NAME
    return False
