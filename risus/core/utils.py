"""
Utilities module for the Risus package.

Provides console printing with rich formatting and the lenient integer
parsing used by the packed text format.
"""

import re
from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_terminal=True, force_jupyter=False)

# Optional whitespace, optional sign, then ASCII digits.
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)", re.ASCII)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def match_leading_int(text: str) -> str | None:
    """
    Finds the integer at the start of a string, without converting it.

    Args:
        text (str): The text to search.

    Returns:
        str | None: The sign and digits found, or None when the text does
        not start with an integer.

    """
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return match.group(1)


def is_leading_int_nonzero(text: str) -> bool:
    """
    Checks whether a string starts with a nonzero integer.

    Text without a leading integer counts as zero. No conversion happens,
    so arbitrarily long digit runs are fine.

    Args:
        text (str): The text to check.

    Returns:
        bool: True when the leading integer is not zero.

    """
    digits = match_leading_int(text)
    if digits is None:
        return False
    return digits.lstrip("+-").strip("0") != ""


def parse_leading_int(text: str) -> int | None:
    """
    Parses the integer at the start of a string.

    Trailing garbage is ignored, so "12abc" gives 12.

    Args:
        text (str): The text to parse.

    Returns:
        int | None: The parsed integer, or None when the text does not
        start with one.

    Raises:
        ValueError: If the integer is too long to be converted.

    """
    digits = match_leading_int(text)
    if digits is None:
        return None
    return int(digits)
