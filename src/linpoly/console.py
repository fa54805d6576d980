"""
Console Input/Output
====================
Line based reading and writing over text streams, and validation of numeric
input.

Numbers use "." as the decimal separator. "," is tolerated as a thousands
separator in the integral part, so ``1,234.5`` reads as 1234.5 while ``3,5``
reads as 35. Only ASCII digits count. The special values ``Infinity`` and
``NaN`` are accepted in any letter case.
"""
from __future__ import annotations

import logging
import re
import sys
from typing import Optional, TextIO

from linpoly.config import MESSAGES, Messages

logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(
    r"""
    [+-]?
    (?:
        \d[\d,]*(?:\.\d*)?   # integral part, optional fraction
        | \.\d+              # fraction only
    )
    (?:[eE][+-]?\d+)?        # exponent
    """,
    re.VERBOSE | re.ASCII,
)
_SPECIAL_PATTERN = re.compile(r"[+-]?(?:infinity|nan)", re.IGNORECASE | re.ASCII)


class InvalidNumberError(ValueError):
    """Raised when a line of input is not a floating-point number."""


def parse_float(text: str) -> float:
    """
    Parse one line of user input as a float.

    Args:
        text: Raw line, surrounding whitespace allowed.

    Returns:
        The parsed value.

    Raises:
        InvalidNumberError: If the text is not a valid number.
    """
    candidate = text.strip()
    if _SPECIAL_PATTERN.fullmatch(candidate):
        return float(candidate)
    if not _NUMBER_PATTERN.fullmatch(candidate):
        raise InvalidNumberError(f"Not a number: {text!r}")
    return float(candidate.replace(",", ""))


def format_point(x: float) -> str:
    """Shortest text for an evaluation point: ``5`` rather than ``5.0``, ``-0`` keeps its sign."""
    text = repr(x)
    if text.endswith(".0"):
        return text[:-2]
    return text


class Console:
    """
    Prompting reader and line writer bound to a pair of text streams.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        messages: Messages = MESSAGES
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.messages = messages

    def write(self, text: str = "") -> None:
        """Write one line."""
        self.stdout.write(text + "\n")

    def prompt(self, text: str) -> str:
        """
        Write a prompt without a line break and read the answer.

        Raises:
            EOFError: If the input stream is exhausted.
        """
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("Input stream closed while waiting for a value.")
        return line.rstrip("\r\n")

    def read_float(self, text: str) -> float:
        """
        Prompt until the answer parses as a float.

        Args:
            text: Prompt re-issued after every invalid answer.

        Returns:
            The accepted value.
        """
        while True:
            answer = self.prompt(text)
            try:
                return parse_float(answer)
            except InvalidNumberError as e:
                logger.debug(f"Rejected input for prompt {text!r}: {e}")
                self.write(self.messages.invalid_number)
