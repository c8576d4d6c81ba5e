"""Interactive session: welcome banner, prompt loop, result lines.

Data flow per line:
1. Read a line and normalize it (whitespace removed)
2. Quit if it contains q or Q
3. Validate; on failure print the reason and reprompt
4. Evaluate; print '<input>=<result>' or the illegal-calculation diagnostic
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from pocketcalc.config import SessionConfig
from pocketcalc.errors import IllegalCalculationError, InputError
from pocketcalc.evaluator import evaluate
from pocketcalc.models import SUPPORTED_OPERATORS
from pocketcalc.render import format_result
from pocketcalc.validator import QUIT_KEYS, is_quit_request, normalize, validate

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]

RETRY_MESSAGE = "Invalid input. Please try again."
ILLEGAL_MESSAGE = "Illegal calculation. Please try again."


def print_welcome(console: Console) -> None:
    ops = " ".join(op.value for op in SUPPORTED_OPERATORS)
    console.print()
    console.print(f"This calculator supports the following operations: {escape(ops)}")
    console.print(f"To quit at any time, enter {' or '.join(QUIT_KEYS)}.")


def read_expression(
    console: Console,
    read_line: ReadLine,
    config: Optional[SessionConfig] = None,
) -> Optional[str]:
    """Prompt until a valid line is entered.

    Returns the raw line as typed, or None on a quit request or end of input.
    """
    config = config or SessionConfig()
    while True:
        try:
            raw = read_line(config.prompt)
        except EOFError:
            console.print()
            return None

        expr = normalize(raw)
        if is_quit_request(expr):
            return None
        try:
            validate(expr, config.allowed_characters)
        except InputError as exc:
            console.print(escape(str(exc)))
            console.print(RETRY_MESSAGE)
            continue
        return raw


def evaluate_line(raw: str, console: Console) -> Optional[float]:
    """Evaluate one validated line and print the outcome.

    Returns the result, or None when the calculation was illegal.
    """
    try:
        value = evaluate(normalize(raw))
    except IllegalCalculationError as exc:
        console.print(exc.reason.message)
        console.print(ILLEGAL_MESSAGE)
        return None
    console.print(f"{escape(raw)}={format_result(value)}", soft_wrap=True)
    return value


def run_session(
    console: Console,
    read_line: Optional[ReadLine] = None,
    config: Optional[SessionConfig] = None,
) -> int:
    """Run the prompt loop until the user quits. Returns the exit status."""
    config = config or SessionConfig()
    if read_line is None:
        read_line = console.input

    print_welcome(console)
    try:
        while True:
            console.print()
            raw = read_expression(console, read_line, config)
            if raw is None:
                break
            evaluate_line(raw, console)
    except KeyboardInterrupt:
        console.print()
        logger.debug("session interrupted")
    return 0
