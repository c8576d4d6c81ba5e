"""Exception hierarchy for pocketcalc.

Everything derives from ValueError so callers that only care about "bad
input" can catch that.
"""

from __future__ import annotations

from pocketcalc.models import IllegalCalculation


class CalcError(ValueError):
    """Base class for every pocketcalc error."""


class InputError(CalcError):
    """A line was rejected before evaluation. The caller should reprompt."""


class EmptyInputError(InputError):
    def __init__(self) -> None:
        super().__init__("Error: You did not enter an input.")


class InvalidCharacterError(InputError):
    """The line contains a character outside the allowed alphabet."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"Error: {character} is not valid input.")


class IllegalCalculationError(CalcError):
    """The expression has a missing operand or divides by zero.

    Raised at the first illegal condition found anywhere in the split tree;
    no numeric result exists for the expression.
    """

    def __init__(self, reason: IllegalCalculation, expression: str = "") -> None:
        self.reason = reason
        self.expression = expression
        super().__init__(reason.message)
