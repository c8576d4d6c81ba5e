"""Data models for the pocketcalc expression evaluator.

Operator enum, IllegalCalculation reasons, Expression, and the Leaf/Split
split tree — all the typed structures that flow through
validator → scanner → evaluator → session.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Operator(str, Enum):
    """Supported binary operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def apply(self, left: float, right: float) -> float:
        """Combine two operands. Division by zero is checked by the caller."""
        return _FUNCS[self](left, right)


_LABELS = {
    Operator.ADD: "addition",
    Operator.SUBTRACT: "subtraction",
    Operator.MULTIPLY: "multiplication",
    Operator.DIVIDE: "division",
}

_FUNCS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}

# Scan order for splitting. The expression splits on the first operator in
# this tuple that occurs at all, so binding strength runs in REVERSE order:
# / binds tightest, + loosest.
SUPPORTED_OPERATORS: tuple[Operator, ...] = (
    Operator.ADD,
    Operator.SUBTRACT,
    Operator.MULTIPLY,
    Operator.DIVIDE,
)

SUPPORTED_CHARACTERS: frozenset[str] = frozenset("0123456789. +-*/")

# C isspace() in the "C" locale. Unicode spaces such as U+00A0 are kept so
# validation can reject them.
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\v\f\r")


class IllegalCalculation(str, Enum):
    """Reasons a calculation cannot produce a trustworthy number."""

    MISSING_OPERAND = "missing-operand"
    DIVISION_BY_ZERO = "division-by-zero"

    @property
    def message(self) -> str:
        if self is IllegalCalculation.MISSING_OPERAND:
            return "Error: Missing operand."
        return "Error: Dividing by zero is not allowed."


@dataclass(frozen=True)
class Expression:
    """A line of input with all ASCII whitespace removed.

    Build one with ``Expression.from_raw()``; the plain constructor assumes
    the text is already normalized.
    """

    text: str

    @classmethod
    def from_raw(cls, raw: str) -> Expression:
        return cls("".join(c for c in raw if c not in ASCII_WHITESPACE))

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class Leaf:
    """Operator-free piece of an expression, parsed directly as a number."""

    text: str

    @property
    def is_empty(self) -> bool:
        return self.text == ""


@dataclass(frozen=True)
class Split:
    """An expression decomposed at the operator chosen by the scanner.

    ``text`` is the source slice the split was made from. When omitted it is
    rebuilt from the children, which already hold their own text.
    """

    left: Node
    operator: Operator
    right: Node
    text: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.text:
            object.__setattr__(self, "text", f"{self.left.text}{self.operator.value}{self.right.text}")

    @property
    def missing_operand(self) -> bool:
        """True when either side of the split is empty (e.g. '8*')."""
        return any(isinstance(side, Leaf) and side.is_empty for side in (self.left, self.right))


Node = Union[Leaf, Split]
