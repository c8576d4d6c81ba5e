"""Precedence scanner: picks the operator an expression splits on next."""

from __future__ import annotations

from typing import Optional

from pocketcalc.models import SUPPORTED_OPERATORS, Operator


def next_operator_position(text: str) -> Optional[int]:
    """Index of the operator to split on, or None if there is none.

    Operators are tried in SUPPORTED_OPERATORS order (+, -, *, /). The first
    one that occurs anywhere wins, and its leftmost occurrence is returned.
    Adjacent operators ('8*+9') are not special-cased here.
    """
    for op in SUPPORTED_OPERATORS:
        pos = text.find(op.value)
        if pos != -1:
            return pos
    return None


def split_at_next_operator(text: str) -> Optional[tuple[str, Operator, str]]:
    """Return (left, operator, right) for the next split, or None for a leaf."""
    pos = next_operator_position(text)
    if pos is None:
        return None
    return text[:pos], Operator(text[pos]), text[pos + 1:]
