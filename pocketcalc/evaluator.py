"""Evaluator: splits an expression and reduces the pieces.

Data flow per call:
1. decompose() runs the scanner on the text and splits at the chosen
   operator, working through both sides until only operator-free leaves remain
2. evaluate() walks that tree: leaves are parsed leniently as numbers,
   splits check for a missing operand, reduce both children, then combine
3. The first missing operand or zero divisor raises IllegalCalculationError,
   which unwinds the whole walk
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from pocketcalc.errors import IllegalCalculationError
from pocketcalc.models import Expression, IllegalCalculation, Leaf, Node, Operator, Split
from pocketcalc.scanner import split_at_next_operator

logger = logging.getLogger(__name__)

# digits [ decimal-point more-digits ] or decimal-point digits
_NUMBER_PREFIX_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_number(text: str) -> float:
    """Parse the longest leading decimal number in text, like C's atof().

    Trailing junk is ignored and a string with no numeric prefix gives 0.0:
    '1.2.3' → 1.2, '.' → 0.0, '' → 0.0. Never raises.
    """
    m = _NUMBER_PREFIX_RE.match(text)
    if not m:
        return 0.0
    return float(m.group(0))


def _text_of(expr: Union[Expression, str]) -> str:
    if isinstance(expr, Expression):
        return expr.text
    return expr


def decompose(expr: Union[Expression, str]) -> Node:
    """Build the split tree for an expression.

    Always succeeds. Empty sides of a split ('8*' → '8', '*', '') become
    empty leaves, left for evaluate() to reject.

    Uses an explicit work stack, so a long operator chain cannot exhaust
    the interpreter's recursion limit.
    """
    # ("split", text) expands a substring; ("join", (text, op)) pops the two
    # finished children off `built`. Left is pushed last so it runs first.
    pending: list[tuple[str, object]] = [("split", _text_of(expr))]
    built: list[Node] = []
    while pending:
        action, payload = pending.pop()
        if action == "split":
            parts = split_at_next_operator(payload)
            if parts is None:
                built.append(Leaf(payload))
                continue
            left, op, right = parts
            pending.append(("join", (payload, op)))
            pending.append(("split", right))
            pending.append(("split", left))
        else:
            source, op = payload
            right_node = built.pop()
            left_node = built.pop()
            built.append(Split(left_node, op, right_node, source))
    return built.pop()


def _reduce(root: Node) -> float:
    """Walk the tree left first without recursion.

    A split is checked for a missing operand when first reached, before its
    children; the zero divisor is checked once both children are reduced.
    """
    pending: list[tuple[Node, bool]] = [(root, False)]
    values: list[float] = []
    debug = logger.isEnabledFor(logging.DEBUG)
    while pending:
        node, children_done = pending.pop()
        if isinstance(node, Leaf):
            value = parse_number(node.text)
            if debug:
                logger.debug("leaf %r -> %g", node.text, value)
            values.append(value)
            continue

        if not children_done:
            if node.missing_operand:
                logger.debug("split %r on %s has an empty side", node.text, node.operator.value)
                raise IllegalCalculationError(IllegalCalculation.MISSING_OPERAND, node.text)
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))
            continue

        right = values.pop()
        left = values.pop()
        if node.operator is Operator.DIVIDE and right == 0:
            logger.debug("split %r divides by zero", node.text)
            raise IllegalCalculationError(IllegalCalculation.DIVISION_BY_ZERO, node.text)

        result = node.operator.apply(left, right)
        if debug:
            logger.debug("split %r: %g %s %g -> %g", node.text, left, node.operator.value, right, result)
        values.append(result)
    return values.pop()


def evaluate(expr: Union[Expression, str]) -> float:
    """Compute the value of a validated, whitespace-free expression.

    Raises:
        IllegalCalculationError: a split has an empty operand or a divisor
            evaluates to exactly zero, anywhere in the tree.
    """
    return _reduce(decompose(expr))


def evaluate_or_none(expr: Union[Expression, str]) -> Optional[float]:
    """Like evaluate(), but an illegal calculation yields None."""
    try:
        return evaluate(expr)
    except IllegalCalculationError as exc:
        logger.info("illegal calculation in %r: %s", _text_of(expr), exc.reason.value)
        return None
