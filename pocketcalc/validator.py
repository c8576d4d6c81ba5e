"""Input normalization, quit detection and character validation."""

from __future__ import annotations

import logging
from collections.abc import Collection

from pocketcalc.errors import EmptyInputError, InputError, InvalidCharacterError
from pocketcalc.models import SUPPORTED_CHARACTERS, Expression

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "Q")


def normalize(raw: str) -> Expression:
    """Strip every whitespace character from a raw input line."""
    return Expression.from_raw(raw)


def is_quit_request(expr: Expression) -> bool:
    """True if the text contains q or Q anywhere.

    'q' embedded in other text counts too, so 'quit', 'sqrt' and '2q' all
    end the session.
    """
    return any(key in expr.text for key in QUIT_KEYS)


def validate(expr: Expression, allowed_chars: Collection[str] = SUPPORTED_CHARACTERS) -> None:
    """Raise if the expression is empty or uses an unsupported character.

    Raises:
        EmptyInputError: the normalized text is empty.
        InvalidCharacterError: for the first disallowed character, scanning
            left to right.
    """
    if not expr.text:
        raise EmptyInputError()
    for c in expr.text:
        if c not in allowed_chars:
            raise InvalidCharacterError(c)


def is_valid(expr: Expression, allowed_chars: Collection[str] = SUPPORTED_CHARACTERS) -> bool:
    """Boolean form of validate(); the rejection reason is logged."""
    try:
        validate(expr, allowed_chars)
    except InputError as exc:
        logger.info("rejected %r: %s", expr.text, exc)
        return False
    return True
