"""Session settings and logging setup for pocketcalc.

Settings come from CLI options only; nothing is read from the environment
or from files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

from pocketcalc.models import SUPPORTED_CHARACTERS

DEFAULT_PROMPT = "Enter an expression: "


@dataclass
class SessionConfig:
    """Knobs for one interactive session."""

    prompt: str = DEFAULT_PROMPT
    allowed_characters: frozenset[str] = SUPPORTED_CHARACTERS
    verbose: bool = False


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a RichHandler (stderr) to the package logger.

    DEBUG traces every split and leaf; the default WARNING keeps the
    interactive session quiet. Safe to call more than once.
    """
    log = logging.getLogger("pocketcalc")
    log.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in log.handlers):
        log.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    return log
