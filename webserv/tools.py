"""Small helpers shared across the server: splitting, fatal errors, colours."""

from __future__ import annotations

from typing import NoReturn

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[0;33m"
BLUE = "\033[0;34m"
RESET = "\033[0m"


class FatalError(RuntimeError):
    """An error the server cannot recover from."""


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, keeping empty pieces but dropping an empty tail."""
    pieces = text.split(sep)
    if pieces and pieces[-1] == "":
        pieces.pop()
    return pieces


def fatal(msg: str) -> NoReturn:
    """Abort the current operation with a :class:`FatalError`."""
    raise FatalError(msg)