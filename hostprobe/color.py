"""ANSI colouring of text, applied only when writing to a terminal."""

from __future__ import annotations

import sys

_RESET = "\033[0m"


def is_tty() -> bool:
    """Return True if standard output is connected to a terminal."""
    stream = sys.stdout
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def _ansi(escape: str, txt: str) -> str:
    if is_tty():
        return escape + txt + _RESET
    return txt


def gray(txt: str) -> str:
    """Return ``txt`` rendered in gray when on a terminal."""
    return _ansi("\033[30m", txt)


def green(txt: str) -> str:
    """Return ``txt`` rendered in green when on a terminal."""
    return _ansi("\033[32m", txt)


def normal(txt: str) -> str:
    """Return ``txt`` as text in the standard colour, without escape codes."""
    return str(txt)


def red(txt: str) -> str:
    """Return ``txt`` rendered in red when on a terminal."""
    return _ansi("\033[31m", txt)


def yellow(txt: str) -> str:
    """Return ``txt`` rendered in yellow when on a terminal."""
    return _ansi("\033[33m", txt)