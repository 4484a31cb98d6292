"""String helpers with explicit, byte-oriented semantics.

These functions are deliberately not Unicode-aware: case conversion only
touches ASCII letters and the default white-space set is the classic C one.
"""

from __future__ import annotations

import re
import string
from typing import Callable, Iterable, TypeVar

WHITESPACE = " \t\f\v\n\r"

_WHITESPACE_RUN = re.compile("[" + re.escape(WHITESPACE) + "]+")
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

T = TypeVar("T")
U = TypeVar("U")


def join(items: Iterable[object], delim: str = "") -> str:
    """Join the string forms of ``items`` with ``delim`` between them."""
    return delim.join(str(item) for item in items)


def transform(container, func: Callable[[T], U]):
    """Apply ``func`` to each element, returning a container of the same kind.

    Lists, tuples, sets and frozensets are supported; anything else raises
    ``TypeError``.
    """
    if isinstance(container, (list, tuple, set, frozenset)):
        return type(container)(func(item) for item in container)
    raise TypeError(f"cannot transform container of type {type(container).__name__}")


def tolower(s: str) -> str:
    """Return ``s`` with ASCII upper-case letters converted to lower case."""
    return s.translate(_LOWER)


def toupper(s: str) -> str:
    """Return ``s`` with ASCII lower-case letters converted to upper case."""
    return s.translate(_UPPER)


def rtrim(s: str, chars: str = WHITESPACE) -> str:
    """Remove all trailing characters that appear in ``chars``."""
    return s.rstrip(chars) if chars else s


def ltrim(s: str, chars: str = WHITESPACE) -> str:
    """Remove all leading characters that appear in ``chars``."""
    return s.lstrip(chars) if chars else s


def trim(s: str, chars: str = WHITESPACE) -> str:
    """Remove leading and trailing characters that appear in ``chars``."""
    return ltrim(rtrim(s, chars), chars)


def _split_whitespace(s: str) -> list[str]:
    s = trim(s)
    if not s:
        return []
    return _WHITESPACE_RUN.split(s)


def _split_delim(s: str, delim: str) -> list[str]:
    if not delim or len(s) < len(delim):
        return [s]

    ends_in_delim = s.endswith(delim)
    parts: list[str] = []

    while True:
        head, sep, tail = s.partition(delim)
        parts.append(head)
        if not sep:
            break
        s = tail
        if not s:
            break

    if ends_in_delim:
        parts.append("")

    return parts


def split(s: str, delim: str | None = None) -> list[str]:
    """Split ``s`` at every occurrence of ``delim``.

    Without a delimiter, ``s`` is split at runs of white space and leading or
    trailing white space is ignored. With a delimiter, successive occurrences
    produce empty pieces; an empty delimiter returns ``[s]``.
    """
    if delim is None:
        return _split_whitespace(s)
    return _split_delim(s, delim)


def split1(s: str, delim: str | None = None) -> tuple[str, str]:
    """Split ``s`` once at the first delimiter (or white-space run).

    The second element is empty if the delimiter does not occur.
    """
    if delim is None:
        match = re.search("[" + re.escape(WHITESPACE) + "]", s)
        if match is None:
            return s, ""
        i = match.start()
        return s[:i], ltrim(s[i + 1 :])

    i = s.find(delim)
    if i < 0:
        return s, ""
    return s[:i], s[i + len(delim) :]


def rsplit1(s: str, delim: str | None = None) -> tuple[str, str]:
    """Split ``s`` once at the last delimiter (or white-space character).

    The first element is empty if the delimiter does not occur.
    """
    if delim is None:
        i = max(s.rfind(c) for c in WHITESPACE)
        if i < 0:
            return "", s
        return s[:i], rtrim(s[i + 1 :])

    i = s.rfind(delim)
    if i < 0:
        return "", s
    return s[:i], s[i + len(delim) :]


def starts_with(s: str, prefix: str) -> bool:
    """Return True if ``s`` begins with ``prefix``."""
    return s.startswith(prefix)


def ends_with(s: str, suffix: str) -> bool:
    """Return True if ``s`` ends with ``suffix``."""
    return s.endswith(suffix)