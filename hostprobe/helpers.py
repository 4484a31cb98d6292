"""General helpers: error types, scope guards, time rendering, versions, globbing."""

from __future__ import annotations

import glob as _glob
import inspect
import re
import uuid
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, NoReturn, Optional, Union

from .textutil import split, starts_with

TimeLike = Union[int, float, datetime]
IntervalLike = Union[int, float, timedelta]

_BASE62_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LEADING_UNSIGNED = re.compile(r"[ \t\n\v\f\r]*\+?(\d+)")
_UNREACHABLE_MESSAGE = "code is executing that should not be reachable"


class InternalError(RuntimeError):
    """Signals an internal logic error."""

    location: Optional[str] = None


class FatalError(RuntimeError):
    """Signals a fatal error that requires process termination."""


class ScopeGuard:
    """Context manager that runs a callback when the block is left."""

    def __init__(self, callback: Callable[[], object]) -> None:
        self._callback = callback

    def __enter__(self) -> "ScopeGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._callback()
        return False


def cannot_be_reached() -> NoReturn:
    """Raise an internal error saying execution should not get here.

    The raised error records the caller's location in ``location``.
    """
    error = InternalError(_UNREACHABLE_MESSAGE)
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        error.location = f"{caller.f_code.co_filename}:{caller.f_lineno}"
    del frame, caller
    raise error


def _local_datetime(t: TimeLike) -> datetime:
    if isinstance(t, datetime):
        return t.astimezone() if t.tzinfo is not None else t
    return datetime.fromtimestamp(t)


def time_to_string(t: TimeLike) -> str:
    """Render a time (seconds since the epoch or datetime) in local time.

    Naive datetimes are taken to be in local time already.
    """
    return _local_datetime(t).strftime("%Y-%m-%d-%H-%M-%S")


def time_to_string_iso(t: TimeLike) -> str:
    """Render a time in ISO 8601 form with the local UTC offset."""
    if isinstance(t, datetime):
        local = t.astimezone()
    else:
        local = datetime.fromtimestamp(t).astimezone()
    return local.strftime("%Y-%m-%dT%H:%M:%S%z")


def interval_to_string(seconds: IntervalLike) -> str:
    """Render an interval as whole seconds, truncated toward zero, e.g. ``42s``."""
    if isinstance(seconds, timedelta):
        seconds = seconds.total_seconds()
    return f"{int(seconds)}s"


def _parse_unsigned(text: str) -> int:
    match = _LEADING_UNSIGNED.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def parse_version(v: str) -> int:
    """Parse ``x.y.z[-...-N]`` into a number suitable for ordering.

    Raises ``ValueError`` if the string is not a valid version.
    """
    if starts_with(v, "v"):
        v = v[1:]

    parts = split(v, "-")
    if not parts:
        raise ValueError("empty version string")

    numbers = split(parts[0], ".")
    if len(numbers) != 3:
        raise ValueError("not a valid version string")

    try:
        major, minor, patch = (_parse_unsigned(n) for n in numbers)
    except ValueError as exc:
        raise ValueError("trouble parsing version string") from exc

    commit = 0
    if len(parts) > 1:
        try:
            commit = _parse_unsigned(parts[-1])
        except ValueError:
            commit = 0

    return major * 100000000 + minor * 1000000 + patch * 10000 + commit


def _base62_encode(i: int) -> str:
    digits = []
    while True:
        i, rem = divmod(i, 62)
        digits.append(_BASE62_ALPHABET[rem])
        if i == 0:
            break
    return "".join(reversed(digits))


def random_uuid() -> str:
    """Create a new random UUID, encoded compactly in base62."""
    raw = uuid.uuid4().bytes
    low = int.from_bytes(raw[:8], "little")
    high = int.from_bytes(raw[8:], "little")
    return _base62_encode(low) + _base62_encode(high)


def glob(pattern: Union[str, Path], max: int = 100) -> list[Path]:
    """Expand a shell-style glob into existing paths, at most ``max`` of them."""
    return [Path(p) for p in _glob.glob(str(pattern))[:max]]