"""A value-or-error container and its error type."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")

_UNSET: Any = object()


class Error:
    """An error message with optional context."""

    def __init__(self, description: str = "<no description>", context: str = "") -> None:
        self.description = description
        self.context = context

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Error({self.description!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.description == other.description

    def __hash__(self) -> int:
        return hash(self.description)


class NoResult(RuntimeError):
    """Raised when a value is requested from a result that holds an error."""

    def __init__(self, error: Error) -> None:
        super().__init__(error.description)
        self.error = error


class NoError(RuntimeError):
    """Raised when an error is requested from a result that holds a value."""

    def __init__(self) -> None:
        super().__init__("<no error>")


class Nothing:
    """A value carrying no information; all instances are equal."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nothing):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "Nothing()"


class Result(Generic[T]):
    """Either a successful value or an error.

    ``Result(v)`` holds a value, ``Result(error=e)`` (or ``Result(e)`` with an
    ``Error``) holds an error, and ``Result()`` holds an "uninitialised" error.
    """

    def __init__(self, value: Any = _UNSET, error: Error | None = None) -> None:
        if error is not None:
            if value is not _UNSET:
                raise ValueError("a result holds either a value or an error, not both")
            self._value: Any = _UNSET
            self._error: Error | None = error
        elif value is _UNSET:
            self._value = _UNSET
            self._error = Error("<result not initialized>")
        elif isinstance(value, Error):
            self._value = _UNSET
            self._error = value
        else:
            self._value = value
            self._error = None

    def has_value(self) -> bool:
        """Return True if the result holds a successful value."""
        return self._error is None

    def value(self) -> T:
        """Return the value; raises ``ValueError`` if the result holds an error."""
        if not self.has_value():
            raise ValueError("result holds an error, not a value")
        return self._value

    def error(self) -> Error:
        """Return the error; raises ``ValueError`` if the result holds a value."""
        if self._error is None:
            raise ValueError("result holds a value, not an error")
        return self._error

    def value_or_throw(self) -> T:
        """Return the value, or raise ``NoResult`` carrying the error."""
        if self._error is not None:
            raise NoResult(self._error)
        return self._value

    def error_or_throw(self) -> Error:
        """Return the error, or raise ``NoError`` if there is a value."""
        if self._error is None:
            raise NoError()
        return self._error

    def __bool__(self) -> bool:
        return self.has_value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        if self.has_value() != other.has_value():
            return False
        if self.has_value():
            return self._value == other._value
        return self._error == other._error

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.has_value():
            return f"Result({self._value!r})"
        return f"Result(error={self._error!r})"