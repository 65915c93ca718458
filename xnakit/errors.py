"""Error types raised throughout the package."""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")

_DEFAULT_UNWRAP_MESSAGE = "Invalid unwrap() operation."


class XnaError(Exception):
    """Base error carrying a message, an optional inner error and an HRESULT code."""

    DEFAULT_H_RESULT = 0x80131500

    def __init__(
        self,
        message: str,
        inner: Optional[BaseException] = None,
        h_result: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.inner = inner
        self.h_result = self.DEFAULT_H_RESULT if h_result is None else h_result
        if inner is not None:
            self.__cause__ = inner

    def __str__(self) -> str:
        return f"{self.h_result}: {self.message}"


class OutOfRangeError(XnaError):
    """A value fell outside the range an operation accepts."""

    DEFAULT_H_RESULT = 0x80004003


class InvalidOperationError(XnaError):
    """An operation is not valid in the object's current state."""

    DEFAULT_H_RESULT = 0x0


class ArgumentError(XnaError):
    """An argument passed to an operation is not acceptable."""

    DEFAULT_H_RESULT = 0x0


def require(value: Optional[T], message: str = _DEFAULT_UNWRAP_MESSAGE) -> T:
    """Return ``value``, or raise :class:`XnaError` with ``message`` if it is None."""
    if value is None:
        raise XnaError(message)
    return value