"""Shorthands for building, raising and checking errors."""

from __future__ import annotations

from typing import NoReturn, TypeVar

from anyerr.error import Error, to_error

T = TypeVar("T")

_CONDITION_FAILED = "Condition failed"


def anyhow(message: object, *args: object, **kwargs: object) -> Error:
    """Build an :class:`Error` from a message, a format string or any value.

    With format arguments, ``message`` must be a format string and the
    result holds the formatted text. With a single argument, an exception
    keeps its own chain of causes, an :class:`Error` is returned unchanged,
    and any other value becomes a message error that can be downcast back
    to that value.
    """
    if args or kwargs:
        if not isinstance(message, str):
            raise TypeError(
                f"format arguments need a format string, got {type(message).__name__}"
            )
        return Error.msg(message.format(*args, **kwargs))
    return to_error(message)


def format_err(message: object, *args: object, **kwargs: object) -> Error:
    """Another name for :func:`anyhow`."""
    return anyhow(message, *args, **kwargs)


def bail(message: object, *args: object, **kwargs: object) -> NoReturn:
    """Raise the :class:`Error` that :func:`anyhow` builds from the arguments."""
    raise anyhow(message, *args, **kwargs)


def ensure(
    condition: object, message: object = None, *args: object, **kwargs: object
) -> None:
    """Raise an :class:`Error` unless ``condition`` is true.

    Without a message the error reads ``Condition failed``; otherwise the
    error is built as :func:`anyhow` builds it.
    """
    if condition:
        return
    if message is None and not args and not kwargs:
        raise Error.msg(_CONDITION_FAILED)
    raise anyhow(message, *args, **kwargs)


def ok(value: T) -> T:
    """Return ``value`` as the successful result of a fallible step.

    An exception is not a successful result, so passing one raises
    :class:`TypeError`.
    """
    if isinstance(value, BaseException):
        raise TypeError(
            f"an exception is not a successful result: {type(value).__name__}"
        )
    return value