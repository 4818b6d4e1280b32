"""The dynamic error type: wraps any exception or printable value."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from anyerr.fmt import format_debug, format_display
from anyerr.wrapper import ContextError, DisplayError, MessageError

T = TypeVar("T")

_MISSING = object()


def _cause_of(error: BaseException) -> BaseException | None:
    """Return the next error in a cause chain, or None at its end."""
    if isinstance(error, Error):
        return error.source
    explicit = getattr(error, "source", None)
    if isinstance(explicit, BaseException):
        return explicit
    if error.__cause__ is not None:
        return error.__cause__
    if error.__context__ is not None and not error.__suppress_context__:
        return error.__context__
    return None


class Error(Exception):
    """An error holding any exception or message, with optional context layers.

    ``str()`` shows only the outermost message; ``format(error, "#")`` shows
    the whole chain joined by ``": "``; ``format(error, "?")`` or
    :meth:`debug` gives a report with a ``Caused by:`` list.
    """

    def __init__(self, error: BaseException, context: object = None) -> None:
        if context is None:
            if not isinstance(error, BaseException):
                raise TypeError(
                    f"expected an exception, got {type(error).__name__}"
                )
            inner: BaseException = error
        else:
            inner = ContextError(context, error)
        super().__init__(inner)
        self._object = inner

    @classmethod
    def new(cls, error: BaseException) -> Error:
        """Wrap an exception, keeping its own chain of causes."""
        return cls(error)

    @classmethod
    def msg(cls, message: object) -> Error:
        """Make an error from any printable value."""
        return cls(MessageError(message))

    @classmethod
    def display(cls, message: object) -> Error:
        """Make an error from a value that is only shown through ``str``."""
        return cls(DisplayError(message))

    def context(self, context: object) -> Error:
        """Return a new error that shows ``context`` and is caused by this one."""
        return type(self)(self, context)

    @property
    def source(self) -> BaseException | None:
        """The cause of the outermost error, if any."""
        return _cause_of(self._object)

    def chain(self) -> Iterator[BaseException]:
        """Yield the outermost error and then each of its causes in turn."""
        seen: set[int] = set()
        current: BaseException | None = self._object
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = _cause_of(current)

    def root_cause(self) -> BaseException:
        """Return the lowest-level cause: the last error of :meth:`chain`."""
        *_, last = self.chain()
        return last

    def _find(self, kind: type) -> Any:
        obj = self._object
        if isinstance(obj, ContextError):
            if isinstance(obj.context, kind):
                return obj.context
            inner = obj.error
            if isinstance(inner, Error):
                return inner._find(kind)
            return inner if isinstance(inner, kind) else _MISSING
        if isinstance(obj, (MessageError, DisplayError)):
            return obj.message if isinstance(obj.message, kind) else _MISSING
        if isinstance(obj, Error):
            return obj._find(kind)
        return obj if isinstance(obj, kind) else _MISSING

    def is_(self, kind: type) -> bool:
        """Tell whether this error holds a value of ``kind``, context included."""
        return self._find(kind) is not _MISSING

    def downcast(self, kind: type[T]) -> T:
        """Return the held value of ``kind``; raise TypeError if there is none."""
        found = self._find(kind)
        if found is _MISSING:
            raise TypeError(f"error does not hold a value of type {kind.__name__}")
        return found

    def downcast_ref(self, kind: type[T]) -> T | None:
        """Return the held value of ``kind``, or None if there is none."""
        found = self._find(kind)
        return None if found is _MISSING else found

    def debug(self) -> str:
        """Render the error with a numbered list of its causes."""
        return format_debug(self.chain())

    def __str__(self) -> str:
        return format_display(self.chain(), alternate=False)

    def __format__(self, spec: str) -> str:
        if spec == "":
            return str(self)
        if spec == "#":
            return format_display(self.chain(), alternate=True)
        if spec == "?":
            return self.debug()
        if spec == "#?":
            return repr(self)
        return format(str(self), spec)

    def __repr__(self) -> str:
        return repr(self._object)


def to_error(value: object) -> Error:
    """Turn any value into an :class:`Error`.

    Errors pass through unchanged, exceptions keep their causes, and any
    other value becomes a message.
    """
    if isinstance(value, Error):
        return value
    if isinstance(value, BaseException):
        return Error.new(value)
    return Error.msg(value)