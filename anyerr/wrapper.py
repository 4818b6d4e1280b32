"""Exception types that wrap plain values, foreign errors and context."""

from __future__ import annotations


def _source_of(error: BaseException) -> BaseException | None:
    """Return the cause of an exception, as Python's chaining records it."""
    explicit = getattr(error, "source", None)
    if isinstance(explicit, BaseException):
        return explicit
    if error.__cause__ is not None:
        return error.__cause__
    if error.__context__ is not None and not error.__suppress_context__:
        return error.__context__
    return None


class MessageError(Exception):
    """An error made from any printable value; it has no source."""

    source: BaseException | None = None

    def __init__(self, message: object) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return str(self.message)

    def __repr__(self) -> str:
        return repr(self.message)


class DisplayError(Exception):
    """An error made from a value that is only shown in its text form."""

    source: BaseException | None = None

    def __init__(self, message: object) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return str(self.message)

    def __repr__(self) -> str:
        return str(self.message)


class BoxedError(Exception):
    """An error that wraps another exception and passes its cause through."""

    def __init__(self, error: BaseException) -> None:
        if not isinstance(error, BaseException):
            raise TypeError(f"expected an exception, got {type(error).__name__}")
        super().__init__(error)
        self.error = error

    @property
    def source(self) -> BaseException | None:
        return _source_of(self.error)

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return repr(self.error)


class ContextError(Exception):
    """An error that shows a context message and is caused by another error."""

    def __init__(self, context: object, error: BaseException) -> None:
        if not isinstance(error, BaseException):
            raise TypeError(f"expected an exception, got {type(error).__name__}")
        super().__init__(context, error)
        self.context = context
        self.error = error
        self.__cause__ = error

    @property
    def source(self) -> BaseException | None:
        return self.error

    def __str__(self) -> str:
        return str(self.context)

    def __repr__(self) -> str:
        return f"ContextError(context={self.context!r}, source={self.error!r})"