# anyerr

One flexible error type for applications. An `Error` wraps any exception
or printable value. You can add human-readable context to it as it travels
up the call stack, and you can still match it against the value underneath.

## Installation

```
pip install anyerr
```

## Building errors

```python
from anyerr.error import Error, to_error
from anyerr.macros import anyhow, format_err, bail, ensure, ok

err = Error.msg("disk full")                 # from any printable value
err = Error.display(some_value)              # shown only through str()
err = Error.new(ValueError("bad header"))    # from an exception, keeping its causes
err = anyhow("missing attribute: {}", "name")  # formatted with str.format
err = to_error(value)                        # Error unchanged, exception wrapped, else a message
```

A single argument to `anyhow` is not formatted. An `Error` passed to it comes
back unchanged. An exception keeps its own causes. Any other value becomes a
message error, and you can downcast that error back to the value.
`format_err` is another name for `anyhow`.

```python
def check(depth):
    ensure(depth <= 10, "recursion limit exceeded")
    if depth < 0:
        bail("negative depth: {}", depth)
```

`bail` always raises the `Error` that `anyhow` builds from its arguments.
`ensure` raises when its condition is false. With no message, that error
reads `Condition failed`.

`ok(value)` returns `value` unchanged. It raises `TypeError` if `value` is an
exception.

## Adding context

```python
err = Error.msg("No such file or directory").context("Failed to read ./instrs.json")
```

`Error.context` returns a new `Error`. The new error shows the context message
and is caused by the original error.

## Rendering

```python
str(err)          # outermost message only
f"{err:#}"        # every message in the chain, joined with ": "
err.debug()       # report with a "Caused by:" section (same as f"{err:?}")
f"{err:#?}"       # repr of the wrapped object
```

For the error above, `err.debug()` gives:

```
Failed to read ./instrs.json

Caused by:
    No such file or directory
```

If there is more than one cause, each one is numbered. `anyerr.fmt` has the
helpers behind these forms: `indent`, `format_display` and `format_debug`.
They work on any sequence of messages.

## Inspecting

```python
for cause in err.chain():     # the outermost error, then each cause in turn
    print(cause)

err.root_cause()              # the last error in the chain
err.is_(OSError)              # True if the error or any of its context holds an OSError
err.downcast_ref(OSError)     # the matching value, or None
err.downcast(OSError)         # the matching value, or TypeError if there is none
```

A downcast matches the context values as well as the error they were
attached to. So adding context never breaks a downcast that worked before.

`anyerr.wrapper` holds the exception types an `Error` uses inside:
`MessageError`, `DisplayError`, `BoxedError` and `ContextError`.

## What it does not do

The package has no context manager and no decorator that adds context to a
block of code or a function. To add context, catch the exception, turn it into
an `Error`, call `.context(...)` and raise the result. The package also does
not capture or print stack backtraces of its own.