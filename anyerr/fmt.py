"""Rendering of error chains: plain, alternate and report forms."""

from __future__ import annotations

from collections.abc import Iterable

_NUMBER_CONTINUATION = " " * 7
_PLAIN_INDENT = " " * 4


def indent(text: object, number: int | None = None) -> str:
    """Indent a possibly multi-line message as one entry of a cause list.

    With a number, the first line is prefixed by the number right-aligned
    in five columns followed by ``": "``, and following lines are aligned
    under the text. Without one, every line is indented by four spaces.
    """
    lines = str(text).split("\n")
    if number is None:
        first_prefix = _PLAIN_INDENT
        rest_prefix = _PLAIN_INDENT
    else:
        first_prefix = f"{number:>5}: "
        rest_prefix = _NUMBER_CONTINUATION
    head, *tail = lines
    return "\n".join([first_prefix + head, *(rest_prefix + line for line in tail)])


def _as_messages(messages: Iterable[object]) -> list[str]:
    rendered = [str(message) for message in messages]
    if not rendered:
        raise ValueError("an error chain holds at least one message")
    return rendered


def format_display(messages: Iterable[object], alternate: bool = False) -> str:
    """Render the outermost message, or the whole chain joined by ``": "``."""
    rendered = _as_messages(messages)
    if alternate:
        return ": ".join(rendered)
    return rendered[0]


def format_debug(messages: Iterable[object]) -> str:
    """Render the outermost message followed by a ``Caused by:`` list."""
    head, *causes = _as_messages(messages)
    if not causes:
        return head
    multiple = len(causes) > 1
    parts = [head, "\n\nCaused by:"]
    for n, cause in enumerate(causes):
        parts.append("\n")
        parts.append(indent(cause, n if multiple else None))
    return "".join(parts)