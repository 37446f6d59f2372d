"""The text output side-channel used by capture() and emit().

Output goes to a sink held in a context variable. Outside any
:func:`output_to` block the sink is whatever ``sys.stdout`` is at write time,
so plain ``print`` and :func:`echo` end up in the same place.

Example:
    ```python
    import io
    from funcwrap.output import echo, output_to

    buf = io.StringIO()
    with output_to(buf):
        echo('hello')
    buf.getvalue()  # 'hello'
    ```
"""

from __future__ import annotations

import contextlib
import sys
from collections.abc import Iterator
from contextvars import ContextVar
from typing import Any, TextIO

__all__ = ['current_sink', 'echo', 'output_to']

_sink: ContextVar[TextIO | None] = ContextVar('funcwrap_output_sink', default=None)


def current_sink() -> TextIO:
    """Return the sink output is currently written to."""
    sink = _sink.get()
    return sink if sink is not None else sys.stdout


@contextlib.contextmanager
def output_to(sink: TextIO) -> Iterator[TextIO]:
    """Send side-channel output to ``sink`` for the duration of the block."""
    token = _sink.set(sink)
    try:
        yield sink
    finally:
        _sink.reset(token)


def echo(value: Any) -> None:
    """Write ``value`` to the current sink.

    ``None`` writes nothing; anything else is written as ``str(value)``
    without a trailing newline.
    """
    if value is None:
        return
    current_sink().write(str(value))
