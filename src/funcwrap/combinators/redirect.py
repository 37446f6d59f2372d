"""capture() and emit(): move values between return and the output sink."""

from __future__ import annotations

import contextlib
import io
from collections.abc import Callable
from typing import Any

from funcwrap._logging import get_logger
from funcwrap.func import Func, invoke
from funcwrap.output import echo, output_to

__all__ = ['Captured', 'Emitted', 'capture', 'emit']

_log = get_logger(__name__)


class Captured(Func, frozen=True, eq=False):
    """A target whose printed output becomes its return value."""

    target: Any

    def invoke(self, args: tuple[Any, ...]) -> str:
        buffer = io.StringIO()
        with output_to(buffer), contextlib.redirect_stdout(buffer):
            invoke(self.target, args)
        return buffer.getvalue()


def capture(target: Func | Callable[..., Any]) -> Captured:
    """Return what ``target`` writes instead of what it returns.

    While the target runs, both ``sys.stdout`` and the funcwrap output sink
    point at a fresh buffer; the target's return value is discarded and the
    buffered text is returned.

    Example:
        ```python
        greet = capture(lambda name, title: print(f'Hello {title}. {name}', end=''))
        greet('Anderson', 'Mr')  # 'Hello Mr. Anderson'
        ```
    """
    _log.debug('func.captured.created')
    return Captured(target=target)


class Emitted(Func, frozen=True, eq=False):
    """A target whose return value is written to the output sink."""

    target: Any

    def invoke(self, args: tuple[Any, ...]) -> None:
        echo(invoke(self.target, args))


def emit(target: Func | Callable[..., Any]) -> Emitted:
    """Write ``target``'s return value to the output sink and return ``None``.

    See :func:`funcwrap.output.echo` for how values are written.
    """
    _log.debug('func.emitted.created')
    return Emitted(target=target)
