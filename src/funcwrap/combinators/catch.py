"""catch(): turn selected exceptions into return values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from funcwrap._logging import get_logger
from funcwrap.func import Func, invoke

__all__ = ['Caught', 'catch']

_log = get_logger(__name__)


class Caught(Func, frozen=True, eq=False):
    """A target whose matching exceptions are routed to a handler.

    Attributes:
        target: The wrapped callable.
        kinds: Exception classes to intercept.
        handler: Called as ``handler(exc, *args)`` on a match.
    """

    target: Any
    kinds: tuple[type[BaseException], ...]
    handler: Any

    def invoke(self, args: tuple[Any, ...]) -> Any:
        try:
            return invoke(self.target, args)
        except self.kinds as exc:
            return invoke(self.handler, (exc, *args))


def catch(
    target: Func | Callable[..., Any],
    kinds: Iterable[type[BaseException]],
    handler: Func | Callable[..., Any],
) -> Caught:
    """Call ``target``, handing matching exceptions to ``handler``.

    An exception that is an instance of one of ``kinds`` is passed to
    ``handler`` followed by the original call arguments, and the handler's
    return value becomes the result. Anything else is re-raised as the same
    object, traceback intact.

    Args:
        target: The callable to guard.
        kinds: Exception classes to intercept (subclasses match too).
        handler: Receives the exception, then the original arguments.

    Returns:
        A new ``Caught`` wrapped callable.

    Raises:
        TypeError: If an entry of ``kinds`` is not an exception class.

    Example:
        ```python
        lookup = catch(lambda key: {}[key], [KeyError], lambda exc, key: f'no {key}')
        lookup('foo')  # 'no foo'
        ```
    """
    frozen = tuple(kinds)
    for kind in frozen:
        if not (isinstance(kind, type) and issubclass(kind, BaseException)):
            msg = f'catch() expects exception classes, got {kind!r}'
            raise TypeError(msg)
    _log.debug('func.caught.created', kinds=[kind.__name__ for kind in frozen])
    return Caught(target=target, kinds=frozen, handler=handler)
