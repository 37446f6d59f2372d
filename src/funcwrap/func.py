"""Wrapped callables and the invocation adapter.

Every combinator returns a ``Func``: a frozen ``msgspec.Struct`` that owns its
configuration and is invoked with a positional argument tuple. Combinators
never call their targets directly; they go through :func:`invoke`, so a
``Func`` can stand in wherever a plain callable is accepted and vice versa.

Example:
    ```python
    from funcwrap import apply, invoke

    greet = apply(lambda greeting, name: f'{greeting}, {name}', ['Hello'])
    greet('World')  # 'Hello, World'
    invoke(greet, ('World',))  # 'Hello, World'
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

__all__ = ['Func', 'invoke']


class Func(msgspec.Struct, frozen=True, eq=False):
    """Base class of every wrapped callable.

    Subclasses implement :meth:`invoke`; calling the instance forwards its
    positional arguments as a tuple. Keyword arguments are not part of the
    invocation contract and are rejected by Python itself.
    """

    def invoke(self, args: tuple[Any, ...]) -> Any:
        """Apply this wrapped callable to a positional argument tuple."""
        raise NotImplementedError(type(self).__name__)

    def __call__(self, *args: Any) -> Any:
        return self.invoke(args)


def invoke(target: Func | Callable[..., Any], args: tuple[Any, ...]) -> Any:
    """Apply a wrapped or plain callable to a positional argument tuple.

    No arity or type checks are made; whatever the target raises propagates
    unchanged.

    Args:
        target: A ``Func`` or any Python callable (function, bound method,
            class, object with ``__call__``).
        args: The positional arguments, in order.

    Returns:
        Whatever the target returns.
    """
    if isinstance(target, Func):
        return target.invoke(args)
    return target(*args)
