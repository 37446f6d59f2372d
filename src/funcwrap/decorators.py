"""Decorator forms: @memoized, @catching, @capturing and @emitting.

Each decorator builds its combinator once, when the function is decorated,
and keeps the function's name, docstring and signature via ``wrapt``. On
methods the receiver is passed as the first positional argument, so a
``@catching`` handler on a method is called as ``handler(exc, self, *args)``.

Keyword arguments are outside the combinators' positional contract and are
rejected with :class:`~funcwrap.errors.CallContractError`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import wrapt

from funcwrap.combinators import capture, catch, emit, memoize
from funcwrap.errors import CallContractError
from funcwrap.func import Func

__all__ = ['capturing', 'catching', 'emitting', 'memoized']

P = ParamSpec('P')
T = TypeVar('T')


def _positional(
    name: str,
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> tuple[Any, ...]:
    if kwargs:
        raise CallContractError(
            f'@{name}', f'keyword arguments are not supported ({", ".join(sorted(kwargs))})'
        )
    if instance is None:
        return args
    return (instance, *args)


def _decorate(name: str, func: Callable[..., Any], combinator: Func) -> Any:
    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return combinator.invoke(_positional(name, instance, args, kwargs))

    return wrapper(func)


def memoized[**P, T](func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that caches results per distinct argument list.

    The cache lives as long as the decorated function and is never pruned.
    On methods every receiver becomes part of a key and is strongly
    referenced, so decorated instances are kept alive for the life of the
    class. For per-instance caching that dies with the instance, wrap the
    bound method in ``__init__`` instead: ``self.lookup = memoize(self._lookup)``.

    Example:
        ```python
        @memoized
        def fib(n: int) -> int:
            return n if n < 2 else fib(n - 1) + fib(n - 2)

        fib(80)  # 23416728348467685
        ```
    """
    return _decorate('memoized', func, memoize(func))


def catching(
    *kinds: type[BaseException],
    handler: Callable[..., Any],
) -> Callable[[Callable[..., T]], Callable[..., Any]]:
    """Decorator that routes exceptions of ``kinds`` to ``handler``.

    Args:
        *kinds: Exception classes to intercept.
        handler: Called as ``handler(exc, *args)``; its return value becomes
            the decorated function's result.

    Example:
        ```python
        @catching(ZeroDivisionError, handler=lambda exc, a, b: float('inf'))
        def divide(a: float, b: float) -> float:
            return a / b

        divide(1, 0)  # inf
        ```
    """

    def decorator(func: Callable[..., T]) -> Callable[..., Any]:
        return _decorate('catching', func, catch(func, kinds, handler))

    return decorator


def capturing(func: Callable[P, Any]) -> Callable[P, str]:
    """Decorator that returns the function's printed output as a string."""
    return _decorate('capturing', func, capture(func))


def emitting(func: Callable[P, Any]) -> Callable[P, None]:
    """Decorator that writes the function's return value to the output sink."""
    return _decorate('emitting', func, emit(func))
