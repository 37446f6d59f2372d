"""Trivial constructors: noop(), that_returns() and method()."""

from __future__ import annotations

from typing import Any

from funcwrap.errors import CallContractError
from funcwrap.func import Func

__all__ = ['Constant', 'Method', 'NoOp', 'method', 'noop', 'that_returns']


class NoOp(Func, frozen=True, eq=False):
    """Ignores its arguments and returns ``None``."""

    def invoke(self, args: tuple[Any, ...]) -> None:
        return None


class Constant(Func, frozen=True, eq=False):
    """Ignores its arguments and returns ``value``."""

    value: Any

    def invoke(self, args: tuple[Any, ...]) -> Any:
        return self.value


class Method(Func, frozen=True, eq=False):
    """Calls the method ``name`` on the first argument with the rest.

    Attributes:
        name: Attribute looked up on the receiver at call time.
    """

    name: str

    def invoke(self, args: tuple[Any, ...]) -> Any:
        if not args:
            raise CallContractError(f'method({self.name!r})', 'called without a receiver')
        receiver, *rest = args
        return getattr(receiver, self.name)(*rest)


_NOOP = NoOp()


def noop() -> NoOp:
    """A callable that accepts anything and does nothing."""
    return _NOOP


def that_returns(value: Any) -> Constant:
    """A callable that accepts anything and always returns ``value``."""
    return Constant(value=value)


def method(name: str) -> Method:
    """A callable that invokes method ``name`` on its first argument.

    Remaining call arguments are passed to the method. Calling it with no
    arguments at all raises :class:`~funcwrap.errors.CallContractError`.

    Example:
        ```python
        upper = method('upper')
        upper('abc')  # 'ABC'
        method('split')('a-b', '-')  # ['a', 'b']
        ```
    """
    return Method(name=name)
