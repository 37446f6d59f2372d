"""Control flow: merge() fans out, pipe() threads a value through stages."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from funcwrap._logging import get_logger
from funcwrap.func import Func, invoke

__all__ = ['Merged', 'Piped', 'merge', 'pipe']

_log = get_logger(__name__)


class Merged(Func, frozen=True, eq=False):
    """Targets called one after another with the same arguments.

    Attributes:
        targets: The callables to run, in order.
    """

    targets: tuple[Any, ...] = ()

    def invoke(self, args: tuple[Any, ...]) -> None:
        for target in self.targets:
            invoke(target, args)


def merge(targets: Iterable[Func | Callable[..., Any]]) -> Merged:
    """Combine several callables into one that calls each of them.

    Every target gets the identical argument list, strictly in the order
    given; target ``i + 1`` starts only once target ``i`` has returned. The
    results are discarded and the merged callable returns ``None``.

    Example:
        ```python
        seen = []
        both = merge([seen.append, print])
        both('hello')  # prints 'hello'; seen == ['hello']
        ```
    """
    frozen = tuple(targets)
    _log.debug('func.merged.created', targets=len(frozen))
    return Merged(targets=frozen)


class Piped(Func, frozen=True, eq=False):
    """Targets chained so each receives the previous one's result.

    Attributes:
        targets: The stages, in order.
    """

    targets: tuple[Any, ...] = ()

    def invoke(self, args: tuple[Any, ...]) -> Any:
        if not self.targets:
            return None
        first, *rest = self.targets
        value = invoke(first, args)
        for target in rest:
            value = invoke(target, (value,))
        return value


def pipe(targets: Iterable[Func | Callable[..., Any]]) -> Piped:
    """Compose callables left to right.

    The first target receives the full argument list; each later target is
    called with exactly one argument, the previous result. An empty pipe
    returns ``None``. Stages built with ``apply`` can carry extra fixed
    arguments next to the piped value.

    Example:
        ```python
        shout = pipe([str.strip, str.upper, apply(str.__add__, [SKIP, '!'])])
        shout('  hi ')  # 'HI!'
        ```
    """
    frozen = tuple(targets)
    _log.debug('func.piped.created', targets=len(frozen))
    return Piped(targets=frozen)
