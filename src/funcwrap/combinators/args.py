"""Argument transforms: reorder_args() and map_args()."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from funcwrap._logging import get_logger
from funcwrap.func import Func, invoke

__all__ = ['Mapped', 'Reordered', 'map_args', 'reorder_args']

_log = get_logger(__name__)


class Reordered(Func, frozen=True, eq=False):
    """A target whose positional arguments are moved around before the call.

    Attributes:
        target: The wrapped callable.
        moves: ``(source, destination)`` index pairs, applied in order.
    """

    target: Any
    moves: tuple[tuple[int, int], ...] = ()

    def reorder(self, args: tuple[Any, ...]) -> tuple[Any, ...]:
        """Apply every move, in order, to a copy of ``args``."""
        reordered = list(args)
        for source, dest in self.moves:
            if not (0 <= source < len(reordered) and 0 <= dest < len(reordered)):
                continue
            reordered.insert(dest, reordered.pop(source))
        return tuple(reordered)

    def invoke(self, args: tuple[Any, ...]) -> Any:
        return invoke(self.target, self.reorder(args))


def reorder_args(
    target: Func | Callable[..., Any],
    moves: Mapping[int, int] | Iterable[tuple[int, int]],
) -> Reordered:
    """Reorder positional arguments before calling ``target``.

    Each ``source: destination`` entry takes the argument currently at
    ``source`` out of the list and puts it back at ``destination``. Moves run
    one after the other on the list as the previous move left it, so entries
    that share an index compound:

    ```python
    show = lambda a, b, c, d: f'{a} {b} {c} {d}'
    reorder_args(show, {0: 2, 3: 1})('d', 'a', 'c', 'b')  # 'a b c d'
    reorder_args(show, {0: 2, 2: 1})('d', 'a', 'c', 'b')  # 'a d c b'
    ```

    The second call does not give 'a b c d': after the first move the
    argument at index 2 is no longer 'c'. With two arguments a move is a
    plain exchange. Moves referring to positions outside the argument list
    are skipped.

    Args:
        target: The callable to wrap.
        moves: A mapping of source to destination index, or an iterable of
            ``(source, destination)`` pairs.

    Returns:
        A new ``Reordered`` wrapped callable.
    """
    pairs = moves.items() if isinstance(moves, Mapping) else moves
    frozen = tuple((int(source), int(dest)) for source, dest in pairs)
    _log.debug('func.reordered.created', moves=len(frozen))
    return Reordered(target=target, moves=frozen)


class Mapped(Func, frozen=True, eq=False):
    """A target whose every argument passes through ``transform`` first.

    Attributes:
        target: The wrapped callable.
        transform: Single-argument callable applied to each argument.
    """

    target: Any
    transform: Any

    def invoke(self, args: tuple[Any, ...]) -> Any:
        return invoke(self.target, tuple(invoke(self.transform, (arg,)) for arg in args))


def map_args(
    target: Func | Callable[..., Any],
    transform: Func | Callable[[Any], Any],
) -> Mapped:
    """Pass every positional argument through ``transform`` before the call.

    Example:
        ```python
        total_length = map_args(lambda a, b: a + b, len)
        total_length('hello', 'world')  # 10
        ```
    """
    _log.debug('func.mapped.created')
    return Mapped(target=target, transform=transform)
