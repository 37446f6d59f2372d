"""apply(): partial application with skip placeholders."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

import msgspec

from funcwrap._logging import get_logger
from funcwrap.func import Func, invoke

__all__ = ['SKIP', 'Bound', 'Fixed', 'Skip', 'apply']

_log = get_logger(__name__)

_MISSING = object()


class Fixed(msgspec.Struct, frozen=True):
    """A bound slot holding a value that is passed as-is."""

    value: Any


class Skip(msgspec.Struct, frozen=True):
    """A bound slot filled from the next unused call-time argument."""

    def __repr__(self) -> str:
        return 'SKIP'


SKIP = Skip()
"""Placeholder for ``apply`` bind lists: take this argument from the call."""


type Slot = Fixed | Skip


def _to_slot(value: Any) -> Slot:
    if isinstance(value, Fixed | Skip):
        return value
    return Fixed(value)


def _fill_slots(inner: tuple[Slot, ...], outer: tuple[Slot, ...]) -> tuple[Slot, ...]:
    """Fill the skips of ``inner`` with ``outer`` slots, in order.

    Outer slots left over after every inner skip is filled are appended.
    """
    pending = iter(outer)
    filled = [next(pending, slot) if isinstance(slot, Skip) else slot for slot in inner]
    filled.extend(pending)
    return tuple(filled)


class Bound(Func, frozen=True, eq=False):
    """A target with pre-applied arguments and skip placeholders.

    Attributes:
        target: The wrapped callable.
        slots: Bound slots, each ``Fixed`` or ``Skip``.
    """

    target: Any
    slots: tuple[Slot, ...] = ()

    def resolve(self, args: tuple[Any, ...]) -> tuple[Any, ...]:
        """Build the final argument tuple for a call with ``args``.

        Skips take call arguments in order. When the call arguments run out,
        remaining skips are dropped and later fixed values shift left. Unused
        call arguments are appended at the end.
        """
        remaining = iter(args)
        resolved: list[Any] = []
        for slot in self.slots:
            if isinstance(slot, Fixed):
                resolved.append(slot.value)
                continue
            arg = next(remaining, _MISSING)
            if arg is not _MISSING:
                resolved.append(arg)
        resolved.extend(remaining)
        return tuple(resolved)

    def invoke(self, args: tuple[Any, ...]) -> Any:
        return invoke(self.target, self.resolve(args))


def apply(target: Func | Callable[..., Any], args: Iterable[Any] = ()) -> Bound:
    """Pre-apply positional arguments to a callable.

    Any element of ``args`` may be :data:`SKIP`, meaning "take this argument
    from the call". Arguments given at call time beyond the number of skips
    are appended after the bound ones.

    Applying to an existing ``Bound`` copies its target and slots into a new,
    independent ``Bound``: the outer slots fill the inner skips, in order, and
    the inner wrapper keeps behaving exactly as before.

    Flattening matches nesting whenever the call fills every skip. When it
    does not, inner skips are filled first: with inner ``[SKIP, 1, SKIP]`` and
    outer ``[SKIP, 2]``, a bare call gives ``f(1, 2)`` where nesting the two
    wrappers would give ``f(2, 1)``.

    Args:
        target: The callable to bind.
        args: Values to bind, possibly containing ``SKIP``.

    Returns:
        A new ``Bound`` wrapped callable.

    Example:
        ```python
        shout = apply(lambda text, n: text + '!' * n, [SKIP, 3])
        shout('test')  # 'test!!!'

        title = apply(shout, ['Hey'])
        title()  # 'Hey!!!'
        ```
    """
    slots = tuple(_to_slot(arg) for arg in args)
    if isinstance(target, Bound):
        slots = _fill_slots(target.slots, slots)
        target = target.target
    _log.debug('func.bound.created', slots=len(slots))
    return Bound(target=target, slots=slots)
