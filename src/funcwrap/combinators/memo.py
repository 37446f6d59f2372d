"""memoize(): per-instance result cache keyed by call arguments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from funcwrap._logging import get_logger
from funcwrap.func import Func, invoke

__all__ = ['Memoized', 'canonical_key', 'memoize']

_log = get_logger(__name__)

# Keyed by value; matched on the exact type so True, 1 and 1.0 stay apart.
_BY_VALUE = frozenset({type(None), bool, int, float, complex, str, bytes})


class _Identity:
    """Key component that compares by object identity.

    Holds a strong reference so the id cannot be reused while cached.
    """

    __slots__ = ('obj',)

    def __init__(self, obj: Any) -> None:
        self.obj = obj

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Identity) and other.obj is self.obj

    def __hash__(self) -> int:
        return id(self.obj)

    def __repr__(self) -> str:
        return f'<identity {type(self.obj).__name__} at {id(self.obj):#x}>'


def _canonical(value: Any) -> Any:
    kind = type(value)
    if kind in _BY_VALUE:
        return (kind, value)
    if kind is tuple:
        return (tuple, tuple(_canonical(item) for item in value))
    if kind is frozenset:
        return (frozenset, frozenset(_canonical(item) for item in value))
    return _Identity(value)


def canonical_key(args: tuple[Any, ...]) -> tuple[Any, ...]:
    """Build the cache key for an argument tuple.

    Scalars (None, bool, int, float, complex, str, bytes) compare by type and
    value, tuples and frozensets by their canonicalized contents, and
    everything else (callables, lists, dicts, instances) by identity.
    Argument tuples of different lengths never share a key.
    """
    return tuple(_canonical(arg) for arg in args)


class Memoized(Func, frozen=True, eq=False):
    """A target whose results are cached per distinct argument key.

    The cache belongs to this instance alone; two ``Memoized`` wrappers never
    see each other's entries, whatever their targets. Constructing or copying
    an instance always starts from an empty cache.

    Not safe for concurrent use: the check-then-store sequence needs
    external locking if one instance is shared across threads.

    Attributes:
        target: The wrapped callable.
        cache: Canonical key -> stored result.
    """

    target: Any
    cache: dict[Any, Any] = msgspec.field(default_factory=dict)

    def __post_init__(self) -> None:
        # A passed-in cache is discarded; every instance starts empty.
        msgspec.structs.force_setattr(self, 'cache', {})

    def __copy__(self) -> Memoized:
        return type(self)(target=self.target)

    def invoke(self, args: tuple[Any, ...]) -> Any:
        key = canonical_key(args)
        if key in self.cache:
            _log.debug('func.memoize.hit', entries=len(self.cache))
            return self.cache[key]
        _log.debug('func.memoize.miss', entries=len(self.cache))
        result = invoke(self.target, args)
        self.cache[key] = result
        return result

    def cache_size(self) -> int:
        """Number of cached results."""
        return len(self.cache)

    def cache_clear(self) -> None:
        """Drop every cached result."""
        self.cache.clear()


def memoize(target: Func | Callable[..., Any]) -> Memoized:
    """Cache ``target``'s results by argument list.

    The target runs at most once per distinct argument key for the lifetime
    of the returned wrapper. Exceptions are not cached.

    Example:
        ```python
        slow_square = memoize(lambda x: x * x)
        slow_square(9)  # computed
        slow_square(9)  # served from the cache
        ```
    """
    _log.debug('func.memoized.created')
    return Memoized(target=target)
