"""Combinator constructors and the wrapped-callable variants they build."""

from funcwrap.combinators.args import Mapped, Reordered, map_args, reorder_args
from funcwrap.combinators.bind import SKIP, Bound, Fixed, Skip, apply
from funcwrap.combinators.catch import Caught, catch
from funcwrap.combinators.flow import Merged, Piped, merge, pipe
from funcwrap.combinators.memo import Memoized, canonical_key, memoize
from funcwrap.combinators.redirect import Captured, Emitted, capture, emit
from funcwrap.combinators.trivial import Constant, Method, NoOp, method, noop, that_returns

__all__ = [
    'SKIP',
    'Bound',
    'Captured',
    'Caught',
    'Constant',
    'Emitted',
    'Fixed',
    'Mapped',
    'Memoized',
    'Merged',
    'Method',
    'NoOp',
    'Piped',
    'Reordered',
    'Skip',
    'apply',
    'canonical_key',
    'capture',
    'catch',
    'emit',
    'map_args',
    'memoize',
    'merge',
    'method',
    'noop',
    'pipe',
    'reorder_args',
    'that_returns',
]
