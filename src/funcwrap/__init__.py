"""funcwrap: higher-order function combinators.

Small, composable wrappers that turn one callable into another: partial
application with skip placeholders, argument reordering and mapping, fan-out,
pipelines, exception-to-value adapters, memoization and output redirection.

Flat imports (preferred):
    from funcwrap import apply, SKIP, pipe, merge, catch, memoize

Submodule imports (for organization):
    from funcwrap.combinators import Bound, Memoized
    from funcwrap.decorators import memoized, catching
    from funcwrap.output import output_to, echo
"""

from funcwrap._config import FuncConfig, get_config, init

# Combinators
from funcwrap.combinators import (
    SKIP,
    Bound,
    Captured,
    Caught,
    Constant,
    Emitted,
    Mapped,
    Memoized,
    Merged,
    Method,
    NoOp,
    Piped,
    Reordered,
    apply,
    capture,
    catch,
    emit,
    map_args,
    memoize,
    merge,
    method,
    noop,
    pipe,
    reorder_args,
    that_returns,
)

# Decorators
from funcwrap.decorators import capturing, catching, emitting, memoized
from funcwrap.errors import CallContract, CallContractError, FuncwrapError
from funcwrap.func import Func, invoke

# Output side-channel
from funcwrap.output import echo, output_to

__all__ = [
    'SKIP',
    'Bound',
    # Errors
    'CallContract',
    'CallContractError',
    'Captured',
    'Caught',
    'Constant',
    'Emitted',
    # Wrapped callables
    'Func',
    # Configuration
    'FuncConfig',
    'FuncwrapError',
    'Mapped',
    'Memoized',
    'Merged',
    'Method',
    'NoOp',
    'Piped',
    'Reordered',
    # Combinators
    'apply',
    'capture',
    # Decorators
    'capturing',
    'catch',
    'catching',
    'echo',
    'emit',
    'emitting',
    'get_config',
    'init',
    'invoke',
    'map_args',
    'memoize',
    'memoized',
    'merge',
    'method',
    'noop',
    'output_to',
    'pipe',
    'reorder_args',
    'that_returns',
]
