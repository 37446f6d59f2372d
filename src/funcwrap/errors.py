"""Error types: dual struct+exception for Result-style and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'CallContract',
    'CallContractError',
    'FuncwrapError',
]


class FuncwrapError(Exception):
    """Base exception for errors raised by funcwrap itself.

    Failures raised by wrapped targets, transforms and handlers are never
    translated into this hierarchy; they propagate as they were raised.
    """


# --- Call-contract Errors ---


class CallContract(msgspec.Struct, frozen=True, gc=False):
    """A wrapped callable was invoked in a way it cannot honour - struct variant."""

    operation: str
    reason: str

    def to_exception(self) -> CallContractError:
        """Convert to exception for raise-based code."""
        return CallContractError(self.operation, self.reason)


class CallContractError(FuncwrapError, TypeError):
    """A wrapped callable was invoked in a way it cannot honour - exception variant.

    Signals a programming error at the call site (for example a method-binder
    called without a receiver), not a problem with the data being passed.
    """

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f'{operation}: {reason}')

    def to_struct(self) -> CallContract:
        """Convert to struct for Result-based code."""
        return CallContract(self.operation, self.reason)
