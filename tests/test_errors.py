"""Tests for error types."""

import msgspec
import pytest
from funcwrap import CallContract, CallContractError, FuncwrapError


class TestCallContract:
    """Tests for CallContract / CallContractError."""

    def test_exception_message(self):
        """The message names the operation and the reason."""
        error = CallContractError('method(count)', 'called without a receiver')
        assert str(error) == 'method(count): called without a receiver'
        assert error.operation == 'method(count)'
        assert error.reason == 'called without a receiver'

    def test_hierarchy(self):
        """CallContractError is a FuncwrapError and a TypeError."""
        error = CallContractError('op', 'why')
        assert isinstance(error, FuncwrapError)
        assert isinstance(error, TypeError)

    def test_struct_round_trip(self):
        """Struct and exception variants convert into each other."""
        struct = CallContract('op', 'why')
        error = struct.to_exception()
        assert isinstance(error, CallContractError)
        assert error.to_struct() == struct

    def test_struct_is_frozen(self):
        """The struct variant is immutable."""
        struct = CallContract('op', 'why')
        with pytest.raises(AttributeError):
            struct.reason = 'other'  # type: ignore[misc]

    def test_struct_encodes(self):
        """The struct variant serializes with msgspec."""
        encoded = msgspec.json.encode(CallContract('op', 'why'))
        assert msgspec.json.decode(encoded, type=CallContract) == CallContract('op', 'why')
