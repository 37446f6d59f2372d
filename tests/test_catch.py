"""Tests for catch()."""

import pytest
from funcwrap import Caught, catch


class TestCatch:
    """Tests for catch()."""

    def test_catch(self):
        """A matching exception yields the handler's result."""

        def fail():
            raise IndexError

        func = catch(fail, [IndexError], lambda exc: 55)
        assert func() == 55

    def test_catch_bubble(self):
        """A non-matching exception propagates."""

        def fail():
            raise RuntimeError

        func = catch(fail, [IndexError], lambda exc: 55)
        with pytest.raises(RuntimeError):
            func()

    def test_unmatched_is_same_object(self):
        """The re-raised exception is the original object."""
        error = RuntimeError('original')

        def fail():
            raise error

        with pytest.raises(RuntimeError) as exc_info:
            catch(fail, [IndexError], lambda exc: None)()
        assert exc_info.value is error

    def test_handler_gets_exception(self):
        """The handler receives the raised exception itself."""
        error = IndexError()
        received = []

        def fail():
            raise error

        catch(fail, [IndexError], received.append)()
        assert received == [error]
        assert received[0] is error

    def test_handler_gets_call_args(self):
        """Call arguments follow the exception."""

        def fail(key):
            raise IndexError

        func = catch(fail, [IndexError], lambda exc, key: key)
        assert func('foobar') == 'foobar'

    def test_subclass_matches(self):
        """Matching is by isinstance, so subclasses are caught."""

        def fail():
            raise KeyError('k')

        assert catch(fail, [LookupError], lambda exc: 'caught')() == 'caught'

    def test_supertype_not_matched_by_subclass(self):
        """A subclass matcher does not catch its base class."""

        def fail():
            raise LookupError

        with pytest.raises(LookupError):
            catch(fail, [KeyError], lambda exc: 'caught')()

    def test_any_of_several_kinds(self):
        """Any listed kind matches."""

        def fail(kind):
            raise kind

        func = catch(fail, [ValueError, TypeError], lambda exc, kind: type(exc).__name__)
        assert func(ValueError) == 'ValueError'
        assert func(TypeError) == 'TypeError'

    def test_success_passes_through(self, counter):
        """Without an exception the target's result is returned."""
        func = catch(lambda x: x * 2, [Exception], counter)
        assert func(4) == 8
        assert counter.count == 0

    def test_no_kinds_catches_nothing(self):
        """An empty kind list intercepts nothing."""

        def fail():
            raise ValueError

        with pytest.raises(ValueError):
            catch(fail, [], lambda exc: None)()

    def test_handler_error_propagates(self):
        """Failures in the handler are not intercepted."""

        def fail():
            raise ValueError

        def bad_handler(exc):
            raise RuntimeError('handler')

        with pytest.raises(RuntimeError, match='handler'):
            catch(fail, [ValueError], bad_handler)()

    def test_invalid_kind_rejected(self):
        """Non-exception matchers fail at construction."""
        with pytest.raises(TypeError):
            catch(len, [str], print)

    def test_returns_caught(self):
        """catch() builds a Caught variant with frozen kinds."""
        func = catch(len, [ValueError], print)
        assert isinstance(func, Caught)
        assert func.kinds == (ValueError,)
