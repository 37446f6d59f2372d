"""Tests for capture(), emit() and the output sink."""

import io
import sys

import pytest
from funcwrap import Captured, Emitted, capture, echo, emit, output_to
from funcwrap.output import current_sink


class TestOutputSink:
    """Tests for output_to() and echo()."""

    def test_default_sink_is_stdout(self):
        """Outside any scope output goes to sys.stdout."""
        assert current_sink() is sys.stdout

    def test_output_to_scopes_sink(self):
        """output_to() installs a sink for its block only."""
        buffer = io.StringIO()
        with output_to(buffer) as sink:
            assert sink is buffer
            assert current_sink() is buffer
        assert current_sink() is sys.stdout

    def test_nested_scopes_restore(self):
        """Leaving an inner scope restores the outer sink."""
        outer, inner = io.StringIO(), io.StringIO()
        with output_to(outer):
            with output_to(inner):
                echo('in')
            echo('out')
        assert inner.getvalue() == 'in'
        assert outer.getvalue() == 'out'

    def test_echo_none_writes_nothing(self):
        """echo(None) leaves the sink empty."""
        buffer = io.StringIO()
        with output_to(buffer):
            echo(None)
        assert buffer.getvalue() == ''

    def test_echo_uses_str(self):
        """Non-string values are written with str()."""
        buffer = io.StringIO()
        with output_to(buffer):
            echo(42)
            echo(True)
        assert buffer.getvalue() == '42True'

    def test_echo_follows_stdout(self, capsys):
        """Without a scope echo() writes to the current sys.stdout."""
        echo('plain')
        assert capsys.readouterr().out == 'plain'


class TestCapture:
    """Tests for capture()."""

    def test_capture_print(self):
        """Printed output becomes the return value."""

        def greet(name, title):
            print(f'Hello {title}. {name}', end='')

        func = capture(greet)
        assert func('Anderson', 'Mr') == 'Hello Mr. Anderson'

    def test_capture_echo(self):
        """Output written with echo() is captured too."""
        func = capture(lambda value: echo(value * 2))
        assert func(21) == '42'

    def test_capture_discards_result(self):
        """The target's return value is dropped."""
        func = capture(lambda: 'returned')
        assert func() == ''

    def test_capture_does_not_leak(self, capsys):
        """Captured output never reaches the real stdout."""
        capture(print)('hidden')
        assert capsys.readouterr().out == ''

    def test_capture_restores_sink(self):
        """The previous sink is back after the call."""
        outer = io.StringIO()
        with output_to(outer):
            capture(echo)('inner')
            echo('outer')
        assert outer.getvalue() == 'outer'

    def test_capture_error_propagates(self):
        """Failures pass through and the sink is restored."""

        def fail():
            print('partial')
            raise ValueError

        with pytest.raises(ValueError):
            capture(fail)()
        assert current_sink() is sys.stdout

    def test_capture_of_emit(self):
        """Capturing an emitter returns the emitted value as text."""
        func = capture(emit(lambda name: f'Hi {name}'))
        assert func('Neo') == 'Hi Neo'

    def test_returns_captured(self):
        """capture() builds a Captured variant."""
        assert isinstance(capture(print), Captured)


class TestEmit:
    """Tests for emit()."""

    def test_emit(self, capsys):
        """The return value is written to stdout and None returned."""
        func = emit(lambda name, title: f'Hello {title}. {name}')
        assert func('Anderson', 'Mr') is None
        assert capsys.readouterr().out == 'Hello Mr. Anderson'

    def test_emit_to_sink(self):
        """The return value goes to the scoped sink."""
        buffer = io.StringIO()
        with output_to(buffer):
            emit(lambda: 'scoped')()
        assert buffer.getvalue() == 'scoped'

    def test_emit_none(self):
        """A None return writes nothing."""
        buffer = io.StringIO()
        with output_to(buffer):
            emit(lambda: None)()
        assert buffer.getvalue() == ''

    def test_returns_emitted(self):
        """emit() builds an Emitted variant."""
        assert isinstance(emit(str), Emitted)
