"""Unit tests for stack trace capture."""

from splunk_logger.traces import ExceptionTrace, TracedError, as_traced


def _raise_nested() -> None:
    """Raise an exception two frames deep."""
    try:
        int("not a number")
    except ValueError as e:
        raise RuntimeError("conversion failed") from e


def test_describe_returns_exception_message() -> None:
    """Test the description is the exception text."""
    assert ExceptionTrace(KeyError("missing")).describe() == "'missing'"
    assert ExceptionTrace(RuntimeError("boom")).describe() == "boom"


def test_stack_trace_of_raised_exception() -> None:
    """Test raised exceptions render their own traceback with causes."""
    try:
        _raise_nested()
    except RuntimeError as e:
        trace = ExceptionTrace(e).stack_trace()

    assert trace.startswith("Traceback (most recent call last):")
    assert "in _raise_nested" in trace
    assert "ValueError: invalid literal" in trace
    assert "RuntimeError: conversion failed" in trace


def test_stack_trace_of_unraised_exception() -> None:
    """Test call chain at logging point is rendered for unraised exceptions."""
    trace = ExceptionTrace(RuntimeError("boom")).stack_trace()
    lines = trace.splitlines()

    assert lines[0] == "Stack (most recent call last):"
    assert "in test_stack_trace_of_unraised_exception" in trace
    assert lines[-1] == "RuntimeError: boom"
    assert "in stack_trace" not in trace


def test_as_traced_wraps_exceptions() -> None:
    """Test exceptions get wrapped by ExceptionTrace."""
    traced = as_traced(ValueError("boom"))
    assert isinstance(traced, ExceptionTrace)
    assert isinstance(traced, TracedError)
    assert traced.describe() == "boom"


def test_as_traced_keeps_traced_errors() -> None:
    """Test objects implementing the protocol are returned unchanged."""

    class Traced:
        """Error value implementing the protocol."""

        def describe(self) -> str:
            """Return description."""
            return "d"

        def stack_trace(self) -> str:
            """Return stack trace."""
            return "s"

    error = Traced()
    assert as_traced(error) is error
