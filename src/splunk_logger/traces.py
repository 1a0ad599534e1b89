"""Capture of human-readable stack traces from error values.

The Splunk logger only depends on the `TracedError` protocol. Exceptions are
adapted to it by `ExceptionTrace`; other error types can implement the two
methods themselves.
"""

import traceback
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class TracedError(Protocol):
    """Error value able to describe itself and render its call chain."""

    def describe(self) -> str:
        """Return textual description of the error."""

    def stack_trace(self) -> str:
        """Return multi-line rendering of the call chain."""


class ExceptionTrace:
    """Adapter exposing an exception through the `TracedError` protocol."""

    def __init__(self, exc: BaseException) -> None:
        """Wrap the exception.

        The traceback is rendered lazily, at the moment the error is logged.
        """
        self._exc = exc

    def describe(self) -> str:
        """Return the exception message."""
        return str(self._exc)

    def stack_trace(self) -> str:
        """Render the call chain of the wrapped exception.

        A raised exception carries its own traceback, which is rendered
        together with any chained causes. An exception that has never been
        raised has no traceback, so the call chain leading to this point is
        rendered instead, followed by the exception itself.

        Returns:
            str: Multi-line stack trace.
        """
        if self._exc.__traceback__ is not None:
            return "".join(traceback.format_exception(self._exc))
        # drop the frame of this method
        frames = traceback.format_stack()[:-1]
        return "".join(
            ["Stack (most recent call last):\n"]
            + frames
            + traceback.format_exception_only(self._exc)
        )


def as_traced(error: Union[BaseException, TracedError]) -> TracedError:
    """Return the error as `TracedError`, adapting exceptions when needed.

    Parameters:
        error: Exception or any object implementing `TracedError`.

    Returns:
        TracedError: The error itself, or an `ExceptionTrace` wrapper.
    """
    if isinstance(error, TracedError):
        return error
    return ExceptionTrace(error)
