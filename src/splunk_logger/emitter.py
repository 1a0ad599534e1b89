"""Synchronous Splunk HEC client sending one event per logging call."""

import logging
import sys
from typing import Optional, TextIO, Union

import requests
from pydantic_core import PydanticSerializationError

import constants
from models.config import SplunkLoggerConfiguration
from models.event import EventEnvelope, LogLevel, LogMessage
from splunk_logger.traces import TracedError, as_traced

logger = logging.getLogger(__name__)


def _source_location_trace(level: LogLevel, source_filename: str, line_no: int) -> str:
    """Build the synthesized stack trace for caller-supplied source location."""
    return f"{level.name.capitalize()} Stacktrace:\n-> {source_filename}:{line_no}"


class SplunkLogger:
    """Forward log events to a Splunk HTTP Event Collector.

    Every logging method builds one record, serializes it and POSTs it to the
    collector on the calling thread. Failures never propagate to the caller:
    records that can not be serialized or sent are dropped, and the body of a
    rejected request is written to the diagnostic output.

    The instance holds only read-only connection settings, so it can be shared
    by concurrent callers without locking.
    """

    def __init__(
        self,
        token: str,
        endpoint: str,
        port: int,
        diagnostic_output: Optional[TextIO] = None,
    ) -> None:
        """Store connection settings.

        No validation is performed, an invalid token or unreachable endpoint
        shows up only when events are sent.

        Parameters:
            token: HEC token sent in the Authorization header.
            endpoint: Scheme and host of the collector.
            port: TCP port of the collector.
            diagnostic_output: Stream receiving bodies of rejected requests,
                standard error when not provided.
        """
        self._token = token
        self._endpoint = endpoint
        self._port = port
        self._diagnostic_output = diagnostic_output

    @property
    def token(self) -> str:
        """HEC token."""
        return self._token

    @property
    def endpoint(self) -> str:
        """Scheme and host of the collector."""
        return self._endpoint

    @property
    def port(self) -> int:
        """TCP port of the collector."""
        return self._port

    @property
    def url(self) -> str:
        """URL of the collector event endpoint."""
        return (
            f"{self._endpoint}:{self._port}{constants.SPLUNK_COLLECTOR_EVENT_PATH}"
        )

    def __repr__(self) -> str:
        """Return representation without the token."""
        return f"SplunkLogger(endpoint={self._endpoint!r}, port={self._port!r})"

    def log_debug(self, message: str, source_filename: str, line_no: int) -> None:
        """Send debug event pointing to the given source location."""
        self._log_at_location(LogLevel.DEBUG, message, source_filename, line_no)

    def log_information(
        self, message: str, source_filename: str, line_no: int
    ) -> None:
        """Send information event pointing to the given source location."""
        self._log_at_location(LogLevel.INFORMATION, message, source_filename, line_no)

    def log_warning(self, message: str, source_filename: str, line_no: int) -> None:
        """Send warning event pointing to the given source location."""
        self._log_at_location(LogLevel.WARNING, message, source_filename, line_no)

    def log_error(self, error: Union[BaseException, TracedError]) -> None:
        """Send error event with the error description and its stack trace."""
        self._log_error_value(LogLevel.ERROR, error)

    def log_fatal(self, error: Union[BaseException, TracedError]) -> None:
        """Send fatal event with the error description and its stack trace.

        Only the event is sent; the process is not terminated.
        """
        self._log_error_value(LogLevel.FATAL, error)

    def _log_at_location(
        self, level: LogLevel, message: str, source_filename: str, line_no: int
    ) -> None:
        try:
            record = LogMessage.for_level(
                level, message, _source_location_trace(level, source_filename, line_no)
            )
        except (ValueError, TypeError) as e:
            logger.debug("Dropping log event that can not be built: %s", e)
            return
        self._send(record)

    def _log_error_value(
        self, level: LogLevel, error: Union[BaseException, TracedError]
    ) -> None:
        try:
            traced = as_traced(error)
            record = LogMessage.for_level(level, traced.describe(), traced.stack_trace())
        except (ValueError, TypeError, AttributeError) as e:
            logger.debug("Dropping log event that can not be built: %s", e)
            return
        self._send(record)

    def _send(self, record: LogMessage) -> None:
        """Send the record to the collector.

        This function handles failures gracefully: serialization and transport
        errors drop the record, rejected requests are reported to the
        diagnostic output. Nothing is raised to the caller.
        """
        try:
            payload = EventEnvelope(event=record).to_json()
        except (PydanticSerializationError, ValueError, TypeError) as e:
            logger.debug("Dropping log event that can not be serialized: %s", e)
            return

        headers = {
            "Authorization": f"{constants.SPLUNK_AUTHORIZATION_SCHEME} {self._token}",
            "Content-Type": "application/json",
        }

        try:
            with requests.post(
                self.url,
                data=payload.encode("utf-8"),
                headers=headers,
                timeout=constants.SPLUNK_REQUEST_TIMEOUT,
            ) as response:
                if response.status_code < 200 or response.status_code >= 299:
                    self._report_rejection(response.text)
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.debug("Dropping log event, Splunk HEC request failed: %s", e)

    def _report_rejection(self, body: str) -> None:
        # sys.stderr is looked up on every write
        output = self._diagnostic_output
        if output is None:
            output = sys.stderr
        print(body, file=output)


def create(
    token: str, endpoint: str, port: int, diagnostic_output: Optional[TextIO] = None
) -> SplunkLogger:
    """Create a Splunk logger for the given collector.

    Parameters:
        token: HEC token.
        endpoint: Scheme and host of the collector, e.g. "https://splunk.example.com".
        port: TCP port of the collector.
        diagnostic_output: Stream receiving bodies of rejected requests.

    Returns:
        SplunkLogger: Ready to use logger instance.
    """
    return SplunkLogger(token, endpoint, port, diagnostic_output)


def from_configuration(config: SplunkLoggerConfiguration) -> SplunkLogger:
    """Create a Splunk logger from validated configuration.

    Raises:
        OSError: If the token is configured by path and can not be read.
    """
    return SplunkLogger(config.resolve_token(), config.endpoint, config.port)
