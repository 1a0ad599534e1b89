"""Client library forwarding application log events to Splunk HEC.

The emitter module provides `SplunkLogger` with one method per severity.
Each call sends one event synchronously and never raises; see the traces
module for how stack traces are captured from error values.
"""

from splunk_logger.emitter import SplunkLogger, create, from_configuration
from splunk_logger.traces import ExceptionTrace, TracedError, as_traced

__all__ = [
    "SplunkLogger",
    "create",
    "from_configuration",
    "ExceptionTrace",
    "TracedError",
    "as_traced",
]
