"""Models describing a single Splunk HEC log event.

A `LogMessage` is built once per logging call, wrapped in an
`EventEnvelope` and serialized straight away. Both models are frozen, so a
record can not change between construction and sending.
"""

from datetime import datetime, timezone
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

import constants


class LogLevel(IntEnum):
    """Severity of a log event.

    The numeric values are part of the wire format (`log_level` field).
    Zero is reserved for an unset level and is not a member.
    """

    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


LOG_LEVEL_LABELS: dict[int, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFORMATION: "information",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
}


def log_level_to_string(level: int) -> str:
    """Return lowercase label for the given log level.

    Parameters:
        level (int): Log level, usually a `LogLevel` member.

    Returns:
        str: The label, or "Not Set" for values outside of the table.
    """
    return LOG_LEVEL_LABELS.get(level, constants.LOG_LEVEL_NOT_SET)


class LogMessage(BaseModel):
    """Payload of one log event as expected under the `event` key."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Free-text content of the event")

    stack_trace: str = Field(
        "",
        description="Synthesized source location or captured stack trace",
    )

    log_level: int = Field(0, description="Numeric severity, 0 when unset")

    log_level_description: str = Field(
        "", description="Lowercase label derived from log_level"
    )

    event_time: datetime = Field(
        ..., description="Point in time when the record was created"
    )

    @classmethod
    def for_level(
        cls, level: LogLevel, message: str, stack_trace: str
    ) -> "LogMessage":
        """Build a record for the given level stamped with the current time.

        Level and its label are always derived together here, callers never
        set them independently.
        """
        return cls(
            message=message,
            stack_trace=stack_trace,
            log_level=int(level),
            log_level_description=log_level_to_string(level),
            event_time=datetime.now(timezone.utc),
        )


class EventEnvelope(BaseModel):
    """Request body sent to the collector."""

    model_config = ConfigDict(frozen=True)

    event: LogMessage

    def to_json(self) -> str:
        """Serialize the envelope into JSON accepted by the collector.

        Empty `stack_trace`, zero `log_level` and empty
        `log_level_description` are left out of the payload.

        Returns:
            str: JSON document with single top-level `event` key.
        """
        exclude: set[str] = set()
        if not self.event.stack_trace:
            exclude.add("stack_trace")
        if not self.event.log_level:
            exclude.add("log_level")
        if not self.event.log_level_description:
            exclude.add("log_level_description")
        if not exclude:
            return self.model_dump_json()
        return self.model_dump_json(exclude={"event": exclude})
