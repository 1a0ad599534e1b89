"""Constants used in business logic."""

from typing import Final

# Path of the HEC event endpoint, appended to "<endpoint>:<port>"
SPLUNK_COLLECTOR_EVENT_PATH: Final[str] = "/services/collector/event"

# Every request to the collector is bounded by this timeout (in seconds)
SPLUNK_REQUEST_TIMEOUT: Final[int] = 10

# Default HEC port used when the configuration does not specify one
DEFAULT_SPLUNK_HEC_PORT: Final[int] = 8088

# Authorization scheme expected by the HTTP Event Collector
SPLUNK_AUTHORIZATION_SCHEME: Final[str] = "Splunk"

# Label reported for an unknown or unset log level
LOG_LEVEL_NOT_SET: Final[str] = "Not Set"
