"""Model with Splunk logger configuration."""

from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
    FilePath,
    PositiveInt,
    SecretStr,
)
from typing_extensions import Self

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class SplunkLoggerConfiguration(ConfigurationBase):
    """Splunk HTTP Event Collector (HEC) connection settings.

    The collector URL is composed as `<endpoint>:<port>/services/collector/event`,
    so `endpoint` holds only scheme and host, e.g. `https://splunk.example.com`.
    The HEC token is taken either directly from `token` or read from the file
    referenced by `token_path`. Exactly one of them has to be provided.

    Useful resources:

      - [Set up and use HTTP Event Collector](https://docs.splunk.com/Documentation/Splunk/latest/Data/UsetheHTTPEventCollector)
      - [Format events for HEC](https://docs.splunk.com/Documentation/Splunk/latest/Data/FormateventsforHTTPEventCollector)
    """

    endpoint: str = Field(
        ...,
        title="Endpoint",
        description="Scheme and host of the collector, without port and path.",
    )

    port: PositiveInt = Field(
        constants.DEFAULT_SPLUNK_HEC_PORT,
        title="Port",
        description="TCP port of the HTTP Event Collector.",
    )

    token: Optional[SecretStr] = Field(
        None,
        title="HEC token",
        description="HTTP Event Collector token sent in the Authorization header.",
    )

    token_path: Optional[FilePath] = Field(
        None,
        title="HEC token path",
        description="Path to file containing the HTTP Event Collector token.",
    )

    @field_validator("endpoint")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Remove trailing slashes so the port can be appended directly."""
        return value.rstrip("/")

    @model_validator(mode="after")
    def check_token_source(self) -> Self:
        """Check that exactly one token source is configured."""
        if self.token is None and self.token_path is None:
            raise ValueError(
                "Invalid Splunk logger configuration: either token or token_path "
                "needs to be set"
            )
        if self.token is not None and self.token_path is not None:
            raise ValueError(
                "Invalid Splunk logger configuration: token and token_path "
                "can not be set together"
            )
        return self

    def resolve_token(self) -> str:
        """Return the HEC token from configuration or from the token file.

        Returns:
            str: Token value with surrounding whitespace removed.

        Raises:
            ValueError: If neither token source is set.
            OSError: If the token file can not be read.
        """
        if self.token is not None:
            return self.token.get_secret_value()
        if self.token_path is None:
            raise ValueError(
                "Invalid Splunk logger configuration: either token or token_path "
                "needs to be set"
            )
        with open(self.token_path, encoding="utf-8") as f:
            return f.read().strip()


class Configuration(ConfigurationBase):
    """Global configuration."""

    name: str = Field(
        ...,
        title="Application name",
        description="Name of the application that emits log events.",
    )

    splunk: SplunkLoggerConfiguration = Field(
        ...,
        title="Splunk logger configuration",
        description="This section contains connection settings of the Splunk "
        "HTTP Event Collector that receives log events.",
    )
