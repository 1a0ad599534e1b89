"""Configuration loader."""

from typing import Any, Optional

import yaml

from log import get_logger
from models.config import Configuration, SplunkLoggerConfiguration
from splunk_logger.emitter import SplunkLogger, from_configuration

logger = get_logger(__name__)


class LogicError(Exception):
    """Error in application logic."""


class AppConfig:
    """Singleton class to load and store the configuration."""

    _instance = None

    def __new__(cls, *args: Any, **kwargs: Any) -> "AppConfig":
        """Create a new instance of the class."""
        if not isinstance(cls._instance, cls):
            cls._instance = super().__new__(cls, *args, **kwargs)
        return cls._instance

    def __init__(self) -> None:
        """Initialize the class instance.

        Sets placeholders for the loaded configuration and the lazily-created
        Splunk logger.
        """
        self._configuration: Optional[Configuration] = None
        self._splunk_logger: Optional[SplunkLogger] = None

    def load_configuration(self, filename: str) -> None:
        """Load configuration from YAML file.

        Parameters:
            filename (str): Path to the YAML configuration file to load.
        """
        with open(filename, encoding="utf-8") as fin:
            config_dict = yaml.safe_load(fin)
        self.init_from_dict(config_dict)
        logger.info(
            "Loaded configuration of %s from %s", self.configuration.name, filename
        )

    def init_from_dict(self, config_dict: dict[Any, Any]) -> None:
        """Initialize configuration from a dictionary.

        Parameters:
            config_dict (dict[Any, Any]): Mapping of configuration values
            (typically parsed from YAML) to construct a new Configuration
            instance. Any Splunk logger built from the previous configuration
            is dropped and will be rebuilt on next access.
        """
        # clear cached values when configuration changes
        self._splunk_logger = None
        self._configuration = Configuration(**config_dict)

    @property
    def configuration(self) -> Configuration:
        """Return the whole configuration.

        Returns:
            Configuration: The loaded configuration object.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration

    @property
    def splunk_logger_configuration(self) -> SplunkLoggerConfiguration:
        """Return Splunk logger configuration.

        Raises:
            LogicError: If the configuration has not been loaded.
        """
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        return self._configuration.splunk

    @property
    def splunk_logger(self) -> SplunkLogger:
        """Return the Splunk logger built from the loaded configuration.

        The logger is created on first access and shared afterwards; it holds
        no mutable state, so sharing it between threads is safe.

        Returns:
            SplunkLogger: The configured logger instance.

        Raises:
            LogicError: If the configuration has not been loaded.
            OSError: If the token file can not be read.
        """
        if self._configuration is None:
            raise LogicError("logic error: configuration is not loaded")
        if self._splunk_logger is None:
            self._splunk_logger = from_configuration(self._configuration.splunk)
            logger.debug("Splunk logger sends events to %s", self._splunk_logger.url)
        return self._splunk_logger


configuration: AppConfig = AppConfig()
