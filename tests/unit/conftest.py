"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from pytest_mock import MockerFixture, MockType

from configuration import AppConfig
from splunk_logger import SplunkLogger


@pytest.fixture(name="mock_response")
def mock_response_fixture(mocker: MockerFixture) -> MockType:
    """Create a mock HTTP response accepted by the collector."""
    response = mocker.MagicMock()
    response.status_code = 200
    response.text = ""
    return response


@pytest.fixture(name="mock_post")
def mock_post_fixture(mocker: MockerFixture, mock_response: MockType) -> MockType:
    """Patch requests.post used by the Splunk logger.

    The returned mock behaves as a context manager yielding `mock_response`.
    """
    mock_post = mocker.patch("splunk_logger.emitter.requests.post")
    mock_post.return_value.__enter__.return_value = mock_response
    return mock_post


@pytest.fixture(name="diagnostic_output")
def diagnostic_output_fixture() -> io.StringIO:
    """Create an in-memory diagnostic sink."""
    return io.StringIO()


@pytest.fixture(name="splunk_logger")
def splunk_logger_fixture(diagnostic_output: io.StringIO) -> SplunkLogger:
    """Create a Splunk logger writing diagnostics into memory."""
    return SplunkLogger(
        "test-hec-token",
        "https://splunk.example.com",
        8088,
        diagnostic_output=diagnostic_output,
    )


@pytest.fixture(name="token_file")
def token_file_fixture(tmp_path: Path) -> Path:
    """Create a temporary token file for testing."""
    token_file = tmp_path / "token"
    token_file.write_text("  file-hec-token\n")
    return token_file


@pytest.fixture(name="minimal_config")
def minimal_config_fixture() -> AppConfig:
    """Create a minimal AppConfig with only required fields.

    Returns:
        AppConfig: A minimal AppConfig instance with required fields only.
    """
    cfg = AppConfig()
    cfg.init_from_dict(
        {
            "name": "test",
            "splunk": {
                "endpoint": "https://splunk.example.com",
                "token": "test-hec-token",
            },
        }
    )
    return cfg
