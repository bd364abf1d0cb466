"""
Tests for the command line interface
"""

import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from catstronomy import __version__
from catstronomy.cli import cli
from catstronomy.config import settings


@pytest.fixture
def preserve_settings(monkeypatch):
    """serve updates the process settings; put them back afterwards."""
    for name in ("debug", "log_level", "tracks_api_url"):
        monkeypatch.setattr(settings, name, getattr(settings, name))


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_print_schema():
    result = CliRunner().invoke(cli, ["print-schema"])

    assert result.exit_code == 0
    assert "tracksForHome: [Track!]!" in result.output
    assert "author: Author" in result.output
    assert "type Module" in result.output


def test_serve_runs_uvicorn(preserve_settings):
    with patch("catstronomy.cli.uvicorn.run") as mock_run, patch(
        "catstronomy.cli.configure_logging"
    ):
        result = CliRunner().invoke(cli, ["serve", "--port", "4100"])

    assert result.exit_code == 0
    mock_run.assert_called_once()
    assert mock_run.call_args.args == ("catstronomy.api.app:app",)
    assert mock_run.call_args.kwargs["port"] == 4100


def test_serve_log_level_reaches_app_and_uvicorn(preserve_settings):
    with patch("catstronomy.cli.uvicorn.run") as mock_run, patch(
        "catstronomy.cli.configure_logging"
    ) as mock_configure:
        result = CliRunner().invoke(cli, ["serve", "--log-level", "WARNING"])

    assert result.exit_code == 0
    mock_configure.assert_called_once_with(debug=False, level="warning")
    assert mock_run.call_args.kwargs["log_level"] == "warning"
    assert settings.log_level == "warning"
    assert settings.debug is False
    assert os.environ["CATSTRONOMY_LOG_LEVEL"] == "warning"
    assert os.environ["CATSTRONOMY_DEBUG"] == "false"


def test_serve_tracks_api_url(preserve_settings):
    with patch("catstronomy.cli.uvicorn.run"), patch("catstronomy.cli.configure_logging"):
        result = CliRunner().invoke(
            cli, ["serve", "--tracks-api-url", "https://catstronomy.test/"]
        )

    assert result.exit_code == 0
    assert settings.tracks_api_url == "https://catstronomy.test/"
    assert os.environ["CATSTRONOMY_TRACKS_API_URL"] == "https://catstronomy.test/"
