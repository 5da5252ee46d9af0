"""
Unit tests for environment-driven settings.
"""

import importlib

import pytest

from mock_users_api.app.core import config


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload the config module under a patched environment."""

    def _reload(**env):
        for key, value in env.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)
        return importlib.reload(config).settings

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestSettings:
    """Tests for Settings."""

    def test_port_defaults_to_3000(self, reload_settings):
        settings = reload_settings(PORT=None)
        assert settings.port == 3000

    def test_port_from_environment(self, reload_settings):
        settings = reload_settings(PORT="8081")
        assert settings.port == 8081

    def test_debug_flag(self, reload_settings):
        assert reload_settings(DEBUG="yes").debug is True
        assert reload_settings(DEBUG=None).debug is False

    def test_log_file_unset(self, reload_settings):
        assert reload_settings(LOG_FILE="").log_file is None
