"""Shared fixtures for the localekit test suite."""

import pytest

from localekit.configuration import I18nSettings, Settings
from localekit.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Configure logging once for the run; output is suppressed under pytest."""
    configure_logging()


@pytest.fixture
def make_settings(tmp_path):
    """Build a Settings instance pointing at a temporary language path."""

    def _make(**i18n_overrides):
        values = {"I18N_LANGUAGE_PATH": str(tmp_path / "languages")}
        values.update(i18n_overrides)
        return Settings(i18n=I18nSettings(**values))

    return _make
