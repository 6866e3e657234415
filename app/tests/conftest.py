import pytest

import core.config as core_config


@pytest.fixture
def i18n_settings(monkeypatch):
    """Replace the application i18n settings for the duration of a test.

    Returns a callable taking I18nSettings keyword arguments (by their
    environment alias) that installs the resulting settings.
    """

    def _install(**kwargs):
        settings = core_config.I18nSettings(**kwargs)
        monkeypatch.setattr(core_config.settings, "i18n", settings)
        return settings

    return _install
