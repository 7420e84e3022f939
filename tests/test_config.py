import logging

from console_forms import configure_logging
from console_forms.config import Settings


def test_defaults():
    config = Settings(_env_file=None)
    assert config.DEFAULT_MAX_ATTEMPTS == 3
    assert config.DEFAULT_REQUIRED is True
    assert config.PATH_DELIMITER == "."
    assert config.SAVE_CONFIRM_MESSAGE == "Save results?"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CONSOLE_FORMS_DEFAULT_MAX_ATTEMPTS", "5")
    monkeypatch.setenv("CONSOLE_FORMS_PATH_DELIMITER", "/")

    config = Settings(_env_file=None)

    assert config.DEFAULT_MAX_ATTEMPTS == 5
    assert config.PATH_DELIMITER == "/"


def test_configure_logging_only_touches_package_logger():
    root_level = logging.getLogger().level

    logger = configure_logging("debug")

    assert logger.name == "console_forms"
    assert logger.level == logging.DEBUG
    assert logging.getLogger().level == root_level
    configure_logging("warning")
