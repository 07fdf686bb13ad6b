import logging

import pytest
from pydantic import ValidationError

from kstoolkit.config import Settings
from kstoolkit.logging_setup import configure_logging


def test_defaults(monkeypatch):
    for key in ("DEFAULT_NAMESPACE", "HANDLER_ERROR_POLICY", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    s = Settings(_env_file=None)

    assert s.DEFAULT_NAMESPACE == "default"
    assert s.HANDLER_ERROR_POLICY == "raise"
    assert s.LOG_LEVEL == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("DEFAULT_NAMESPACE", "app")
    monkeypatch.setenv("HANDLER_ERROR_POLICY", "log")

    s = Settings(_env_file=None)

    assert s.DEFAULT_NAMESPACE == "app"
    assert s.HANDLER_ERROR_POLICY == "log"


def test_invalid_policy_rejected(monkeypatch):
    monkeypatch.setenv("HANDLER_ERROR_POLICY", "ignore")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_configure_logging_sets_package_level():
    package_logger = logging.getLogger("kstoolkit")
    try:
        configure_logging("debug")
        assert package_logger.level == logging.DEBUG

        configure_logging(logging.WARNING)
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.setLevel(logging.NOTSET)
