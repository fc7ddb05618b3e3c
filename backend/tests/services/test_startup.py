"""Startup Checks — placeholder JWT secret is flagged in the logs."""

import logging

from app.config import DEFAULT_JWT_SECRET, Settings
from app.main import warn_on_default_secret


def test_default_secret_logs_warning(caplog):
    settings = Settings(jwt_secret=DEFAULT_JWT_SECRET)
    with caplog.at_level(logging.WARNING, logger="app.main"):
        assert warn_on_default_secret(settings) is True
    assert "JWT_SECRET is not set" in caplog.text


def test_configured_secret_is_silent(caplog):
    settings = Settings(jwt_secret="a-real-deployment-secret")
    with caplog.at_level(logging.WARNING, logger="app.main"):
        assert warn_on_default_secret(settings) is False
    assert caplog.text == ""
