"""Structured Logging — JSONFormatter output shape."""

import json
import logging
from uuid import uuid4

from app.infrastructure.observability import JSONFormatter


def _record(**extra):
    record = logging.LogRecord(
        "app.services.item_service", logging.INFO, __file__, 1,
        "Item created", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_base_fields_present():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "app.services.item_service"
    assert log["message"] == "Item created"
    assert "timestamp" in log


def test_extra_fields_surface_and_uuids_stringify():
    uid = uuid4()
    log = json.loads(JSONFormatter().format(_record(user_id=uid, item_id=7)))
    assert log["user_id"] == str(uid)
    assert log["item_id"] == 7


def test_absent_extras_are_omitted():
    log = json.loads(JSONFormatter().format(_record()))
    assert "inventory_id" not in log
