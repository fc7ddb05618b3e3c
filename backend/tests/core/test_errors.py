"""Error Hierarchy — codes, statuses and the REST error envelope."""

from app.core.errors import (
    AdminRequiredError, AuthenticationError, ConcurrencyError, DatabaseError,
    DuplicateEmailError, ErrorCategory, ResourceNotFoundError, SelfRoleChangeError,
)


def test_not_found_envelope_carries_resource_context():
    body = ResourceNotFoundError("Inventory", 42).to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"]["resource_type"] == "Inventory"
    assert body["context"]["resource_id"] == "42"


def test_status_codes():
    assert AuthenticationError().http_status == 401
    assert AdminRequiredError().http_status == 403
    assert SelfRoleChangeError().http_status == 400
    assert DuplicateEmailError("a@b.com").http_status == 409
    assert ConcurrencyError("stale").http_status == 409
    assert DatabaseError("down", "connect").http_status == 503


def test_self_role_change_message():
    assert SelfRoleChangeError().message == "You cannot change your own admin status."
