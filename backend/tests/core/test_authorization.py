"""Ownership Authorization — owner-or-admin rule.

Tests:
    - Owner may modify; another user may not; admin always may
    - Unowned resources are admin-only
    - ensure_can_modify raises PermissionDeniedError with a 403 status
"""

from uuid import uuid4

import pytest

from app.core.authorization import can_modify, ensure_can_modify
from app.core.domain_types import Actor, OwnedBy, Unowned, UserId
from app.core.errors import PermissionDeniedError

OWNER_ID = UserId(uuid4())
STRANGER_ID = UserId(uuid4())


def test_owner_can_modify():
    assert can_modify(OwnedBy(OWNER_ID), Actor(OWNER_ID)) is True


def test_other_user_cannot_modify():
    assert can_modify(OwnedBy(OWNER_ID), Actor(STRANGER_ID)) is False


def test_admin_can_modify_anything():
    admin = Actor(STRANGER_ID, is_admin=True)
    assert can_modify(OwnedBy(OWNER_ID), admin) is True
    assert can_modify(Unowned(), admin) is True


def test_unowned_is_admin_only():
    assert can_modify(Unowned(), Actor(OWNER_ID)) is False


def test_ensure_can_modify_passes_for_owner():
    ensure_can_modify(OwnedBy(OWNER_ID), Actor(OWNER_ID), "edit", "Item", 1)


def test_ensure_can_modify_raises_for_stranger():
    with pytest.raises(PermissionDeniedError) as exc_info:
        ensure_can_modify(OwnedBy(OWNER_ID), Actor(STRANGER_ID), "delete", "Inventory", 7)
    err = exc_info.value
    assert err.http_status == 403
    assert err.code == "PERMISSION_DENIED"
    assert "delete this inventory" in err.message
