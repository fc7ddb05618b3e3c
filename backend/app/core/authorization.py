"""Ownership Authorization — the owner-or-admin rule for mutating resources.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - can_modify is True iff the actor created the resource OR the actor is admin
    - Unowned resources are modifiable by admins only
    - Read paths never consult this module (listing/details are public)

Design Decisions:
    - Actor passed explicitly: no framework-managed current-user context
    - Denial is a PermissionDeniedError (403), never disguised as not-found
"""

from app.core.domain_types import Actor, Owner, OwnedBy
from app.core.errors import PermissionDeniedError


def can_modify(owner: Owner, actor: Actor) -> bool:
    """Rule: owner-or-admin may edit or delete."""
    if actor.is_admin:
        return True
    return isinstance(owner, OwnedBy) and owner.user_id == actor.user_id


def ensure_can_modify(
    owner: Owner, actor: Actor, action: str, resource_type: str, resource_id: object,
) -> None:
    """Raise PermissionDeniedError when can_modify fails."""
    if not can_modify(owner, actor):
        raise PermissionDeniedError(action, resource_type, resource_id)
