"""Inventory Routes — listing/search, details, create, edit and cascade delete.

Invariants:
    - Listing and details are public; mutations need a bearer token
    - Only the creator or an admin may edit/delete (403 otherwise)
    - Deleting an inventory removes every item in it

Design Decisions:
    - Assertions on DB state use a fresh session so the fixture session's
      identity map cannot mask what the request committed
"""

from decimal import Decimal

from sqlalchemy import func, select

from app.models.inventory import Inventory
from app.models.item import Item
from tests.services.auth_helpers import auth_headers


async def test_list_is_public_and_sorted_by_name(client, office_supplies, electronics):
    res = await client.get("/api/v1/inventories")
    assert res.status_code == 200
    assert [i["name"] for i in res.json()] == ["Electronics", "Office Supplies"]


async def test_list_includes_totals(client, office_supplies):
    res = await client.get("/api/v1/inventories")
    summary = res.json()[0]
    assert summary["total_items"] == 3
    assert summary["total_quantity"] == 55
    # 50 x 8.99 + 5 x 24.99 + 0 x 6.49
    assert Decimal(summary["total_value"]) == Decimal("574.45")


async def test_search_matches_name_or_description_case_insensitively(
    client, office_supplies, electronics,
):
    res = await client.get("/api/v1/inventories", params={"search": "OFFICE"})
    assert [i["name"] for i in res.json()] == ["Office Supplies"]

    res = await client.get("/api/v1/inventories", params={"search": "computer"})
    assert [i["name"] for i in res.json()] == ["Electronics"]


async def test_search_without_match_returns_empty_list(client, office_supplies):
    res = await client.get("/api/v1/inventories", params={"search": "zzz"})
    assert res.status_code == 200
    assert res.json() == []


async def test_details_include_items(client, office_supplies):
    res = await client.get(f"/api/v1/inventories/{office_supplies.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Office Supplies"
    assert {i["display_code"] for i in body["items"]} == {"ITEM001", "ITEM002", "ITEM003"}


async def test_details_of_missing_inventory_is_404(client):
    res = await client.get("/api/v1/inventories/9999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_create_requires_authentication(client):
    res = await client.post("/api/v1/inventories", json={"name": "Garage"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_create_records_creator(client, owner):
    res = await client.post(
        "/api/v1/inventories",
        json={"name": "  Garage  ", "description": "Tools"},
        headers=auth_headers(owner),
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Inventory 'Garage' created successfully."
    assert body["inventory"]["name"] == "Garage"
    assert body["inventory"]["created_by"] == str(owner.id)
    assert body["inventory"]["total_items"] == 0
    assert Decimal(body["inventory"]["total_value"]) == Decimal("0")


async def test_create_rejects_blank_name(client, owner):
    res = await client.post(
        "/api/v1/inventories", json={"name": "   "}, headers=auth_headers(owner),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_owner_can_edit(client, owner, office_supplies):
    res = await client.put(
        f"/api/v1/inventories/{office_supplies.id}",
        json={"name": "Stationery Cupboard", "description": ""},
        headers=auth_headers(owner),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Inventory 'Stationery Cupboard' updated successfully."
    assert body["inventory"]["description"] is None
    assert body["inventory"]["created_by"] == str(owner.id)


async def test_other_user_cannot_edit(client, other_user, office_supplies):
    res = await client.put(
        f"/api/v1/inventories/{office_supplies.id}",
        json={"name": "Mine now"},
        headers=auth_headers(other_user),
    )
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "PERMISSION_DENIED"


async def test_admin_can_edit_any_inventory(client, admin_user, office_supplies):
    res = await client.put(
        f"/api/v1/inventories/{office_supplies.id}",
        json={"name": "Audited Supplies"},
        headers=auth_headers(admin_user),
    )
    assert res.status_code == 200


async def test_edit_missing_inventory_is_404(client, owner):
    res = await client.put(
        "/api/v1/inventories/9999", json={"name": "Ghost"}, headers=auth_headers(owner),
    )
    assert res.status_code == 404


async def test_delete_cascades_to_items(
    client, owner, office_supplies, electronics, test_session_factory,
):
    res = await client.delete(
        f"/api/v1/inventories/{office_supplies.id}", headers=auth_headers(owner),
    )
    assert res.status_code == 200
    assert res.json() == {
        "message": "Inventory 'Office Supplies' and all its items deleted successfully.",
        "deleted": True,
    }

    async with test_session_factory() as db:
        assert await db.get(Inventory, office_supplies.id) is None
        remaining = await db.scalar(
            select(func.count()).select_from(Item)
            .where(Item.inventory_id == office_supplies.id),
        )
        assert remaining == 0
        others = await db.scalar(select(func.count()).select_from(Item))
        assert others == 2


async def test_other_user_cannot_delete(client, other_user, office_supplies):
    res = await client.delete(
        f"/api/v1/inventories/{office_supplies.id}", headers=auth_headers(other_user),
    )
    assert res.status_code == 403


async def test_unowned_inventory_is_admin_only(client, make_inventory, owner, admin_user):
    seeded = await make_inventory("Warehouse Storage")
    res = await client.delete(
        f"/api/v1/inventories/{seeded.id}", headers=auth_headers(owner),
    )
    assert res.status_code == 403

    res = await client.delete(
        f"/api/v1/inventories/{seeded.id}", headers=auth_headers(admin_user),
    )
    assert res.status_code == 200


async def test_edit_keeps_creator_and_creation_time(
    client, admin_user, owner, office_supplies,
):
    before = (await client.get(f"/api/v1/inventories/{office_supplies.id}")).json()

    res = await client.put(
        f"/api/v1/inventories/{office_supplies.id}",
        json={
            "name": "Audited Supplies",
            "created_by": str(admin_user.id),
            "created_at": "2001-01-01T00:00:00Z",
        },
        headers=auth_headers(admin_user),
    )
    assert res.status_code == 200
    inventory = res.json()["inventory"]
    assert inventory["name"] == "Audited Supplies"
    assert inventory["created_by"] == str(owner.id)
    assert inventory["created_at"] == before["created_at"]
