"""Domain Types — verifies identity wrappers, ownership lifting and enum values."""

from uuid import uuid4

from app.core.domain_types import (
    Actor, ItemSortKey, OwnedBy, StockFilter, Unowned, UserId, owner_of,
)


def test_user_id_wraps_uuid():
    uid = uuid4()
    assert UserId(uid) == uid


def test_owner_of_none_is_unowned():
    assert owner_of(None) == Unowned()


def test_owner_of_uuid_is_owned_by():
    uid = uuid4()
    assert owner_of(uid) == OwnedBy(UserId(uid))


def test_actor_defaults_to_non_admin():
    assert Actor(user_id=UserId(uuid4())).is_admin is False


def test_stock_filter_values_match_query_strings():
    assert {s.value for s in StockFilter} == {"low", "out", "good"}


def test_sort_keys_serialize_to_string():
    assert ItemSortKey.PRICE == "price"
    assert {k.value for k in ItemSortKey} == {"quantity", "price", "date", "name"}
