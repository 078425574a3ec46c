"""Tests for display projections."""

from barter.models.enums import ItemCategory, TradeStatus
from barter.models.item import Item, ItemImage
from barter.models.trade import Trade
from barter.services.shaping import resolve_items, shape_item, shape_trade


def make_item(item_id: str, name: str, keys: list[str] | None = None) -> Item:
    return Item(
        id=item_id,
        owner_id="owner",
        name=name,
        description=None,
        category=ItemCategory.BOOKS,
        images=[ItemImage(key=key, position=i) for i, key in enumerate(keys or [])],
    )


def test_shape_item():
    """Item snapshot carries the category display name and ordered keys."""
    shaped = shape_item(make_item("i1", "Atlas", ["b", "a"]))
    assert shaped.model_dump() == {
        "id": "i1",
        "owner_id": "owner",
        "name": "Atlas",
        "description": None,
        "category": "Books",
        "image_keys": ["b", "a"],
    }


def test_resolve_items_skips_unknown_ids():
    """Unknown ids are skipped and the rest keep their order."""
    lookup = {"a": make_item("a", "A"), "c": make_item("c", "C")}
    assert [item.id for item in resolve_items(["c", "b", "a"], lookup)] == ["c", "a"]


def test_shape_trade():
    """Trade view resolves both sides against the supplied items."""
    trade = Trade(
        id="t1",
        initiator_id="u1",
        receiver_id="u2",
        offered_item_ids=["a", "gone"],
        sought_item_ids=["c"],
        status=TradeStatus.COUNTERED,
    )
    items = [make_item("a", "A"), make_item("c", "C"), make_item("z", "Unrelated")]

    shaped = shape_trade(trade, items)

    assert shaped.id == "t1"
    assert shaped.initiator_id == "u1"
    assert shaped.receiver_id == "u2"
    assert shaped.status == "Countered"
    assert [item.id for item in shaped.offered_items] == ["a"]
    assert [item.id for item in shaped.sought_items] == ["c"]


def test_shape_trade_with_no_items():
    trade = Trade(
        id="t1",
        initiator_id="u1",
        receiver_id="u2",
        offered_item_ids=["a"],
        sought_item_ids=[],
        status=TradeStatus.REQUESTED,
    )
    shaped = shape_trade(trade, [])
    assert shaped.offered_items == []
    assert shaped.sought_items == []
