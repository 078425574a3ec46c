"""Pure projections from stored records to display-ready responses."""

from collections.abc import Iterable, Mapping

from barter.models.item import Item
from barter.models.trade import Trade
from barter.schemas.item import ItemResponse
from barter.schemas.trade import PendingTradeResponse


def shape_item(item: Item) -> ItemResponse:
    """Snapshot of an item with its image keys in display order."""
    return ItemResponse(
        id=item.id,
        owner_id=item.owner_id,
        name=item.name,
        description=item.description,
        category=item.category.value,
        image_keys=item.image_keys,
    )


def resolve_items(item_ids: Iterable[str], lookup: Mapping[str, Item]) -> list[ItemResponse]:
    """Resolve ids in order, silently skipping ones with no live item."""
    resolved = (lookup.get(item_id) for item_id in item_ids)
    return [shape_item(item) for item in resolved if item is not None]


def shape_trade(trade: Trade, items: Iterable[Item]) -> PendingTradeResponse:
    """Trade view with offered and sought ids resolved against the given items."""
    lookup = {item.id: item for item in items}
    return PendingTradeResponse(
        id=trade.id,
        initiator_id=trade.initiator_id,
        receiver_id=trade.receiver_id,
        status=trade.status.value,
        offered_items=resolve_items(trade.offered_item_ids or [], lookup),
        sought_items=resolve_items(trade.sought_item_ids or [], lookup),
    )
