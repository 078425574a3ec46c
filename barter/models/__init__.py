"""SQLAlchemy models."""

from barter.models.item import Item, ItemImage
from barter.models.trade import Trade
from barter.models.user import User

__all__ = [
    "User",
    "Item",
    "ItemImage",
    "Trade",
]
