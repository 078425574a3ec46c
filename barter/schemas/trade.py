"""Trade schemas."""

from pydantic import BaseModel, ConfigDict, Field

from barter.models.enums import TradeStatus
from barter.schemas.item import ItemResponse


class TradeCreate(BaseModel):
    """Propose a trade to another user. The caller is the initiator."""

    receiver_id: str = Field(..., max_length=36)
    offered_item_ids: list[str] = Field(default_factory=list)
    sought_item_ids: list[str] = Field(default_factory=list)


class TradeStatusUpdate(BaseModel):
    """Receiver's response to a trade: Accepted, Rejected or Countered."""

    status: str = Field(..., max_length=20)


class TradeResponse(BaseModel):
    """Stored trade record with raw item ids."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    initiator_id: str
    receiver_id: str
    offered_item_ids: list[str]
    sought_item_ids: list[str]
    status: TradeStatus


class PendingTradeResponse(BaseModel):
    """Trade with item ids resolved to current item snapshots."""

    id: str
    initiator_id: str
    receiver_id: str
    status: str
    offered_items: list[ItemResponse]
    sought_items: list[ItemResponse]
