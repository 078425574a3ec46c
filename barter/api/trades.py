"""Trade negotiation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from barter.api.dependencies import get_current_user, get_trade_service, http_error
from barter.exceptions import BarterError
from barter.models.user import User
from barter.schemas.trade import (
    PendingTradeResponse,
    TradeCreate,
    TradeResponse,
    TradeStatusUpdate,
)
from barter.services.trade_service import TradeService

router = APIRouter(prefix="/api/v1/trades", tags=["trades"])


@router.post("", response_model=TradeResponse, status_code=status.HTTP_201_CREATED)
def create_trade(
    trade_data: TradeCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    trade_service: Annotated[TradeService, Depends(get_trade_service)],
):
    """Propose a trade. The current user is the initiator."""
    try:
        return trade_service.create_trade(
            initiator_id=current_user.id,
            receiver_id=trade_data.receiver_id,
            offered_item_ids=trade_data.offered_item_ids,
            sought_item_ids=trade_data.sought_item_ids,
        )
    except BarterError as e:
        raise http_error(e) from e


@router.get("/pending", response_model=list[PendingTradeResponse])
def get_my_pending_trades(
    current_user: Annotated[User, Depends(get_current_user)],
    trade_service: Annotated[TradeService, Depends(get_trade_service)],
):
    """Trades awaiting the current user's response."""
    return trade_service.list_pending_trades(current_user.id)


@router.get("/{trade_id}", response_model=TradeResponse)
def get_trade(
    trade_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    trade_service: Annotated[TradeService, Depends(get_trade_service)],
):
    """Get a specific trade."""
    trade = trade_service.get_trade(trade_id)
    if trade is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trade not found.")
    return trade


@router.patch("/{trade_id}/status", response_model=TradeResponse)
def update_trade_status(
    trade_id: str,
    status_data: TradeStatusUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    trade_service: Annotated[TradeService, Depends(get_trade_service)],
):
    """Accept, reject or counter a trade. Only its receiver may respond."""
    try:
        return trade_service.update_trade_status(trade_id, current_user.id, status_data.status)
    except BarterError as e:
        raise http_error(e) from e
