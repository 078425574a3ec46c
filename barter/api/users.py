"""User directory API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from barter.api.dependencies import get_current_user, get_trade_service
from barter.database import get_db
from barter.models.user import User
from barter.schemas.auth import UserResponse
from barter.schemas.item import ItemResponse
from barter.schemas.trade import PendingTradeResponse, TradeResponse
from barter.services.auth import get_user_by_email, get_user_by_id
from barter.services.item_registry import get_items_by_owner
from barter.services.shaping import shape_item
from barter.services.trade_service import TradeService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("/by-email/{email}", response_model=UserResponse)
def get_user_with_email(
    email: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Look up a user by exact email."""
    user = get_user_by_email(db, email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return user


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Look up a user by id."""
    user = get_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    return user


@router.get("/{user_id}/items", response_model=list[ItemResponse])
def get_user_items(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Items currently owned by a user."""
    return [shape_item(item) for item in get_items_by_owner(db, user_id)]


@router.get("/{user_id}/trades/received", response_model=list[TradeResponse])
def get_received_trades(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    trade_service: Annotated[TradeService, Depends(get_trade_service)],
):
    """Trades proposed to a user, in any status."""
    return trade_service.list_trades_by_receiver(user_id)


@router.get("/{user_id}/trades/sent", response_model=list[TradeResponse])
def get_sent_trades(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    trade_service: Annotated[TradeService, Depends(get_trade_service)],
):
    """Trades a user proposed, in any status."""
    return trade_service.list_trades_by_initiator(user_id)


@router.get("/{user_id}/trades/pending", response_model=list[PendingTradeResponse])
def get_pending_trades(
    user_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    trade_service: Annotated[TradeService, Depends(get_trade_service)],
):
    """Trades awaiting a user's response, with items resolved."""
    return trade_service.list_pending_trades(user_id)
