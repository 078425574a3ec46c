"""Debug API endpoints for development and troubleshooting.

Only registered when ``enable_debug_routes`` is set. No authentication.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, EmailStr
from sqlalchemy.orm import Session

from barter.database import get_db
from barter.models.item import Item, ItemImage
from barter.models.trade import Trade
from barter.models.user import User
from barter.schemas.auth import Token, UserResponse
from barter.schemas.item import ItemResponse
from barter.schemas.trade import TradeResponse
from barter.services.auth import create_access_token, get_user_by_email
from barter.services.item_registry import list_items
from barter.services.shaping import shape_item

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/debug", tags=["debug"])


class DeleteUserRequest(BaseModel):
    """Remove the account registered under this email."""

    email: EmailStr


class WipeResponse(BaseModel):
    """Row counts removed by a wipe."""

    trades: int
    images: int
    items: int
    users: int


@router.get("/users", response_model=list[UserResponse])
def dump_users(db: Annotated[Session, Depends(get_db)]):
    """Dump every user."""
    return db.query(User).all()


@router.get("/items", response_model=list[ItemResponse])
def dump_items(db: Annotated[Session, Depends(get_db)]):
    """Dump every item."""
    return [shape_item(item) for item in list_items(db)]


@router.get("/trades", response_model=list[TradeResponse])
def dump_trades(db: Annotated[Session, Depends(get_db)]):
    """Dump every trade."""
    return db.query(Trade).all()


@router.delete("/users")
def delete_user(
    request: DeleteUserRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a user by email.

    Their items go the way of the items.owner_id foreign key; trades are kept.
    """
    user = get_user_by_email(db, request.email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found.")
    db.delete(user)
    db.commit()
    logger.info(f"Debug: removed user {request.email}")
    return {"message": "Account removed."}


@router.delete("/trades/{trade_id}")
def delete_trade(
    trade_id: str,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a trade by id."""
    trade = db.query(Trade).filter(Trade.id == trade_id).first()
    if trade is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trade not found.")
    db.delete(trade)
    db.commit()
    logger.info(f"Debug: removed trade {trade_id}")
    return {"message": "Trade removed."}


@router.delete("/wipe", response_model=WipeResponse)
def wipe_all(db: Annotated[Session, Depends(get_db)]):
    """Delete every trade, image reference, item and user."""
    counts = WipeResponse(
        trades=db.query(Trade).delete(),
        images=db.query(ItemImage).delete(),
        items=db.query(Item).delete(),
        users=db.query(User).delete(),
    )
    db.commit()
    logger.warning(f"Debug: wiped all data {counts.model_dump()}")
    return counts


@router.get("/jwt", response_model=Token)
def sign_jwt(user_id: str = Query(..., max_length=36)):
    """Issue a token for any user id."""
    return Token(access_token=create_access_token(user_id))
