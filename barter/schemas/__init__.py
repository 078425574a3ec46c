"""Pydantic schemas for API requests and responses."""

from barter.schemas.auth import (
    AuthResponse,
    OAuthLogin,
    Token,
    UserLogin,
    UserRegister,
    UserResponse,
)
from barter.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from barter.schemas.trade import PendingTradeResponse, TradeCreate, TradeResponse, TradeStatusUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "OAuthLogin",
    "Token",
    "AuthResponse",
    "UserResponse",
    "ItemCreate",
    "ItemUpdate",
    "ItemResponse",
    "TradeCreate",
    "TradeStatusUpdate",
    "TradeResponse",
    "PendingTradeResponse",
]
