"""Item API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from barter.api.dependencies import get_current_user, http_error
from barter.database import get_db
from barter.exceptions import BarterError
from barter.models.user import User
from barter.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from barter.services import item_registry
from barter.services.shaping import shape_item

router = APIRouter(prefix="/api/v1/items", tags=["items"])


@router.get("", response_model=list[ItemResponse])
def get_items(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Browse all listed items."""
    return [shape_item(item) for item in item_registry.list_items(db)]


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
def create_item(
    item_data: ItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List a new item owned by the current user."""
    try:
        item = item_registry.create_item(
            db,
            owner_id=current_user.id,
            name=item_data.name,
            description=item_data.description,
            category=item_data.category,
            image_keys=item_data.image_keys,
        )
    except BarterError as e:
        raise http_error(e) from e
    return shape_item(item)


@router.get("/{item_id}", response_model=ItemResponse)
def get_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a specific item."""
    item = item_registry.get_item(db, item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found.")
    return shape_item(item)


@router.patch("/{item_id}", response_model=ItemResponse)
def update_item(
    item_id: str,
    item_data: ItemUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update an item (owner only)."""
    try:
        item = item_registry.update_item(
            db,
            item_id,
            name=item_data.name,
            description=item_data.description,
            category=item_data.category,
            image_keys=item_data.image_keys,
            owner_id=current_user.id,
        )
    except BarterError as e:
        raise http_error(e) from e
    return shape_item(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    item_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete an item (owner only)."""
    try:
        item_registry.delete_item(db, item_id, current_user.id)
    except BarterError as e:
        raise http_error(e) from e
