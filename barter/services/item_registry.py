"""Item registry: listing, browsing and owner-only mutation of items."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session, selectinload

from barter.exceptions import (
    ImageKeyConflictError,
    InvalidCategoryError,
    ItemForbiddenError,
    ItemNotFoundError,
)
from barter.models.enums import ItemCategory
from barter.models.item import Item, ItemImage

logger = logging.getLogger(__name__)


def sanitize_image_keys(keys: Iterable[str | None]) -> list[str]:
    """Drop blank keys, trim, and de-duplicate keeping first occurrence order."""
    seen: set[str] = set()
    result = []
    for key in keys:
        if key is None or not key.strip():
            continue
        key = key.strip()
        if key in seen:
            continue
        seen.add(key)
        result.append(key)
    return result


def parse_category(value: str | None) -> ItemCategory:
    """Parse a category display name, case-insensitively."""
    category = ItemCategory.parse(value)
    if category is None:
        raise InvalidCategoryError("Invalid category.")
    return category


def _build_images(keys: Iterable[str | None]) -> list[ItemImage]:
    return [
        ItemImage(key=key, position=position)
        for position, key in enumerate(sanitize_image_keys(keys))
    ]


def _check_image_keys_free(db: Session, keys: list[str], item_id: str | None = None) -> None:
    """Raise if any key is already attached to an item other than item_id."""
    if not keys:
        return
    query = db.query(ItemImage.key).filter(ItemImage.key.in_(keys))
    if item_id is not None:
        query = query.filter(ItemImage.item_id != item_id)
    taken = {key for (key,) in query.all()}
    for key in keys:
        if key in taken:
            raise ImageKeyConflictError(key)


def _item_query(db: Session):
    return db.query(Item).options(selectinload(Item.images))


def get_item(db: Session, item_id: str) -> Item | None:
    """Get an item with its images, or None."""
    return _item_query(db).filter(Item.id == item_id).first()


def get_items_by_ids(db: Session, item_ids: Iterable[str]) -> list[Item]:
    """Bulk fetch every existing item in the id set. Unknown ids are ignored."""
    ids = set(item_ids)
    if not ids:
        return []
    return _item_query(db).filter(Item.id.in_(ids)).all()


def get_items_by_owner(db: Session, owner_id: str) -> list[Item]:
    """All items currently owned by a user."""
    return _item_query(db).filter(Item.owner_id == owner_id).all()


def list_items(db: Session) -> list[Item]:
    """All listed items."""
    return _item_query(db).all()


def create_item(
    db: Session,
    owner_id: str,
    name: str,
    description: str | None,
    category: str,
    image_keys: list[str] | None = None,
) -> Item:
    """List a new item for its owner."""
    category_enum = parse_category(category)
    images = _build_images(image_keys or [])
    _check_image_keys_free(db, [image.key for image in images])

    item = Item(
        owner_id=owner_id,
        name=name,
        description=description,
        category=category_enum,
        images=images,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_item(
    db: Session,
    item_id: str,
    name: str,
    description: str | None,
    category: str,
    image_keys: list[str] | None = None,
    owner_id: str | None = None,
) -> Item:
    """Overwrite an item's fields.

    When image_keys is given the existing images are replaced, not merged.
    When owner_id is given, only that user may update the item.
    """
    category_enum = parse_category(category)

    item = get_item(db, item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    if owner_id is not None and item.owner_id != owner_id:
        raise ItemForbiddenError()

    images = None
    if image_keys is not None:
        images = _build_images(image_keys)
        _check_image_keys_free(db, [image.key for image in images], item_id=item.id)

    logger.info(
        f"PATCH item[{item.id}]: {item.name!r} -> {name!r}, "
        f"{item.description!r} -> {description!r}, {item.category.value} -> {category_enum.value}"
    )
    item.name = name
    item.description = description
    item.category = category_enum

    if images is not None:
        # Flush the orphan deletes first so a re-used key does not collide
        item.images.clear()
        db.flush()
        item.images.extend(images)

    db.commit()
    db.refresh(item)
    return item


def delete_item(db: Session, item_id: str, owner_id: str) -> None:
    """Delete an item and its image references (owner only).

    Trades that reference the item keep the stale id.
    """
    item = get_item(db, item_id)
    if item is None:
        raise ItemNotFoundError(item_id)
    if item.owner_id != owner_id:
        raise ItemForbiddenError()

    db.delete(item)
    db.commit()
    logger.info(f"Deleted item {item_id} owned by {owner_id}")
