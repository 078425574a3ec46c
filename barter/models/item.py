"""Item model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from barter.database import Base
from barter.models.enums import ItemCategory
from barter.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Item(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A tradeable good or service listed by its owner."""

    __tablename__ = "items"

    owner_id = Column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    description = Column(String, nullable=True)
    category = Column(
        Enum(ItemCategory, name="itemcategory", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ItemCategory.OTHER,
    )

    # Relationships
    owner = relationship("User", back_populates="items")
    images = relationship(
        "ItemImage",
        back_populates="item",
        cascade="all, delete-orphan",
        order_by="ItemImage.position",
    )

    @property
    def image_keys(self) -> list[str]:
        """Image storage keys in display order."""
        return [image.key for image in self.images]


class ItemImage(Base, UUIDPrimaryKeyMixin):
    """Reference to an externally stored image blob.

    Deleting the row does not delete the blob.
    """

    __tablename__ = "item_images"

    item_id = Column(
        String(36), ForeignKey("items.id", ondelete="CASCADE"), nullable=False, index=True
    )
    key = Column(String(255), nullable=False, unique=True)
    position = Column(Integer, nullable=False, default=0)

    # Relationships
    item = relationship("Item", back_populates="images")
