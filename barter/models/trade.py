"""Trade model."""

from sqlalchemy import JSON, Column, Enum, String

from barter.database import Base
from barter.models.enums import TradeStatus
from barter.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Trade(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """A proposed exchange of item sets between two users.

    Users and items are referenced by id only; the trade does not own them and
    item ids are never re-validated after creation.
    """

    __tablename__ = "trades"

    initiator_id = Column(String(36), nullable=False, index=True)
    receiver_id = Column(String(36), nullable=False, index=True)
    # Ordered item id lists: ["3f2c...", "9a1b..."]
    offered_item_ids = Column(JSON, nullable=False, default=list)
    sought_item_ids = Column(JSON, nullable=False, default=list)
    status = Column(
        Enum(TradeStatus, name="tradestatus", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TradeStatus.REQUESTED,
        index=True,
    )

    @property
    def referenced_item_ids(self) -> list[str]:
        """All item ids this trade mentions, offered first."""
        return list(self.offered_item_ids or []) + list(self.sought_item_ids or [])
