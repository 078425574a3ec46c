"""Enums for model fields."""

from enum import Enum


class DisplayEnum(str, Enum):
    """String enum whose values are the display names sent over the wire."""

    @classmethod
    def parse(cls, value: str | None):
        """Case-insensitive lookup by display name. Returns None if unknown."""
        if value is None:
            return None
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return None


class ItemCategory(DisplayEnum):
    """Closed set of listing categories."""

    CLOTHING = "Clothing"
    ELECTRONICS = "Electronics"
    FURNITURE = "Furniture"
    BOOKS = "Books"
    LABOR = "Labor"
    TOOLS = "Tools"
    EXPERIENCE = "Experience"
    OTHER = "Other"


class TradeStatus(DisplayEnum):
    """Lifecycle status of a trade proposal."""

    REQUESTED = "Requested"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    COUNTERED = "Countered"


PENDING_STATUSES = (TradeStatus.REQUESTED, TradeStatus.COUNTERED)

# Values a receiver may move a trade to
RESPONSE_STATUSES = (TradeStatus.ACCEPTED, TradeStatus.REJECTED, TradeStatus.COUNTERED)


class OAuthProvider(str, Enum):
    """Identity providers accepted for ID token login."""

    GOOGLE = "google"
    APPLE = "apple"
