"""Domain errors raised by the service layer.

Each error carries the HTTP status the API layer responds with.
"""

from fastapi import status


class BarterError(Exception):
    """Base class for domain errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPartyError(BarterError):
    """Initiator or receiver of a trade does not exist."""


class InvalidOfferError(BarterError):
    """An offered item is not owned by the initiator."""

    def __init__(self, item_id: str):
        super().__init__(f"Item {item_id} is not owned by the initiator.")
        self.item_id = item_id


class InvalidRequestError(BarterError):
    """A sought item is not owned by the receiver."""

    def __init__(self, item_id: str):
        super().__init__(f"Item {item_id} is not owned by the receiver.")
        self.item_id = item_id


class InvalidStatusError(BarterError):
    """Status value could not be parsed or is not a receiver response."""


class InvalidCategoryError(BarterError):
    """Item category is not one of the known categories."""


class NotFoundError(BarterError):
    status_code = status.HTTP_404_NOT_FOUND


class TradeNotFoundError(NotFoundError):
    def __init__(self, trade_id: str):
        super().__init__("Trade not found.")
        self.trade_id = trade_id


class ItemNotFoundError(NotFoundError):
    def __init__(self, item_id: str):
        super().__init__("Item not found.")
        self.item_id = item_id


class TradeUnauthorizedError(BarterError):
    """Someone other than the receiver tried to respond to a trade."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self):
        super().__init__("Only the receiving party can update.")


class ItemForbiddenError(BarterError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self):
        super().__init__("Only the owner can modify this item.")


class OAuthVerificationError(BarterError):
    """Provider ID token could not be verified."""


class ImageKeyConflictError(BarterError):
    """An image key is already attached to a different item."""

    status_code = status.HTTP_409_CONFLICT

    def __init__(self, key: str):
        super().__init__(f"Image key {key} is already in use.")
        self.key = key
