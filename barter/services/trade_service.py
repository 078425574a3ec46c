"""Trade negotiation: proposal validation, status transitions and pending views."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session, selectinload

from barter.exceptions import (
    InvalidOfferError,
    InvalidPartyError,
    InvalidRequestError,
    InvalidStatusError,
    TradeNotFoundError,
    TradeUnauthorizedError,
)
from barter.models.enums import PENDING_STATUSES, RESPONSE_STATUSES, TradeStatus
from barter.models.trade import Trade
from barter.models.user import User
from barter.schemas.trade import PendingTradeResponse
from barter.services.item_registry import get_items_by_ids
from barter.services.shaping import shape_trade

logger = logging.getLogger(__name__)


def parse_response_status(value: str | None) -> TradeStatus:
    """Parse a receiver's response. Requested is not a valid response."""
    status = TradeStatus.parse(value)
    if status not in RESPONSE_STATUSES:
        raise InvalidStatusError("Invalid status.")
    return status


def _first_not_owned(item_ids: Sequence[str], owned: set[str]) -> str | None:
    return next((item_id for item_id in item_ids if item_id not in owned), None)


class TradeService:
    """Service for proposing and responding to trades.

    Ownership is checked once, at proposal time. The check and the insert are
    not atomic, so two concurrent proposals may both reference the same item.
    """

    def __init__(self, db: Session):
        self.db = db

    def _get_party(self, user_id: str) -> User | None:
        return (
            self.db.query(User)
            .options(selectinload(User.items))
            .filter(User.id == user_id)
            .first()
        )

    def create_trade(
        self,
        initiator_id: str,
        receiver_id: str,
        offered_item_ids: Sequence[str],
        sought_item_ids: Sequence[str],
    ) -> Trade:
        """Validate ownership and persist a new Requested trade.

        Offered items must belong to the initiator and sought items to the
        receiver. Empty item lists and self-trades are allowed.
        """
        initiator = self._get_party(initiator_id)
        receiver = self._get_party(receiver_id)
        if initiator is None or receiver is None:
            raise InvalidPartyError("Invalid user(s).")

        initiator_item_ids = {item.id for item in initiator.items}
        receiver_item_ids = {item.id for item in receiver.items}

        offending = _first_not_owned(offered_item_ids, initiator_item_ids)
        if offending is not None:
            raise InvalidOfferError(offending)

        offending = _first_not_owned(sought_item_ids, receiver_item_ids)
        if offending is not None:
            raise InvalidRequestError(offending)

        trade = Trade(
            initiator_id=initiator_id,
            receiver_id=receiver_id,
            offered_item_ids=list(offered_item_ids),
            sought_item_ids=list(sought_item_ids),
            status=TradeStatus.REQUESTED,
        )
        self.db.add(trade)
        self.db.commit()
        self.db.refresh(trade)

        logger.info(
            f"Trade {trade.id} requested: {initiator_id} offers {len(trade.offered_item_ids)} "
            f"item(s) for {len(trade.sought_item_ids)} of {receiver_id}"
        )
        return trade

    def update_trade_status(self, trade_id: str, acting_receiver_id: str, new_status: str) -> Trade:
        """Record the receiver's response to a trade.

        Only the stored receiver may respond. The status is overwritten
        unconditionally, including away from Accepted or Rejected. Countered
        does not create the counter-proposal; the client proposes it separately.
        """
        status = parse_response_status(new_status)

        trade = self.get_trade(trade_id)
        if trade is None:
            raise TradeNotFoundError(trade_id)

        logger.info(
            f"PATCH trade[{trade.id}]: {trade.status.value} -> {status.value} | "
            f"receiver == actor: {trade.receiver_id} == {acting_receiver_id}"
        )
        if acting_receiver_id != trade.receiver_id:
            raise TradeUnauthorizedError()

        trade.status = status
        self.db.commit()
        self.db.refresh(trade)
        return trade

    def get_trade(self, trade_id: str) -> Trade | None:
        """Get a trade by id, or None."""
        return self.db.query(Trade).filter(Trade.id == trade_id).first()

    def list_trades_by_receiver(self, user_id: str) -> list[Trade]:
        """All trades proposed to a user, in storage order."""
        return self.db.query(Trade).filter(Trade.receiver_id == user_id).all()

    def list_trades_by_initiator(self, user_id: str) -> list[Trade]:
        """All trades a user proposed, in storage order."""
        return self.db.query(Trade).filter(Trade.initiator_id == user_id).all()

    def list_pending_trades(self, receiver_id: str) -> list[PendingTradeResponse]:
        """Trades awaiting the user's response, with item ids resolved.

        Items are fetched in one query for all trades. Ids whose item no longer
        exists are dropped from the view; the order of the rest is kept.
        """
        trades = (
            self.db.query(Trade)
            .filter(Trade.receiver_id == receiver_id, Trade.status.in_(PENDING_STATUSES))
            .all()
        )
        if not trades:
            return []

        item_ids = {item_id for trade in trades for item_id in trade.referenced_item_ids}
        items = get_items_by_ids(self.db, item_ids)

        return [shape_trade(trade, items) for trade in trades]
