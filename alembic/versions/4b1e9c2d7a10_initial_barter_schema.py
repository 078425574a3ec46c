"""initial barter schema

Revision ID: 4b1e9c2d7a10
Revises:
Create Date: 2026-10-19 10:12:31.482190

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4b1e9c2d7a10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ITEM_CATEGORIES = (
    "Clothing",
    "Electronics",
    "Furniture",
    "Books",
    "Labor",
    "Tools",
    "Experience",
    "Other",
)
TRADE_STATUSES = ("Requested", "Accepted", "Rejected", "Countered")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def upgrade() -> None:
    # Enum values match the Python enum display values
    itemcategory_enum = sa.Enum(*ITEM_CATEGORIES, name="itemcategory")
    tradestatus_enum = sa.Enum(*TRADE_STATUSES, name="tradestatus")

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("oauth_provider", sa.String(length=50), nullable=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        *_timestamps(),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "items",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "owner_id",
            sa.String(length=36),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("category", itemcategory_enum, nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_items_owner_id"), "items", ["owner_id"], unique=False)

    op.create_table(
        "item_images",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "item_id",
            sa.String(length=36),
            sa.ForeignKey("items.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("key", sa.String(length=255), nullable=False, unique=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(op.f("ix_item_images_item_id"), "item_images", ["item_id"], unique=False)

    # Trades reference users and items by id only
    op.create_table(
        "trades",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("initiator_id", sa.String(length=36), nullable=False),
        sa.Column("receiver_id", sa.String(length=36), nullable=False),
        sa.Column("offered_item_ids", sa.JSON(), nullable=False),
        sa.Column("sought_item_ids", sa.JSON(), nullable=False),
        sa.Column("status", tradestatus_enum, nullable=False),
        *_timestamps(),
    )
    op.create_index(op.f("ix_trades_initiator_id"), "trades", ["initiator_id"], unique=False)
    op.create_index(op.f("ix_trades_receiver_id"), "trades", ["receiver_id"], unique=False)
    op.create_index(op.f("ix_trades_status"), "trades", ["status"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_trades_status"), table_name="trades")
    op.drop_index(op.f("ix_trades_receiver_id"), table_name="trades")
    op.drop_index(op.f("ix_trades_initiator_id"), table_name="trades")
    op.drop_table("trades")
    op.drop_index(op.f("ix_item_images_item_id"), table_name="item_images")
    op.drop_table("item_images")
    op.drop_index(op.f("ix_items_owner_id"), table_name="items")
    op.drop_table("items")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
    sa.Enum(name="tradestatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="itemcategory").drop(op.get_bind(), checkfirst=True)
