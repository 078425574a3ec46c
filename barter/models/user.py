"""User model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from barter.database import Base
from barter.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class User(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """User model for authentication and item ownership.

    A user has either a password hash or an OAuth provider tag. Legacy rows
    with neither are tolerated and get a provider backfilled on first OAuth login.
    """

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=True)
    oauth_provider = Column(String(50), nullable=True)  # "google" | "apple"
    name = Column(String(255), nullable=True)

    # Relationships
    # Row removal is left to the database foreign key rules
    items = relationship("Item", back_populates="owner", passive_deletes="all")
