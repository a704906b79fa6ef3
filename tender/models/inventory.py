"""Grocery list and fridge inventory models."""

from datetime import UTC, datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from tender.database import Base


class GroceryItem(Base):
    """Item on a user's grocery list."""

    __tablename__ = "grocery_items"
    __table_args__ = (
        UniqueConstraint("user_id", "normalized_name", name="uq_grocery_user_normalized_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # Display name
    normalized_name = Column(String(255), nullable=False)  # Lowercase, trimmed for matching
    quantity = Column(Float, nullable=False, default=1)
    unit = Column(String(50), nullable=False, default="")
    category = Column(String(100), nullable=False, default="Other")
    checked = Column(Boolean, nullable=False, default=False)
    added_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    user = relationship("User", back_populates="grocery_items")


class FridgeItem(Base):
    """Item the user has at home."""

    __tablename__ = "fridge_items"
    __table_args__ = (
        UniqueConstraint("user_id", "normalized_name", name="uq_fridge_user_normalized_name"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    normalized_name = Column(String(255), nullable=False)
    quantity = Column(Float, nullable=False, default=1)
    unit = Column(String(50), nullable=False, default="")
    category = Column(String(100), nullable=False, default="Other")
    added_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    user = relationship("User", back_populates="fridge_items")
