# prioritykit/db/models/product.py

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from prioritykit.db.base import Base


class Product(Base):
    """Owner of ideas, features and releases; organization scoping lives in the host."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    organization_id = Column(String(100), index=True, nullable=False)
    key = Column(String(50), index=True, nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    ideas = relationship("Idea", back_populates="product")
    features = relationship("Feature", back_populates="product")
    releases = relationship("Release", back_populates="product")
