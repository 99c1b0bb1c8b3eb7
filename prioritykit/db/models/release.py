# prioritykit/db/models/release.py

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from prioritykit.db.base import Base


class Release(Base):
    __tablename__ = "releases"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    # Free-form; suggested from the previous release but never re-validated
    version = Column(String(50), nullable=False)
    type = Column(String(20), nullable=False, default="MINOR")
    status = Column(String(20), nullable=False, default="PLANNED")
    description = Column(Text, nullable=True)

    release_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    product = relationship("Product", back_populates="releases")
    features = relationship("Feature", back_populates="release")
