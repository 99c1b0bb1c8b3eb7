# prioritykit/db/models/idea.py

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from prioritykit.db.base import Base


class Idea(Base):
    __tablename__ = "ideas"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    problem = Column(Text, nullable=True)
    hypothesis = Column(Text, nullable=True)
    source = Column(String(100), nullable=True)
    tags = Column(JSON, nullable=True)

    status = Column(String(20), nullable=False, default="SUBMITTED", index=True)
    priority = Column(String(10), nullable=False, default="MEDIUM")

    # RICE inputs, 1-5 each; None until someone scores the idea
    reach_score = Column(Integer, nullable=True)
    impact_score = Column(Integer, nullable=True)
    confidence_score = Column(Integer, nullable=True)
    effort_score = Column(Integer, nullable=True)

    votes = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    product = relationship("Product", back_populates="ideas")
