# prioritykit/db/models/feature.py

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from prioritykit.db.base import Base


class Feature(Base):
    __tablename__ = "features"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    # A feature belongs to at most one release
    release_id = Column(Integer, ForeignKey("releases.id"), nullable=True, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="NEW", index=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    product = relationship("Product", back_populates="features")
    release = relationship("Release", back_populates="features")
    tasks = relationship("Task", back_populates="feature", order_by="Task.id")


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    feature_id = Column(Integer, ForeignKey("features.id"), nullable=False, index=True)

    title = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, default="NEW")
    effort = Column(Float, nullable=True)  # story points

    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    feature = relationship("Feature", back_populates="tasks")
