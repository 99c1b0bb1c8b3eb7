# Test bootstrap: in-memory SQLite schema and an API client bound to it
from __future__ import annotations

import logging
import os
from datetime import datetime

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PRIORITYKIT_API_SECRET", "test-secret")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from prioritykit.db.base import Base
from prioritykit.db.models import Feature, Idea, Product, Release, Task

logger = logging.getLogger(__name__)

AUTH_HEADERS = {"X-PRIORITYKIT-SECRET": "test-secret", "X-ORG-ROLE": "PRODUCT_MANAGER"}


@pytest.fixture()
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    logger.info("test-bootstrap: schema ensured")
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    from fastapi.testclient import TestClient

    from prioritykit.api.deps import get_db
    from prioritykit.main import app

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def product(db) -> Product:
    p = Product(organization_id="org-1", key="CORE", name="Core")
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def add_idea(db, product: Product, title: str, scores=(None, None, None, None), **kwargs) -> Idea:
    reach, impact, confidence, effort = scores
    idea = Idea(
        product_id=product.id,
        title=title,
        reach_score=reach,
        impact_score=impact,
        confidence_score=confidence,
        effort_score=effort,
        created_at=kwargs.pop("created_at", datetime(2026, 1, 1)),
        **kwargs,
    )
    db.add(idea)
    db.commit()
    return idea


def add_feature(db, product: Product, title: str, status: str, task_statuses=(), efforts=None, **kwargs) -> Feature:
    feature = Feature(product_id=product.id, title=title, status=status, **kwargs)
    db.add(feature)
    db.flush()
    efforts = efforts or [None] * len(task_statuses)
    for i, (st, effort) in enumerate(zip(task_statuses, efforts)):
        db.add(Task(feature_id=feature.id, title=f"{title} task {i}", status=st, effort=effort))
    db.commit()
    return feature


def add_release(db, product: Product, version: str, created_at: datetime, **kwargs) -> Release:
    release = Release(
        product_id=product.id,
        name=kwargs.pop("name", f"Release {version}"),
        version=version,
        created_at=created_at,
        **kwargs,
    )
    db.add(release)
    db.commit()
    return release


@pytest.fixture(autouse=True)
def propagate_app_logs():
    """create_app() stops propagation on the app logger; caplog needs it back."""
    app_logger = logging.getLogger("prioritykit")
    previous = app_logger.propagate
    app_logger.propagate = True
    yield
    app_logger.propagate = previous
