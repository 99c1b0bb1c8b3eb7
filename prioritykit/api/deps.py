# prioritykit/api/deps.py

from __future__ import annotations

from typing import Callable, Generator, Iterable

from fastapi import Header, HTTPException
from sqlalchemy.orm import Session

from prioritykit.config import settings
from prioritykit.db.session import SessionLocal
from prioritykit.schemas.enums import OrgRole


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def require_shared_secret(x_prioritykit_secret: str | None = Header(default=None)) -> None:
    """
    Shared secret header from the host application.
    Header name: X-PRIORITYKIT-SECRET
    """
    expected = settings.PRIORITYKIT_API_SECRET
    if not expected:
        # If secret isn't configured, fail closed.
        raise HTTPException(status_code=500, detail="PRIORITYKIT_API_SECRET is not configured")

    if not x_prioritykit_secret or x_prioritykit_secret != expected:
        raise HTTPException(status_code=401, detail="Unauthorized")


def require_role(*allowed: OrgRole) -> Callable[..., OrgRole]:
    """Build a dependency admitting callers whose X-ORG-ROLE is in ``allowed``.

    The host resolves the caller's organization role and forwards it; routers
    attach the gate once instead of checking inside each handler.
    """
    allowed_values = {r.value for r in allowed}

    def _dependency(x_org_role: str | None = Header(default=None)) -> OrgRole:
        role = (x_org_role or "").strip().upper()
        if role not in allowed_values:
            raise HTTPException(status_code=403, detail="Insufficient role")
        return OrgRole(role)

    return _dependency


READ_ROLES: Iterable[OrgRole] = (OrgRole.ADMIN, OrgRole.PRODUCT_MANAGER, OrgRole.CONTRIBUTOR)
MANAGE_ROLES: Iterable[OrgRole] = (OrgRole.ADMIN, OrgRole.PRODUCT_MANAGER)
