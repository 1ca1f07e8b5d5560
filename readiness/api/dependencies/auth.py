"""FastAPI identity dependency.

Authentication itself happens upstream; this dependency only reads the
resolved tenant and user from request headers and rejects requests that
carry none.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Header, HTTPException, status

from readiness.core.logger import get_logger

logger = get_logger("API")


@dataclass(frozen=True)
class Identity:
    tenant_id: str
    user_id: str


def get_current_identity(
    x_tenant_id: str | None = Header(default=None),
    x_user_id: str | None = Header(default=None),
) -> Identity:
    """Return the caller's (tenant, user) identity.

    Raises:
        HTTPException: 401 if either header is missing or empty
    """
    if not x_tenant_id or not x_user_id:
        logger.warning(f"Missing identity headers: tenant_present={bool(x_tenant_id)}, user_present={bool(x_user_id)}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return Identity(tenant_id=x_tenant_id, user_id=x_user_id)
