"""Readiness API endpoints.

GET /readiness/view returns the projected readiness view; list fields are
connections unless ``flat=true``. GET /readiness/acwr returns the ACWR
status for one day.
"""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status

from readiness.api.dependencies.auth import Identity, get_current_identity
from readiness.api.dependencies.readiness import get_readiness_composer
from readiness.api.schemas import ACWRStatusResponse
from readiness.config.settings import settings
from readiness.core.logger import get_logger
from readiness.records.errors import SourceUnavailableError
from readiness.services.readiness_service import ReadinessComposer
from readiness.views import unwrap_connections_in_place
from readiness.views.readiness import READINESS_LIST_FIELDS

logger = get_logger("API")

router = APIRouter(prefix="/readiness", tags=["readiness"])


def _source_unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Training records are temporarily unavailable",
    )


@router.get("/view")
async def get_readiness_view(
    as_of: date = Query(alias="date", description="Last day of the history (YYYY-MM-DD)"),
    history_days: int = Query(default=settings.default_history_days, ge=7, le=90),
    select: list[str] | None = Query(default=None, description="Selection paths; omit to select everything"),
    flat: bool = Query(default=False, description="Return list fields as plain arrays"),
    identity: Identity = Depends(get_current_identity),
    composer: ReadinessComposer = Depends(get_readiness_composer),
):
    """Get the readiness view (current ACWR, ACWR history, wellness history).

    Args:
        as_of: Last day of the history
        history_days: Number of days of history (7-90)
        select: Optional selection paths (e.g. ``wellness_history.rhr``)
        flat: Unwrap connection fields to plain arrays
        identity: Caller identity (from auth dependency)
        composer: Readiness composer (from dependency)

    Returns:
        Projected readiness view
    """
    logger.info(f"/readiness/view called for user_id={identity.user_id}: date={as_of}, history_days={history_days}")
    try:
        view = await composer.get_readiness_view(
            identity.tenant_id,
            identity.user_id,
            as_of,
            history_days,
            select=select,
        )
    except SourceUnavailableError as e:
        logger.error(f"Readiness view failed for user_id={identity.user_id}: {e}")
        raise _source_unavailable() from e

    if flat:
        unwrap_connections_in_place(view, READINESS_LIST_FIELDS)
    return view


@router.get("/acwr", response_model=ACWRStatusResponse)
async def get_acwr_status(
    as_of: date = Query(alias="date", description="Reference day (YYYY-MM-DD)"),
    identity: Identity = Depends(get_current_identity),
    composer: ReadinessComposer = Depends(get_readiness_composer),
):
    """Get acute load, chronic load, ratio and danger flag for one day."""
    logger.info(f"/readiness/acwr called for user_id={identity.user_id}: date={as_of}")
    try:
        result = await composer.get_acwr_status(identity.tenant_id, identity.user_id, as_of)
    except SourceUnavailableError as e:
        logger.error(f"ACWR status failed for user_id={identity.user_id}: {e}")
        raise _source_unavailable() from e

    return ACWRStatusResponse(date=as_of.isoformat(), **result.to_dict())
