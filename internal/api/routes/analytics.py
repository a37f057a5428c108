"""Analytics tracking API routes.

Tracking never surfaces failures to the page: the response is always 200.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request  # type: ignore
from pydantic import ValidationError

from internal.consumer import DomainServices
from internal.model import AnalyticsEvent

from ..constant import HEADER_USER_AGENT
from ..dependencies import get_identity, get_services

router = APIRouter(prefix="/api")


@router.post("/analytics")
async def track_event(
    request: Request,
    payload: Any = Body(...),
    identity: str = Depends(get_identity),
    services: DomainServices = Depends(get_services),
) -> Dict[str, bool]:
    logger = request.app.state.deps.logger

    try:
        event = AnalyticsEvent.model_validate(payload)
    except ValidationError as exc:
        logger.debug(f"[AnalyticsRoute] Invalid event ignored: {exc.error_count()} error(s)")
        return {"success": False}

    if event.ip is None:
        event.ip = identity
    if event.user_agent is None:
        event.user_agent = request.headers.get(HEADER_USER_AGENT)

    try:
        await services.analytics_usecase.track(event)
    except Exception as exc:
        logger.error_with_context(exc, "Analytics tracking")
        return {"success": False}

    return {"success": True}
