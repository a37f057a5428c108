"""System status API routes."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from internal.consumer import DomainServices
from internal.model import utc_now_iso
from internal.status import MSG_STATUS_FAILED, STATUS_UNHEALTHY

from ..dependencies import get_services

router = APIRouter(prefix="/api")


@router.get("/system-status")
async def system_status(
    request: Request,
    services: DomainServices = Depends(get_services),
) -> Dict[str, Any]:
    try:
        return await services.status_usecase.get_status()
    except Exception as exc:
        request.app.state.deps.logger.error_with_context(exc, "System status check")
        return JSONResponse(
            status_code=500,
            content={
                "status": STATUS_UNHEALTHY,
                "timestamp": utc_now_iso(),
                "error": MSG_STATUS_FAILED,
            },
        )
