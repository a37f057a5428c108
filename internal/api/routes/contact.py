"""Contact form API routes."""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from internal.consumer import DomainServices
from internal.contact import (
    ErrInvalidSubmission,
    ErrRateLimited,
    ErrSubmissionFailed,
    MSG_RATE_LIMITED,
    parse_contact_form,
)

from ..dependencies import get_identity, get_services

router = APIRouter(prefix="/api")


@router.post("/contact")
async def submit_contact(
    payload: Any = Body(...),
    identity: str = Depends(get_identity),
    services: DomainServices = Depends(get_services),
) -> Dict[str, Any]:
    """Validate, rate limit and enqueue a contact form submission."""
    try:
        form = parse_contact_form(payload)
        result = await services.contact_usecase.submit(form, identity)
    except ErrInvalidSubmission as exc:
        return JSONResponse(status_code=400, content={"error": exc.message})
    except ErrRateLimited:
        return JSONResponse(status_code=429, content={"error": MSG_RATE_LIMITED})
    except ErrSubmissionFailed as exc:
        return JSONResponse(status_code=500, content={"error": exc.message})

    return result.to_dict()
