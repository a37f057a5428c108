"""Dependency injection for API endpoints.

Services are wired once at application startup and stored on app state.
"""

from fastapi import HTTPException, Request, status  # type: ignore

from internal.consumer import DomainServices
from internal.model import ANONYMOUS_IDENTITY

from .constant import HEADER_FORWARDED_FOR, HEADER_REAL_IP


def get_services(request: Request) -> DomainServices:
    """Domain services from app state.

    Raises:
        HTTPException: 503 if the services are not initialized
    """
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Services are not available. The service may still be starting up.",
        )
    return services


def get_identity(request: Request) -> str:
    """Submitter identity for rate limiting.

    First hop of X-Forwarded-For, then X-Real-IP, then the peer address,
    then "anonymous".
    """
    forwarded_for = request.headers.get(HEADER_FORWARDED_FOR)
    if forwarded_for:
        first_hop = forwarded_for.split(",")[0].strip()
        if first_hop:
            return first_hop

    real_ip = request.headers.get(HEADER_REAL_IP)
    if real_ip and real_ip.strip():
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host

    return ANONYMOUS_IDENTITY
