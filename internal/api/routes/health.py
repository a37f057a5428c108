"""Health check API routes."""

from typing import Any, Dict

from fastapi import APIRouter, Request  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Basic liveness endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(request: Request) -> Dict[str, Any]:
    """Readiness with dependency status.

    The broker is required; the cache is reported but optional since
    every cache consumer degrades without it. Workers are checked only
    when they run inside this process.
    """
    deps = request.app.state.deps
    consumer = getattr(request.app.state, "consumer", None)

    cache_ok = await deps.cache.health_check()
    queue_ok = await deps.queue.ensure_connected()
    workers = "not_embedded"
    workers_ok = True
    if consumer is not None:
        workers_ok = consumer.is_ready()
        workers = "ready" if workers_ok else "not_ready"

    ready = queue_ok and workers_ok
    body = {
        "status": "ready" if ready else "not_ready",
        "dependencies": {
            "redis": "healthy" if cache_ok else "unavailable",
            "rabbitmq": "healthy" if queue_ok else "unavailable",
            "workers": workers,
        },
    }
    if not ready:
        return JSONResponse(status_code=503, content=body)
    return body
