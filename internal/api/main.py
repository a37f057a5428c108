"""
FastAPI application setup and configuration.
Defines the app factory, middleware, exception handlers, and route registration.
"""

import uuid
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request  # type: ignore
from fastapi.exceptions import RequestValidationError  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from internal.consumer import (
    ConsumerRegistry,
    ConsumerServer,
    Dependencies,
    DomainServices,
)
from internal.contact import MSG_SUBMISSION_FAILED, MSG_VALIDATION_ERROR

from .constant import *
from .routes import analytics, contact, health, status


def create_app(deps: Dependencies, services: Optional[DomainServices] = None) -> FastAPI:
    """Build the API application around already constructed dependencies.

    Connecting and disconnecting the clients stays with the caller. When
    ``workers.embedded`` is set, the queue workers start and stop with the
    application.
    """
    logger = deps.logger
    services = services or ConsumerRegistry(deps).initialize()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Portfolio Ingest API...")
        if deps.config.workers.embedded:
            app.state.consumer = ConsumerServer(deps, services)
            await app.state.consumer.start()
        yield
        logger.info("Shutting down Portfolio Ingest API...")
        if app.state.consumer is not None:
            await app.state.consumer.shutdown()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        docs_url="/swagger/index.html",
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.deps = deps
    app.state.services = services
    app.state.consumer = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=deps.config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Tag each request with an ID and log it."""
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = datetime.utcnow()

        with logger.trace_context(request_id):
            logger.info(f"Request: {request.method} {request.url.path}")
            response = await call_next(request)
            duration = (datetime.utcnow() - start_time).total_seconds() * 1000
            logger.info(f"Response: {response.status_code} ({duration:.1f}ms)")

        response.headers[HEADER_REQUEST_ID] = request_id
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": MSG_VALIDATION_ERROR})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(f"Unhandled exception in request {request_id}: {exc}")
        logger.exception("Exception details:")
        return JSONResponse(status_code=500, content={"error": MSG_SUBMISSION_FAILED})

    app.include_router(contact.router, tags=["contact"])
    app.include_router(analytics.router, tags=["analytics"])
    app.include_router(status.router, tags=["status"])
    app.include_router(health.router, tags=["health"])

    return app


__all__ = ["create_app"]
