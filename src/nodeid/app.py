"""FastAPI gateway application for nodeid.

Exposes the vSphere provider-ID and UUID helpers to reconcilers that are
not written in Python. No backend: every request is answered from the
request alone.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from nodeid.auth import make_api_key_checker
from nodeid.config import NodeIdConfig, load_config
from nodeid.decoder import DecoderRing
from nodeid.errors import MalformedUUIDError
from nodeid.routes import identity, meta

logger = logging.getLogger("nodeid")
audit_logger = logging.getLogger("nodeid.audit")


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: NodeIdConfig = app.state.config
    logger.info("nodeid gateway ready (strict UUIDs: %s)", config.strict_uuids)
    yield
    logger.info("nodeid gateway shut down")


def create_app(config: NodeIdConfig | None = None) -> FastAPI:
    """Application factory."""
    if config is None:
        config = load_config()

    app = FastAPI(
        title="nodeid",
        description="vSphere node identity helpers for provider IDs and BIOS UUIDs",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.decoder = DecoderRing(strict=config.strict_uuids)

    check_key = make_api_key_checker(config.api_key)

    # ── Exception handlers ────────────────────────────────────

    @app.exception_handler(MalformedUUIDError)
    async def malformed_uuid_handler(request: Request, exc: MalformedUUIDError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    # ── Audit middleware ──────────────────────────────────────

    @app.middleware("http")
    async def audit_log(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start
        audit_logger.info(
            "%s %s %d %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
        )
        return response

    # ── Routers ───────────────────────────────────────────────

    app.include_router(meta.router, dependencies=[Depends(check_key)])
    app.include_router(identity.router, dependencies=[Depends(check_key)])

    return app
