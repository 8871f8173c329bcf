"""Health and version endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from nodeid.util import PROVIDER_PREFIX

router = APIRouter(prefix="/api/v1", tags=["meta"])


@router.get("/health")
def health():
    return {"status": "ok", "service": "nodeid"}


@router.get("/version")
def version():
    return {"gateway": "0.1.0", "provider_prefix": PROVIDER_PREFIX}
