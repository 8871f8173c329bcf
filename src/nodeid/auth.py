"""API key check for the nodeid gateway.

No key configured means development mode, where every request passes.
Otherwise the X-API-Key header must match, compared in constant time.
"""

from __future__ import annotations

import secrets

from fastapi import HTTPException, Security
from fastapi.security import APIKeyHeader

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def make_api_key_checker(expected_key: str):
    """Build the router-level dependency for a given key."""
    if not expected_key:

        async def allow_all() -> None:
            return None

        return allow_all

    async def require_key(api_key: str | None = Security(_api_key_header)) -> str:
        if not secrets.compare_digest((api_key or "").encode(), expected_key.encode()):
            raise HTTPException(status_code=401, detail="Invalid or missing API key")
        return api_key

    return require_key
