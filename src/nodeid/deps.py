"""FastAPI dependencies for nodeid routes."""

from __future__ import annotations

from fastapi import Request

from nodeid.decoder import DecoderRing


def get_decoder(request: Request) -> DecoderRing:
    """Get the decoder ring from app state."""
    return request.app.state.decoder
