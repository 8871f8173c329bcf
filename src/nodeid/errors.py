"""Errors raised outside the pure helpers in nodeid.util."""

from __future__ import annotations


class NodeIdError(Exception):
    """Base class for nodeid errors."""


class MalformedUUIDError(NodeIdError, ValueError):
    """A strict caller was handed something that is not a 36-character UUID."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed UUID: {value!r}")
