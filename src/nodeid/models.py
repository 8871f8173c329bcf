"""Request bodies for the nodeid gateway."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FindNodeRequest(BaseModel):
    provider_ids: list[str] = Field(default_factory=list)
    vm_uuid: str


class MembershipRequest(BaseModel):
    values: list[str] = Field(default_factory=list)
    target: str
