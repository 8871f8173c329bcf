"""Endpoints over the provider-ID and UUID helpers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from nodeid.decoder import DecoderRing
from nodeid.deps import get_decoder
from nodeid.models import FindNodeRequest, MembershipRequest
from nodeid.util import array_contains_case_insensitive, should_process_node

router = APIRouter(prefix="/api/v1", tags=["identity"])


# ── Nodes ──────────────────────────────────────────────────────


@router.get("/nodes/should-process")
def should_process(provider_id: str = Query("")):
    return {"provider_id": provider_id, "process": should_process_node(provider_id)}


@router.get("/nodes/uuid")
def node_uuid(
    provider_id: str = Query(""),
    decoder: DecoderRing = Depends(get_decoder),
):
    return {"provider_id": provider_id, "uuid": decoder.node_uuid(provider_id)}


@router.post("/nodes/find")
def find_node(
    body: FindNodeRequest,
    decoder: DecoderRing = Depends(get_decoder),
):
    return {"provider_id": decoder.find_node(body.provider_ids, body.vm_uuid)}


# ── UUIDs ──────────────────────────────────────────────────────


@router.get("/uuids/convert")
def convert(
    uuid: str = Query(...),
    decoder: DecoderRing = Depends(get_decoder),
):
    return {"uuid": uuid, "converted": decoder.encode(uuid)}


@router.get("/uuids/match")
def match(
    node_uuid: str = Query(...),
    vm_uuid: str = Query(...),
    decoder: DecoderRing = Depends(get_decoder),
):
    return {"match": decoder.match(node_uuid, vm_uuid)}


# ── Misc ───────────────────────────────────────────────────────


@router.post("/membership")
def membership(body: MembershipRequest):
    return {"contains": array_contains_case_insensitive(body.values, body.target)}
