"""Provider-ID and UUID helpers for vSphere nodes.

A node's provider ID looks like ``vsphere://<uuid>``. The UUID inside it is
the one the orchestration layer reports, which stores the first three groups
in the opposite byte order from the BIOS UUID vCenter reports for the same VM.

Everything here is a pure function over strings. Nothing raises and nothing
logs; bad input yields ``""``/``False`` or, for the converter, unspecified
output.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

PROVIDER_PREFIX = "vsphere://"

_UUID_RE = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")


def should_process_node(provider_id: str) -> bool:
    """Return True if the node belongs to vSphere or has no provider ID yet."""
    if provider_id == "":
        return True
    return provider_id.startswith(PROVIDER_PREFIX)


def get_uuid_from_provider_id(provider_id: str) -> str:
    """Strip the vSphere scheme. Unprefixed input is already a bare UUID."""
    if provider_id.startswith(PROVIDER_PREFIX):
        return provider_id[len(PROVIDER_PREFIX):]
    return provider_id


def make_provider_id(uuid: str) -> str:
    if not uuid:
        return ""
    return PROVIDER_PREFIX + uuid


def convert_k8s_uuid_to_normal(k8s_uuid: str) -> str:
    """Swap the byte order of the first three UUID groups.

    ``56492e42-22ad-3911-...`` becomes ``422e4956-ad22-1139-...``. The swap is
    its own inverse, so the same call converts in either direction. Case is
    left alone.
    """
    if not k8s_uuid:
        return ""
    u = k8s_uuid
    return (
        u[6:8] + u[4:6] + u[2:4] + u[0:2]
        + "-" + u[11:13] + u[9:11]
        + "-" + u[16:18] + u[14:16]
        + u[18:]
    )


def normalize_uuid(uuid: str) -> str:
    return uuid.strip().lower()


def is_well_formed_uuid(uuid: str) -> bool:
    """True for the 36-character ``8-4-4-4-12`` hex form, either case."""
    return _UUID_RE.fullmatch(uuid) is not None


def uuids_match(node_uuid: str, vm_uuid: str) -> bool:
    """Whether two UUIDs name the same machine under either byte order."""
    if not node_uuid or not vm_uuid:
        return False
    node = normalize_uuid(node_uuid)
    vm = normalize_uuid(vm_uuid)
    return node == vm or convert_k8s_uuid_to_normal(node) == vm


def array_contains_case_insensitive(values: Iterable[str], target: str) -> bool:
    """Exact membership test with both sides case-folded."""
    folded = target.casefold()
    return any(value.casefold() == folded for value in values)
