"""The decoder ring translates node UUIDs to vCenter BIOS UUIDs and back.

A node's provider ID carries the UUID as the kubelet read it from SMBIOS.
vCenter reports the same VM's BIOS UUID with the first three groups in the
opposite byte order. The decoder sits between the two so the reconciler can
match a VM record to a node record without caring which side it started on.

Permissive by default, like the helpers it wraps. With ``strict=True``,
encode/decode refuse anything that is not a well-formed UUID.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from nodeid.errors import MalformedUUIDError
from nodeid.util import (
    convert_k8s_uuid_to_normal,
    get_uuid_from_provider_id,
    is_well_formed_uuid,
    should_process_node,
    uuids_match,
)

logger = logging.getLogger("nodeid.decoder")


class DecoderRing:
    """Byte-order translation between node UUIDs and BIOS UUIDs."""

    def __init__(self, strict: bool = False):
        self.strict = strict

    def _check(self, uuid: str) -> None:
        if self.strict and not is_well_formed_uuid(uuid):
            raise MalformedUUIDError(uuid)

    def encode(self, k8s_uuid: str) -> str:
        """Map the node's UUID to the vCenter BIOS UUID."""
        self._check(k8s_uuid)
        return convert_k8s_uuid_to_normal(k8s_uuid)

    def decode(self, bios_uuid: str) -> str:
        """Map a vCenter BIOS UUID to the UUID the node reports."""
        self._check(bios_uuid)
        return convert_k8s_uuid_to_normal(bios_uuid)

    def node_uuid(self, provider_id: str) -> str:
        return get_uuid_from_provider_id(provider_id)

    def match(self, node_uuid: str, vm_uuid: str) -> bool:
        """Whether the two UUIDs name the same VM under either byte order."""
        self._check(node_uuid)
        self._check(vm_uuid)
        return uuids_match(node_uuid, vm_uuid)

    def find_node(self, provider_ids: Iterable[str], vm_uuid: str) -> str | None:
        """Return the first vSphere provider ID whose UUID names this VM.

        Nodes from other clouds and nodes without a provider ID are skipped.
        In strict mode a malformed vm_uuid raises before any node is looked at;
        malformed node UUIDs simply fail to match.
        """
        self._check(vm_uuid)
        for provider_id in provider_ids:
            if not provider_id or not should_process_node(provider_id):
                continue
            if uuids_match(self.node_uuid(provider_id), vm_uuid):
                logger.debug("VM %s matched node %s", vm_uuid, provider_id)
                return provider_id
        return None
