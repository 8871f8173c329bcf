"""Tests for DecoderRing, which matches VMs to nodes across UUID byte orders."""

from __future__ import annotations

import logging

import pytest

from nodeid.decoder import DecoderRing
from nodeid.errors import MalformedUUIDError, NodeIdError

K8S_UUID = "56492e42-22ad-3911-6d72-59cc8f26bc90"
BIOS_UUID = "422e4956-ad22-1139-6d72-59cc8f26bc90"
OTHER_UUID = "42278c9d-79fb-f2af-b060-d7f167fa261c"


@pytest.fixture
def decoder():
    return DecoderRing()


class TestEncodeDecode:
    def test_encode(self, decoder):
        assert decoder.encode(K8S_UUID) == BIOS_UUID

    def test_decode(self, decoder):
        assert decoder.decode(BIOS_UUID) == K8S_UUID

    def test_roundtrip(self, decoder):
        assert decoder.decode(decoder.encode(OTHER_UUID)) == OTHER_UUID

    def test_permissive_by_default(self, decoder):
        assert decoder.encode("") == ""
        assert isinstance(decoder.encode("short"), str)

    def test_node_uuid(self, decoder):
        assert decoder.node_uuid("vsphere://" + K8S_UUID) == K8S_UUID


class TestStrict:
    def test_well_formed_accepted(self):
        assert DecoderRing(strict=True).encode(K8S_UUID.upper()) == BIOS_UUID.upper()

    def test_malformed_rejected(self):
        with pytest.raises(MalformedUUIDError) as info:
            DecoderRing(strict=True).decode("not-a-uuid")
        assert info.value.value == "not-a-uuid"
        assert "not-a-uuid" in str(info.value)

    def test_error_hierarchy(self):
        err = MalformedUUIDError("x")
        assert isinstance(err, NodeIdError)
        assert isinstance(err, ValueError)

    def test_find_node_checks_vm_uuid(self):
        with pytest.raises(MalformedUUIDError):
            DecoderRing(strict=True).find_node(["vsphere://" + K8S_UUID], "")

    def test_find_node_skips_malformed_node_uuid(self):
        ids = ["vsphere://garbage", "vsphere://" + K8S_UUID]
        assert DecoderRing(strict=True).find_node(ids, BIOS_UUID) == "vsphere://" + K8S_UUID

    def test_match_checks_both_sides(self):
        decoder = DecoderRing(strict=True)
        assert decoder.match(K8S_UUID, BIOS_UUID.upper())
        with pytest.raises(MalformedUUIDError):
            decoder.match("garbage", BIOS_UUID)
        with pytest.raises(MalformedUUIDError):
            decoder.match(K8S_UUID, "garbage")

    def test_match_permissive_by_default(self):
        assert DecoderRing().match("garbage", "garbage")
        assert not DecoderRing().match("", "")


class TestFindNode:
    provider_ids = [
        "",
        "aws:///us-west-2a/i-1234567890abcdef0",
        "vsphere://" + OTHER_UUID,
        "vsphere://" + K8S_UUID,
    ]

    def test_matches_bios_uuid(self, decoder):
        assert decoder.find_node(self.provider_ids, BIOS_UUID) == "vsphere://" + K8S_UUID

    def test_matches_same_order(self, decoder):
        assert decoder.find_node(self.provider_ids, K8S_UUID) == "vsphere://" + K8S_UUID

    def test_matches_upper_case(self, decoder):
        assert decoder.find_node(self.provider_ids, BIOS_UUID.upper()) == "vsphere://" + K8S_UUID

    def test_no_match(self, decoder):
        assert decoder.find_node(self.provider_ids, "00000000-0000-0000-0000-000000000000") is None

    def test_empty_list(self, decoder):
        assert decoder.find_node([], BIOS_UUID) is None

    def test_skips_bare_uuid(self, decoder):
        # A bare UUID is not a vSphere provider ID, so it is never matched.
        assert decoder.find_node([K8S_UUID], BIOS_UUID) is None

    def test_first_match_wins(self, decoder):
        ids = ["vsphere://" + BIOS_UUID, "vsphere://" + K8S_UUID]
        assert decoder.find_node(ids, BIOS_UUID) == "vsphere://" + BIOS_UUID

    def test_logs_match(self, decoder, caplog):
        with caplog.at_level(logging.DEBUG, logger="nodeid.decoder"):
            decoder.find_node(self.provider_ids, BIOS_UUID)
        assert "matched node" in caplog.text
