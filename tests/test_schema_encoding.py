"""
Encode call params with scalecodec against the roles/jobs pallet types, so a
missing struct field fails here instead of in compose_call on a live node.
"""

import pytest
from scalecodec.base import RuntimeConfigurationObject
from scalecodec.type_registry import load_type_registry_preset

from tanglejobs.flow import build_job_result
from tanglejobs.keys import alice_role, bob_role, dev_identity, dkg_key
from tanglejobs.schema import DkgJob, Profile, ProfileRecord

PALLET_TYPES = {
    "types": {
        "ThresholdSignatureRoleType": {
            "type": "enum",
            "value_list": ["ZengoGG20Secp256k1", "DfnsCGGMP21Secp256k1", "DfnsCGGMP21Secp384r1"],
        },
        "ZeroKnowledgeRoleType": {"type": "enum", "value_list": ["ZkSaaSGroth16"]},
        "RoleType": {
            "type": "enum",
            "type_mapping": [["Tss", "ThresholdSignatureRoleType"], ["ZkSaaS", "ZeroKnowledgeRoleType"]],
        },
        "Record": {"type": "struct", "type_mapping": [["role", "RoleType"], ["amount", "Option<u128>"]]},
        "IndependentRestakeProfile": {"type": "struct", "type_mapping": [["records", "Vec<Record>"]]},
        "SharedRestakeProfile": {
            "type": "struct",
            "type_mapping": [["records", "Vec<Record>"], ["amount", "u128"]],
        },
        "Profile": {
            "type": "enum",
            "type_mapping": [["Independent", "IndependentRestakeProfile"], ["Shared", "SharedRestakeProfile"]],
        },
        "DKGTSSPhaseOneJobType": {
            "type": "struct",
            "type_mapping": [
                ["participants", "Vec<AccountId>"],
                ["threshold", "u8"],
                ["permitted_caller", "Option<AccountId>"],
                ["role_type", "ThresholdSignatureRoleType"],
            ],
        },
        "JobType": {"type": "enum", "type_mapping": [["DKGTSSPhaseOne", "DKGTSSPhaseOneJobType"]]},
        "JobSubmission": {
            "type": "struct",
            "type_mapping": [["expiry", "u64"], ["ttl", "u64"], ["job_type", "JobType"]],
        },
        "DigitalSignatureScheme": {"type": "enum", "value_list": ["Ecdsa", "SchnorrSr25519"]},
        "DKGTSSKeySubmissionResult": {
            "type": "struct",
            "type_mapping": [
                ["key", "Bytes"],
                ["signatures", "Vec<Bytes>"],
                ["threshold", "u8"],
                ["signature_scheme", "DigitalSignatureScheme"],
            ],
        },
        "JobResult": {"type": "enum", "type_mapping": [["DKGPhaseOne", "DKGTSSKeySubmissionResult"]]},
    }
}


@pytest.fixture(scope="module")
def runtime_config():
    config = RuntimeConfigurationObject()
    config.update_type_registry(load_type_registry_preset("core"))
    config.update_type_registry(load_type_registry_preset("legacy"))
    config.update_type_registry(PALLET_TYPES)
    return config


def _encode(runtime_config, type_string, value):
    return runtime_config.create_scale_object(type_string).encode(value).to_hex()


def test_record_needs_every_field(runtime_config):
    with pytest.raises(ValueError):
        _encode(runtime_config, "Record", {"role": {"Tss": "DfnsCGGMP21Secp256k1"}})


def test_record_encodes(runtime_config):
    assert _encode(runtime_config, "Record", ProfileRecord().to_call_params()) == "0x000100"
    assert _encode(runtime_config, "Record", ProfileRecord(amount=1).to_call_params()).startswith("0x00010101")


def test_shared_profile_encodes(runtime_config):
    params = Profile().to_call_params()
    encoded = _encode(runtime_config, "Profile", params["profile"])
    # Shared, one record, record, amount 10^19 as u128 LE
    assert encoded == "0x01" + "04" + "000100" + "0000e8890423c78a" + "00" * 8
    assert _encode(runtime_config, "Option<u32>", params["max_active_services"]) == "0x010a000000"


def test_dkg_job_encodes(runtime_config):
    participants = ["0x" + dev_identity(name).public_key.hex() for name in ("Alice", "Bob")]
    job = DkgJob(participants=participants).to_call_params()["job"]
    encoded = _encode(runtime_config, "JobSubmission", job)
    # expiry, ttl, DKGTSSPhaseOne, two participants
    assert encoded.startswith("0x" + "6400000000000000" * 2 + "00" + "08")
    # threshold 1, no permitted caller, DfnsCGGMP21Secp256k1
    assert encoded.endswith("010001")


def test_dkg_result_encodes(runtime_config):
    result = build_job_result(3, [alice_role(), bob_role()], dkg_key()).to_call_params()
    encoded = _encode(runtime_config, "JobResult", result["result"])
    # DKGPhaseOne, compact length 65, uncompressed key
    assert encoded.startswith("0x00" + "0501" + result["result"]["DKGPhaseOne"]["key"][2:])
    assert _encode(runtime_config, "RoleType", result["role_type"]) == "0x0001"


def test_dkg_result_needs_signature_scheme(runtime_config):
    result = build_job_result(3, [alice_role(), bob_role()], dkg_key()).to_call_params()
    del result["result"]["DKGPhaseOne"]["signature_scheme"]
    with pytest.raises(ValueError):
        _encode(runtime_config, "JobResult", result["result"])
