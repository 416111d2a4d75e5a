"""
Call payloads for the roles/jobs pallets.

Contract: Identity creates a role profile → requester submits a DKG job →
participants submit the job result (DKG public key + role-key signatures).

Each model renders the params dict substrate-interface expects via
to_call_params(). Unit enum variants are passed as bare strings.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

# Role type used throughout the flow: Tss(DfnsCGGMP21Secp256k1)
TSS_ROLE = "DfnsCGGMP21Secp256k1"
DEFAULT_STAKE = 10_000_000_000_000_000_000


class ProfileRecord(BaseModel):
    """One role record inside a shared profile."""

    role: str = Field(TSS_ROLE, description="Threshold signature role variant")
    amount: Optional[int] = Field(None, description="Per-record stake; None for shared profiles")

    def to_call_params(self) -> Dict[str, Any]:
        # every struct field must be present for SCALE encoding, Option ones included
        return {"role": {"Tss": self.role}, "amount": self.amount}


class Profile(BaseModel):
    """Shared restaking profile: one stake amount covering all records."""

    records: List[ProfileRecord] = Field(default_factory=lambda: [ProfileRecord()])
    amount: int = Field(DEFAULT_STAKE, description="Staked amount (plancks)")
    max_active_services: Optional[int] = Field(10, description="Cap on concurrently active services")

    def to_call_params(self) -> Dict[str, Any]:
        """Params for Roles.create_profile."""
        return {
            "profile": {
                "Shared": {
                    "records": [r.to_call_params() for r in self.records],
                    "amount": self.amount,
                }
            },
            "max_active_services": self.max_active_services,
        }


class DkgJob(BaseModel):
    """DKG phase one job request (two-party threshold key generation)."""

    participants: List[str] = Field(..., description="SS58 addresses of the participants")
    threshold: int = Field(1, description="Signing threshold t (t+1 parties sign)")
    permitted_caller: Optional[str] = Field(None, description="Account allowed to use the result")
    role_type: str = Field(TSS_ROLE)
    expiry: int = Field(100, description="Block number after which the job expires")
    ttl: int = Field(100, description="Blocks the result stays valid")

    def to_call_params(self) -> Dict[str, Any]:
        """Params for Jobs.submit_job."""
        return {
            "job": {
                "expiry": self.expiry,
                "ttl": self.ttl,
                "job_type": {
                    "DKGTSSPhaseOne": {
                        "participants": list(self.participants),
                        "threshold": self.threshold,
                        "permitted_caller": self.permitted_caller,
                        "role_type": self.role_type,
                    }
                },
            }
        }


class DkgJobResult(BaseModel):
    """Result of a DKG phase one job: generated key plus participant signatures."""

    job_id: int = Field(..., description="Id assigned by the chain on submission")
    key: str = Field(..., description="0x-hex uncompressed DKG public key")
    signatures: List[str] = Field(default_factory=list, description="0x-hex 65-byte role-key signatures")
    threshold: int = Field(1)
    signature_scheme: str = Field("Ecdsa")
    role_type: str = Field(TSS_ROLE)

    def to_call_params(self) -> Dict[str, Any]:
        """Params for Jobs.submit_job_result."""
        return {
            "role_type": {"Tss": self.role_type},
            "job_id": self.job_id,
            "result": {
                "DKGPhaseOne": {
                    "key": self.key,
                    "signatures": list(self.signatures),
                    "threshold": self.threshold,
                    "signature_scheme": self.signature_scheme,
                }
            },
        }
