"""
Roles → job → job result, end to end.

1. Connect to the node (TANGLE_WS_URL, default local standalone node)
2. Alice and Bob create TSS role profiles
3. Alice submits a two-party DKG phase one job
4. DKG output key is signed by both role keys
5. Alice submits the job result

Each extrinsic blocks until it is in a block before the next one is sent.
"""

from typing import List, Optional

from pydantic import BaseModel, Field
from substrateinterface import SubstrateInterface

from tanglejobs.chain import InclusionReport, connect, next_job_id, submit_and_watch
from tanglejobs.keys import RoleKey, alice_role, bob_role, dev_identity, dkg_key
from tanglejobs.schema import DkgJob, DkgJobResult, Profile
from tanglejobs.signing import sign_dkg_key, to_hex


class FlowOutcome(BaseModel):
    """Everything the flow produced, for callers that want more than console output."""

    job_id: int
    dkg_public_key: str
    signatures: List[str] = Field(default_factory=list)
    reports: List[InclusionReport] = Field(default_factory=list)


def build_job_result(job_id: int, roles: List[RoleKey], dkg: RoleKey, threshold: int = 1) -> DkgJobResult:
    """Sign the uncompressed DKG public key with each role key (in order)."""
    dkg_public_key = dkg.public_key_uncompressed
    signatures = [to_hex(sign_dkg_key(role, dkg_public_key)) for role in roles]
    return DkgJobResult(
        job_id=job_id,
        key=to_hex(dkg_public_key),
        signatures=signatures,
        threshold=threshold,
    )


def run_job_and_result_submission(
    substrate: Optional[SubstrateInterface] = None,
    url: Optional[str] = None,
) -> FlowOutcome:
    """
    Run the full flow against a node. Pass substrate to reuse a connection;
    otherwise one is opened from url (or TANGLE_WS_URL) and closed at the end.
    """
    owns_connection = substrate is None
    if substrate is None:
        substrate = connect(url)

    try:
        alice = dev_identity("Alice")
        bob = dev_identity("Bob")

        alice_role_key = alice_role()
        bob_role_key = bob_role()
        print("ALICE_ROLE_SEED:", alice_role_key.seed_hex)
        print("BOB_ROLE_SEED:", bob_role_key.seed_hex)
        print("ALICE_ROLE:", to_hex(alice_role_key.public_key))
        print("BOB_ROLE:", to_hex(bob_role_key.public_key))

        reports = []

        # Same profile for both identities
        profile_params = Profile().to_call_params()
        for identity in (alice, bob):
            reports.append(
                submit_and_watch(
                    substrate, "Roles", "create_profile", profile_params, identity, "creatingProfileTx"
                )
            )

        job_id = next_job_id(substrate)
        print("JOB_ID:", job_id)
        job = DkgJob(participants=[alice.ss58_address, bob.ss58_address], threshold=1)
        reports.append(
            submit_and_watch(substrate, "Jobs", "submit_job", job.to_call_params(), alice, "submittingJobTx")
        )

        result = build_job_result(job_id, [alice_role_key, bob_role_key], dkg_key(), threshold=job.threshold)
        reports.append(
            submit_and_watch(
                substrate, "Jobs", "submit_job_result", result.to_call_params(), alice, "submittingJobResultTx"
            )
        )
    finally:
        if owns_connection:
            substrate.close()

    return FlowOutcome(
        job_id=job_id,
        dkg_public_key=result.key,
        signatures=result.signatures,
        reports=reports,
    )
