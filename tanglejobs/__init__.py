"""
tanglejobs: submit jobs and job results to a Tangle node.

Exercises the roles/jobs pallets end to end:
- Create TSS role profiles for dev accounts (Alice, Bob)
- Submit a two-party DKG phase one job
- Sign the DKG public key with each participant's role key
- Submit the job result and wait for inclusion

Point it at a node with TANGLE_WS_URL (default ws://127.0.0.1:9944).
"""

__version__ = "0.1.0"

from tanglejobs.schema import Profile, ProfileRecord, DkgJob, DkgJobResult
from tanglejobs.keys import RoleKey, dev_identity, alice_role, bob_role, dkg_key
from tanglejobs.signing import hash_public_key, sign_dkg_key, verify_dkg_signature, to_hex
from tanglejobs.chain import ChainEvent, InclusionReport, connect, next_job_id, submit_and_watch
from tanglejobs.flow import FlowOutcome, build_job_result, run_job_and_result_submission

__all__ = [
    "__version__",
    "Profile",
    "ProfileRecord",
    "DkgJob",
    "DkgJobResult",
    "RoleKey",
    "dev_identity",
    "alice_role",
    "bob_role",
    "dkg_key",
    "hash_public_key",
    "sign_dkg_key",
    "verify_dkg_signature",
    "to_hex",
    "ChainEvent",
    "InclusionReport",
    "connect",
    "next_job_id",
    "submit_and_watch",
    "FlowOutcome",
    "build_job_result",
    "run_job_and_result_submission",
]
