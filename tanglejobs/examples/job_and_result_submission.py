"""
Submit jobs/job results to a Tangle chain.

Run:
  1. Start a local node: ./scripts/run-standalone-local.sh --clean (tangle repo)
  2. From a repo checkout (the script is not installed with the package):
     python tanglejobs/examples/job_and_result_submission.py
  3. Against another node:
     TANGLE_WS_URL=ws://host:9944 python tanglejobs/examples/job_and_result_submission.py

What happens:
1. Alice and Bob create TSS role profiles (DfnsCGGMP21Secp256k1)
2. Alice submits a DKG phase one job with Alice + Bob as participants
3. Both role keys sign keccak256(DKG public key)
4. Alice submits the job result with the key and both signatures
"""
import sys
from pathlib import Path

if "tanglejobs" not in sys.modules:
    _root = Path(__file__).resolve().parent.parent.parent
    if str(_root) not in sys.path:
        sys.path.insert(0, str(_root))

from tanglejobs import run_job_and_result_submission


def main():
    print("=" * 70)
    print("Job and job result submission")
    print("=" * 70)

    outcome = run_job_and_result_submission()

    print("\n" + "=" * 70)
    print(f"✅ Job id: {outcome.job_id}")
    print(f"✅ DKG key: {outcome.dkg_public_key}")
    for sig in outcome.signatures:
        print(f"✅ Signature: {sig}")
    print("=" * 70)
    sys.exit(0)


if __name__ == "__main__":
    main()
