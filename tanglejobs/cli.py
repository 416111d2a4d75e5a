"""
tanglejobs CLI.

Commands:
  tanglejobs run [ws_url]          — Create role profiles, submit a DKG job and its result
  tanglejobs keys                  — Print dev identities, role keys and DKG signatures (no node needed)
  tanglejobs next-job-id [ws_url]  — Print the chain's next job id
"""
import sys

from substrateinterface.exceptions import SubstrateRequestException

from tanglejobs.chain import connect, next_job_id
from tanglejobs.config import ws_url


def run_command():
    """Full flow; exits 0 once the job result is in a block."""
    from tanglejobs.flow import run_job_and_result_submission

    url = sys.argv[2] if len(sys.argv) > 2 else ws_url()
    print(f"🔗 Connecting to {url}...")
    try:
        outcome = run_job_and_result_submission(url=url)
    except (ConnectionError, RuntimeError, SubstrateRequestException, ValueError) as e:
        print(f"\n❌ {e}")
        sys.exit(1)
    print(f"\n✅ Job {outcome.job_id} submitted and result included ({len(outcome.reports)} extrinsics).")
    sys.exit(0)


def keys_command():
    """Offline: everything derived from the fixed seeds."""
    from tanglejobs.flow import build_job_result
    from tanglejobs.keys import alice_role, bob_role, dev_identity, dkg_key
    from tanglejobs.signing import to_hex

    alice_role_key = alice_role()
    bob_role_key = bob_role()
    print("ALICE:", dev_identity("Alice").ss58_address)
    print("BOB:", dev_identity("Bob").ss58_address)
    print("ALICE_ROLE_SEED:", alice_role_key.seed_hex)
    print("BOB_ROLE_SEED:", bob_role_key.seed_hex)
    print("ALICE_ROLE:", to_hex(alice_role_key.public_key))
    print("BOB_ROLE:", to_hex(bob_role_key.public_key))
    # job id is irrelevant to the signatures
    result = build_job_result(0, [alice_role_key, bob_role_key], dkg_key())
    print("DKG_KEY:", result.key)
    for name, sig in zip(("ALICE", "BOB"), result.signatures):
        print(f"{name}_SIGNATURE:", sig)


def next_job_id_command():
    url = sys.argv[2] if len(sys.argv) > 2 else ws_url()
    try:
        substrate = connect(url)
    except ConnectionError as e:
        print(f"❌ {e}")
        sys.exit(1)
    try:
        print(next_job_id(substrate))
    except SubstrateRequestException as e:
        print(f"❌ {e}")
        sys.exit(1)
    finally:
        substrate.close()


def main():
    """CLI entry point."""
    if len(sys.argv) < 2:
        print("tanglejobs CLI")
        print("\nCommands:")
        print("  tanglejobs run [ws_url]          — Create role profiles, submit a DKG job and its result")
        print("  tanglejobs keys                  — Print dev identities, role keys and DKG signatures")
        print("  tanglejobs next-job-id [ws_url]  — Print the chain's next job id")
        print("\nExamples:")
        print("  tanglejobs run")
        print("  tanglejobs run ws://127.0.0.1:9944")
        sys.exit(1)

    command = sys.argv[1]

    if command == "run":
        run_command()
    elif command == "keys":
        keys_command()
    elif command == "next-job-id":
        next_job_id_command()
    else:
        print(f"Unknown command: {command}")
        print("Use 'tanglejobs run [ws_url]', 'tanglejobs keys', 'tanglejobs next-job-id [ws_url]'")
        sys.exit(1)


if __name__ == "__main__":
    main()
