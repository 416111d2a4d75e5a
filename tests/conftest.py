"""
Fake substrate client: records compose/sign/submit calls and returns canned
receipts, so the flow runs without a node.
"""

import pytest


class FakeStorageValue:
    def __init__(self, value):
        self.value = value


class FakeEventRecord:
    def __init__(self, module_id, event_id, attributes=None):
        self.value = {
            "phase": "ApplyExtrinsic",
            "extrinsic_idx": 1,
            "module_id": module_id,
            "event_id": event_id,
            "attributes": attributes,
        }


class FakeReceipt:
    def __init__(self, block_hash, extrinsic_hash, events, is_success=True, error_message=None):
        self.block_hash = block_hash
        self.extrinsic_hash = extrinsic_hash
        self.triggered_events = events
        self.is_success = is_success
        self.error_message = error_message


class FakeSubstrate:
    # Events emitted per call, keyed by (module, function)
    EVENTS = {
        ("Roles", "create_profile"): [("Roles", "ProfileCreated")],
        ("Jobs", "submit_job"): [("Jobs", "JobSubmitted")],
        ("Jobs", "submit_job_result"): [("Jobs", "JobResultSubmitted")],
    }

    def __init__(self, next_job_id=7, fail_on=None, reject_with=None):
        self.next_job_id = next_job_id
        self.fail_on = fail_on
        # raised by submit_extrinsic, as when the node refuses the extrinsic
        self.reject_with = reject_with
        self.submitted = []
        self.queries = []
        self.closed = False

    def compose_call(self, call_module, call_function, call_params):
        return {"module": call_module, "function": call_function, "params": call_params}

    def create_signed_extrinsic(self, call, keypair):
        return {"call": call, "signer": keypair.ss58_address}

    def submit_extrinsic(self, extrinsic, wait_for_inclusion=False):
        assert wait_for_inclusion, "extrinsics must wait for inclusion"
        if self.reject_with is not None:
            raise self.reject_with
        call = extrinsic["call"]
        key = (call["module"], call["function"])
        self.submitted.append(extrinsic)
        n = len(self.submitted)
        events = [FakeEventRecord(m, e, {"job_id": self.next_job_id}) for m, e in self.EVENTS.get(key, [])]
        if key == ("Jobs", "submit_job"):
            self.next_job_id += 1
        if self.fail_on == key:
            events.append(FakeEventRecord("System", "ExtrinsicFailed"))
            return FakeReceipt(f"0x{n:064x}", f"0x{n:064x}", events, is_success=False, error_message={"name": "InvalidJobParams"})
        events.append(FakeEventRecord("System", "ExtrinsicSuccess"))
        return FakeReceipt(f"0x{n:064x}", f"0x{n:064x}", events)

    def query(self, module, storage_function, params=None):
        self.queries.append((module, storage_function))
        if (module, storage_function) == ("Jobs", "NextJobId"):
            return FakeStorageValue(self.next_job_id)
        raise KeyError(f"{module}.{storage_function}")

    def close(self):
        self.closed = True


@pytest.fixture
def substrate():
    return FakeSubstrate()
