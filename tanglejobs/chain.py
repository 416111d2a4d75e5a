"""
Node connection and extrinsic submission.

Sign with an identity, broadcast, block until the extrinsic is in a block,
then print block hash and emitted events. One extrinsic at a time.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from substrateinterface import Keypair, SubstrateInterface
from websocket import WebSocketException

from tanglejobs.config import debug_enabled, ss58_format, ws_url


class ChainEvent(BaseModel):
    """Event emitted while applying an extrinsic."""

    module_id: str
    event_id: str
    attributes: Optional[Any] = None

    def describe(self) -> str:
        return f"{self.module_id}.{self.event_id}:: {self.attributes}"


class InclusionReport(BaseModel):
    """What the node reported once the extrinsic landed in a block."""

    label: str
    block_hash: str
    extrinsic_hash: Optional[str] = None
    success: bool = True
    events: List[ChainEvent] = Field(default_factory=list)

    def find_event(self, module_id: str, event_id: str) -> Optional[ChainEvent]:
        for ev in self.events:
            if ev.module_id == module_id and ev.event_id == event_id:
                return ev
        return None


def connect(url: Optional[str] = None) -> SubstrateInterface:
    """
    Open a websocket connection and load runtime metadata (node ready).
    Raises ConnectionError if the node is unreachable.
    """
    url = url or ws_url()
    try:
        substrate = SubstrateInterface(url=url, ss58_format=ss58_format())
        substrate.init_runtime()
    except (OSError, WebSocketException) as e:
        raise ConnectionError(
            f"Cannot connect to node: {url}. Start a local node or set TANGLE_WS_URL."
        ) from e
    if debug_enabled():
        print(f"[chain] Connected to {substrate.chain} ({url}), runtime {substrate.runtime_version}")
    return substrate


def next_job_id(substrate: SubstrateInterface) -> int:
    """Jobs.NextJobId: the id the next submitted job will get."""
    return int(substrate.query("Jobs", "NextJobId").value)


def _events_from_receipt(receipt: Any) -> List[ChainEvent]:
    events = []
    for record in receipt.triggered_events:
        value = record.value
        events.append(
            ChainEvent(
                module_id=value["module_id"],
                event_id=value["event_id"],
                attributes=value.get("attributes"),
            )
        )
    return events


def submit_and_watch(
    substrate: SubstrateInterface,
    call_module: str,
    call_function: str,
    call_params: Dict[str, Any],
    signer: Keypair,
    label: str,
) -> InclusionReport:
    """
    Compose, sign and submit a call; wait for block inclusion.

    Prints the block hash and every event. Raises RuntimeError if the
    extrinsic was included but failed to dispatch.
    """
    call = substrate.compose_call(
        call_module=call_module,
        call_function=call_function,
        call_params=call_params,
    )
    extrinsic = substrate.create_signed_extrinsic(call=call, keypair=signer)
    receipt = substrate.submit_extrinsic(extrinsic, wait_for_inclusion=True)

    report = InclusionReport(
        label=label,
        block_hash=receipt.block_hash,
        extrinsic_hash=receipt.extrinsic_hash,
        success=receipt.is_success,
        events=_events_from_receipt(receipt),
    )
    print(f"[{label}] Included at block hash {report.block_hash}")
    print(f"[{label}] Events:")
    for ev in report.events:
        print(f"\t{ev.describe()}")

    if not report.success:
        raise RuntimeError(
            f"[{label}] {call_module}.{call_function} failed in block {report.block_hash}: {receipt.error_message}"
        )
    return report
