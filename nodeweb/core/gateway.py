"""
Query Gateway
=============

Every operation the HTTP API exposes, as plain synchronous calls.

Base operations:
- current_slot: Current SlotId from the slot oracle
- leaders: Slot leaders for an epoch (current when omitted)
- identity: This node's public key
- head_hash: Hash of the head block header
- local_txs_num: Number of pending local transactions

SSC operations:
- toggle_participation: Enable/disable SSC participation (only write)
- our_secret: Not implemented, always raises SecretNotImplemented
- ssc_stage: SSC stage of the current slot

Collaborator exceptions are not caught here; the transport layer decides how
to answer them.
"""

import logging
from typing import Optional

from nodeweb.core.errors import SecretNotImplemented
from nodeweb.core.leaders import LeaderLookup
from nodeweb.models.types import SlotId, SlotLeaders, SscStage
from nodeweb.node.context import NodeContext
from nodeweb.node.interfaces import CurrentSlotOracle, LeaderStore, NodeState
from nodeweb.utils.slotting import SlotPhaseClassifier

logger = logging.getLogger(__name__)


class QueryGateway:
    """
    Binds the node collaborators together behind the gateway operations.

    Usage:
        gateway = QueryGateway(
            slot_oracle=ClockSlotOracle(system_start, 15, 12),
            leader_store=InMemoryLeaderStore(),
            node_context=NodeContext(public_key="ab12..."),
            node_state=InMemoryNodeState(),
            classifier=SlotPhaseClassifier(SscWindows.for_security_param(2)),
        )
        gateway.ssc_stage()
    """

    def __init__(
        self,
        slot_oracle: CurrentSlotOracle,
        leader_store: LeaderStore,
        node_context: NodeContext,
        node_state: NodeState,
        classifier: SlotPhaseClassifier,
    ):
        self.slot_oracle = slot_oracle
        self.node_context = node_context
        self.node_state = node_state
        self.classifier = classifier
        self.leader_lookup = LeaderLookup(slot_oracle, leader_store)

    # ------------------------------------------------------------------
    # Base operations
    # ------------------------------------------------------------------

    def current_slot(self) -> SlotId:
        return self.slot_oracle.current()

    def leaders(self, epoch: Optional[int] = None) -> SlotLeaders:
        """Raises LeadersNotFound if leaders for the epoch are not known."""
        return self.leader_lookup.leaders_for(epoch)

    def identity(self) -> str:
        return self.node_context.public_key

    def head_hash(self) -> str:
        return self.node_state.head_hash()

    def local_txs_num(self) -> int:
        return len(self.node_state.local_txs())

    # ------------------------------------------------------------------
    # SSC operations
    # ------------------------------------------------------------------

    def toggle_participation(self, enable: bool) -> None:
        self.node_context.participate_ssc.set(enable)
        logger.info("SSC participation %s", "enabled" if enable else "disabled")

    def our_secret(self):
        raise SecretNotImplemented()

    def ssc_stage(self) -> SscStage:
        return self.classifier.classify(self.current_slot().slot)
