"""
Collaborator Protocols
======================

Narrow views of the node that the gateway is allowed to use. Concrete
implementations live with the consensus engine / storage; the ones in
nodeweb.node.memory and nodeweb.node.clock are reference versions.

All methods are synchronous and may block on I/O.
"""

from typing import Any, Optional, Protocol, Sequence

from nodeweb.models.types import SlotId, SlotLeaders


class CurrentSlotOracle(Protocol):
    """Source of the current point in consensus time."""

    def current(self) -> SlotId:
        ...


class LeaderStore(Protocol):
    """Read access to slot leaders computed by the consensus engine."""

    def lookup(self, epoch: int) -> Optional[SlotLeaders]:
        """
        Get slot leaders for an epoch.

        Returns:
            Ordered leaders, or None if leaders for the epoch are not known yet
        """
        ...


class NodeState(Protocol):
    """Read access to the node's chain state."""

    def head_hash(self) -> str:
        """Hash of the head block header (hex string)."""
        ...

    def local_txs(self) -> Sequence[Any]:
        """Pending transactions known locally and not yet in a block."""
        ...
