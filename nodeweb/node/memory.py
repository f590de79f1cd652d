"""
In-Memory Node Collaborators
============================

Dict-backed leader store and node state. Used when the gateway runs
standalone (nodeweb serve) and in tests. Writers are the consensus engine or
the test harness; the gateway only reads.
"""

import logging
import threading
from typing import Any, Dict, List, Optional, Sequence

from nodeweb.models.types import SlotLeaders

logger = logging.getLogger(__name__)

GENESIS_HEAD_HASH = "0" * 64


class InMemoryLeaderStore:
    """
    Slot leaders keyed by epoch.

    Example:
        store = InMemoryLeaderStore()
        store.put(7, ["a1", "b2", "c3"])
        store.lookup(7)   # ["a1", "b2", "c3"]
        store.lookup(8)   # None
    """

    def __init__(self, leaders: Optional[Dict[int, SlotLeaders]] = None):
        self._lock = threading.Lock()
        self._leaders: Dict[int, SlotLeaders] = {}
        for epoch, epoch_leaders in (leaders or {}).items():
            self.put(epoch, epoch_leaders)

    def put(self, epoch: int, leaders: SlotLeaders) -> None:
        if epoch < 0:
            raise ValueError(f"Epoch must be non-negative, got {epoch}")
        with self._lock:
            self._leaders[epoch] = list(leaders)
        logger.debug("Stored %d slot leaders for epoch %d", len(leaders), epoch)

    def lookup(self, epoch: int) -> Optional[SlotLeaders]:
        with self._lock:
            leaders = self._leaders.get(epoch)
        return list(leaders) if leaders is not None else None

    def epochs(self) -> List[int]:
        with self._lock:
            return sorted(self._leaders)


class InMemoryNodeState:
    """Head block hash and local pending transactions."""

    def __init__(self, head_hash: str = GENESIS_HEAD_HASH, local_txs: Optional[Sequence[Any]] = None):
        self._lock = threading.Lock()
        self._head_hash = head_hash
        self._local_txs: List[Any] = list(local_txs or [])

    def head_hash(self) -> str:
        with self._lock:
            return self._head_hash

    def set_head_hash(self, head_hash: str) -> None:
        with self._lock:
            self._head_hash = head_hash

    def local_txs(self) -> Sequence[Any]:
        with self._lock:
            return tuple(self._local_txs)

    def add_local_tx(self, tx: Any) -> None:
        with self._lock:
            self._local_txs.append(tx)

    def clear_local_txs(self) -> None:
        """Drop pending transactions (e.g. once they made it into a block)."""
        with self._lock:
            self._local_txs.clear()
