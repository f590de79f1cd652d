"""
Leader Lookup
=============

Resolves slot leaders for an explicit epoch, or for the current epoch when
none is given. "Current" is asked from the slot oracle on every call.
"""

import logging
from typing import Optional

from nodeweb.core.errors import LeadersNotFound
from nodeweb.models.types import SlotLeaders
from nodeweb.node.interfaces import CurrentSlotOracle, LeaderStore

logger = logging.getLogger(__name__)


class LeaderLookup:

    def __init__(self, slot_oracle: CurrentSlotOracle, leader_store: LeaderStore):
        self.slot_oracle = slot_oracle
        self.leader_store = leader_store

    def resolve_epoch(self, epoch: Optional[int]) -> int:
        if epoch is not None:
            if epoch < 0:
                raise ValueError(f"Epoch must be non-negative, got {epoch}")
            return epoch
        return self.slot_oracle.current().epoch

    def leaders_for(self, epoch: Optional[int] = None) -> SlotLeaders:
        """
        Get slot leaders for an epoch.

        Args:
            epoch: Epoch index, or None for the current epoch

        Returns:
            Leaders exactly as stored, one per slot index

        Raises:
            LeadersNotFound: Leaders for the epoch are not known
            ValueError: Epoch is negative
        """
        resolved = self.resolve_epoch(epoch)
        leaders = self.leader_store.lookup(resolved)
        if leaders is None:
            logger.info("Leaders not known for epoch %d (requested: %s)",
                        resolved, "current" if epoch is None else epoch)
            raise LeadersNotFound(epoch)
        return leaders
