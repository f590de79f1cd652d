"""
Node State Types
================

Value types read from the node: slot identifiers, slot leaders and
SSC stages.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from nodeweb.utils.formatting import ordinal


# Ordered public keys, one per slot index of an epoch
SlotLeaders = List[str]


class SscStage(str, Enum):
    """Stage of the SSC (shared seed computation) sub-protocol for a slot."""
    COMMITMENT = "commitment"
    OPENING = "opening"
    SHARES = "shares"
    ORDINARY = "ordinary"


class SlotId(BaseModel):
    """
    A point in consensus time.

    Attributes:
        epoch: Epoch index (0-indexed)
        slot: Slot index within the epoch
    """
    model_config = ConfigDict(frozen=True)

    epoch: int = Field(..., ge=0, description="Epoch index")
    slot: int = Field(..., ge=0, description="Slot index within the epoch")

    def __str__(self):
        return f"{ordinal(self.slot)} slot of {ordinal(self.epoch)} epoch"
