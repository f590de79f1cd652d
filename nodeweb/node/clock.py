"""
Slot Oracles
============

ClockSlotOracle derives the current slot from wall-clock time:

    absolute_slot = (now - system_start) // slot_duration
    epoch         = absolute_slot // epoch_slots
    slot          = absolute_slot % epoch_slots

FixedSlotOracle always answers the same slot (tests, offline tooling).
"""

import time
from typing import Callable

from nodeweb.models.types import SlotId


class ClockSlotOracle:
    """
    Current slot computed from system start and slot duration.

    Args:
        system_start: Unix timestamp of slot 0 of epoch 0
        slot_duration: Slot length in seconds
        epoch_slots: Number of slots per epoch
        clock: Returns the current unix time (defaults to time.time)
    """

    def __init__(
        self,
        system_start: float,
        slot_duration: float,
        epoch_slots: int,
        clock: Callable[[], float] = time.time,
    ):
        if slot_duration <= 0:
            raise ValueError(f"Slot duration must be positive, got {slot_duration}")
        if epoch_slots <= 0:
            raise ValueError(f"Epoch length must be positive, got {epoch_slots}")
        self.system_start = system_start
        self.slot_duration = slot_duration
        self.epoch_slots = epoch_slots
        self._clock = clock

    def current(self) -> SlotId:
        elapsed = self._clock() - self.system_start
        if elapsed < 0:
            raise RuntimeError(
                f"System has not started yet ({-elapsed:.0f}s until system start)"
            )
        absolute_slot = int(elapsed // self.slot_duration)
        return SlotId(
            epoch=absolute_slot // self.epoch_slots,
            slot=absolute_slot % self.epoch_slots,
        )


class FixedSlotOracle:
    """Oracle pinned to one slot; move it with set()."""

    def __init__(self, slot_id: SlotId):
        self._slot_id = slot_id

    def set(self, slot_id: SlotId) -> None:
        self._slot_id = slot_id

    def current(self) -> SlotId:
        return self._slot_id
