"""
Tests for the reference node collaborators (slot oracles, in-memory stores).
"""

import pytest

from nodeweb.models.types import SlotId
from nodeweb.node.clock import ClockSlotOracle, FixedSlotOracle
from nodeweb.node.memory import GENESIS_HEAD_HASH, InMemoryLeaderStore, InMemoryNodeState


class TestClockSlotOracle:
    """Test wall-clock slot computation."""

    def test_first_slot(self):
        oracle = ClockSlotOracle(system_start=1000, slot_duration=10, epoch_slots=12, clock=lambda: 1000)
        assert oracle.current() == SlotId(epoch=0, slot=0)

    def test_slot_within_epoch(self):
        oracle = ClockSlotOracle(system_start=1000, slot_duration=10, epoch_slots=12, clock=lambda: 1035)
        assert oracle.current() == SlotId(epoch=0, slot=3)

    def test_epoch_rollover(self):
        # 12 slots * 10s = 120s per epoch; 1000 + 10 * 120 + 35
        oracle = ClockSlotOracle(system_start=1000, slot_duration=10, epoch_slots=12, clock=lambda: 2235)
        assert oracle.current() == SlotId(epoch=10, slot=3)

    def test_before_system_start(self):
        oracle = ClockSlotOracle(system_start=1000, slot_duration=10, epoch_slots=12, clock=lambda: 999)
        with pytest.raises(RuntimeError, match="not started"):
            oracle.current()

    def test_reads_clock_each_call(self):
        now = [1000.0]
        oracle = ClockSlotOracle(system_start=1000, slot_duration=10, epoch_slots=12, clock=lambda: now[0])
        assert oracle.current().slot == 0
        now[0] = 1025.0
        assert oracle.current().slot == 2

    @pytest.mark.parametrize("slot_duration,epoch_slots", [(0, 12), (-1, 12), (10, 0)])
    def test_invalid_parameters(self, slot_duration, epoch_slots):
        with pytest.raises(ValueError):
            ClockSlotOracle(system_start=0, slot_duration=slot_duration, epoch_slots=epoch_slots)


def test_fixed_slot_oracle():
    oracle = FixedSlotOracle(SlotId(epoch=1, slot=2))
    assert oracle.current() == SlotId(epoch=1, slot=2)
    oracle.set(SlotId(epoch=2, slot=0))
    assert oracle.current() == SlotId(epoch=2, slot=0)


def test_slot_id_str():
    assert str(SlotId(epoch=10, slot=3)) == "3rd slot of 10th epoch"


class TestInMemoryLeaderStore:
    """Test the in-memory leader store."""

    def test_lookup(self):
        store = InMemoryLeaderStore({7: ["a", "b"]})
        assert store.lookup(7) == ["a", "b"]
        assert store.lookup(8) is None
        assert store.epochs() == [7]

    def test_returned_list_is_a_copy(self):
        store = InMemoryLeaderStore({7: ["a", "b"]})
        leaders = store.lookup(7)
        leaders.append("c")
        assert store.lookup(7) == ["a", "b"]

    def test_rejects_negative_epoch(self):
        with pytest.raises(ValueError):
            InMemoryLeaderStore().put(-1, ["a"])


class TestInMemoryNodeState:
    """Test the in-memory node state."""

    def test_defaults(self):
        state = InMemoryNodeState()
        assert state.head_hash() == GENESIS_HEAD_HASH
        assert len(state.local_txs()) == 0

    def test_updates(self):
        state = InMemoryNodeState()
        state.set_head_hash("ff" * 32)
        state.add_local_tx({"id": 1})
        assert state.head_hash() == "ff" * 32
        assert list(state.local_txs()) == [{"id": 1}]
