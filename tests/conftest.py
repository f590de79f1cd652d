import pytest
from fastapi.testclient import TestClient

from nodeweb.config import GatewayConfig
from nodeweb.core.gateway import QueryGateway
from nodeweb.main import create_app
from nodeweb.models.types import SlotId
from nodeweb.node.clock import FixedSlotOracle
from nodeweb.node.context import NodeContext, ParticipationFlag
from nodeweb.node.memory import InMemoryLeaderStore, InMemoryNodeState
from nodeweb.utils.slotting import SlotPhaseClassifier, SlotWindow, SscWindows

PUBLIC_KEY = "ab" * 32
EPOCH_7_LEADERS = ["key-a", "key-b", "key-c", "key-a", "key-d"]


@pytest.fixture
def windows():
    """Commitment [0,5), opening [10,15), shares [20,25), 30-slot epochs."""
    return SscWindows(
        commitment=SlotWindow(start=0, end=5),
        opening=SlotWindow(start=10, end=15),
        shares=SlotWindow(start=20, end=25),
        epoch_slots=30,
    )


@pytest.fixture
def slot_oracle():
    return FixedSlotOracle(SlotId(epoch=10, slot=3))


@pytest.fixture
def leader_store():
    return InMemoryLeaderStore({7: EPOCH_7_LEADERS})


@pytest.fixture
def node_context():
    return NodeContext(public_key=PUBLIC_KEY, participate_ssc=ParticipationFlag(False))


@pytest.fixture
def node_state():
    return InMemoryNodeState(head_hash="cd" * 32, local_txs=["tx-1", "tx-2", "tx-3"])


@pytest.fixture
def gateway(slot_oracle, leader_store, node_context, node_state, windows):
    return QueryGateway(
        slot_oracle=slot_oracle,
        leader_store=leader_store,
        node_context=node_context,
        node_state=node_state,
        classifier=SlotPhaseClassifier(windows),
    )


@pytest.fixture
def client(gateway):
    app = create_app(gateway, GatewayConfig(REQUEST_LOGGING=False))
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
