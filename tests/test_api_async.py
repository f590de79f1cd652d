"""
Async transport tests: many requests in flight against one app.
"""

import asyncio

import httpx
import pytest
import pytest_asyncio

from nodeweb.config import GatewayConfig
from nodeweb.main import create_app


@pytest.fixture
def app(gateway):
    return create_app(gateway, GatewayConfig(REQUEST_LOGGING=False))


@pytest_asyncio.fixture
async def async_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


class TestConcurrentToggles:
    """Concurrent PUT /ssc/toggle requests resolve as last-write-wins."""

    @pytest.mark.asyncio
    async def test_final_value_is_last_applied_write(self, async_client, node_context, mocker):
        flag = node_context.participate_ssc
        spy = mocker.spy(flag, "set")
        values = [i % 3 != 0 for i in range(30)]

        responses = await asyncio.gather(
            *(async_client.put(f"/ssc/toggle/{str(value).lower()}") for value in values)
        )

        assert all(response.status_code == 200 for response in responses)
        assert spy.call_count == len(values)
        assert sorted(call.args[0] for call in spy.call_args_list) == sorted(values)
        assert flag.get() is spy.call_args_list[-1].args[0]

    @pytest.mark.asyncio
    async def test_reads_during_toggles_are_booleans(self, async_client, node_context):
        flag = node_context.participate_ssc
        seen = []

        async def toggle(value):
            response = await async_client.put(f"/ssc/toggle/{str(value).lower()}")
            seen.append(flag.get())
            return response

        await asyncio.gather(*(toggle(i % 2 == 0) for i in range(20)))

        assert len(seen) == 20
        assert all(isinstance(value, bool) for value in seen)


class TestConcurrentQueries:
    """Read endpoints answer consistently under concurrent load."""

    @pytest.mark.asyncio
    async def test_leaders_and_stage_together(self, async_client):
        leaders, missing, stage = await asyncio.gather(
            async_client.get("/leaders", params={"epoch": 7}),
            async_client.get("/leaders", params={"epoch": 8}),
            async_client.get("/ssc/stage"),
        )
        assert leaders.status_code == 200
        assert missing.status_code == 404
        assert missing.json()["descriptor"] == "for the 8th epoch"
        assert stage.json() == "commitment"

    @pytest.mark.asyncio
    async def test_collaborator_called_once_per_request(self, async_client, leader_store, mocker):
        spy = mocker.spy(leader_store, "lookup")

        responses = await asyncio.gather(
            *(async_client.get("/leaders", params={"epoch": 7}) for _ in range(10))
        )

        assert [response.status_code for response in responses] == [200] * 10
        assert spy.call_count == 10
        assert all(call.args[0] == 7 for call in spy.call_args_list)
