"""Deal and Member Handlers tests."""

import pytest

from attio_mcp.schemas.tool_arguments import (
    DealIdArguments, NoArguments, QueryDealsArguments, WorkspaceMemberArguments,
)
from attio_mcp.services.handle_deals import DEALS_QUERY_PATH, DealHandlers
from attio_mcp.services.handle_members import MemberHandlers
from tests.services.fake_attio import FakeAttioClient, remote_failure


@pytest.mark.asyncio
async def test_get_deal_details():
    client = FakeAttioClient(default={"data": {"id": {"record_id": "d1"}}})
    envelope = await DealHandlers(client).get_deal_details(DealIdArguments(dealId="d1"))
    assert client.calls == [("GET", "/objects/deals/records/d1", None)]
    assert envelope.text.startswith("Deal details for d1:\n")


@pytest.mark.asyncio
async def test_query_deals_passes_filter_through():
    deal_filter = {"stage": {"$eq": "won"}}
    client = FakeAttioClient(default={"data": []})
    envelope = await DealHandlers(client).query_deals(QueryDealsArguments(filter=deal_filter))
    assert client.calls == [("POST", DEALS_QUERY_PATH, {"filter": deal_filter, "limit": 100})]
    assert envelope.text.startswith("Deals found:\n")


@pytest.mark.asyncio
async def test_query_deals_rejected_filter_is_error_envelope():
    client = FakeAttioClient(default=remote_failure(400, {"error": "invalid filter"}))
    envelope = await DealHandlers(client).query_deals(
        QueryDealsArguments(filter={"bogus": 1}, limit=5),
    )
    assert envelope.is_error is True
    assert envelope.error.details == "invalid filter"


@pytest.mark.asyncio
async def test_list_workspace_members():
    client = FakeAttioClient(default={"data": [{"first_name": "Ada"}]})
    envelope = await MemberHandlers(client).list_workspace_members(NoArguments())
    assert client.calls == [("GET", "/workspace_members", None)]
    assert '"first_name": "Ada"' in envelope.text


@pytest.mark.asyncio
async def test_get_workspace_member_failure():
    client = FakeAttioClient(default=remote_failure(404))
    envelope = await MemberHandlers(client).get_workspace_member(
        WorkspaceMemberArguments(workspaceMemberId="m1"),
    )
    assert envelope.is_error is True
    assert "- URL: /workspace_members/m1" in envelope.text
