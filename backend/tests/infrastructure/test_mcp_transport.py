"""MCP Transport Adapter tests: envelope <-> MCP result mapping.

Tests cover:
    - All four request handlers registered (and so advertised as capabilities)
    - tools/call keeps isError and the structured error block
    - resources/list and resources/read map envelope data to SDK types
    - Resource errors surface as McpError carrying the diagnostic text, with
      INVALID_PARAMS for local rejections and INTERNAL_ERROR otherwise
    - open_stdio wraps transport setup failures in TransportFailureError
"""

from contextlib import AsyncExitStack, asynccontextmanager
from importlib.metadata import version

import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from attio_mcp.core.errors import TransportFailureError
from attio_mcp.infrastructure import mcp_transport
from attio_mcp.infrastructure.mcp_transport import build_server, open_stdio
from attio_mcp.services.request_router import RequestRouter
from tests.services.fake_attio import FakeAttioClient, company_record, remote_failure


def _server(client):
    return build_server(RequestRouter(client), "attio-mcp-server", "0.0.1")


def test_all_request_kinds_registered():
    server = _server(FakeAttioClient())
    for request_type in (
        types.ListResourcesRequest, types.ReadResourceRequest,
        types.ListToolsRequest, types.CallToolRequest,
    ):
        assert request_type in server.request_handlers


@pytest.mark.asyncio
async def test_call_tool_success():
    server = _server(FakeAttioClient(default={"data": []}))
    result = await server.request_handlers[types.CallToolRequest](types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="search-companies", arguments={"query": "Acme"}),
    ))
    assert result.root.isError is False
    assert result.root.content[0].text == "Found 0 companies:\n"


@pytest.mark.asyncio
async def test_call_tool_error_keeps_error_block():
    server = _server(FakeAttioClient(default=remote_failure(400)))
    result = await server.request_handlers[types.CallToolRequest](types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(
            name="create-company-note",
            arguments={"companyId": "c1", "noteTitle": "T", "noteText": "Body"},
        ),
    ))
    dumped = result.root.model_dump()
    assert dumped["isError"] is True
    assert dumped["error"]["code"] == 400
    assert "Status: 400" in result.root.content[0].text


@pytest.mark.asyncio
async def test_list_tools_maps_registry():
    server = _server(FakeAttioClient())
    result = await server.request_handlers[types.ListToolsRequest](
        types.ListToolsRequest(method="tools/list"),
    )
    names = [t.name for t in result.root.tools]
    assert "search-companies" in names
    assert len(names) == 9


@pytest.mark.asyncio
async def test_list_resources_maps_companies():
    server = _server(FakeAttioClient(default={"data": [company_record("c1", "Acme")]}))
    result = await server.request_handlers[types.ListResourcesRequest](
        types.ListResourcesRequest(method="resources/list"),
    )
    resource = result.root.resources[0]
    assert str(resource.uri) == "attio://companies/c1"
    assert resource.name == "Acme"
    assert resource.mimeType == "application/json"


@pytest.mark.asyncio
async def test_read_resource_maps_contents():
    server = _server(FakeAttioClient(default={"data": company_record("c1", "Acme")}))
    result = await server.request_handlers[types.ReadResourceRequest](types.ReadResourceRequest(
        method="resources/read",
        params=types.ReadResourceRequestParams(uri="attio://companies/c1"),
    ))
    contents = result.root.contents[0]
    assert contents.mimeType == "application/json"
    assert '"Acme"' in contents.text


@pytest.mark.asyncio
async def test_read_resource_failure_raises_mcp_error():
    server = _server(FakeAttioClient(default=remote_failure(404, {"error": "not found"})))
    with pytest.raises(McpError) as exc_info:
        await server.request_handlers[types.ReadResourceRequest](types.ReadResourceRequest(
            method="resources/read",
            params=types.ReadResourceRequestParams(uri="attio://companies/missing"),
        ))
    assert "Status: 404" in exc_info.value.error.message
    assert exc_info.value.error.data["code"] == 404
    assert exc_info.value.error.code == types.INTERNAL_ERROR


@pytest.mark.asyncio
async def test_open_stdio_wraps_failures(monkeypatch):
    @asynccontextmanager
    async def broken_stdio():
        raise OSError("stdin is closed")
        yield

    monkeypatch.setattr(mcp_transport, "stdio_server", broken_stdio)
    async with AsyncExitStack() as stack:
        with pytest.raises(TransportFailureError) as exc_info:
            await open_stdio(stack)
    assert "stdin is closed" in exc_info.value.message


@pytest.mark.asyncio
async def test_read_resource_rejection_is_invalid_params():
    client = FakeAttioClient()
    server = _server(client)
    with pytest.raises(McpError) as exc_info:
        await server.request_handlers[types.ReadResourceRequest](types.ReadResourceRequest(
            method="resources/read",
            params=types.ReadResourceRequestParams(uri="attio://deals/d1"),
        ))
    assert exc_info.value.error.code == types.INVALID_PARAMS
    assert exc_info.value.error.data["code"] == 400
    assert client.calls == []


def test_sdk_is_within_supported_major():
    # low-level Server and request_handlers are the 1.x API
    assert version("mcp").split(".")[0] == "1"
