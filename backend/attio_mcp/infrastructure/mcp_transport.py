"""MCP Transport Adapter: maps MCP requests to OperationRequest and Envelope back to MCP results.

Invariants:
    - Exactly four request types registered: resources/list, resources/read,
      tools/list, tools/call (capabilities derived from this registration)
    - tools/call always answers with a CallToolResult; error envelopes keep
      isError=True and carry the structured `error` block as an extra field
    - Resource and tool-list requests have no isError slot: error envelopes are
      sent as a JSON-RPC error whose message is the diagnostic text
    - Locally rejected requests (error.code 400) map to INVALID_PARAMS, every
      other failure to INTERNAL_ERROR
    - open_stdio converts any failure to establish stdio into TransportFailureError

Design Decisions:
    - Handlers registered in server.request_handlers directly rather than via
      decorators: the adapter needs the full result object, not just content
      (ADR: explicit registration)
    - No business logic here: RequestRouter is tested without the SDK
"""

import logging
from contextlib import AsyncExitStack

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from attio_mcp.core.domain_types import OperationKind
from attio_mcp.core.errors import TransportFailureError
from attio_mcp.schemas.envelope import Envelope, OperationRequest
from attio_mcp.services.request_router import RequestRouter

logger = logging.getLogger(__name__)


def _raise_if_error(envelope: Envelope) -> None:
    if not envelope.is_error:
        return
    rejected = envelope.error is not None and envelope.error.code == 400
    raise McpError(types.ErrorData(
        code=types.INVALID_PARAMS if rejected else types.INTERNAL_ERROR,
        message=envelope.text,
        data=envelope.error.model_dump() if envelope.error else None,
    ))


def to_call_tool_result(envelope: Envelope) -> types.CallToolResult:
    extra = {"error": envelope.error.model_dump()} if envelope.error else {}
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=b.text) for b in envelope.content],
        isError=envelope.is_error,
        **extra,
    )


def build_server(router: RequestRouter, name: str, version: str) -> Server:
    """Create the MCP server with the four request handlers bound to `router`."""
    server = Server(name, version=version)

    async def list_resources(req: types.ListResourcesRequest) -> types.ServerResult:
        envelope = await router.route(OperationRequest(kind=OperationKind.RESOURCE_LIST))
        _raise_if_error(envelope)
        return types.ServerResult(types.ListResourcesResult(
            resources=[
                types.Resource(uri=r["uri"], name=r["name"], mimeType=r["mimeType"])
                for r in envelope.data or []
            ],
            description=envelope.text,
        ))

    async def read_resource(req: types.ReadResourceRequest) -> types.ServerResult:
        envelope = await router.route(OperationRequest(
            kind=OperationKind.RESOURCE_READ, uri=str(req.params.uri),
        ))
        _raise_if_error(envelope)
        return types.ServerResult(types.ReadResourceResult(
            contents=[
                types.TextResourceContents(uri=c["uri"], mimeType=c["mimeType"], text=c["text"])
                for c in envelope.data or []
            ],
        ))

    async def list_tools(req: types.ListToolsRequest) -> types.ServerResult:
        envelope = await router.route(OperationRequest(kind=OperationKind.TOOL_LIST))
        _raise_if_error(envelope)
        return types.ServerResult(types.ListToolsResult(
            tools=[
                types.Tool(
                    name=t["name"], description=t["description"], inputSchema=t["inputSchema"],
                )
                for t in envelope.data or []
            ],
        ))

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        envelope = await router.route(OperationRequest(
            kind=OperationKind.TOOL_CALL,
            name=req.params.name,
            arguments=req.params.arguments or {},
        ))
        return types.ServerResult(to_call_tool_result(envelope))

    server.request_handlers[types.ListResourcesRequest] = list_resources
    server.request_handlers[types.ReadResourceRequest] = read_resource
    server.request_handlers[types.ListToolsRequest] = list_tools
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def open_stdio(stack: AsyncExitStack):
    """Enter the stdio transport on `stack`. Returns (read_stream, write_stream)."""
    try:
        return await stack.enter_async_context(stdio_server())
    except Exception as e:
        raise TransportFailureError(str(e) or type(e).__name__) from e


async def run_server(server: Server, read_stream, write_stream) -> None:
    logger.info("Serving MCP over stdio")
    await server.run(read_stream, write_stream, server.create_initialization_options())
