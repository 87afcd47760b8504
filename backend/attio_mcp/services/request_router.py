"""Request Router: maps each inbound request kind to exactly one handler.

Invariants:
    - route() is total: every request yields exactly one Envelope, it never raises
    - Kind resolution is a dict lookup; an unmapped kind yields UNKNOWN_OPERATION
    - AttioBridgeError becomes a domain error envelope; any other exception
      becomes the minimal fault envelope naming the tool (or, outside tool
      calls, the request kind) and the message
    - Stateless: nothing from one request is visible to the next

Design Decisions:
    - Router owns the last-resort catch so handlers stay free of broad excepts
      (ADR: one boundary, one place to audit)
    - Tool listing served from the static registry, no network call
"""

import logging
from types import MappingProxyType
from typing import Awaitable, Callable

from attio_mcp.core.domain_types import OperationKind, ResourceRef
from attio_mcp.core.envelope import build_domain_error, build_fault, build_success
from attio_mcp.core.errors import (
    AttioBridgeError, ErrorContext, InvalidResourceUriError, UnknownOperationError,
)
from attio_mcp.infrastructure.attio_client import AttioClient
from attio_mcp.schemas.envelope import Envelope, OperationRequest
from attio_mcp.services.handle_companies import CompanyHandlers
from attio_mcp.services.tool_dispatch import ToolDispatch
from attio_mcp.services.tools_registry import ALL_TOOLS

logger = logging.getLogger(__name__)


class RequestRouter:
    """Entry point for every request coming off the transport."""

    def __init__(self, client: AttioClient):
        self.companies = CompanyHandlers(client)
        self.tools = ToolDispatch(client)
        self._routes: MappingProxyType[
            OperationKind, Callable[[OperationRequest], Awaitable[Envelope]]
        ] = MappingProxyType({
            OperationKind.RESOURCE_LIST: self._list_resources,
            OperationKind.RESOURCE_READ: self._read_resource,
            OperationKind.TOOL_LIST: self._list_tools,
            OperationKind.TOOL_CALL: self._call_tool,
        })

    async def route(self, request: OperationRequest) -> Envelope:
        kind = getattr(request.kind, "value", str(request.kind))
        route = self._routes.get(request.kind)
        try:
            if route is None:
                raise UnknownOperationError(kind, ErrorContext(operation_kind=kind))
            return await route(request)
        except AttioBridgeError as e:
            logger.warning(
                f"{kind} rejected: {e.message}",
                extra={"kind": kind, "error_code": e.code, "tool_name": request.name},
            )
            return build_domain_error(e)
        except Exception as e:
            logger.error(
                f"Unhandled fault in {kind}: {e}",
                extra={"kind": kind, "tool_name": request.name},
                exc_info=True,
            )
            return build_fault(request.name, e, kind)

    async def _list_resources(self, request: OperationRequest) -> Envelope:
        return await self.companies.list_recent_companies()

    async def _read_resource(self, request: OperationRequest) -> Envelope:
        if not request.uri:
            raise InvalidResourceUriError("")
        ref = ResourceRef.parse_company(request.uri)
        return await self.companies.read_company_resource(ref)

    async def _list_tools(self, request: OperationRequest) -> Envelope:
        return build_success(f"{len(ALL_TOOLS)} tools available", data=ALL_TOOLS)

    async def _call_tool(self, request: OperationRequest) -> Envelope:
        return await self.tools.execute(request.name or "", request.arguments)
