"""Tool Dispatch: explicit routing from tool_name to (argument schema, handler).

Invariants:
    - Every tool->handler mapping is visible, no getattr magic, no auto-discovery
    - Table built once in __init__ and exposed read-only (MappingProxyType)
    - Unknown tools and invalid arguments return error envelopes (never raise)
    - Arguments validated before the handler runs: zero network I/O on bad input
    - Every tool call logged with its outcome

Design Decisions:
    - Explicit dict over if/elif chain: the dispatch is total and each entry
      is testable on its own (ADR: ExMA no convention-over-config)
    - Handlers split by record family: max ~4 methods per class (ADR: ExMA no god objects)
    - Faults other than AttioBridgeError propagate to RequestRouter, which owns
      the last-resort envelope
"""

import logging
from types import MappingProxyType
from typing import Any, Awaitable, Callable, NamedTuple

from attio_mcp.core.envelope import build_domain_error
from attio_mcp.core.errors import AttioBridgeError, UnknownToolError
from attio_mcp.infrastructure.attio_client import AttioClient
from attio_mcp.schemas.envelope import Envelope
from attio_mcp.schemas.tool_arguments import (
    CompanyUriArguments,
    CreateCompanyNoteArguments,
    CreateDealNoteArguments,
    DealIdArguments,
    NoArguments,
    QueryDealsArguments,
    ReadCompanyNotesArguments,
    SearchCompaniesArguments,
    ToolArguments,
    WorkspaceMemberArguments,
)
from attio_mcp.services.extract_arguments import extract_arguments
from attio_mcp.services.handle_companies import CompanyHandlers
from attio_mcp.services.handle_deals import DealHandlers
from attio_mcp.services.handle_members import MemberHandlers
from attio_mcp.services.handle_notes import NoteHandlers

logger = logging.getLogger(__name__)


class ToolEntry(NamedTuple):
    arguments: type[ToolArguments]
    handler: Callable[[Any], Awaitable[Envelope]]


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, client: AttioClient):
        companies = CompanyHandlers(client)
        notes = NoteHandlers(client)
        deals = DealHandlers(client)
        members = MemberHandlers(client)

        # ADR: every mapping explicit, adding a tool requires editing this dict
        self._handlers = MappingProxyType({
            # Companies (4 tools)
            "search-companies": ToolEntry(SearchCompaniesArguments, companies.search_companies),
            "read-company-details": ToolEntry(CompanyUriArguments, companies.read_company_details),
            "read-company-notes": ToolEntry(ReadCompanyNotesArguments, notes.read_company_notes),
            "create-company-note": ToolEntry(CreateCompanyNoteArguments, notes.create_company_note),

            # Deals (3 tools)
            "get-deal-details": ToolEntry(DealIdArguments, deals.get_deal_details),
            "create-deal-note": ToolEntry(CreateDealNoteArguments, notes.create_deal_note),
            "query-deals": ToolEntry(QueryDealsArguments, deals.query_deals),

            # Workspace members (2 tools)
            "list-workspace-members": ToolEntry(NoArguments, members.list_workspace_members),
            "get-workspace-member": ToolEntry(WorkspaceMemberArguments, members.get_workspace_member),
        })

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def execute(self, tool_name: str, arguments: dict | None) -> Envelope:
        """Validate arguments, run the handler. Returns an envelope. Logs every call."""
        entry = self._handlers.get(tool_name)
        if entry is None:
            result = build_domain_error(UnknownToolError(tool_name))
            self._log_tool_call(tool_name, result)
            return result
        try:
            args = extract_arguments(entry.arguments, arguments, tool_name)
        except AttioBridgeError as e:
            result = build_domain_error(e)
            self._log_tool_call(tool_name, result, e.code)
            return result
        result = await entry.handler(args)
        self._log_tool_call(tool_name, result)
        return result

    def _log_tool_call(
        self, tool_name: str, result: Envelope, error_code: str | None = None,
    ) -> None:
        if not result.is_error:
            logger.info(f"Tool '{tool_name}' ok", extra={"tool_name": tool_name})
            return
        if error_code is None and result.error is not None:
            details = result.error.details
            if isinstance(details, dict):
                error_code = details.get("error_code")
        logger.warning(
            f"Tool '{tool_name}' failed: {result.error.message if result.error else ''}",
            extra={
                "tool_name": tool_name,
                "error_code": error_code,
                "status": result.error.code if result.error else None,
            },
        )
