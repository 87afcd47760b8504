"""Tools Registry: flat list of every MCP tool schema the server advertises.

Invariants:
    - ALL_TOOLS names match ToolDispatch's table one-to-one (checked in tests)
    - Order is stable: tool-list responses are identical across calls

Design Decisions:
    - Explicit imports from each define_*_tools.py: no auto-discovery (ADR: ExMA)
"""

from attio_mcp.services.define_company_tools import TOOLS_COMPANIES
from attio_mcp.services.define_deal_tools import TOOLS_DEALS
from attio_mcp.services.define_member_tools import TOOLS_MEMBERS


ALL_TOOLS: list[dict] = [
    *TOOLS_COMPANIES,    # 4 tools
    *TOOLS_DEALS,        # 3 tools
    *TOOLS_MEMBERS,      # 2 tools
]
# Total: 9


def get_tool_names() -> list[str]:
    return [t["name"] for t in ALL_TOOLS]
