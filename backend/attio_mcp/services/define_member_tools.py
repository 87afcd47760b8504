"""Define Member Tools: MCP tool schemas for workspace members."""

TOOLS_MEMBERS = [
    {
        "name": "list-workspace-members",
        "description": "Lists all members of the workspace in Attio",
        "inputSchema": {
            "type": "object",
            "properties": {},
            "required": [],
        },
    },
    {
        "name": "get-workspace-member",
        "description": "Gets details for a specific workspace member by ID in Attio",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceMemberId": {
                    "type": "string",
                    "description": "ID of the workspace member to fetch",
                },
            },
            "required": ["workspaceMemberId"],
        },
    },
]
