"""Define Deal Tools: MCP tool schemas for deal reads, deal notes and filtered queries.

Design Decisions:
    - query-deals `filter` typed only as "object": Attio owns the filter grammar
"""

TOOLS_DEALS = [
    {
        "name": "get-deal-details",
        "description": "Get details of a specific deal",
        "inputSchema": {
            "type": "object",
            "properties": {
                "dealId": {
                    "type": "string",
                    "description": "ID of the deal to fetch details for",
                },
            },
            "required": ["dealId"],
        },
    },
    {
        "name": "create-deal-note",
        "description": "Add a new note to a deal",
        "inputSchema": {
            "type": "object",
            "properties": {
                "dealId": {
                    "type": "string",
                    "description": "ID of the deal to add the note to",
                },
                "noteTitle": {
                    "type": "string",
                    "description": "Title of the note",
                },
                "noteText": {
                    "type": "string",
                    "description": "Text content of the note",
                },
            },
            "required": ["dealId", "noteTitle", "noteText"],
        },
    },
    {
        "name": "query-deals",
        "description": "Queries deals with filters in Attio",
        "inputSchema": {
            "type": "object",
            "properties": {
                "filter": {
                    "type": "object",
                    "description": "Filter object for the query",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of results to return (optional, default 100)",
                },
            },
            "required": ["filter"],
        },
    },
]
