"""Define Company Tools: MCP tool schemas for company search, reads and notes.

Invariants:
    - Property names match the aliases in schemas/tool_arguments.py
    - `required` lists exactly the fields the argument models require
"""

TOOLS_COMPANIES = [
    {
        "name": "search-companies",
        "description": "Search for companies by name",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Company name or keyword to search for",
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": "read-company-details",
        "description": "Read details of a company",
        "inputSchema": {
            "type": "object",
            "properties": {
                "uri": {
                    "type": "string",
                    "description": "URI of the company to read",
                },
            },
            "required": ["uri"],
        },
    },
    {
        "name": "read-company-notes",
        "description": "Read notes for a company",
        "inputSchema": {
            "type": "object",
            "properties": {
                "uri": {
                    "type": "string",
                    "description": "URI of the company to read notes for",
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of notes to fetch (optional, default 10)",
                },
                "offset": {
                    "type": "number",
                    "description": "Number of notes to skip (optional, default 0)",
                },
            },
            "required": ["uri"],
        },
    },
    {
        "name": "create-company-note",
        "description": "Add a new note to a company",
        "inputSchema": {
            "type": "object",
            "properties": {
                "companyId": {
                    "type": "string",
                    "description": "ID of the company to add the note to",
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
            "required": ["companyId", "noteTitle", "noteText"],
        },
    },
]
