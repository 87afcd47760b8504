"""Infrastructure Layer: Attio HTTP client, MCP stdio transport, logging."""
