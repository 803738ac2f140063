"""Stdio transport server for local MCP clients such as Claude Desktop.

Usage:
    python -m printful_server.stdio_server

Environment Variables (required):
    PRINTFUL_API_TOKEN - Printful private token or OAuth access token

Environment Variables (optional):
    PRINTFUL_STORE_ID - Store id for account-level tokens
    PRINTFUL_BASE_URL - API base URL (defaults to production)
    MCP_LOG_LEVEL - Logging level (default: INFO)
    MCP_LOG_FILE - Log file path with rotation
"""

from .server import server


def main():
    """Run the MCP server using stdio transport.

    Reuses the FastMCP server instance from server.py so stdio and HTTP
    expose the same tools.
    """
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
