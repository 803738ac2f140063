"""HTTP transport entry point."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Mount, Route

from .server import create_mcp_server

load_dotenv()

logger = logging.getLogger("printful_server.server_http")


async def health(request: Request) -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse({
        "status": "ok",
        "transport": "streamable-http",
        "printful_token_configured": bool(os.getenv("PRINTFUL_API_TOKEN")),
    })


mcp_server = create_mcp_server()


def create_app():
    """Create ASGI app with CORS middleware and a health route."""
    mcp_app = mcp_server.http_app()

    # mcp_app.lifespan starts FastMCP's session manager
    app = Starlette(
        routes=[
            Route("/health", health, methods=["GET"]),
            Mount("/", app=mcp_app),
        ],
        lifespan=mcp_app.lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    return app


# ASGI app for uvicorn
app = create_app()


def main() -> None:
    """Run the MCP server with HTTP transport."""
    import uvicorn

    if not os.getenv("PRINTFUL_API_TOKEN"):
        logger.warning("PRINTFUL_API_TOKEN is not set; every tool call will fail")

    port = int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info("Starting Printful MCP Server on %s:%s", host, port)

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
