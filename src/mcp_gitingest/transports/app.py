# File: src/mcp_gitingest/transports/app.py
from __future__ import annotations

import contextlib

from starlette.applications import Starlette
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Mount, Route

from ..server import mcp
from ..settings import Settings
from ..utils.logging import configure_logging

# FastMCP keeps its default streamable_http_path="/mcp"; mounting at "/" makes the endpoint "/mcp".
mcp_app = mcp.streamable_http_app()

async def health(_request):
    return JSONResponse(
        {
            "status": "ok",
            "name": "mcp-gitingest",
            "transport": "streamable-http",
            "endpoint": "/mcp",
        },
        status_code=200,
    )

async def root(_request):
    return PlainTextResponse("mcp-gitingest\ntransport: streamable-http at /mcp")

# Lifespan: start/stop the MCP session manager so POST /mcp works
@contextlib.asynccontextmanager
async def lifespan(_app: Starlette):
    settings = Settings.from_env()
    configure_logging(level=settings.log_level, structured=settings.log_json)
    async with contextlib.AsyncExitStack() as stack:
        await stack.enter_async_context(mcp.session_manager.run())
        yield

# Explicit routes first; the catch-all mount would otherwise shadow them.
routes = [
    Route("/health", endpoint=health, methods=["GET"]),
    Route("/", endpoint=root, methods=["GET"]),
    Mount("/", app=mcp_app),
]

app = Starlette(routes=routes, lifespan=lifespan)
