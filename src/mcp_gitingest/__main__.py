# File: src/mcp_gitingest/__main__.py
from __future__ import annotations

import os
import sys

from .server import mcp
from .settings import Settings
from .utils.logging import configure_logging, get_logger


def main() -> None:
    """
    Entry point for running the server via the official SDK runner.

    Examples:
      # stdio mode (default; MCP Inspector, desktop agents)
      python -m mcp_gitingest

      # streamable HTTP on 0.0.0.0:8000, mounted at /mcp
      MCP_TRANSPORT=streamable-http python -m mcp_gitingest
    """
    if any(a in ("-h", "--help") for a in sys.argv[1:]):
        sys.stderr.write("mcp-gitingest: runs the gitingest MCP server using the official SDK runner.\n")
        sys.stderr.flush()
        return

    settings = Settings.from_env()
    configure_logging(level=settings.log_level, structured=settings.log_json)
    log = get_logger("mcp.gitingest.main")

    transport = os.getenv("MCP_TRANSPORT", "stdio").strip().lower()

    # Configure settings BEFORE run()
    host = os.getenv("MCP_HOST", "0.0.0.0")
    port = int(os.getenv("MCP_PORT", "8000"))
    mcp.settings.host = host
    mcp.settings.port = port

    if transport == "streamable-http":
        mcp.settings.streamable_http_path = os.getenv("MCP_MOUNT_PATH", "/mcp")
    elif transport == "sse":
        mcp.settings.sse_path = os.getenv("MCP_SSE_PATH", "/sse")

    # Optional stateless JSON mode for curl/browser testing
    if os.getenv("MCP_STATELESS_JSON", "").lower() in {"1", "true", "yes"}:
        mcp.settings.stateless_http = True
        mcp.settings.json_response = True

    log.info(
        "server.start",
        transport=transport,
        host=host,
        port=port,
        gitingest_bin=settings.gitingest_bin,
    )
    mcp.run(transport=transport)

if __name__ == "__main__":
    main()
