# File: src/mcp_gitingest/tools/__init__.py
from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .gitingest_digest import register_gitingest_digest

def register(mcp: FastMCP) -> None:
    register_gitingest_digest(mcp)
