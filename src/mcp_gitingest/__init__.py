"""MCP server exposing the gitingest repository digest as an agent tool."""

__version__ = "0.1.0"
