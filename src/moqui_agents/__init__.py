"""Moqui agents: an MCP server exposing agent role documents over stdio."""

__version__ = "1.0.0"
