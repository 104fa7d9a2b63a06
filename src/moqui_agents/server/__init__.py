"""MCP server components."""

from moqui_agents.server.app import create_server, run_stdio
from moqui_agents.server.dispatcher import ToolDispatcher, ToolName

__all__ = ["ToolDispatcher", "ToolName", "create_server", "run_stdio"]
