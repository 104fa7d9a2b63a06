"""FastMCP application serving the Moqui agent tools over stdio."""

import sys
from typing import Optional

from fastmcp import FastMCP

from moqui_agents import __version__
from moqui_agents.server.dispatcher import ToolDispatcher, ToolName

SERVER_NAME = "moqui-agents"
STARTUP_MESSAGE = "Moqui Agents MCP server running on stdio"


def create_server(dispatcher: ToolDispatcher) -> FastMCP:
    """Build a FastMCP server whose tools delegate to dispatcher."""
    mcp = FastMCP(SERVER_NAME, version=__version__)

    @mcp.tool
    async def list_agents() -> str:
        """List all Moqui agents with a one-line summary of each role."""
        return await dispatcher.call_tool(ToolName.LIST_AGENTS)

    @mcp.tool
    async def get_agent_description(agent: Optional[str] = None) -> str:
        """Get the full role document for a Moqui agent, e.g. architecture_agent."""
        return await dispatcher.call_tool(ToolName.GET_AGENT_DESCRIPTION, {"agent": agent})

    @mcp.tool
    async def get_collaboration_framework() -> str:
        """Get the agent collaboration framework document."""
        return await dispatcher.call_tool(ToolName.GET_COLLABORATION_FRAMEWORK)

    return mcp


async def run_stdio(mcp: FastMCP) -> None:
    """Serve on stdin/stdout until the client closes stdin."""
    print(STARTUP_MESSAGE, file=sys.stderr, flush=True)
    await mcp.run_async(transport="stdio", show_banner=False)
