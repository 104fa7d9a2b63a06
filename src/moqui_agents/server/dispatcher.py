"""Tool dispatcher for the Moqui agents server.

Every tool is a read-through: either the in-memory agent catalog or the
whole text of exactly one file.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Optional

import aiofiles
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData

from moqui_agents.core.config import ServerPaths
from moqui_agents.schemas.catalog import AgentCatalog
from moqui_agents.utils.logging import logger


class ToolName(str, Enum):
    """Tools exposed by the server."""
    LIST_AGENTS = "list_agents"
    GET_AGENT_DESCRIPTION = "get_agent_description"
    GET_COLLABORATION_FRAMEWORK = "get_collaboration_framework"


def tool_error(code: int, message: str) -> McpError:
    return McpError(ErrorData(code=code, message=message))


async def read_text(path: Path) -> str:
    """Read a whole file as UTF-8 text."""
    async with aiofiles.open(path, 'r', encoding='utf-8', newline='') as f:
        return await f.read()


class ToolDispatcher:
    """Routes tool calls to their handlers."""

    def __init__(self, catalog: AgentCatalog, paths: ServerPaths):
        """Initialize the dispatcher.

        Args:
            catalog: Agent catalog served by list_agents / get_agent_description
            paths: Resolved filesystem locations
        """
        self.catalog = catalog
        self.paths = paths
        self._handlers: Dict[ToolName, Callable[[Dict[str, Any]], Awaitable[str]]] = {
            ToolName.LIST_AGENTS: self._list_agents,
            ToolName.GET_AGENT_DESCRIPTION: self._get_agent_description,
            ToolName.GET_COLLABORATION_FRAMEWORK: self._get_collaboration_framework,
        }

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """Run a tool and return its text.

        Raises:
            McpError: METHOD_NOT_FOUND for unknown tools, INVALID_PARAMS for bad
                arguments, INTERNAL_ERROR when a backing file cannot be read
        """
        try:
            tool = ToolName(name)
        except ValueError:
            raise tool_error(METHOD_NOT_FOUND, f"Unknown tool: {name}") from None

        logger.debug(f"Tool call: {tool.value} {arguments or {}}")
        return await self._handlers[tool](arguments or {})

    async def _list_agents(self, arguments: Dict[str, Any]) -> str:
        agents = [entry.to_dict() for entry in self.catalog.entries()]
        return json.dumps(agents, indent=2)

    async def _get_agent_description(self, arguments: Dict[str, Any]) -> str:
        agent_name = arguments.get("agent")
        if not agent_name or not isinstance(agent_name, str) or agent_name not in self.catalog:
            raise tool_error(INVALID_PARAMS, f"Unknown agent: {agent_name}")

        agent_file = self.paths.agents_dir / self.catalog.get(agent_name).filename
        try:
            return await read_text(agent_file)
        except (OSError, UnicodeDecodeError) as e:
            logger.info(f"Failed to read {agent_file}: {e}")
            raise tool_error(INTERNAL_ERROR, f"Error reading agent file: {e}") from e

    async def _get_collaboration_framework(self, arguments: Dict[str, Any]) -> str:
        collab_file = self.paths.collaboration_file
        try:
            return await read_text(collab_file)
        except (OSError, UnicodeDecodeError) as e:
            logger.info(f"Failed to read {collab_file}: {e}")
            raise tool_error(
                INTERNAL_ERROR, f"Error reading collaboration framework: {e}"
            ) from e
