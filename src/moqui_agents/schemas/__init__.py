"""Agent catalog schemas."""

from moqui_agents.schemas.catalog import AgentCatalog, AgentEntry, MOQUI_AGENTS, agent_filename

__all__ = ["AgentCatalog", "AgentEntry", "MOQUI_AGENTS", "agent_filename"]
