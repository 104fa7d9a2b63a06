"""Agent catalog definitions."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping


AGENT_FILE_EXTENSION = ".md"


@dataclass(frozen=True)
class AgentEntry:
    """A single catalog entry."""
    name: str
    description: str

    @property
    def filename(self) -> str:
        """Document filename, e.g. dev_deploy_agent -> dev-deploy-agent.md"""
        return agent_filename(self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description}


def agent_filename(agent_name: str) -> str:
    """Map an agent identifier to the name of its role document."""
    return agent_name.replace("_", "-") + AGENT_FILE_EXTENSION


class AgentCatalog:
    """Ordered, read-only mapping of agent identifiers to role summaries."""

    def __init__(self, agents: Mapping[str, str]):
        self._agents = MappingProxyType(dict(agents))

    def __contains__(self, agent_name: object) -> bool:
        return agent_name in self._agents

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self):
        return iter(self._agents)

    def get(self, agent_name: str) -> AgentEntry:
        """Return the entry for agent_name.

        Raises:
            KeyError: If the agent is not in the catalog
        """
        return AgentEntry(agent_name, self._agents[agent_name])

    def entries(self) -> List[AgentEntry]:
        """All entries in catalog order."""
        return [AgentEntry(name, desc) for name, desc in self._agents.items()]


# Agents known to the Moqui project
MOQUI_AGENTS = AgentCatalog({
    "architecture_agent": "Chief Architect - Domain-driven design and architectural integrity",
    "moqui_developer_agent": "Moqui Implementation Expert - Turns architecture and design into working code",
    "dba_agent": "Expert Database Administrator - Performance tuning, schema design, and database security",
    "sre_agent": "SRE/Observability Agent - Functional & Operational Metrics, OpenTelemetry, Grafana Integration",
    "test_agent": "QA Software Engineer - Writes, runs, and analyzes tests",
    "lint_agent": "Code Quality Engineer - Style enforcement and static analysis",
    "api_agent": "Senior Software Engineer - REST API development and error handling",
    "dev_deploy_agent": "Senior DevOps Engineer - Local development deployment and containerization",
    "docs_agent": "Expert Technical Writer - Documentation and knowledge base",
})
