"""Shared fixtures: a throwaway Moqui project tree."""

from pathlib import Path

import pytest

from moqui_agents.core.config import ServerPaths
from moqui_agents.schemas.catalog import MOQUI_AGENTS
from moqui_agents.server.dispatcher import ToolDispatcher

COLLABORATION_TEXT = "# Agent Collaboration\r\n\nArchitecture first, then code.\n  trailing  \n"


@pytest.fixture
def collaboration_text() -> str:
    return COLLABORATION_TEXT


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project with every agent document and the collaboration file."""
    agents_dir = tmp_path / ".github" / "agents"
    agents_dir.mkdir(parents=True)
    for entry in MOQUI_AGENTS.entries():
        (agents_dir / entry.filename).write_text(
            f"# {entry.name}\n\n{entry.description}\n", encoding="utf-8"
        )
    (tmp_path / ".github" / "AGENT_COLLABORATION.md").write_bytes(
        COLLABORATION_TEXT.encode("utf-8")
    )
    return tmp_path


@pytest.fixture
def paths(project_root: Path) -> ServerPaths:
    return ServerPaths(
        project_root=project_root,
        agents_dir=project_root / ".github" / "agents",
        collaboration_file=project_root / ".github" / "AGENT_COLLABORATION.md",
    )


@pytest.fixture
def dispatcher(paths: ServerPaths) -> ToolDispatcher:
    return ToolDispatcher(MOQUI_AGENTS, paths)
