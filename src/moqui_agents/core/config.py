"""Configuration management for the Moqui agents server."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


class ConfigurationError(Exception):
    """Raised when required configuration is missing or unusable."""


class ProjectConfig(BaseModel):
    """Where the Moqui project and its agent documents live."""

    root: Optional[Path] = Field(default=None, description="Moqui project root directory")
    agents_path: Path = Field(
        default=Path(".github/agents"),
        description="Agents directory, relative to the project root",
    )
    collaboration_file: Path = Field(
        default=Path(".github/AGENT_COLLABORATION.md"),
        description="Collaboration document, relative to the project root",
    )


class Settings(BaseModel):
    """Main configuration settings for the Moqui agents server."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)

    # Development Settings
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Optional[str] = Field(default=None, description="Logging level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        root = os.getenv("MOQUI_PROJECT_ROOT")
        log_file = os.getenv("LOG_FILE")
        return cls(
            project=ProjectConfig(
                root=Path(root) if root else None,
                agents_path=Path(os.getenv("AGENTS_PATH", ".github/agents")),
            ),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "").upper() or None,
            log_file=Path(log_file) if log_file else None,
        )


@dataclass(frozen=True)
class ServerPaths:
    """Filesystem locations resolved once before the server starts."""

    project_root: Path
    agents_dir: Path
    collaboration_file: Path

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServerPaths":
        """Resolve paths from settings.

        Raises:
            ConfigurationError: If no project root is configured
        """
        root = settings.project.root
        if root is None:
            raise ConfigurationError(
                "No project root configured; set MOQUI_PROJECT_ROOT or pass --project-root"
            )
        root = root.expanduser()
        return cls(
            project_root=root,
            agents_dir=root / settings.project.agents_path,
            collaboration_file=root / settings.project.collaboration_file,
        )


# Global settings instance
settings = Settings.from_env()
