"""Main CLI application for the Moqui agents server."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from mcp.shared.exceptions import McpError
from rich.console import Console
from rich.table import Table

from moqui_agents.core.config import ConfigurationError, ServerPaths, Settings
from moqui_agents.schemas.catalog import MOQUI_AGENTS
from moqui_agents.server.dispatcher import ToolDispatcher, ToolName
from moqui_agents.server.app import create_server, run_stdio
from moqui_agents.utils.logging import logger, setup_logging

app = typer.Typer(name="moqui-agents", help="MCP server for Moqui agent descriptions")
console = Console()
err_console = Console(stderr=True)


def _load_settings(
    project_root: Optional[Path] = None,
    agents_path: Optional[Path] = None,
) -> Settings:
    """Settings from the environment, with command-line overrides applied."""
    settings = Settings.from_env()
    if project_root is not None:
        settings.project.root = project_root
    if agents_path is not None:
        settings.project.agents_path = agents_path
    return settings


def _build_dispatcher(settings: Settings) -> ToolDispatcher:
    try:
        paths = ServerPaths.from_settings(settings)
    except ConfigurationError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {e}")
        raise typer.Exit(1)
    return ToolDispatcher(MOQUI_AGENTS, paths)


def _run_tool(dispatcher: ToolDispatcher, tool: ToolName, arguments: Optional[dict] = None) -> str:
    try:
        return asyncio.run(dispatcher.call_tool(tool, arguments))
    except McpError as e:
        err_console.print(f"[bold red]{e.error.message}[/bold red]")
        raise typer.Exit(1)


@app.command()
def serve(
    project_root: Optional[Path] = typer.Option(
        None, "--project-root", "-p", help="Moqui project root (overrides MOQUI_PROJECT_ROOT)"
    ),
    agents_path: Optional[Path] = typer.Option(
        None, "--agents-path", "-a", help="Agents directory relative to the project root (overrides AGENTS_PATH)"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Logging level"),
):
    """Run the MCP server on stdin/stdout."""
    settings = _load_settings(project_root, agents_path)
    setup_logging(level=log_level, serving_stdio=True, config=settings)

    dispatcher = _build_dispatcher(settings)
    logger.debug(f"Serving agents from {dispatcher.paths.agents_dir}")

    try:
        asyncio.run(run_stdio(create_server(dispatcher)))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


@app.command()
def agents(
    as_json: bool = typer.Option(False, "--json", help="Print the catalog as JSON"),
):
    """List the known agents."""
    if as_json:
        typer.echo(json.dumps([entry.to_dict() for entry in MOQUI_AGENTS.entries()], indent=2))
        return

    table = Table(title="Moqui Agents")
    table.add_column("Agent", style="cyan", no_wrap=True)
    table.add_column("Document", style="green", no_wrap=True)
    table.add_column("Role", style="yellow")

    for entry in MOQUI_AGENTS.entries():
        table.add_row(entry.name, entry.filename, entry.description)

    console.print(table)


@app.command()
def show(
    agent: str = typer.Argument(..., help="Agent identifier, e.g. architecture_agent"),
    project_root: Optional[Path] = typer.Option(None, "--project-root", "-p", help="Moqui project root"),
    agents_path: Optional[Path] = typer.Option(None, "--agents-path", "-a", help="Agents directory"),
):
    """Print an agent's role document.

    Examples:
        moqui-agents show dba_agent
        moqui-agents show api_agent -p ~/moqui_example
    """
    dispatcher = _build_dispatcher(_load_settings(project_root, agents_path))
    typer.echo(_run_tool(dispatcher, ToolName.GET_AGENT_DESCRIPTION, {"agent": agent}), nl=False)


@app.command()
def collaboration(
    project_root: Optional[Path] = typer.Option(None, "--project-root", "-p", help="Moqui project root"),
):
    """Print the agent collaboration framework document."""
    dispatcher = _build_dispatcher(_load_settings(project_root))
    typer.echo(_run_tool(dispatcher, ToolName.GET_COLLABORATION_FRAMEWORK), nl=False)


if __name__ == "__main__":
    app()
