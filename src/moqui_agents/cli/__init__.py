"""Command-line interface for the Moqui agents server."""

from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file before anything else
env_locations = [
    Path.cwd() / ".env",  # Current directory
    Path(__file__).parent.parent.parent.parent / ".env",  # Project root
]

for env_path in env_locations:
    if env_path.exists():
        load_dotenv(env_path, override=False)
        break

from moqui_agents.cli.main import app

__all__ = ["app"]
