"""Entry point for ``python -m moqui_agents``."""

from moqui_agents.cli import app

if __name__ == "__main__":
    app()
