"""Logging configuration for the Moqui agents server.

stdout carries MCP traffic, so the console handler always writes to stderr.
While serving stdio, stderr stays quiet unless LOG_LEVEL or DEBUG asks for
output; LOG_FILE still receives everything at the configured level.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from moqui_agents.core.config import Settings, settings as default_settings

# Loggers owned by the MCP libraries
LIBRARY_LOGGERS = ("fastmcp", "mcp")

SILENT = "CRITICAL"


def setup_logging(
    name: str = "moqui_agents",
    log_file: Optional[Path] = None,
    level: Optional[str] = None,
    serving_stdio: bool = False,
    config: Optional[Settings] = None,
) -> logging.Logger:
    """Set up logging with Rich handler on stderr.

    Args:
        name: Logger name
        log_file: Optional file path for logging (defaults to config.log_file)
        level: Log level (defaults to config.log_level, then INFO)
        serving_stdio: Keep the console silent unless a level was requested
            explicitly, and apply the console level to the MCP library loggers
        config: Settings to read defaults from (defaults to the global settings)

    Returns:
        Configured logger instance
    """
    config = config or default_settings
    requested = (level or config.log_level or "").upper() or None
    level = requested or ("DEBUG" if config.debug else "INFO")
    log_file = log_file or config.log_file

    if serving_stdio and requested is None and not config.debug:
        console_level = SILENT
    else:
        console_level = level

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=config.debug,
        rich_tracebacks=True,
        tracebacks_show_locals=config.debug,
    )
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)

    if serving_stdio:
        for library in LIBRARY_LOGGERS:
            logging.getLogger(library).setLevel(console_level)

    return logger


# Create default logger
logger = setup_logging()
