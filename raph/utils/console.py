"""
Terminal output and logging helpers.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.control import Control
from rich.logging import RichHandler
from rich.markup import escape
from rich.segment import ControlType

MARKER = "🦀"

console = Console(highlight=False, emoji=False, soft_wrap=True)
error_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_info(message: str) -> None:
    """Print a marked message to stdout."""
    console.print(f"{MARKER} {escape(message)}")


def print_error(message: str) -> None:
    """Print a marked, single-line error to stderr."""
    error_console.print(f"{MARKER} Error: {escape(message)}")


def print_profile(profile: str) -> None:
    """Print the selected profile with the name highlighted."""
    console.print(f"{MARKER} AWS profile: [bold green]{escape(profile)}[/bold green]")


def clear_prompt_lines(lines: int = 2) -> None:
    """
    Move the cursor up and clear the line it lands on.

    Used after the interactive prompt so the final profile line replaces the
    prompt header. Does nothing when stdout is not a terminal.
    """
    if not console.is_terminal:
        return
    console.control(
        Control.move(0, -lines),
        Control((ControlType.ERASE_IN_LINE, 2)),
    )


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """
    Configure the ``raph`` logger to write through rich to stderr.

    Args:
        log_level: Level name such as ``DEBUG`` or ``INFO``

    Returns:
        logging.Logger: The configured package logger
    """
    logger = logging.getLogger("raph")
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    handler = RichHandler(
        console=error_console,
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the ``raph`` namespace."""
    if not name or name == "raph" or name.startswith("raph."):
        return logging.getLogger(name or "raph")
    return logging.getLogger(f"raph.{name}")
